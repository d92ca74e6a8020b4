"""zoclaw: run the bundled OpenClaw setup scripts."""

__version__ = "0.1.0"
