"""Environment handed to the dispatched script."""

import os
from types import MappingProxyType

CHANNEL_VAR = "ZOCLAW_CHANNEL"
NEXT_CHANNEL = "next"


def build_env(base=None, next_channel: bool = False):
    """
    Copy `base` (default: os.environ) into a new read-only mapping.

    With next_channel, CHANNEL_VAR is set to "next" in the copy. The base
    mapping is never modified.
    """
    env = dict(os.environ if base is None else base)
    if next_channel:
        env[CHANNEL_VAR] = NEXT_CHANNEL
    return MappingProxyType(env)
