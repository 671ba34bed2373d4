"""Environment and home directory lookups used by the resolvers.

Resolution never reads ``os.environ`` directly. Callers pass an
:data:`EnvLookup` instead, which keeps resolution pure and lets tests
supply a synthetic environment without touching the process state.
"""

import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

EnvLookup = Callable[[str], str | bytes | None]
HomeLookup = Callable[[], Path | None]


def environ_lookup(name: str) -> str | None:
    """Look up a variable in the real process environment."""
    return os.environ.get(name)


def mapping_lookup(mapping: Mapping[str, str | bytes]) -> EnvLookup:
    """Build a lookup over a fixed mapping.

    For example:
    - mapping_lookup({"XDG_CONFIG_HOME": "/tmp/cfg"})("XDG_CONFIG_HOME") -> "/tmp/cfg"
    - mapping_lookup({})("XDG_CONFIG_HOME") -> None
    """
    snapshot = dict(mapping)

    def lookup(name: str) -> str | bytes | None:
        return snapshot.get(name)

    return lookup


def read_value(lookup: EnvLookup, name: str) -> str | None:
    """Read a variable through ``lookup``, normalizing empty values to None.

    Bytes values are decoded with the filesystem encoding.
    """
    value = lookup(name)
    if value is None:
        return None
    if isinstance(value, bytes):
        value = os.fsdecode(value)
    if not value:
        logger.debug("Ignoring empty variable (name=%s)", name)
        return None
    return value


def default_home_dir() -> Path | None:
    """Return the user's home directory, or None if it cannot be determined."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        # No $HOME and no passwd entry for the current user
        return None
    if not home.is_absolute():
        return None
    return home
