"""Lookup-with-fallback primitives shared by every base directory class."""

import logging
import os
from pathlib import Path

from xdg_basedirs.environment import EnvLookup, HomeLookup, default_home_dir, read_value
from xdg_basedirs.exceptions import NoHomeDirectoryError

logger = logging.getLogger(__name__)


def resolve_optional(lookup: EnvLookup, variable: str) -> Path | None:
    """Return the variable's value as a path if it is set and absolute.

    Absent, empty and relative values all yield None; choosing a fallback
    is left to the caller.
    """
    value = read_value(lookup, variable)
    if value is None:
        return None

    path = Path(value)
    if not path.is_absolute():
        logger.debug("Ignoring relative path (variable=%s, value=%s)", variable, value)
        return None
    return path


def resolve_single(
    lookup: EnvLookup,
    variable: str,
    default: str,
    home: HomeLookup = default_home_dir,
) -> Path:
    """Return the variable's absolute path, or ``default`` joined to the home directory.

    Args:
        lookup: Environment lookup used to read ``variable``.
        variable: Name of the environment variable, e.g. ``XDG_DATA_HOME``.
        default: Fallback path relative to the home directory.
        home: Home directory lookup, only called when the fallback is needed.

    Returns:
        An absolute path.

    Raises:
        NoHomeDirectoryError: If the fallback is needed and ``home`` returns None
            or a relative path.
    """
    path = resolve_optional(lookup, variable)
    if path is not None:
        return path

    home_dir = home()
    if home_dir is None or not home_dir.is_absolute():
        raise NoHomeDirectoryError(variable)

    logger.debug("Using home-relative default (variable=%s, default=%s)", variable, default)
    return home_dir / default


def resolve_list(lookup: EnvLookup, variable: str, default: str) -> list[Path]:
    """Split the variable's value, or ``default`` when unset or empty, on os.pathsep.

    Segments are kept verbatim: order, duplicates and relative entries are
    preserved and nothing is checked for existence.
    """
    value = read_value(lookup, variable)
    if value is None:
        logger.debug("Using default search path (variable=%s, default=%s)", variable, default)
        value = default

    return [Path(segment) for segment in value.split(os.pathsep)]
