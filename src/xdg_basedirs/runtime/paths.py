"""Runtime directory helpers."""

import os
from pathlib import Path

import platformdirs
import structlog

from xdg_basedirs.basedirs import get_runtime_dir_from_env
from xdg_basedirs.environment import EnvLookup, environ_lookup
from xdg_basedirs.runtime.base import RuntimeDirValidator
from xdg_basedirs.runtime.models import RuntimeDirCheck, RuntimeDirStatus
from xdg_basedirs.runtime.null import NullRuntimeDirValidator
from xdg_basedirs.runtime.posix import PosixRuntimeDirValidator

logger = structlog.get_logger()


def get_runtime_dir_validator() -> RuntimeDirValidator:
    """Return the validator for the current platform."""
    if hasattr(os, "geteuid"):
        return PosixRuntimeDirValidator()
    return NullRuntimeDirValidator()


def validate_runtime_dir(
    path: Path | str, validator: RuntimeDirValidator | None = None
) -> RuntimeDirCheck:
    """Check that ``path`` is owned by the calling user and has mode 0700.

    Never raises for a failed check; inspect ``status`` or call
    ``raise_for_status()`` on the result.
    """
    validator = validator or get_runtime_dir_validator()
    return validator.validate(Path(path))


def check_runtime_dir(path: Path | str, validator: RuntimeDirValidator | None = None) -> bool:
    """Return True if ``path`` meets the runtime directory requirements.

    Raises:
        MetadataUnavailableError: If the directory metadata cannot be read.
    """
    check = validate_runtime_dir(path, validator)
    if check.status == RuntimeDirStatus.METADATA_UNAVAILABLE:
        check.raise_for_status()
    return check.ok


def get_app_runtime_dir(app_name: str, lookup: EnvLookup = environ_lookup) -> Path:
    """Get a runtime directory for ``app_name``.

    Uses $XDG_RUNTIME_DIR/<app_name> when set, falls back to platformdirs.
    The directory is not created.
    """
    runtime_dir = get_runtime_dir_from_env(lookup)
    if runtime_dir is not None:
        return runtime_dir / app_name

    fallback = Path(platformdirs.user_runtime_dir(app_name))
    logger.debug("XDG_RUNTIME_DIR not set, using fallback", path=str(fallback))
    return fallback
