"""Runtime directory validation."""

from xdg_basedirs.runtime.base import RuntimeDirValidator
from xdg_basedirs.runtime.models import RuntimeDirCheck, RuntimeDirStatus
from xdg_basedirs.runtime.null import NullRuntimeDirValidator
from xdg_basedirs.runtime.paths import (
    check_runtime_dir,
    get_app_runtime_dir,
    get_runtime_dir_validator,
    validate_runtime_dir,
)
from xdg_basedirs.runtime.posix import PosixRuntimeDirValidator

__all__ = [
    "NullRuntimeDirValidator",
    "PosixRuntimeDirValidator",
    "RuntimeDirCheck",
    "RuntimeDirStatus",
    "RuntimeDirValidator",
    "check_runtime_dir",
    "get_app_runtime_dir",
    "get_runtime_dir_validator",
    "validate_runtime_dir",
]
