"""Resolve XDG base directories (data, config, cache, runtime) with home-relative fallbacks."""

from xdg_basedirs.basedirs import (
    BaseDirectories,
    get_cache_home,
    get_cache_home_from_env,
    get_config_dirs,
    get_config_dirs_from_env,
    get_config_home,
    get_config_home_from_env,
    get_data_dirs,
    get_data_dirs_from_env,
    get_data_home,
    get_data_home_from_env,
    get_runtime_dir,
    get_runtime_dir_from_env,
    load_base_directories,
)
from xdg_basedirs.environment import (
    EnvLookup,
    HomeLookup,
    default_home_dir,
    environ_lookup,
    mapping_lookup,
)
from xdg_basedirs.exceptions import (
    MetadataUnavailableError,
    NoHomeDirectoryError,
    OwnerMismatchError,
    PermissionMismatchError,
    RuntimeDirError,
    XdgError,
)
from xdg_basedirs.resolver import resolve_list, resolve_optional, resolve_single
from xdg_basedirs.runtime import (
    NullRuntimeDirValidator,
    PosixRuntimeDirValidator,
    RuntimeDirCheck,
    RuntimeDirStatus,
    RuntimeDirValidator,
    check_runtime_dir,
    get_app_runtime_dir,
    get_runtime_dir_validator,
    validate_runtime_dir,
)

__version__ = "0.1.0"

__all__ = [
    "BaseDirectories",
    "EnvLookup",
    "HomeLookup",
    "MetadataUnavailableError",
    "NoHomeDirectoryError",
    "NullRuntimeDirValidator",
    "OwnerMismatchError",
    "PermissionMismatchError",
    "PosixRuntimeDirValidator",
    "RuntimeDirCheck",
    "RuntimeDirError",
    "RuntimeDirStatus",
    "RuntimeDirValidator",
    "XdgError",
    "check_runtime_dir",
    "default_home_dir",
    "environ_lookup",
    "get_app_runtime_dir",
    "get_cache_home",
    "get_cache_home_from_env",
    "get_config_dirs",
    "get_config_dirs_from_env",
    "get_config_home",
    "get_config_home_from_env",
    "get_data_dirs",
    "get_data_dirs_from_env",
    "get_data_home",
    "get_data_home_from_env",
    "get_runtime_dir",
    "get_runtime_dir_from_env",
    "get_runtime_dir_validator",
    "load_base_directories",
    "mapping_lookup",
    "resolve_list",
    "resolve_optional",
    "resolve_single",
    "validate_runtime_dir",
]
