"""Base directory entry points for data, config, cache and runtime files."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from xdg_basedirs.defaults import (
    DEFAULT_CACHE_HOME,
    DEFAULT_CONFIG_DIRS,
    DEFAULT_CONFIG_HOME,
    DEFAULT_DATA_DIRS,
    DEFAULT_DATA_HOME,
    XDG_CACHE_HOME,
    XDG_CONFIG_DIRS,
    XDG_CONFIG_HOME,
    XDG_DATA_DIRS,
    XDG_DATA_HOME,
    XDG_RUNTIME_DIR,
)
from xdg_basedirs.environment import EnvLookup, HomeLookup, default_home_dir, environ_lookup
from xdg_basedirs.resolver import resolve_list, resolve_optional, resolve_single


def get_data_home_from_env(lookup: EnvLookup, home: HomeLookup = default_home_dir) -> Path:
    """Get the data home directory from a custom environment.

    Falls back to ``$HOME/.local/share`` if ``$XDG_DATA_HOME`` is unset,
    empty or relative.
    """
    return resolve_single(lookup, XDG_DATA_HOME, DEFAULT_DATA_HOME, home)


def get_data_home() -> Path:
    """Get the data home directory."""
    return get_data_home_from_env(environ_lookup)


def get_data_dirs_from_env(lookup: EnvLookup) -> list[Path]:
    """Get the data directories from a custom environment.

    Falls back to ``[/usr/local/share, /usr/share]`` if ``$XDG_DATA_DIRS`` is
    unset or empty.
    """
    return resolve_list(lookup, XDG_DATA_DIRS, DEFAULT_DATA_DIRS)


def get_data_dirs() -> list[Path]:
    """Get the data directories."""
    return get_data_dirs_from_env(environ_lookup)


def get_config_home_from_env(lookup: EnvLookup, home: HomeLookup = default_home_dir) -> Path:
    """Get the config home directory from a custom environment.

    Falls back to ``$HOME/.config`` if ``$XDG_CONFIG_HOME`` is unset, empty
    or relative.
    """
    return resolve_single(lookup, XDG_CONFIG_HOME, DEFAULT_CONFIG_HOME, home)


def get_config_home() -> Path:
    """Get the config home directory."""
    return get_config_home_from_env(environ_lookup)


def get_config_dirs_from_env(lookup: EnvLookup) -> list[Path]:
    """Get the config directories from a custom environment.

    Falls back to ``[/etc/xdg]`` if ``$XDG_CONFIG_DIRS`` is unset or empty.
    """
    return resolve_list(lookup, XDG_CONFIG_DIRS, DEFAULT_CONFIG_DIRS)


def get_config_dirs() -> list[Path]:
    """Get the config directories."""
    return get_config_dirs_from_env(environ_lookup)


def get_cache_home_from_env(lookup: EnvLookup, home: HomeLookup = default_home_dir) -> Path:
    """Get the cache home directory from a custom environment.

    Falls back to ``$HOME/.cache`` if ``$XDG_CACHE_HOME`` is unset, empty or
    relative.
    """
    return resolve_single(lookup, XDG_CACHE_HOME, DEFAULT_CACHE_HOME, home)


def get_cache_home() -> Path:
    """Get the cache home directory."""
    return get_cache_home_from_env(environ_lookup)


def get_runtime_dir_from_env(lookup: EnvLookup) -> Path | None:
    """Get ``$XDG_RUNTIME_DIR`` from a custom environment.

    Returns None if it is unset, empty or relative, in which case it is up
    to the application to fall back to a location of its own.
    """
    return resolve_optional(lookup, XDG_RUNTIME_DIR)


def get_runtime_dir() -> Path | None:
    """Get ``$XDG_RUNTIME_DIR``, or None if it is unset, empty or relative."""
    return get_runtime_dir_from_env(environ_lookup)


class BaseDirectories(BaseModel):
    """All base directories resolved from one environment."""

    model_config = ConfigDict(frozen=True)

    data_home: Path
    data_dirs: tuple[Path, ...]
    config_home: Path
    config_dirs: tuple[Path, ...]
    cache_home: Path
    runtime_dir: Path | None = None

    def data_search_path(self) -> list[Path]:
        """Return the data directories in read order, user directory first."""
        return [self.data_home, *self.data_dirs]

    def config_search_path(self) -> list[Path]:
        """Return the config directories in read order, user directory first."""
        return [self.config_home, *self.config_dirs]


def load_base_directories(
    lookup: EnvLookup = environ_lookup,
    home: HomeLookup = default_home_dir,
) -> BaseDirectories:
    """Resolve every base directory at once.

    Raises:
        NoHomeDirectoryError: If a home-relative fallback is needed and the
            home directory cannot be determined.
    """
    return BaseDirectories(
        data_home=get_data_home_from_env(lookup, home),
        data_dirs=tuple(get_data_dirs_from_env(lookup)),
        config_home=get_config_home_from_env(lookup, home),
        config_dirs=tuple(get_config_dirs_from_env(lookup)),
        cache_home=get_cache_home_from_env(lookup, home),
        runtime_dir=get_runtime_dir_from_env(lookup),
    )
