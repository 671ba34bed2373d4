"""Variable names and fallback values of the XDG base directory specification."""

XDG_DATA_HOME = "XDG_DATA_HOME"
XDG_DATA_DIRS = "XDG_DATA_DIRS"
XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
XDG_CONFIG_DIRS = "XDG_CONFIG_DIRS"
XDG_CACHE_HOME = "XDG_CACHE_HOME"
XDG_RUNTIME_DIR = "XDG_RUNTIME_DIR"

# Relative to the user's home directory
DEFAULT_DATA_HOME = ".local/share"
DEFAULT_CONFIG_HOME = ".config"
DEFAULT_CACHE_HOME = ".cache"

# Separated by os.pathsep
DEFAULT_DATA_DIRS = "/usr/local/share:/usr/share"
DEFAULT_CONFIG_DIRS = "/etc/xdg"

RUNTIME_DIR_MODE = 0o700
