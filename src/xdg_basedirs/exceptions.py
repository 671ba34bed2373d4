"""Custom exceptions for xdg-basedirs."""

from pathlib import Path


class XdgError(Exception):
    """Base exception for xdg-basedirs."""


class NoHomeDirectoryError(XdgError):
    """Raised when a home-relative fallback is needed but no home directory is known."""

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(
            f"Cannot resolve {variable}: variable is unset or not absolute "
            "and the home directory could not be determined"
        )


class RuntimeDirError(XdgError):
    """Raised when a runtime directory is not private to the current user."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid runtime directory {path}: {message}")


class MetadataUnavailableError(RuntimeDirError):
    """Raised when the runtime directory cannot be stat'ed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"cannot read metadata ({reason})")


class OwnerMismatchError(RuntimeDirError):
    """Raised when the runtime directory is owned by another user."""

    def __init__(self, path: Path, owner_uid: int, expected_uid: int) -> None:
        self.owner_uid = owner_uid
        self.expected_uid = expected_uid
        super().__init__(path, f"owned by uid {owner_uid}, expected uid {expected_uid}")


class PermissionMismatchError(RuntimeDirError):
    """Raised when the runtime directory mode is not exactly the required one."""

    def __init__(self, path: Path, mode: int, expected_mode: int) -> None:
        self.mode = mode
        self.expected_mode = expected_mode
        super().__init__(path, f"mode is {mode:04o}, expected {expected_mode:04o}")
