"""Runtime directory validation models."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, model_validator

from xdg_basedirs.exceptions import (
    MetadataUnavailableError,
    OwnerMismatchError,
    PermissionMismatchError,
)


class RuntimeDirStatus(str, Enum):
    """Outcome of a runtime directory check."""

    OK = "ok"
    METADATA_UNAVAILABLE = "metadata_unavailable"
    OWNER_MISMATCH = "owner_mismatch"
    PERMISSION_MISMATCH = "permission_mismatch"


class RuntimeDirCheck(BaseModel):
    """Result of validating a runtime directory.

    Attributes:
        path: The directory that was checked.
        status: Which requirement failed, or OK.
        owner_uid: Owner of the directory, if metadata could be read.
        expected_uid: Effective uid of the calling process.
        mode: Permission bits of the directory, if metadata could be read.
        expected_mode: The required permission bits.
        reason: Error message from the failed metadata read.
    """

    path: Path
    status: RuntimeDirStatus
    owner_uid: int | None = None
    expected_uid: int | None = None
    mode: int | None = None
    expected_mode: int | None = None
    reason: str | None = None

    @model_validator(mode="after")
    def _require_mismatch_details(self) -> "RuntimeDirCheck":
        if self.status == RuntimeDirStatus.OWNER_MISMATCH and (
            self.owner_uid is None or self.expected_uid is None
        ):
            raise ValueError("owner_mismatch requires owner_uid and expected_uid")
        if self.status == RuntimeDirStatus.PERMISSION_MISMATCH and (
            self.mode is None or self.expected_mode is None
        ):
            raise ValueError("permission_mismatch requires mode and expected_mode")
        return self

    @property
    def ok(self) -> bool:
        """Return True if the directory meets every requirement."""
        return self.status == RuntimeDirStatus.OK

    def raise_for_status(self) -> None:
        """Raise the exception matching a failed check, do nothing on success.

        Raises:
            MetadataUnavailableError: If the directory could not be stat'ed.
            OwnerMismatchError: If another user owns the directory.
            PermissionMismatchError: If the mode is not exactly the expected one.
        """
        if self.status == RuntimeDirStatus.METADATA_UNAVAILABLE:
            raise MetadataUnavailableError(self.path, self.reason or "unknown error")
        if self.status == RuntimeDirStatus.OWNER_MISMATCH:
            assert self.owner_uid is not None and self.expected_uid is not None
            raise OwnerMismatchError(self.path, self.owner_uid, self.expected_uid)
        if self.status == RuntimeDirStatus.PERMISSION_MISMATCH:
            assert self.mode is not None and self.expected_mode is not None
            raise PermissionMismatchError(self.path, self.mode, self.expected_mode)
