"""Owner and mode check for POSIX platforms."""

import os
import stat
from collections.abc import Callable
from pathlib import Path

import structlog

from xdg_basedirs.defaults import RUNTIME_DIR_MODE
from xdg_basedirs.runtime.base import RuntimeDirValidator
from xdg_basedirs.runtime.models import RuntimeDirCheck, RuntimeDirStatus

logger = structlog.get_logger()


class PosixRuntimeDirValidator(RuntimeDirValidator):
    """Validator comparing st_uid to the effective uid and the mode to 0700.

    ``stat_fn`` and ``geteuid`` default to the os module functions and can be
    replaced to check synthetic metadata.
    """

    def __init__(
        self,
        stat_fn: Callable[[Path], os.stat_result] | None = None,
        geteuid: Callable[[], int] | None = None,
        required_mode: int = RUNTIME_DIR_MODE,
    ) -> None:
        self._stat = stat_fn or os.stat
        self._geteuid = geteuid or os.geteuid
        self._required_mode = required_mode

    def validate(self, path: Path) -> RuntimeDirCheck:
        try:
            st = self._stat(path)
        except (OSError, ValueError) as e:
            logger.info("Runtime directory metadata unavailable", path=str(path), error=str(e))
            return RuntimeDirCheck(
                path=path,
                status=RuntimeDirStatus.METADATA_UNAVAILABLE,
                reason=getattr(e, "strerror", None) or str(e),
            )

        uid = self._geteuid()
        mode = stat.S_IMODE(st.st_mode)
        check = RuntimeDirCheck(
            path=path,
            status=RuntimeDirStatus.OK,
            owner_uid=st.st_uid,
            expected_uid=uid,
            mode=mode,
            expected_mode=self._required_mode,
        )

        if st.st_uid != uid:
            logger.info("Runtime directory owner mismatch", path=str(path), owner=st.st_uid, uid=uid)
            return check.model_copy(update={"status": RuntimeDirStatus.OWNER_MISMATCH})

        if mode != self._required_mode:
            logger.info("Runtime directory mode mismatch", path=str(path), mode=oct(mode))
            return check.model_copy(update={"status": RuntimeDirStatus.PERMISSION_MISMATCH})

        logger.debug("Runtime directory is valid", path=str(path))
        return check
