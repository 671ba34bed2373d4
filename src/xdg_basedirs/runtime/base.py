"""Abstract base class for runtime directory validators."""

from abc import ABC, abstractmethod
from pathlib import Path

from xdg_basedirs.runtime.models import RuntimeDirCheck


class RuntimeDirValidator(ABC):
    """Abstract interface for checking a runtime directory.

    ``$XDG_RUNTIME_DIR`` must be owned by the user with access mode 0700.
    Implementations decide how (and whether) that can be verified on the
    current platform.
    """

    @abstractmethod
    def validate(self, path: Path) -> RuntimeDirCheck:
        """Check the given directory.

        Args:
            path: The candidate runtime directory.

        Returns:
            A RuntimeDirCheck describing the first failed requirement, or OK.
        """
        ...
