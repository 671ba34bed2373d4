"""Tests for runtime directory helpers."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from xdg_basedirs.environment import mapping_lookup
from xdg_basedirs.exceptions import MetadataUnavailableError
from xdg_basedirs.runtime.null import NullRuntimeDirValidator
from xdg_basedirs.runtime.paths import (
    check_runtime_dir,
    get_app_runtime_dir,
    get_runtime_dir_validator,
    validate_runtime_dir,
)
from xdg_basedirs.runtime.posix import PosixRuntimeDirValidator

posix_only = pytest.mark.skipif(not hasattr(os, "geteuid"), reason="requires POSIX uids")


class TestGetRuntimeDirValidator:
    @posix_only
    def test_posix(self) -> None:
        assert isinstance(get_runtime_dir_validator(), PosixRuntimeDirValidator)

    def test_without_uids(self) -> None:
        """Test platforms without geteuid get the null validator."""
        with patch("xdg_basedirs.runtime.paths.os") as mock_os:
            del mock_os.geteuid
            assert isinstance(get_runtime_dir_validator(), NullRuntimeDirValidator)


@posix_only
class TestValidateRuntimeDir:
    def test_accepts_str(self, tmp_path: Path) -> None:
        tmp_path.chmod(0o700)

        check = validate_runtime_dir(str(tmp_path))

        assert check.ok
        assert check.path == tmp_path

    def test_uses_given_validator(self, tmp_path: Path) -> None:
        check = validate_runtime_dir(tmp_path / "missing", NullRuntimeDirValidator())

        assert check.ok


@posix_only
class TestCheckRuntimeDir:
    def test_true(self, tmp_path: Path) -> None:
        tmp_path.chmod(0o700)

        assert check_runtime_dir(tmp_path) is True

    def test_false_for_wrong_mode(self, tmp_path: Path) -> None:
        tmp_path.chmod(0o755)

        assert check_runtime_dir(tmp_path) is False

    def test_false_for_wrong_owner(self, tmp_path: Path) -> None:
        tmp_path.chmod(0o700)
        validator = PosixRuntimeDirValidator(geteuid=lambda: os.geteuid() + 1)

        assert check_runtime_dir(tmp_path, validator) is False

    def test_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(MetadataUnavailableError) as exc_info:
            check_runtime_dir(tmp_path / "missing")

        assert exc_info.value.path == tmp_path / "missing"


class TestGetAppRuntimeDir:
    def test_uses_xdg_runtime_dir(self) -> None:
        lookup = mapping_lookup({"XDG_RUNTIME_DIR": "/run/user/1000"})

        assert get_app_runtime_dir("myapp", lookup) == Path("/run/user/1000/myapp")

    def test_falls_back_to_platformdirs(self, tmp_path: Path) -> None:
        with patch(
            "xdg_basedirs.runtime.paths.platformdirs.user_runtime_dir",
            return_value=str(tmp_path / "myapp"),
        ) as mock_runtime:
            result = get_app_runtime_dir("myapp", mapping_lookup({"XDG_RUNTIME_DIR": ""}))

        assert result == tmp_path / "myapp"
        mock_runtime.assert_called_once_with("myapp")

    def test_does_not_create_directory(self, tmp_path: Path) -> None:
        lookup = mapping_lookup({"XDG_RUNTIME_DIR": str(tmp_path)})

        result = get_app_runtime_dir("myapp", lookup)

        assert not result.exists()

    def test_reads_process_environment(self) -> None:
        with patch.dict(os.environ, {"XDG_RUNTIME_DIR": "/run/user/1000"}, clear=True):
            assert get_app_runtime_dir("myapp") == Path("/run/user/1000/myapp")
