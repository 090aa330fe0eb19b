"""Tests for JSON document storage."""

import json
import os
import stat
from unittest.mock import patch

import pytest

from shared.storage import JsonFileStorage


class TestJsonFileStorage:
    def test_creates_directory_on_first_write(self, tmp_path):
        target = tmp_path / "games" / "scores.json"
        storage = JsonFileStorage()

        storage.write(target, {"Alice": {"total_score": 0}})

        assert target.parent.is_dir()
        assert target.exists()

    def test_writes_indented_json(self, tmp_path):
        target = tmp_path / "scores.json"

        JsonFileStorage(indent=2).write(target, {"Alice": {"bonus": 0}})

        assert target.read_text(encoding="utf-8") == '{\n  "Alice": {\n    "bonus": 0\n  }\n}'

    def test_compact_output(self, tmp_path):
        target = tmp_path / "scores.json"

        JsonFileStorage(indent=None).write(target, {"a": [1, None]})

        assert target.read_text(encoding="utf-8") == '{"a": [1, null]}'

    def test_overwrites_existing_file(self, tmp_path):
        target = tmp_path / "scores.json"
        storage = JsonFileStorage()

        storage.write(target, {"version": 1})
        storage.write(target, {"version": 2})

        assert storage.read(target) == {"version": 2}

    def test_writes_utf8_names_unescaped(self, tmp_path):
        target = tmp_path / "scores.json"
        storage = JsonFileStorage()

        storage.write(target, {"プレイヤー": {"total_score": 50}})

        assert "プレイヤー" in target.read_text(encoding="utf-8")
        assert storage.read(target) == {"プレイヤー": {"total_score": 50}}

    def test_accepts_string_path(self, tmp_path):
        storage = JsonFileStorage()
        target = str(tmp_path / "scores.json")

        storage.write(target, [])

        assert storage.read(target) == []


class TestJsonFileStorageRead:
    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonFileStorage().read(tmp_path / "missing.json")

    def test_invalid_json_raises_value_error(self, tmp_path):
        target = tmp_path / "scores.json"
        target.write_text("{", encoding="utf-8")

        with pytest.raises(json.JSONDecodeError):
            JsonFileStorage().read(target)


class TestJsonFileStorageErrorHandling:
    """Tests for error handling during file write operations."""

    def test_unserializable_document_leaves_target_untouched(self, tmp_path):
        target = tmp_path / "scores.json"
        storage = JsonFileStorage()
        storage.write(target, {"version": 1})

        with pytest.raises(TypeError):
            storage.write(target, {"version": object()})

        assert storage.read(target) == {"version": 1}
        assert list(tmp_path.glob(".scores_*.tmp")) == []

    def test_write_cleans_up_temp_on_fdopen_failure(self, tmp_path):
        """If os.fdopen fails, the temp file is removed and no target is created."""
        storage = JsonFileStorage()

        with (
            patch("os.fdopen", side_effect=OSError("fdopen failure")),
            pytest.raises(OSError, match="fdopen failure"),
        ):
            storage.write(tmp_path / "scores.json", {})

        assert not (tmp_path / "scores.json").exists()
        assert list(tmp_path.glob(".scores_*.tmp")) == []

    def test_write_cleans_up_temp_on_fsync_failure(self, tmp_path):
        """If fsync fails after write, the temp file is removed and no target is created."""
        storage = JsonFileStorage()

        with (
            patch("os.fsync", side_effect=OSError("fsync failure")),
            pytest.raises(OSError, match="fsync failure"),
        ):
            storage.write(tmp_path / "scores.json", {})

        assert not (tmp_path / "scores.json").exists()
        assert list(tmp_path.glob(".scores_*.tmp")) == []

    def test_write_closes_fd_on_fdopen_failure(self, tmp_path):
        """If os.fdopen raises, the raw file descriptor is closed."""
        storage = JsonFileStorage()

        with (
            patch("os.fdopen", side_effect=OSError("fdopen failure")) as mock_fdopen,
            patch("os.close", wraps=os.close) as mock_close,
            pytest.raises(OSError, match="fdopen failure"),
        ):
            storage.write(tmp_path / "scores.json", {})

        fd_arg = mock_fdopen.call_args[0][0]
        mock_close.assert_called_once_with(fd_arg)

    def test_no_double_close_when_fdopen_succeeds_but_fsync_fails(self, tmp_path):
        """After fdopen takes ownership, os.close(fd) must not be called in cleanup."""
        storage = JsonFileStorage()

        with (
            patch("os.fsync", side_effect=OSError("fsync failure")),
            patch("os.close") as mock_close,
            pytest.raises(OSError, match="fsync failure"),
        ):
            storage.write(tmp_path / "scores.json", {})

        mock_close.assert_not_called()


class TestJsonFileStoragePermissions:
    def test_file_created_with_owner_only_permissions(self, tmp_path):
        target = tmp_path / "scores.json"

        JsonFileStorage().write(target, {})

        assert stat.S_IMODE(target.stat().st_mode) == 0o600

    def test_overwritten_file_retains_owner_only_permissions(self, tmp_path):
        target = tmp_path / "scores.json"
        storage = JsonFileStorage()

        storage.write(target, {"version": 1})
        storage.write(target, {"version": 2})

        assert stat.S_IMODE(target.stat().st_mode) == 0o600

    def test_file_not_group_or_world_readable(self, tmp_path):
        target = tmp_path / "scores.json"

        JsonFileStorage().write(target, {"Alice": {}})

        file_mode = target.stat().st_mode
        assert not file_mode & stat.S_IRGRP
        assert not file_mode & stat.S_IWGRP
        assert not file_mode & stat.S_IROTH
        assert not file_mode & stat.S_IWOTH
