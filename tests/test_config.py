"""Tests for Settings and the debug log setup."""

import logging
import os
from pathlib import Path

import pytest

from rustcja.config import DEFAULT_DEBUG_LOG_NAME, DEFAULT_PHRASES_PATH, Settings
from rustcja.debuglog import PACKAGE_LOGGER, setup_debug_logging


class TestSettings:
    """Tests for Settings.from_env()."""

    def test_defaults(self, monkeypatch):
        for var in (
            "RUSTC_JA_PHRASES",
            "RUSTC_JA_EXTRA_PHRASES",
            "RUSTC_JA_DEBUG_LOG",
            "RUSTC_JA_LOG_LEVEL",
        ):
            monkeypatch.delenv(var, raising=False)

        settings = Settings.from_env()

        assert settings.phrases_path == DEFAULT_PHRASES_PATH
        assert settings.extra_phrase_paths == []
        assert settings.debug_log_path.name == DEFAULT_DEBUG_LOG_NAME
        assert settings.log_level == "DEBUG"

    def test_phrases_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RUSTC_JA_PHRASES", str(tmp_path / "mine.json"))
        assert Settings.from_env().phrases_path == tmp_path / "mine.json"

    def test_extra_phrases_split_on_pathsep(self, monkeypatch, tmp_path):
        a, b = tmp_path / "a.json", tmp_path / "b.yaml"
        monkeypatch.setenv("RUSTC_JA_EXTRA_PHRASES", f"{a}{os.pathsep}{b}")

        settings = Settings.from_env()

        assert settings.extra_phrase_paths == [a, b]
        assert settings.all_phrase_paths == [settings.phrases_path, a, b]

    def test_empty_debug_log_disables(self, monkeypatch):
        monkeypatch.setenv("RUSTC_JA_DEBUG_LOG", "")
        assert Settings.from_env().debug_log_path is None

    def test_debug_log_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RUSTC_JA_DEBUG_LOG", str(tmp_path / "d.log"))
        assert Settings.from_env().debug_log_path == tmp_path / "d.log"

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("RUSTC_JA_LOG_LEVEL", "warning")
        assert Settings.from_env().log_level == "WARNING"

    def test_bundled_phrases_exist(self):
        assert DEFAULT_PHRASES_PATH.exists()


class TestDebugLogging:
    """Tests for setup_debug_logging()."""

    def test_writes_to_file(self, tmp_path):
        log_path = tmp_path / "debug.log"
        handler = setup_debug_logging(Settings(debug_log_path=log_path))

        logging.getLogger("rustcja.test").debug("hello debug log")
        handler.flush()

        text = log_path.read_text(encoding="utf-8")
        assert "hello debug log" in text
        assert "| DEBUG" in text

    def test_appends(self, tmp_path):
        log_path = tmp_path / "debug.log"
        log_path.write_text("existing\n", encoding="utf-8")

        handler = setup_debug_logging(Settings(debug_log_path=log_path))
        logging.getLogger("rustcja.test").debug("new line")
        handler.flush()

        assert log_path.read_text(encoding="utf-8").startswith("existing\n")

    def test_disabled(self):
        assert setup_debug_logging(Settings(debug_log_path=None)) is None

    def test_unwritable_path_is_ignored(self, tmp_path):
        path = tmp_path / "no-such-dir" / "debug.log"
        assert setup_debug_logging(Settings(debug_log_path=path)) is None

    def test_idempotent_for_same_path(self, tmp_path):
        settings = Settings(debug_log_path=tmp_path / "debug.log")
        first = setup_debug_logging(settings)
        second = setup_debug_logging(settings)

        assert first is second
        file_handlers = [
            h
            for h in logging.getLogger(PACKAGE_LOGGER).handlers
            if isinstance(h, logging.FileHandler)
        ]
        assert len(file_handlers) == 1

    def test_level_from_settings(self, tmp_path):
        setup_debug_logging(Settings(debug_log_path=None, log_level="WARNING"))
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.WARNING

    @pytest.mark.parametrize("name", ["basicConfig", "NOT_A_LEVEL"])
    def test_unknown_level_falls_back_to_debug(self, name):
        setup_debug_logging(Settings(debug_log_path=None, log_level=name))
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    def test_default_path_in_tempdir(self):
        path = Settings().debug_log_path
        assert isinstance(path, Path)
        assert path.name == DEFAULT_DEBUG_LOG_NAME
