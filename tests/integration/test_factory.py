"""
End-to-end tests: resolve a configuration file and build a working logger.
"""

import json
import logging
from unittest.mock import Mock

import pytest

import monolog_factory
from monolog_factory import (
    ConfigNotFoundError,
    ConfigResolver,
    LoggerFactory,
    UnknownHandlerTypeError,
    get_default_logger,
    get_logger,
    load_config_from_file,
)


@pytest.mark.integration
class TestModuleEntryPoints:
    """Test the module-level convenience functions."""

    def test_load_config_from_explicit_file(self, temp_dir, work_dir, config_writer):
        path = config_writer(temp_dir / "logging.json", [{"class": "NullHandler"}])

        document = load_config_from_file(str(path))

        assert document.handler_classes == ("NullHandler",)

    def test_get_logger_without_config(self):
        built = get_logger("plain")

        assert built.name == "plain"
        assert built.handlers == []

    def test_get_default_logger_from_environment(self, temp_dir, work_dir, config_writer, monkeypatch):
        path = config_writer(
            temp_dir / "env.json",
            [{"class": "StreamHandler", "parameters": {"stream": "stdout", "level": "NOTICE"}}],
        )
        monkeypatch.setenv("MONOLOG_CFG", str(path))

        built = get_default_logger()

        assert built.name == "monolog"
        assert built.handlers[0].level == 25

    def test_get_default_logger_without_config_fails(self, work_dir):
        with pytest.raises(ConfigNotFoundError):
            get_default_logger("app")

    def test_version(self):
        assert monolog_factory.__version__


@pytest.mark.integration
class TestLoggerFactory:
    """Test the LoggerFactory class."""

    def test_constructor_config_skips_resolution(self):
        resolver = Mock(spec=ConfigResolver)
        factory = LoggerFactory(resolver=resolver, config={"handlers": [{"class": "NullHandler"}]})

        built = factory.get_default_logger("svc")

        resolver.resolve.assert_not_called()
        assert built.name == "svc"
        assert isinstance(built.handlers[0], logging.NullHandler)

    def test_default_logger_resolves_through_resolver(self, include_dir, work_dir, config_writer):
        config_writer(include_dir / "monolog.cfg", [{"class": "NullHandler"}, {"class": "StreamHandler"}])
        factory = LoggerFactory(resolver=ConfigResolver(include_path=[include_dir]))

        built = factory.get_default_logger()

        assert [type(h).__name__ for h in built.handlers] == ["NullHandler", "StreamHandler"]

    def test_unknown_handler_propagates(self, include_dir, work_dir, config_writer):
        config_writer(include_dir / "monolog.cfg", [{"class": "DoesNotExist"}])
        factory = LoggerFactory(resolver=ConfigResolver(include_path=[include_dir]))

        with pytest.raises(UnknownHandlerTypeError):
            factory.get_default_logger()


@pytest.mark.integration
class TestFileOutput:
    """Test that a resolved configuration actually writes log files."""

    def test_json_file_output(self, temp_dir, include_dir, work_dir, config_writer):
        log_file = temp_dir / "logs" / "app.jsonl"
        config_writer(
            include_dir / "monolog.cfg",
            [
                {
                    "class": "FileHandler",
                    "parameters": {"filename": str(log_file), "level": "ERROR"},
                    "formatter": "json",
                }
            ],
            processors=[{"class": "ContextProcessor", "parameters": {"extra": {"env": "test"}}}],
        )
        factory = LoggerFactory(resolver=ConfigResolver(include_path=[include_dir]))

        built = factory.get_default_logger("billing")
        built.info("ignored")
        built.error("payment failed")
        for handler in built.handlers:
            handler.close()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1
        entry = json.loads(lines[0])
        assert entry["message"] == "payment failed"
        assert entry["channel"] == "billing"
        assert entry["extra"] == {"env": "test"}

    def test_two_file_handlers_with_different_levels(self, temp_dir, work_dir):
        everything = temp_dir / "all.log"
        errors = temp_dir / "errors.log"
        config = {
            "handlers": [
                {"class": "FileHandler", "parameters": {"filename": str(everything), "level": "DEBUG"}},
                {"class": "FileHandler", "parameters": {"filename": str(errors), "level": 40}},
            ]
        }

        built = get_logger("worker", config)
        built.debug("starting")
        built.error("crashed")
        for handler in built.handlers:
            handler.close()

        assert "starting" in everything.read_text(encoding="utf-8")
        assert "crashed" in everything.read_text(encoding="utf-8")
        assert "starting" not in errors.read_text(encoding="utf-8")
        assert "crashed" in errors.read_text(encoding="utf-8")
