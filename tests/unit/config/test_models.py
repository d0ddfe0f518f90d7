"""
Unit tests for the configuration document models.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from monolog_factory.config import ConfigDocument, HandlerSpec, Options, ProcessorSpec


@pytest.mark.unit
class TestHandlerSpec:
    """Test HandlerSpec validation."""

    def test_class_alias(self):
        spec = HandlerSpec.model_validate({"class": "StreamHandler"})

        assert spec.class_name == "StreamHandler"
        assert spec.parameters is None
        assert spec.formatter is None

    def test_populate_by_name(self):
        spec = HandlerSpec(class_name="FileHandler", parameters={"filename": "app.log"})

        assert spec.parameters == {"filename": "app.log"}

    def test_class_is_stripped(self):
        assert HandlerSpec.model_validate({"class": "  NullHandler "}).class_name == "NullHandler"

    @pytest.mark.parametrize("payload", [{}, {"class": ""}, {"class": "   "}, {"class": 5}])
    def test_invalid_class(self, payload):
        with pytest.raises(ValidationError):
            HandlerSpec.model_validate(payload)

    def test_parameters_must_be_object(self):
        with pytest.raises(ValidationError):
            HandlerSpec.model_validate({"class": "A", "parameters": ["level"]})

    def test_frozen(self):
        spec = HandlerSpec.model_validate({"class": "A"})

        with pytest.raises(ValidationError):
            spec.class_name = "B"


@pytest.mark.unit
class TestConfigDocument:
    """Test ConfigDocument validation."""

    def test_handlers_keep_order(self):
        document = ConfigDocument.model_validate(
            {"handlers": [{"class": "A"}, {"class": "B"}, {"class": "C"}]}
        )

        assert document.handler_classes == ("A", "B", "C")

    def test_processors_default_empty(self):
        document = ConfigDocument.model_validate({"handlers": []})

        assert document.processors == ()
        assert document.source is None

    def test_processors_parsed(self):
        document = ConfigDocument.model_validate(
            {"handlers": [], "processors": [{"class": "UidProcessor", "parameters": {"length": 4}}]}
        )

        assert document.processors == (ProcessorSpec(class_name="UidProcessor", parameters={"length": 4}),)

    def test_handlers_required(self):
        with pytest.raises(ValidationError):
            ConfigDocument.model_validate({"processors": []})

    def test_unknown_keys_ignored(self):
        document = ConfigDocument.model_validate({"handlers": [], "comment": "ignored"})

        assert not hasattr(document, "comment")

    def test_source_is_path(self):
        document = ConfigDocument.model_validate({"handlers": [], "source": "/etc/monolog.cfg"})

        assert document.source == Path("/etc/monolog.cfg")


@pytest.mark.unit
class TestOptions:
    """Test the process option store."""

    def test_mapping_behaviour(self):
        options = Options({"monolog.config": "a.json"})
        options["other"] = 5

        assert options["other"] == "5"
        assert dict(options) == {"monolog.config": "a.json", "other": "5"}
        del options["other"]
        assert len(options) == 1

    def test_config_file(self):
        assert Options().config_file is None
        assert Options({"monolog.config": ""}).config_file is None
        assert Options({"monolog.config": "a.json"}).config_file == "a.json"
