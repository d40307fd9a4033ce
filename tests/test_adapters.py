"""Tests for infrastructure adapters.

Each adapter translates a third-party or OS failure into the domain
exceptions the core expects:
- JsonFileSchemaSource -> SchemaLoadError for missing, invalid or non-object documents
- PyperclipClipboard -> ClipboardUnavailableError for failed writes
- DatamodelCodeGenerator -> CodeGenerationError when the library raises
"""

import json
import logging

import pyperclip
import pytest

from schemagen.adapters import datamodel_codegen_adapter
from schemagen.adapters.datamodel_codegen_adapter import DatamodelCodeGenerator
from schemagen.adapters.logging_adapter import LoggingAdapter
from schemagen.adapters.pyperclip_clipboard_adapter import PyperclipClipboard
from schemagen.adapters.schema_file_adapter import JsonFileSchemaSource
from schemagen.core.exceptions import (
    ClipboardUnavailableError,
    CodeGenerationError,
    SchemaLoadError,
)
from schemagen.core.logging_config import coerce_level, configure_logging


PERSON_SCHEMA = {
    "title": "Person",
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "integer"},
    },
    "required": ["name"],
}


class TestJsonFileSchemaSource:

    @pytest.mark.asyncio
    async def test_loads_object_document(self, tmp_path):
        path = tmp_path / "person.json"
        path.write_text(json.dumps(PERSON_SCHEMA), encoding="utf-8")

        assert await JsonFileSchemaSource().load(path) == PERSON_SCHEMA

    @pytest.mark.asyncio
    async def test_accepts_string_paths(self, tmp_path):
        path = tmp_path / "person.json"
        path.write_text("{}", encoding="utf-8")

        assert await JsonFileSchemaSource().load(str(path)) == {}

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(SchemaLoadError) as excinfo:
            await JsonFileSchemaSource().load(tmp_path / "absent.json")

        assert excinfo.value.diagnostic == "file does not exist"

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"type": "object",', encoding="utf-8")

        with pytest.raises(SchemaLoadError) as excinfo:
            await JsonFileSchemaSource().load(path)

        assert "invalid JSON" in excinfo.value.diagnostic
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    @pytest.mark.asyncio
    async def test_non_object_document(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        with pytest.raises(SchemaLoadError) as excinfo:
            await JsonFileSchemaSource().load(path)

        assert "list" in excinfo.value.diagnostic


class TestPyperclipClipboard:

    def test_set_text_copies(self, monkeypatch):
        copied = []
        monkeypatch.setattr(pyperclip, "copy", copied.append)

        PyperclipClipboard().set_text("class A: ...")

        assert copied == ["class A: ..."]

    def test_pyperclip_failure_is_clipboard_unavailable(self, monkeypatch):
        def fail(text):
            raise pyperclip.PyperclipException("could not find a copy/paste mechanism")

        monkeypatch.setattr(pyperclip, "copy", fail)

        with pytest.raises(ClipboardUnavailableError) as excinfo:
            PyperclipClipboard().set_text("class A: ...")

        assert "copy/paste mechanism" in str(excinfo.value)


class TestDatamodelCodeGenerator:

    def test_generates_models_with_namespace_header(self):
        code = DatamodelCodeGenerator().generate(PERSON_SCHEMA, "Acme.Models")

        assert "class Person" in code
        assert "namespace: Acme.Models" in code

    def test_library_failure_becomes_code_generation_error(self, monkeypatch):
        def explode(*args, **kwargs):
            raise RuntimeError("unsupported schema")

        monkeypatch.setattr(datamodel_codegen_adapter, "generate", explode)

        with pytest.raises(CodeGenerationError) as excinfo:
            DatamodelCodeGenerator().generate({"type": "object"}, "Acme")

        assert "unsupported schema" in excinfo.value.diagnostic


class TestLogging:

    @pytest.mark.parametrize(
        "level, expected",
        [(None, logging.INFO), ("debug", logging.DEBUG), (" WARNING ", logging.WARNING),
         (logging.ERROR, logging.ERROR), ("nonsense", logging.INFO)],
    )
    def test_coerce_level(self, level, expected):
        assert coerce_level(level) == expected

    def test_logging_adapter_emits_through_named_logger(self, caplog):
        adapter = LoggingAdapter("schemagen.test", "DEBUG")

        with caplog.at_level(logging.DEBUG, logger="schemagen.test"):
            adapter.info("copied chars=%d", 12)
            adapter.warning("slow clipboard")

        messages = [r.getMessage() for r in caplog.records if r.name == "schemagen.test"]
        assert "copied chars=12" in messages
        assert "slow clipboard" in messages

    def test_configure_logging_installs_split_sinks(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            configure_logging("DEBUG", quiet_retries=True)

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2
            assert logging.getLogger("schemagen.adapters.retry_tenacity").level == logging.WARNING
        finally:
            for handler in list(root.handlers):
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
            logging.getLogger("schemagen.adapters.retry_tenacity").setLevel(logging.NOTSET)
