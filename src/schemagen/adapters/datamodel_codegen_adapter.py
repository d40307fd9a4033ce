"""Code generator backed by datamodel-code-generator (JSON Schema -> pydantic models)."""
from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path
from typing import Any, Dict

from datamodel_code_generator import InputFileType, generate

from schemagen.core.exceptions import CodeGenerationError
from schemagen.core.interfaces.code_generator import CodeGeneratorPort

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = "# generated by schemagen\n# namespace: {namespace}"


class DatamodelCodeGenerator(CodeGeneratorPort):
    """Delegates to `datamodel_code_generator.generate`.

    The library writes to a file when `output` is given on every release we
    support, so output goes through a temporary directory and is read back.
    The namespace has no Python equivalent; it is recorded in the file header.
    """

    def __init__(self, header_template: str = HEADER_TEMPLATE) -> None:
        self.header_template = header_template

    def generate(self, schema: Dict[str, Any], namespace: str) -> str:
        with tempfile.TemporaryDirectory(prefix="schemagen-") as tmp:
            output = Path(tmp) / "models.py"
            try:
                generate(
                    json.dumps(schema),
                    input_file_type=InputFileType.JsonSchema,
                    output=output,
                    custom_file_header=self.header_template.format(namespace=namespace),
                )
            except Exception as exc:
                logger.debug("datamodel-code-generator failed: %r", exc)
                raise CodeGenerationError(diagnostic=f"{type(exc).__name__}: {exc}") from exc
            return output.read_text(encoding="utf-8")
