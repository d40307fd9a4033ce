"""CodegenManager: one schema-to-code session.

Responsibilities:
1. Hold session state (schema path, namespace, generated code).
2. Load the schema through the schema source port and hand it to the generator.
3. Copy the generated code to the clipboard, retrying transient clipboard failures.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional, Union

from schemagen.core.config import CodegenConfig
from schemagen.core.exceptions import (
    ClipboardError,
    CodeGenerationError,
    CodegenStateError,
    SchemaLoadError,
)
from schemagen.core.interfaces.clipboard import ClipboardPort
from schemagen.core.interfaces.code_generator import CodeGeneratorPort
from schemagen.core.interfaces.logging import LoggingPort
from schemagen.core.interfaces.retry import RetryPort
from schemagen.core.interfaces.schema_source import SchemaSourcePort
from schemagen.core.settings import get_logger


class CodegenManager:
    """Orchestrates a session: schema selection, code generation, clipboard copy.

    Attributes:
        config: Immutable session configuration (default namespace, clipboard retry schedule)
        namespace: Namespace passed to the generator; starts at config.namespace
        generated_code: Output of the last successful generate(), if any
    """

    def __init__(
        self,
        schema_source: SchemaSourcePort,
        generator: CodeGeneratorPort,
        clipboard: ClipboardPort,
        retry_port: RetryPort,
        config: Optional[CodegenConfig] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._source = schema_source
        self._generator = generator
        self._clipboard = clipboard
        self._retry = retry_port
        self.config = config or CodegenConfig()
        self._log = logger or get_logger()

        self._schema_path: Optional[Path] = None
        self.namespace: str = self.config.namespace
        self.generated_code: Optional[str] = None

    @property
    def schema_path(self) -> Optional[Path]:
        return self._schema_path

    @schema_path.setter
    def schema_path(self, value: Union[str, Path, None]) -> None:
        self._schema_path = Path(value) if value else None

    def can_generate(self) -> bool:
        return self._schema_path is not None

    def can_copy(self) -> bool:
        return bool(self.generated_code)

    async def generate(self) -> str:
        """Generate code for the selected schema and keep it for copy().

        Raises:
            CodegenStateError: no schema file selected
            SchemaLoadError: the schema source could not read the document
            CodeGenerationError: the generator rejected the schema
        """
        if not self.can_generate():
            raise CodegenStateError("Select a JSON Schema file before generating code")

        path = self._schema_path
        self._log.debug(f"[codegen:generate] loading schema path={path}")
        try:
            schema = await self._source.load(path)
        except SchemaLoadError:
            raise
        except Exception as exc:
            raise SchemaLoadError(path, diagnostic=str(exc)) from exc

        try:
            # generators are synchronous; keep the event loop free while they run
            code = await asyncio.to_thread(self._generator.generate, schema, self.namespace)
        except CodeGenerationError:
            raise
        except Exception as exc:
            raise CodeGenerationError(diagnostic=f"{type(exc).__name__}: {exc}") from exc

        self.generated_code = code
        self._log.info(
            f"[codegen:generate] generated path={path} namespace={self.namespace} chars={len(code)}"
        )
        return code

    def copy(self) -> None:
        """Copy the generated code to the clipboard.

        Every clipboard failure counts as transient; the configured schedule
        decides how long we keep trying.

        Raises:
            CodegenStateError: nothing generated yet
            ClipboardError: the last clipboard write failed after all retries
        """
        if not self.can_copy():
            raise CodegenStateError("Generate code before copying it")

        code = self.generated_code
        schedule = self.config.clipboard_retry.schedule
        try:
            self._retry.run_sync(lambda: self._clipboard.set_text(code), schedule=schedule)
        except Exception as exc:
            self._log.error(
                f"[codegen:copy] clipboard write failed max_attempts={len(schedule) + 1} error={exc}"
            )
            raise ClipboardError(diagnostic=str(exc)) from exc
        self._log.info(f"[codegen:copy] copied chars={len(code)}")
