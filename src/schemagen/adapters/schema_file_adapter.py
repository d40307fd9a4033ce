"""JSON Schema source reading documents from the local filesystem."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import aiofiles

from schemagen.core.exceptions import SchemaLoadError
from schemagen.core.interfaces.schema_source import SchemaSourcePort

logger = logging.getLogger(__name__)


class JsonFileSchemaSource(SchemaSourcePort):
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    async def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(path)
        if not path.is_file():
            raise SchemaLoadError(path, diagnostic="file does not exist")
        try:
            async with aiofiles.open(path, "r", encoding=self.encoding) as f:
                text = await f.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise SchemaLoadError(path, diagnostic=str(exc)) from exc

        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaLoadError(
                path, diagnostic=f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
            ) from exc
        if not isinstance(document, dict):
            raise SchemaLoadError(
                path, diagnostic=f"expected a JSON object, got {type(document).__name__}"
            )
        logger.debug("Loaded schema path=%s keys=%s", path, sorted(document.keys()))
        return document
