# schemagen/core/interfaces/schema_source.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

class SchemaSourcePort(ABC):
    @abstractmethod
    async def load(self, path: Union[str, Path]) -> Dict[str, Any]:
        """Load a JSON Schema document and return it as a dict.

        Implementations raise SchemaLoadError when the document is missing,
        unreadable or not a JSON object.
        """
        pass
