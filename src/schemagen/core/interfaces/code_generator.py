# schemagen/core/interfaces/code_generator.py
from abc import ABC, abstractmethod
from typing import Any, Dict

class CodeGeneratorPort(ABC):
    @abstractmethod
    def generate(self, schema: Dict[str, Any], namespace: str) -> str:
        """Turn a parsed JSON Schema into source text.

        The generator is opaque to the core; adapters raise CodeGenerationError
        when the schema cannot be converted.
        """
        pass
