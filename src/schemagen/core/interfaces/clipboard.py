# schemagen/core/interfaces/clipboard.py
from abc import ABC, abstractmethod

class ClipboardPort(ABC):
    @abstractmethod
    def set_text(self, text: str) -> None:
        """Replace the clipboard contents with text.

        A single failed write raises ClipboardUnavailableError; callers decide
        whether to retry.
        """
        pass
