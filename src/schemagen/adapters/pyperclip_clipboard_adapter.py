import pyperclip

from schemagen.core.exceptions import ClipboardUnavailableError
from schemagen.core.interfaces.clipboard import ClipboardPort


class PyperclipClipboard(ClipboardPort):
    """System clipboard via pyperclip.

    A failed write (no clipboard mechanism, clipboard held by another process)
    surfaces as ClipboardUnavailableError so callers can retry it.
    """

    def set_text(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardUnavailableError(str(exc)) from exc
