"""Clipboard write strategies.

Two backends implement ClipboardBackend:

- NativeClipboard delegates to the platform's async clipboard writer,
  which is only exposed in a secure context.
- LegacyClipboard drives the document: a hidden off-screen textarea is
  filled, selected and copied with the "copy" command, then removed.

Both raise ClipboardCopyError on failure. Neither retries.
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

import structlog

from walletkit.core.exceptions import ClipboardCopyError

log = structlog.get_logger(__name__)

ClipboardWriter = Callable[[str], Awaitable[Any]]

# Keeps the textarea out of the viewport without display:none, which would
# make it unselectable
OFFSCREEN_STYLE: dict[str, str] = {
    "position": "absolute",
    "opacity": "0",
    "left": "-999999px",
    "top": "-999999px",
}


class ClipboardBackend(Protocol):
    """A strategy that writes text to the OS clipboard."""

    name: str

    async def write_text(self, text: str) -> None: ...


class EditableElement(Protocol):
    """The subset of a DOM textarea used by the legacy strategy."""

    value: str
    style: dict[str, str]

    def focus(self) -> None: ...

    def select(self) -> None: ...

    def remove(self) -> None: ...


class DocumentBody(Protocol):
    def append_child(self, element: EditableElement) -> None: ...


class Document(Protocol):
    """The subset of the DOM document used by the legacy strategy."""

    @property
    def body(self) -> DocumentBody: ...

    def create_element(self, tag_name: str) -> EditableElement: ...

    def exec_command(self, command: str) -> bool: ...


class NativeClipboard:
    """Writes through the platform async clipboard API."""

    name = "native"

    def __init__(self, writer: ClipboardWriter) -> None:
        self._writer = writer

    async def write_text(self, text: str) -> None:
        try:
            await self._writer(text)
        except ClipboardCopyError:
            raise
        except Exception as e:
            log.warning("clipboard_copy_failed", strategy=self.name, error=str(e))
            raise ClipboardCopyError(str(e) or type(e).__name__, strategy=self.name) from e


class LegacyClipboard:
    """Copies via a temporary textarea and the document "copy" command.

    The textarea is removed on every exit path, including when the copy
    command returns False or raises.
    """

    name = "legacy"

    def __init__(self, document: Document) -> None:
        self._document = document

    async def write_text(self, text: str) -> None:
        textarea = self._document.create_element("textarea")
        textarea.value = text
        textarea.style.update(OFFSCREEN_STYLE)
        self._document.body.append_child(textarea)
        try:
            textarea.focus()
            textarea.select()
            copied = self._document.exec_command("copy")
        except Exception as e:
            log.warning("clipboard_copy_failed", strategy=self.name, error=str(e))
            raise ClipboardCopyError(str(e) or type(e).__name__, strategy=self.name) from e
        finally:
            textarea.remove()

        if not copied:
            log.warning("clipboard_copy_rejected", strategy=self.name)
            raise ClipboardCopyError("copy command returned false", strategy=self.name)
