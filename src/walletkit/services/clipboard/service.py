"""Clipboard service.

Selects a clipboard strategy once, from the capabilities the host reports,
and copies display values (addresses, amounts, transaction ids) through it.
"""

from typing import Protocol

import structlog

from walletkit.services.clipboard.backends import (
    ClipboardBackend,
    ClipboardWriter,
    Document,
    LegacyClipboard,
    NativeClipboard,
)

log = structlog.get_logger(__name__)


class ClipboardEnvironment(Protocol):
    """Host capabilities relevant to clipboard access.

    Attributes:
        is_secure_context: Whether privileged APIs are available.
        clipboard: Native async clipboard writer, None when not exposed.
        document: Document used by the legacy fallback.
    """

    @property
    def is_secure_context(self) -> bool: ...

    @property
    def clipboard(self) -> ClipboardWriter | None: ...

    @property
    def document(self) -> Document: ...


def select_backend(env: ClipboardEnvironment) -> ClipboardBackend:
    """Pick the native backend when available, else the legacy fallback.

    Args:
        env: Host capabilities.

    Returns:
        NativeClipboard if the context is secure and exposes a writer,
        LegacyClipboard otherwise.
    """
    if env.clipboard is not None and env.is_secure_context:
        return NativeClipboard(env.clipboard)
    return LegacyClipboard(env.document)


class ClipboardService:
    """Copies text to the OS clipboard.

    Attributes:
        backend: Strategy used for every copy.

    Example:
        service = ClipboardService.from_environment(host)
        try:
            await service.copy(address)
        except ClipboardCopyError:
            show_toast("Copy failed")
    """

    def __init__(self, backend: ClipboardBackend) -> None:
        self.backend = backend

    @classmethod
    def from_environment(cls, env: ClipboardEnvironment) -> "ClipboardService":
        backend = select_backend(env)
        log.debug("clipboard_backend_selected", strategy=backend.name)
        return cls(backend)

    async def copy(self, payload: str | int | float) -> None:
        """Copy payload to the clipboard.

        Args:
            payload: Value to copy, converted with str().

        Raises:
            ClipboardCopyError: If the backend rejects the write.
        """
        text = str(payload)
        await self.backend.write_text(text)
        log.debug("clipboard_copied", strategy=self.backend.name, length=len(text))
