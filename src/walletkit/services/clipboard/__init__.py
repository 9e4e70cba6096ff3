"""Clipboard access with a native strategy and a legacy fallback."""

from walletkit.services.clipboard.backends import (
    OFFSCREEN_STYLE,
    ClipboardBackend,
    LegacyClipboard,
    NativeClipboard,
)
from walletkit.services.clipboard.service import (
    ClipboardEnvironment,
    ClipboardService,
    select_backend,
)

__all__ = [
    "OFFSCREEN_STYLE",
    "ClipboardBackend",
    "ClipboardEnvironment",
    "ClipboardService",
    "LegacyClipboard",
    "NativeClipboard",
    "select_backend",
]
