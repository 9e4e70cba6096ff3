"""Configuration module for walletkit.

Usage:
    from walletkit.config import get_settings

    settings = get_settings()  # Cached singleton
    print(settings.popup_page)

Note:
    Formatting and conversion helpers never read settings. Only logging
    setup and UI page resolution do.
"""

from walletkit.config.logging import configure_logging
from walletkit.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
