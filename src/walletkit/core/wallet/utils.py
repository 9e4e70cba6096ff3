"""Wallet utility functions.

Shared utilities for wallet display used across UI and core modules.
"""

from walletkit.core.text.formatter import ELLIPSIS


def shorten_address(address: str | None, length: int = 5) -> str:
    """Shorten wallet address for display: bc1qx...f3k9w.

    Args:
        address: Full wallet address. None or "" yields "".
        length: Characters kept on each side of the ellipsis.

    Returns:
        Address unchanged if it is at most 2 * length characters, otherwise
        the first and last length characters joined by "...".

    Example:
        >>> shorten_address("0123456789abcdef", 4)
        '0123...cdef'
    """
    if not address:
        return ""
    if len(address) <= length * 2:
        return address
    return f"{address[:length]}{ELLIPSIS}{address[-length:]}"
