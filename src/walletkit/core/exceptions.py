"""walletkit exception hierarchy.

This module defines the base exception class and the specialized
exceptions that callers of amount conversion and clipboard copy are
expected to handle. Text formatting helpers never raise.
"""


class WalletKitError(Exception):
    """Base exception for all walletkit errors.

    All custom exceptions in walletkit inherit from this class
    to enable consistent error handling and logging.
    """

    pass


class ConfigurationError(WalletKitError):
    """Raised when configuration is invalid or missing.

    Example:
        raise ConfigurationError("Page filenames must be distinct")
    """

    pass


class ArithmeticParseError(WalletKitError, ValueError):
    """Raised when an exact amount conversion receives non-numeric input.

    Also a ValueError, so callers that already guard numeric parsing
    with ``except ValueError`` keep working.

    Attributes:
        value: The rejected input.

    Example:
        raise ArithmeticParseError("abc")
    """

    def __init__(self, value: object, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Cannot parse amount: {value!r}")


class ClipboardCopyError(WalletKitError):
    """Raised when a clipboard write is rejected.

    Attributes:
        strategy: Clipboard strategy that failed ("native" or "legacy").

    Example:
        raise ClipboardCopyError("copy command returned false", strategy="legacy")
    """

    def __init__(self, message: str, strategy: str) -> None:
        self.strategy = strategy
        super().__init__(f"{strategy} clipboard: {message}")
