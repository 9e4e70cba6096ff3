"""Wallet address checks.

Only presence is checked here. Chain-specific format validation belongs to
the wallet backend that owns the keyring.
"""


def is_valid_address(address: str | None) -> bool:
    """Check that an address was provided.

    Any truthy value passes, whitespace included.

    Args:
        address: Candidate address from a form field or URL parameter.

    Returns:
        True if address is truthy, False for None or "".

    Example:
        >>> is_valid_address("bc1qar0srrr7xfkvy5l643lydnw9re59gtzzwf5mdq")
        True
        >>> is_valid_address("")
        False
    """
    return bool(address)
