"""Wallet address display and validation module."""

from walletkit.core.wallet.utils import shorten_address
from walletkit.core.wallet.validator import is_valid_address

__all__ = ["is_valid_address", "shorten_address"]
