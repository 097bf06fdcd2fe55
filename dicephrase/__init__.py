"""Diceware-like passphrase generator."""

__version__ = '0.3.0'
