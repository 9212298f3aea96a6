"""Integration shortcuts."""

from .viacep_client import PostalCodeLookupError, PostalCodeResult, ViaCepClient

__all__ = ["PostalCodeLookupError", "PostalCodeResult", "ViaCepClient"]
