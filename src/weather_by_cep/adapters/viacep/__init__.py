"""ViaCEP adapter - postal code lookups."""

from .client import ViaCEPLocationResolver

__all__ = ["ViaCEPLocationResolver"]
