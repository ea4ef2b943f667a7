"""Terminal interaction helpers for gwt."""

from .prompt import Confirmer

__all__ = ["Confirmer"]
