"""Nostromo Toolkit - fundraising lifecycle engine for Nostromo campaigns."""

__version__ = "0.1.0"

from .fundraising import FundraisingLifecycle
from .shared.config import LifecycleSettings

__all__ = ["FundraisingLifecycle", "LifecycleSettings"]
