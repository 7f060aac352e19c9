"""
Base classes for resolver implementations.

This module re-exports the ResolverPlugin base class for convenience.
"""

from ..plugins import ResolverPlugin

__all__ = ["ResolverPlugin"]
