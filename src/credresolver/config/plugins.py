"""
Plugin contract for scheme based configuration resolvers.

A host configuration framework hands every selector of the form
``scheme:rest`` to the resolver registered for ``scheme``. This module holds
the abstract base class resolvers implement and a registry keyed on the
scheme token.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ResolverPlugin(ABC):
    """
    Abstract base class for scheme based resolver plugins.

    A plugin owns exactly one scheme and resolves every selector starting
    with ``<scheme>:``. Subclasses implement `scheme` and `resolve`, and may
    override `validate_config` and `cleanup`.

    ```python
    with SystemdCredentialResolver() as resolver:
        token = resolver.resolve("systemdcredential:api_token")
    ```

    `resolve` raises a ``ValueError`` subclass when a selector cannot be
    resolved; no fallback value is ever returned.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        self.enabled = self.config.get("enabled", True)

    @property
    @abstractmethod
    def scheme(self) -> str:
        """The scheme token this plugin handles, without the trailing colon."""

    @property
    def name(self) -> str:
        return self.scheme

    def can_resolve(self, reference: str) -> bool:
        return reference.startswith(f"{self.scheme}:")

    @abstractmethod
    def resolve(self, reference: str) -> str:
        """Resolve the selector to its value."""

    def validate_config(self) -> bool:
        return True

    def cleanup(self) -> None:
        """Release held resources. Must be safe to call more than once."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()


class ResolverRegistry:
    """Routes selectors to plugins by their ``scheme:`` prefix."""

    def __init__(self):
        self._by_scheme: Dict[str, ResolverPlugin] = {}

    def register(self, resolver: ResolverPlugin) -> bool:
        """Register ``resolver`` under its scheme.

        Returns False when the resolver is disabled or misconfigured and was
        skipped. Registering a second resolver for a taken scheme raises
        ValueError.
        """
        scheme = resolver.scheme
        if not resolver.enabled:
            logger.debug(f"Resolver for scheme {scheme!r} is disabled, skipping registration")
            return False
        if not resolver.validate_config():
            logger.warning(f"Resolver for scheme {scheme!r} has invalid configuration, skipping registration")
            return False
        if scheme in self._by_scheme:
            raise ValueError(f"A resolver is already registered for scheme {scheme!r}")

        self._by_scheme[scheme] = resolver
        logger.debug(f"Registered resolver for scheme {scheme!r}")
        return True

    def schemes(self) -> List[str]:
        return list(self._by_scheme)

    def resolver_for(self, reference: str) -> Optional[ResolverPlugin]:
        """Return the resolver owning the scheme of ``reference``, if any."""
        scheme, sep, _ = reference.partition(":")
        if not sep:
            return None
        return self._by_scheme.get(scheme)

    def resolve(self, reference: str) -> str:
        resolver = self.resolver_for(reference)
        if resolver is None:
            raise ValueError(f"No resolver registered for reference: {reference!r}")
        return resolver.resolve(reference)

    def shutdown(self) -> None:
        """Clean up every registered resolver, logging failures."""
        for scheme, resolver in self._by_scheme.items():
            try:
                resolver.cleanup()
            except Exception as e:
                logger.warning(f"Error cleaning up resolver for scheme {scheme!r}: {e}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()
