"""
Host provider adapter for the systemd credential resolver.

Host configuration frameworks register providers through a zero-argument
factory and then call ``resolve(uri, watcher)``, ``scheme()`` and
``shutdown(context)`` on the provider it creates. This module exposes the
systemd credential resolver through that shape.

Example:
    >>> provider = new_factory().create()
    >>> provider.scheme()
    'systemdcredential'
    >>> provider.resolve("systemdcredential:api_token").as_string()  # doctest: +SKIP
    'my-secret-token-12345'
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .resolvers import SystemdCredentialResolver

logger = logging.getLogger(__name__)

WatcherFunc = Callable[[Any], None]


@dataclass(frozen=True)
class RetrievedValue:
    """A value returned to the host framework.

    Attributes:
        value: The resolved credential text; undecodable bytes are kept
            as surrogate escapes
        ephemeral: Whether the host should avoid caching the value
    """

    value: str
    ephemeral: bool = True

    def as_string(self) -> str:
        return self.value


class CredentialProvider:
    """Provider exposing a SystemdCredentialResolver to a host framework.

    The provider owns no resources and is safe to share between threads.
    """

    def __init__(self, resolver: Optional[SystemdCredentialResolver] = None):
        self._resolver = resolver or SystemdCredentialResolver()

    def resolve(
        self,
        uri: str,
        watcher: Optional[WatcherFunc] = None,
        context: Any = None,
    ) -> RetrievedValue:
        """Resolve ``uri`` to its credential value.

        ``watcher`` and ``context`` are accepted for interface conformance;
        the watcher is never invoked and the context is not consulted.

        Raises:
            CredentialResolutionError: If the reference cannot be resolved
        """
        return RetrievedValue(value=self._resolver.resolve(uri))

    def scheme(self) -> str:
        return self._resolver.scheme

    def shutdown(self, context: Any = None) -> None:
        self._resolver.cleanup()


class ProviderFactory:
    """Factory creating CredentialProvider instances for a host registry."""

    def __init__(self, create_func: Callable[[Any], CredentialProvider]):
        self._create_func = create_func

    def create(self, settings: Any = None) -> CredentialProvider:
        return self._create_func(settings)


def _new_provider(settings: Any) -> CredentialProvider:
    # Provider settings carry nothing this resolver uses
    return CredentialProvider()


def new_factory() -> ProviderFactory:
    """Return a factory for providers reading systemd credentials.

    Providers created by the factory support the ``systemdcredential`` scheme
    and are called with a selector ``systemdcredential:CREDENTIAL_NAME``. The
    credential is read from ``$CREDENTIALS_DIRECTORY/CREDENTIAL_NAME``.
    """
    return ProviderFactory(_new_provider)
