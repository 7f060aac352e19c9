"""Configuration reference resolution.

Resolvers turn selectors such as ``systemdcredential:api_token`` into values.

```python
from credresolver.config import SystemdCredentialResolver

with SystemdCredentialResolver() as resolver:
    token = resolver.resolve("systemdcredential:api_token")
```
"""

from .errors import (
    CredentialReadError,
    CredentialResolutionError,
    CredentialsDirectoryNotConfiguredError,
    InvalidCredentialNameError,
    UnsupportedSchemeError,
)
from .loader import build_registry, load_credential_config
from .models import SystemdCredentialConfigModel
from .plugins import ResolverPlugin, ResolverRegistry
from .provider import CredentialProvider, ProviderFactory, RetrievedValue, new_factory
from .resolvers import SCHEME_NAME, SystemdCredentialResolver, env_directory_provider

__all__ = [
    "SCHEME_NAME",
    "CredentialProvider",
    "CredentialReadError",
    "CredentialResolutionError",
    "CredentialsDirectoryNotConfiguredError",
    "InvalidCredentialNameError",
    "ProviderFactory",
    "ResolverPlugin",
    "ResolverRegistry",
    "RetrievedValue",
    "SystemdCredentialConfigModel",
    "SystemdCredentialResolver",
    "UnsupportedSchemeError",
    "build_registry",
    "env_directory_provider",
    "load_credential_config",
    "new_factory",
]
