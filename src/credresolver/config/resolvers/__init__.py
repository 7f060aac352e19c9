"""
Resolvers subpackage.

This subpackage contains the resolver implementations for the configuration
references credresolver understands.
"""

from .base import ResolverPlugin
from .systemd_credential import (
    DEFAULT_DIRECTORY_ENV,
    SCHEME_NAME,
    SystemdCredentialResolver,
    env_directory_provider,
)

__all__ = [
    "DEFAULT_DIRECTORY_ENV",
    "SCHEME_NAME",
    "ResolverPlugin",
    "SystemdCredentialResolver",
    "env_directory_provider",
]
