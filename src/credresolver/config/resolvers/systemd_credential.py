"""
systemd credential resolver.

This module provides the SystemdCredentialResolver class for resolving
references like ``systemdcredential:CREDENTIAL_NAME``. The credential is read
from ``$CREDENTIALS_DIRECTORY/CREDENTIAL_NAME``, the directory a service
manager such as systemd populates for the running service.

See also: https://systemd.io/CREDENTIALS/
"""

import logging
import os
import re
from pathlib import Path
from typing import Callable, Optional

from ..errors import (
    CredentialReadError,
    CredentialsDirectoryNotConfiguredError,
    InvalidCredentialNameError,
    UnsupportedSchemeError,
)
from ..models import SystemdCredentialConfigModel
from .base import ResolverPlugin

logger = logging.getLogger(__name__)

SCHEME_NAME = "systemdcredential"
DEFAULT_DIRECTORY_ENV = "CREDENTIALS_DIRECTORY"

DirectoryProvider = Callable[[], Optional[str]]


def env_directory_provider(env_var: str = DEFAULT_DIRECTORY_ENV) -> DirectoryProvider:
    """Return an accessor reading the credentials directory from ``env_var`` on each call."""

    def _provider() -> Optional[str]:
        return os.environ.get(env_var)

    return _provider


class SystemdCredentialResolver(ResolverPlugin):
    """Resolver for systemd credential references like systemdcredential:NAME.

    The resolver is stateless: the directory is looked up through
    ``directory_provider`` on every call and nothing is cached, so one
    instance can serve any number of concurrent callers.

    Credential content is returned as text without being interpreted. Bytes
    that are not valid UTF-8 are kept as surrogate escapes, so
    ``value.encode("utf-8", "surrogateescape")`` gives back the file content.

    Args:
        config: Optional plugin configuration. ``directory_env`` names the
            environment variable holding the credentials directory.
        directory_provider: Accessor returning the credentials directory, or
            None when it is not configured. Defaults to reading
            ``directory_env`` from the process environment.
    """

    CREDENTIAL_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]*$")

    def __init__(self, config=None, directory_provider: Optional[DirectoryProvider] = None):
        super().__init__(config)
        self.directory_env = self.config.get("directory_env", DEFAULT_DIRECTORY_ENV)
        self._directory_provider = directory_provider or env_directory_provider(self.directory_env)

    @classmethod
    def from_config(
        cls,
        config: SystemdCredentialConfigModel,
        directory_provider: Optional[DirectoryProvider] = None,
    ) -> "SystemdCredentialResolver":
        return cls(config.model_dump(), directory_provider=directory_provider)

    @property
    def scheme(self) -> str:
        return SCHEME_NAME

    def validate_config(self) -> bool:
        if not self.directory_env:
            logger.error("directory_env must name an environment variable")
            return False
        return True

    def resolve(self, reference: str) -> str:
        if not self.can_resolve(reference):
            raise UnsupportedSchemeError(reference, SCHEME_NAME)

        cred_name = reference[len(SCHEME_NAME) + 1 :]
        if not self.CREDENTIAL_NAME_PATTERN.fullmatch(cred_name):
            raise InvalidCredentialNameError(cred_name, self.CREDENTIAL_NAME_PATTERN.pattern)

        cred_dir = self._directory_provider()
        if cred_dir is None:
            raise CredentialsDirectoryNotConfiguredError(self.directory_env)

        cred_path = Path(cred_dir) / cred_name
        logger.debug(f"Reading credential {cred_name!r} from {cred_path}")
        try:
            raw = cred_path.read_bytes()
        except OSError as e:
            raise CredentialReadError(cred_name, cred_path, e) from e

        # Only a single "\n" is trimmed; "\r\n" keeps its "\r"
        if raw.endswith(b"\n"):
            raw = raw[:-1]
        return raw.decode("utf-8", errors="surrogateescape")
