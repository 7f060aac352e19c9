"""Errors raised while resolving credential references.

Every error derives from ``CredentialResolutionError``, itself a ``ValueError``,
so callers that already catch ``ValueError`` from resolver plugins keep working.
"""

from pathlib import Path


class CredentialResolutionError(ValueError):
    """Base class for all credential resolution failures."""


class UnsupportedSchemeError(CredentialResolutionError):
    """The reference does not start with the resolver's scheme prefix."""

    def __init__(self, uri: str, scheme: str):
        self.uri = uri
        self.scheme = scheme
        super().__init__(f"{uri!r} uri is not supported by {scheme!r} resolver")


class InvalidCredentialNameError(CredentialResolutionError):
    """The credential name does not match the allowed identifier pattern."""

    def __init__(self, name: str, pattern: str):
        self.name = name
        self.pattern = pattern
        super().__init__(
            f"credential name {name!r} has invalid name: must match regex {pattern}"
        )


class CredentialsDirectoryNotConfiguredError(CredentialResolutionError):
    """The environment variable naming the credentials directory is unset."""

    def __init__(self, env_var: str):
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is not set")


class CredentialReadError(CredentialResolutionError):
    """The credential file could not be read."""

    def __init__(self, name: str, path: Path, cause: Exception):
        self.name = name
        self.path = path
        super().__init__(f"failed to read credential {name!r} from {str(path)!r}: {cause}")
