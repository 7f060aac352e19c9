"""Pydantic models for resolver configuration."""

from pydantic import Field

from credresolver.models import CredBaseModel


class SystemdCredentialConfigModel(CredBaseModel):
    """Configuration for the systemd credential resolver.

    Loaded from the ``systemd_credential`` section of a YAML file:

    ```yaml
    systemd_credential:
      enabled: true
      directory_env: "CREDENTIALS_DIRECTORY"
    ```

    Attributes:
        enabled: Whether the resolver is registered
        directory_env: Environment variable holding the credentials directory
    """

    enabled: bool = True
    directory_env: str = Field(default="CREDENTIALS_DIRECTORY", min_length=1)
