"""Loading of the systemd credential resolver settings.

Settings live under a ``systemd_credential`` key of a YAML document, so the
section can sit inside a larger host configuration file.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import SystemdCredentialConfigModel
from .plugins import ResolverRegistry
from .resolvers import SystemdCredentialResolver

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "CREDRESOLVER_CONFIG"
CONFIG_SECTION = "systemd_credential"


def load_credential_config(config_path: str | Path | None = None) -> SystemdCredentialConfigModel:
    """Read the ``systemd_credential`` section from a YAML file.

    Args:
        config_path: File to read. Defaults to the file named by the
            CREDRESOLVER_CONFIG environment variable; when neither is given
            the default settings are returned.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not YAML or the section is invalid
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR)
        if not config_path:
            return SystemdCredentialConfigModel()

    path = Path(config_path)
    if not path.is_file():
        raise FileNotFoundError(f"Resolver config file not found at {path}")

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file {path}: {e}") from e

    if document is None:
        document = {}
    if not isinstance(document, dict):
        raise ValueError(f"Invalid resolver config in {path}: expected a mapping")

    section = document.get(CONFIG_SECTION) or {}
    try:
        config = SystemdCredentialConfigModel.model_validate(section)
    except ValidationError as e:
        raise ValueError(f"Invalid {CONFIG_SECTION} section in {path}: {e}") from e

    logger.debug(f"Loaded {CONFIG_SECTION} settings from {path}: {config}")
    return config


def build_registry(config: SystemdCredentialConfigModel | None = None) -> ResolverRegistry:
    """Create a registry holding the systemd credential resolver unless it is disabled."""
    registry = ResolverRegistry()
    registry.register(SystemdCredentialResolver.from_config(config or SystemdCredentialConfigModel()))
    return registry
