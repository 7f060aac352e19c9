"""
Tests for loading the systemd credential resolver settings.
"""

import pytest
import yaml

from credresolver.config import (
    SystemdCredentialConfigModel,
    SystemdCredentialResolver,
    build_registry,
    load_credential_config,
)


def write_config(path, data):
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestLoadCredentialConfig:
    """Test reading the systemd_credential section."""

    def test_defaults_without_file(self):
        assert load_credential_config() == SystemdCredentialConfigModel()

    def test_section_from_file(self, tmp_path):
        path = write_config(
            tmp_path / "config.yaml",
            {"systemd_credential": {"enabled": True, "directory_env": "APP_CREDS"}},
        )

        config = load_credential_config(path)
        assert config.enabled is True
        assert config.directory_env == "APP_CREDS"

    def test_section_inside_host_config(self, tmp_path):
        path = write_config(
            tmp_path / "host.yaml",
            {
                "server": {"port": 8080},
                "systemd_credential": {"enabled": False},
            },
        )

        config = load_credential_config(str(path))
        assert config.enabled is False
        assert config.directory_env == "CREDENTIALS_DIRECTORY"

    def test_path_from_env_var(self, tmp_path, monkeypatch):
        path = write_config(tmp_path / "resolvers.yaml", {"systemd_credential": {"directory_env": "FROM_ENV"}})
        monkeypatch.setenv("CREDRESOLVER_CONFIG", str(path))

        assert load_credential_config().directory_env == "FROM_ENV"

    @pytest.mark.parametrize("content", ["", "other: 1\n", "systemd_credential:\n"])
    def test_missing_or_empty_section(self, tmp_path, content):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        assert load_credential_config(path) == SystemdCredentialConfigModel()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_credential_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("systemd_credential: [unterminated")
        with pytest.raises(ValueError, match="Failed to parse YAML"):
            load_credential_config(path)

    @pytest.mark.parametrize(
        "section",
        [{"enabled": True, "cache": True}, {"directory_env": ""}],
    )
    def test_invalid_section(self, tmp_path, section):
        path = write_config(tmp_path / "config.yaml", {"systemd_credential": section})
        with pytest.raises(ValueError, match="Invalid systemd_credential section"):
            load_credential_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ValueError, match="expected a mapping"):
            load_credential_config(path)


class TestBuildRegistry:
    """Test building registries from settings."""

    def test_default_registry(self, credentials_dir):
        (credentials_dir / "api_token").write_text("token")
        registry = build_registry()

        assert registry.schemes() == ["systemdcredential"]
        assert registry.resolve("systemdcredential:api_token") == "token"

    def test_disabled_resolver(self):
        assert build_registry(SystemdCredentialConfigModel(enabled=False)).schemes() == []

    def test_custom_directory_env(self, tmp_path, monkeypatch):
        (tmp_path / "api_token").write_text("custom\n")
        monkeypatch.setenv("APP_CREDS", str(tmp_path))

        registry = build_registry(SystemdCredentialConfigModel(directory_env="APP_CREDS"))
        resolver = registry.resolver_for("systemdcredential:api_token")
        assert isinstance(resolver, SystemdCredentialResolver)
        assert resolver.directory_env == "APP_CREDS"
        assert registry.resolve("systemdcredential:api_token") == "custom"
