"""Tests for role definition configuration module."""

import pytest

import yaml

from routeacl.common.config import (
    LoggingConfig,
    ScopeConfig,
    RoleConfig,
    RouteAclConfig,
    parse_scope_config,
    parse_role_config,
    parse_logging_config,
    parse_config,
    load_config,
    load_typed_config,
    get_config_path,
    DEFAULT_CONFIG_PATH,
    CONFIG_PATH_ENV,
)


class TestScopeConfig:
    """Tests for ScopeConfig parsing."""

    def test_parse_basic_scope(self):
        """Test parsing basic scope config."""
        scope = parse_scope_config(
            {"id": "orders", "name": "Orders", "permissions": ["read", "write"]}
        )

        assert scope.id == "orders"
        assert scope.name == "Orders"
        assert scope.permissions == ["read", "write"]

    def test_parse_scope_defaults(self):
        """Test scope without name or permissions."""
        scope = parse_scope_config({"id": "orders"})

        assert scope.name == ""
        assert scope.permissions == []

    def test_parse_scope_keeps_duplicates(self):
        """Test duplicate permissions survive parsing."""
        scope = parse_scope_config({"id": "orders", "permissions": ["x", "x"]})
        assert scope.permissions == ["x", "x"]

    def test_parse_scope_stringifies_permissions(self):
        """Test non-string YAML scalars become strings."""
        scope = parse_scope_config({"id": 42, "permissions": [1, True]})

        assert scope.id == "42"
        assert scope.permissions == ["1", "True"]

    def test_parse_scope_missing_id(self):
        """Test a scope without id is rejected."""
        with pytest.raises(ValueError):
            parse_scope_config({"name": "Orders"})

    def test_parse_scope_not_mapping(self):
        """Test a scope entry that is not a mapping."""
        with pytest.raises(TypeError):
            parse_scope_config("orders")

    def test_parse_scope_permissions_not_list(self):
        """Test permissions given as a plain string."""
        with pytest.raises(TypeError):
            parse_scope_config({"id": "orders", "permissions": "read"})


class TestRoleConfig:
    """Tests for RoleConfig parsing."""

    def test_parse_scoped_role(self):
        """Test parsing a role with scopes."""
        role = parse_role_config(
            {
                "id": "manager",
                "name": "Manager",
                "scopes": [
                    {"id": "orders", "permissions": ["read"]},
                    {"id": "invoices", "permissions": ["approve"]},
                ],
            }
        )

        assert role.id == "manager"
        assert role.name == "Manager"
        assert [s.id for s in role.scopes] == ["orders", "invoices"]
        assert role.permissions is None

    def test_parse_unique_permission_role(self):
        """Test parsing the flat permissions shorthand."""
        role = parse_role_config({"id": "admin", "permissions": ["/deploy"]})

        assert role.scopes == []
        assert role.permissions == ["/deploy"]

    def test_parse_empty_permissions_list(self):
        """Test an explicit empty permissions list is kept."""
        role = parse_role_config({"id": "guest", "permissions": []})
        assert role.permissions == []

    def test_parse_role_missing_id(self):
        """Test a role without id is rejected."""
        with pytest.raises(ValueError):
            parse_role_config({"name": "Manager"})

    def test_parse_role_scopes_not_list(self):
        """Test scopes given as a mapping."""
        with pytest.raises(TypeError):
            parse_role_config({"id": "manager", "scopes": {"orders": ["read"]}})

    def test_parse_role_not_mapping(self):
        """Test a role entry given as a bare string."""
        with pytest.raises(TypeError):
            parse_config({"roles": ["admin"]})


class TestLoggingConfig:
    """Tests for LoggingConfig parsing."""

    def test_parse_logging_defaults(self):
        """Test logging config defaults."""
        config = parse_logging_config({})

        assert config.level == "INFO"
        assert config.log_dir == "/var/log/routeacl"
        assert not config.file_logging
        assert config.console_logging

    def test_parse_logging_custom(self):
        """Test custom logging config."""
        config = parse_logging_config(
            {"level": "DEBUG", "file_logging": True, "log_dir": "/tmp/acl"}
        )

        assert config.level == "DEBUG"
        assert config.file_logging
        assert config.log_dir == "/tmp/acl"


class TestRouteAclConfig:
    """Tests for full RouteAclConfig parsing."""

    def test_parse_full_config(self, sample_config):
        """Test parsing full configuration."""
        config = parse_config(sample_config)

        assert [r.id for r in config.roles] == ["manager", "admin"]
        assert config.roles[0].scopes[0].permissions == ["read", "write"]
        assert config.roles[1].permissions == ["/deploy", "/rollback"]
        assert config.logging.level == "DEBUG"
        assert not config.logging.console_logging

    def test_parse_empty_config(self):
        """Test parsing empty configuration."""
        config = parse_config({})

        assert config.roles == []
        assert config.logging == LoggingConfig()

    def test_parse_null_sections(self):
        """Test empty YAML sections fall back to defaults."""
        config = parse_config({"roles": None, "logging": None})

        assert config.roles == []
        assert config.logging.level == "INFO"

    def test_parse_roles_not_list(self):
        """Test roles given as a mapping."""
        with pytest.raises(TypeError):
            parse_config({"roles": {"manager": {}}})

    def test_parse_logging_not_mapping(self):
        """Test a logging section given as a bare string."""
        with pytest.raises(TypeError):
            parse_config({"logging": "verbose"})

    def test_dataclass_defaults(self):
        """Test dataclass defaults."""
        config = RouteAclConfig()
        assert config.roles == []
        assert RoleConfig(id="r").scopes == []
        assert ScopeConfig(id="s").permissions == []


class TestLoadConfig:
    """Tests for loading configuration from files."""

    def test_load_yaml_config(self, tmp_path):
        """Test loading YAML configuration."""
        config_content = """
roles:
  - id: manager
    scopes:
      - id: orders
        permissions: [read, write]
"""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text(config_content)

        config_dict = load_config(str(config_file))

        assert config_dict["roles"][0]["id"] == "manager"
        assert config_dict["roles"][0]["scopes"][0]["permissions"] == ["read", "write"]

    def test_load_config_nonexistent(self, tmp_path):
        """Test loading nonexistent config raises error."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "nonexistent.yaml"))

    def test_load_config_empty_file(self, tmp_path):
        """Test an empty file loads as an empty mapping."""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text("")

        assert load_config(str(config_file)) == {}

    def test_load_config_invalid_yaml(self, tmp_path):
        """Test malformed YAML raises a YAML error."""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text("roles: [unclosed\n")

        with pytest.raises(yaml.YAMLError):
            load_config(str(config_file))

    def test_load_config_root_not_mapping(self, tmp_path):
        """Test a YAML list at the root is rejected."""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text("- manager\n- admin\n")

        with pytest.raises(TypeError):
            load_config(str(config_file))

    def test_load_config_env_expansion(self, tmp_path, monkeypatch):
        """Test environment variable expansion."""
        monkeypatch.setenv("API_PREFIX", "/api/v2")

        config_content = """
roles:
  - id: admin
    permissions: ["${API_PREFIX}/deploy"]
"""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text(config_content)

        config_dict = load_config(str(config_file))

        assert config_dict["roles"][0]["permissions"] == ["/api/v2/deploy"]

    def test_load_config_from_env_path(self, tmp_path, monkeypatch):
        """Test the default path can be overridden by environment."""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text("roles: []\n")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(config_file))

        assert get_config_path() == str(config_file)
        assert load_config() == {"roles": []}

    def test_default_config_path(self, monkeypatch):
        """Test the default path without override."""
        monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
        assert get_config_path() == DEFAULT_CONFIG_PATH

    def test_load_typed_config(self, tmp_path):
        """Test loading typed configuration."""
        config_content = """
logging:
  level: WARNING
roles:
  - id: admin
    name: Admin
    permissions: [deploy, rollback]
"""
        config_file = tmp_path / "acl.yaml"
        config_file.write_text(config_content)

        config = load_typed_config(str(config_file))

        assert isinstance(config, RouteAclConfig)
        assert config.logging.level == "WARNING"
        assert config.roles[0].name == "Admin"
        assert config.roles[0].permissions == ["deploy", "rollback"]
