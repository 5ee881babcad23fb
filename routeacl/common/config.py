"""Configuration management for routeacl.

Handles loading and validation of YAML role definition files. The
registry built from them (see routeacl.acl.loader) is never written back
to disk.

Example file::

    logging:
      level: INFO
    roles:
      - id: manager
        name: Manager
        scopes:
          - id: orders
            name: Orders
            permissions: [read, write]
      - id: admin
        name: Admin
        permissions: [/deploy, /rollback]
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .logger import get_logger

logger = get_logger("acl_config")

DEFAULT_CONFIG_PATH = "/etc/routeacl/acl.yaml"
CONFIG_PATH_ENV = "ROUTEACL_CONFIG"


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "INFO"
    log_dir: str = "/var/log/routeacl"
    file_logging: bool = False
    console_logging: bool = True


@dataclass
class ScopeConfig:
    """Definition of a single scope."""

    id: str
    name: str = ""
    permissions: List[str] = field(default_factory=list)


@dataclass
class RoleConfig:
    """Definition of a single role.

    ``permissions`` is the shorthand for a role of unique permissions; it
    becomes a scope with the same ID as the role.
    """

    id: str
    name: str = ""
    scopes: List[ScopeConfig] = field(default_factory=list)
    permissions: Optional[List[str]] = None


@dataclass
class RouteAclConfig:
    """Top-level configuration for routeacl."""

    roles: List[RoleConfig] = field(default_factory=list)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _require_id(entry: Any, kind: str) -> str:
    if not isinstance(entry, dict):
        raise TypeError(
            f"{kind} definition must be a mapping, got {type(entry).__name__}"
        )
    entry_id = entry.get("id")
    if entry_id is None or entry_id == "":
        raise ValueError(f"{kind} definition is missing an id: {entry}")
    return str(entry_id)


def _require_list(value: Any, what: str) -> List[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{what} must be a list, got {type(value).__name__}")
    return value


def parse_scope_config(scope_dict: Dict[str, Any]) -> ScopeConfig:
    """Parse a scope configuration dictionary.

    Args:
        scope_dict: Scope configuration dictionary

    Returns:
        ScopeConfig instance

    Raises:
        ValueError: If the scope has no id
        TypeError: If the entry is not a mapping or permissions is not a list
    """
    return ScopeConfig(
        id=_require_id(scope_dict, "Scope"),
        name=scope_dict.get("name", ""),
        permissions=[
            str(p) for p in _require_list(scope_dict.get("permissions"), "permissions")
        ],
    )


def parse_role_config(role_dict: Dict[str, Any]) -> RoleConfig:
    """Parse a role configuration dictionary.

    Args:
        role_dict: Role configuration dictionary

    Returns:
        RoleConfig instance

    Raises:
        ValueError: If the role or one of its scopes has no id
        TypeError: If the entry is not a mapping or scopes or permissions are
            not lists
    """
    role_id = _require_id(role_dict, "Role")

    scopes = []
    for scope_dict in _require_list(role_dict.get("scopes"), "scopes"):
        scopes.append(parse_scope_config(scope_dict))

    permissions = None
    if "permissions" in role_dict:
        permissions = [
            str(p) for p in _require_list(role_dict["permissions"], "permissions")
        ]

    return RoleConfig(
        id=role_id,
        name=role_dict.get("name", ""),
        scopes=scopes,
        permissions=permissions,
    )


def parse_logging_config(logging_dict: Dict[str, Any]) -> LoggingConfig:
    """Parse logging configuration dictionary.

    Args:
        logging_dict: Logging configuration dictionary

    Returns:
        LoggingConfig instance
    """
    return LoggingConfig(
        level=logging_dict.get("level", "INFO"),
        log_dir=logging_dict.get("log_dir", "/var/log/routeacl"),
        file_logging=logging_dict.get("file_logging", False),
        console_logging=logging_dict.get("console_logging", True),
    )


def parse_config(config_dict: Dict[str, Any]) -> RouteAclConfig:
    """Parse the full configuration dictionary.

    Args:
        config_dict: Full configuration dictionary

    Returns:
        RouteAclConfig instance

    Raises:
        TypeError: If roles is not a list or logging is not a mapping
        ValueError: If a role or scope has no id
    """
    roles = []
    for role_dict in _require_list(config_dict.get("roles"), "roles"):
        roles.append(parse_role_config(role_dict))

    logging_config = LoggingConfig()
    logging_dict = config_dict.get("logging")
    if logging_dict is not None:
        if not isinstance(logging_dict, dict):
            raise TypeError(
                f"logging must be a mapping, got {type(logging_dict).__name__}"
            )
        logging_config = parse_logging_config(logging_dict)

    return RouteAclConfig(roles=roles, logging=logging_config)


def get_config_path() -> str:
    """Get the configuration file path, honouring ROUTEACL_CONFIG."""
    return os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH)


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file (defaults to get_config_path())

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
        TypeError: If the YAML root is not a mapping
    """
    if config_path is None:
        config_path = get_config_path()
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug(f"Loading configuration from {config_path}")
    with config_file.open("r") as f:
        config = yaml.safe_load(f)

    if config is None:
        config = {}

    if not isinstance(config, dict):
        raise TypeError(
            f"Configuration root must be a mapping, got {type(config).__name__}"
        )

    return _expand_env_vars(config)


def _expand_env_vars(obj: Any) -> Any:
    """Recursively expand environment variables in configuration.

    Args:
        obj: Configuration object (dict, list, str, etc.)

    Returns:
        Configuration with expanded environment variables
    """
    if isinstance(obj, dict):
        return {key: _expand_env_vars(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [_expand_env_vars(item) for item in obj]
    elif isinstance(obj, str):
        return os.path.expandvars(obj)
    else:
        return obj


def load_typed_config(config_path: Optional[str] = None) -> RouteAclConfig:
    """Load and parse configuration into typed dataclass.

    Args:
        config_path: Path to configuration file

    Returns:
        RouteAclConfig instance
    """
    return parse_config(load_config(config_path))

