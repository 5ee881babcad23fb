"""Build roles and registries from parsed configuration."""

from typing import Optional

from ..common.config import RoleConfig, RouteAclConfig, load_typed_config
from ..common.logger import get_logger
from .base import Role, Scope, new_role_with_unique_permissions
from .registry import AccessRegistry

logger = get_logger("acl_loader")


def build_role(role_config: RoleConfig) -> Role:
    """Build a Role from its definition.

    A flat ``permissions`` list becomes the unique-permission scope named
    after the role; explicit scopes are attached after it.

    Args:
        role_config: RoleConfig instance

    Returns:
        Role with all configured scopes attached
    """
    if role_config.permissions is not None:
        role = new_role_with_unique_permissions(
            role_config.id, role_config.name, list(role_config.permissions)
        )
    else:
        role = Role(id=role_config.id, name=role_config.name)

    for scope_config in role_config.scopes:
        role.add_scope(
            Scope(
                id=scope_config.id,
                name=scope_config.name,
                permissions=list(scope_config.permissions),
            )
        )
    return role


def build_registry(
    config: RouteAclConfig, registry: Optional[AccessRegistry] = None
) -> AccessRegistry:
    """Populate an access registry from configuration.

    Args:
        config: RouteAclConfig instance
        registry: Registry to fill; a new one is created if omitted

    Returns:
        The populated AccessRegistry
    """
    if registry is None:
        registry = AccessRegistry()

    for role_config in config.roles:
        registry.add_role(build_role(role_config))

    logger.info(f"Loaded {len(config.roles)} role definitions")
    return registry


def load_registry(
    config_path: Optional[str] = None, registry: Optional[AccessRegistry] = None
) -> AccessRegistry:
    """Load a definition file and build an access registry from it.

    Args:
        config_path: Path to configuration file (ROUTEACL_CONFIG by default)
        registry: Registry to fill; a new one is created if omitted

    Returns:
        The populated AccessRegistry

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is invalid YAML
    """
    return build_registry(load_typed_config(config_path), registry)
