"""Access registry answering permission checks for sets of role IDs.

An application usually keeps one registry for its whole lifetime, fills it at
startup and then asks it, per request, whether the caller's roles permit an
action. The registry does not lock; see ``routeacl.acl.base``.
"""

from typing import Dict, Iterable, List, Optional

from ..common.logger import get_logger
from .base import Role

logger = get_logger("acl_registry")


class AccessRegistry:
    """Registry of roles keyed by role ID.

    Adding a role whose ID is already registered replaces the previous one.
    Unknown role IDs, unknown scopes and missing permissions all deny.
    """

    def __init__(self) -> None:
        self.roles: Dict[str, Role] = {}

    def add_role(self, *roles: Role) -> "AccessRegistry":
        """Register one or more roles.

        Args:
            roles: Role instances to register

        Returns:
            This registry, for chaining
        """
        for role in roles:
            if role.id in self.roles:
                logger.warning(f"Overwriting existing role: {role.id}")
            self.roles[role.id] = role
            logger.debug(f"Registered role: {role.id}")
        return self

    def remove_role_by_id(self, *role_ids: str) -> "AccessRegistry":
        """Unregister roles by ID. Unknown IDs are ignored.

        Args:
            role_ids: IDs of roles to remove

        Returns:
            This registry, for chaining
        """
        for role_id in role_ids:
            if self.roles.pop(role_id, None) is not None:
                logger.debug(f"Unregistered role: {role_id}")
        return self

    def get_role(self, role_id: str) -> Optional[Role]:
        """Get a registered role by ID.

        Args:
            role_id: ID of the role

        Returns:
            Role or None if not registered
        """
        return self.roles.get(role_id)

    def list_roles(self) -> List[str]:
        """List all registered role IDs.

        Returns:
            List of role IDs
        """
        return list(self.roles.keys())

    def is_role_allowed(
        self, role_ids: Iterable[str], scope_id: str, permission: str
    ) -> bool:
        """Check whether any of the given roles grants a scoped permission.

        Roles are tried in the given order and the first grant wins.
        Role IDs that are not registered are skipped.

        Args:
            role_ids: Role IDs held by the caller
            scope_id: ID of the scope the permission belongs to
            permission: Permission string

        Returns:
            True if at least one registered role allows it
        """
        for role_id in role_ids:
            role = self.roles.get(role_id)
            if role is not None and role.is_allowed(scope_id, permission):
                return True
        logger.debug(f"Denied {scope_id}/{permission}")
        return False

    def is_role_allowed_uniquely(
        self, role_ids: Iterable[str], permission: str
    ) -> bool:
        """Check whether any of the given roles grants a unique permission.

        Same as ``is_role_allowed`` but searches every scope of each role.

        Args:
            role_ids: Role IDs held by the caller
            permission: Permission string, unique in the application

        Returns:
            True if at least one registered role allows it
        """
        for role_id in role_ids:
            role = self.roles.get(role_id)
            if role is not None and role.is_allowed_uniquely(permission):
                return True
        logger.debug(f"Denied {permission}")
        return False

    def clear(self) -> None:
        """Remove all registered roles."""
        self.roles.clear()

    def __len__(self) -> int:
        return len(self.roles)

    def __contains__(self, role_id: str) -> bool:
        return role_id in self.roles


# Default application registry
_registry = AccessRegistry()


def get_registry() -> AccessRegistry:
    """Get the default access registry.

    Returns:
        Process-wide AccessRegistry instance
    """
    return _registry


def register_role(*roles: Role) -> None:
    """Register roles with the default registry.

    Args:
        roles: Role instances to register
    """
    _registry.add_role(*roles)


def is_role_allowed(role_ids: Iterable[str], scope_id: str, permission: str) -> bool:
    """Check a scoped permission against the default registry."""
    return _registry.is_role_allowed(role_ids, scope_id, permission)


def is_role_allowed_uniquely(role_ids: Iterable[str], permission: str) -> bool:
    """Check a unique permission against the default registry."""
    return _registry.is_role_allowed_uniquely(role_ids, permission)
