"""Core access control entities: scopes and roles.

The model is a strict ownership tree:

    AccessRegistry -> Role -> Scope -> permission strings

A Scope is a named bundle of permission strings (an "actions group"), a Role
holds any number of Scopes keyed by scope ID. Nothing here keeps a reference
back up the tree, and nothing is copied defensively: a Scope attached to two
Roles is the same object in both.

None of these objects lock. Build them once and query from many threads, or
serialize every add/remove call yourself.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Scope:
    """A group of permission strings.

    Permissions keep insertion order and may contain duplicates.
    """

    id: str
    name: str = ""
    permissions: List[str] = field(default_factory=list)

    def add_permission(self, *permissions: str) -> "Scope":
        """Append one or more permissions.

        Args:
            permissions: Permission strings to append, duplicates included

        Returns:
            This scope, for chaining
        """
        self.permissions.extend(permissions)
        return self

    def remove_permission(self, *permissions: str) -> "Scope":
        """Remove the first occurrence of each given permission.

        Permissions that are not present are ignored. Later duplicates of a
        removed permission stay in place.

        Args:
            permissions: Permission strings to remove

        Returns:
            This scope, for chaining
        """
        for permission in permissions:
            if permission in self.permissions:
                self.permissions.remove(permission)
        return self

    def __contains__(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass
class Role:
    """An assignable identity such as a position or user group.

    Scopes are keyed by their ID; adding a scope whose ID is already present
    replaces the previous one.
    """

    id: str
    name: str = ""
    scopes: Dict[str, Scope] = field(default_factory=dict)

    def add_scope(self, *scopes: Scope) -> "Role":
        """Attach one or more scopes, replacing any with the same ID.

        Args:
            scopes: Scope instances to attach

        Returns:
            This role, for chaining
        """
        for scope in scopes:
            self.scopes[scope.id] = scope
        return self

    def remove_scope_by_id(self, *scope_ids: str) -> "Role":
        """Detach scopes by ID. Unknown IDs are ignored.

        Args:
            scope_ids: IDs of the scopes to detach

        Returns:
            This role, for chaining
        """
        for scope_id in scope_ids:
            self.scopes.pop(scope_id, None)
        return self

    def get_scope(self, scope_id: str) -> Optional[Scope]:
        """Get an attached scope by ID, or None."""
        return self.scopes.get(scope_id)

    def list_scopes(self) -> List[str]:
        """List the IDs of all attached scopes."""
        return list(self.scopes.keys())

    def is_allowed(self, scope_id: str, permission: str) -> bool:
        """Check whether the role grants a permission within one scope.

        Permission strings need not be unique across scopes, so the scope
        has to be named.

        Args:
            scope_id: ID of the scope to look in
            permission: Permission string, matched exactly

        Returns:
            True if the scope exists and contains the permission
        """
        scope = self.scopes.get(scope_id)
        if scope is None:
            return False
        return permission in scope

    def is_allowed_uniquely(self, permission: str) -> bool:
        """Check whether any scope of the role grants a permission.

        Meant for setups where every permission string is globally unique
        (a route path, for instance), so the granting scope does not matter.

        Args:
            permission: Permission string, matched exactly

        Returns:
            True if at least one scope contains the permission
        """
        return any(permission in scope for scope in self.scopes.values())


def new_role_with_unique_permissions(
    role_id: str, name: str, permissions: List[str]
) -> Role:
    """Create a role holding a single scope of unique permissions.

    The scope shares the role's ID and uses the given list as its
    permissions. Query the result with ``is_allowed_uniquely``.

    Args:
        role_id: ID for both the role and its only scope
        name: Display name of the role
        permissions: Permission strings, each unique in the application

    Returns:
        New Role instance
    """
    scope = Scope(id=role_id, permissions=permissions)
    return Role(id=role_id, name=name).add_scope(scope)
