"""Role-based access control model.

Roles own scopes, scopes own permission strings, and an AccessRegistry
answers whether a set of role IDs may perform a permission.
"""

from .base import Role, Scope, new_role_with_unique_permissions
from .registry import (
    AccessRegistry,
    get_registry,
    register_role,
    is_role_allowed,
    is_role_allowed_uniquely,
)
from .loader import build_role, build_registry, load_registry

__all__ = [
    "Role",
    "Scope",
    "new_role_with_unique_permissions",
    "AccessRegistry",
    "get_registry",
    "register_role",
    "is_role_allowed",
    "is_role_allowed_uniquely",
    "build_role",
    "build_registry",
    "load_registry",
]
