"""routeacl: in-process role-based access control.

Build scopes, attach them to roles, register the roles in an
AccessRegistry, then ask the registry whether a caller's role IDs allow
a permission::

    from routeacl import AccessRegistry, Role, Scope

    orders = Scope(id="orders", permissions=["read", "write"])
    acl = AccessRegistry().add_role(Role(id="manager").add_scope(orders))
    acl.is_role_allowed(["manager"], "orders", "write")  # True
"""

from .acl import (
    AccessRegistry,
    Role,
    Scope,
    build_registry,
    get_registry,
    load_registry,
    new_role_with_unique_permissions,
)

__version__ = "0.1.0"

__all__ = [
    "AccessRegistry",
    "Role",
    "Scope",
    "build_registry",
    "get_registry",
    "load_registry",
    "new_role_with_unique_permissions",
]
