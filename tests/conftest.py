"""Pytest configuration and shared fixtures."""

import pytest

from routeacl.acl.base import Role, Scope
from routeacl.acl.registry import AccessRegistry


@pytest.fixture
def sample_config():
    """Sample configuration dictionary."""
    return {
        "logging": {
            "level": "DEBUG",
            "console_logging": False,
        },
        "roles": [
            {
                "id": "manager",
                "name": "Manager",
                "scopes": [
                    {"id": "orders", "name": "Orders", "permissions": ["read", "write"]},
                    {"id": "invoices", "name": "Invoices", "permissions": ["read"]},
                ],
            },
            {
                "id": "admin",
                "name": "Admin",
                "permissions": ["/deploy", "/rollback"],
            },
        ],
    }


@pytest.fixture
def manager_role():
    """Manager role with an orders scope and an invoices scope."""
    orders = Scope(id="orders", name="Orders", permissions=["read", "write"])
    invoices = Scope(id="invoices", name="Invoices", permissions=["read", "approve"])
    return Role(id="manager", name="Manager").add_scope(orders, invoices)


@pytest.fixture
def registry(manager_role):
    """Access registry holding the manager role."""
    return AccessRegistry().add_role(manager_role)
