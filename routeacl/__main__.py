"""CLI interface for checking a permission against a role definition file."""

import sys
from typing import List, Optional

import yaml

from .acl.loader import build_registry
from .common.config import load_typed_config
from .common.logger import setup_logger

USAGE = (
    "Usage: python -m routeacl <config.yaml> <role_id[,role_id...]> "
    "<permission> [scope_id]"
)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the permission check CLI.

    Returns:
        0 if allowed, 1 if denied, 2 on usage or configuration errors
    """
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (3, 4):
        print(USAGE, file=sys.stderr)
        return 2

    config_path, role_arg, permission = args[:3]
    scope_id = args[3] if len(args) == 4 else None
    role_ids = [r.strip() for r in role_arg.split(",") if r.strip()]

    try:
        config = load_typed_config(config_path)
        for name in ("acl_loader", "acl_registry"):
            setup_logger(
                name,
                log_dir=config.logging.log_dir,
                level=config.logging.level,
                file_logging=config.logging.file_logging,
                console_logging=config.logging.console_logging,
            )
    except (FileNotFoundError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    registry = build_registry(config)

    if scope_id is None:
        allowed = registry.is_role_allowed_uniquely(role_ids, permission)
        target = permission
    else:
        allowed = registry.is_role_allowed(role_ids, scope_id, permission)
        target = f"{scope_id}/{permission}"

    print(f"Roles: {', '.join(role_ids)}")
    print(f"Permission: {target}")
    print(f"Result: {'allowed' if allowed else 'denied'}")

    return 0 if allowed else 1


if __name__ == "__main__":
    sys.exit(main())
