"""Utility script to create an initial user, and optionally its role, in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.application.use_cases.permissions import create_permission, delete_permission
from app.application.use_cases.roles import create_role, delete_role
from app.application.use_cases.users import create_user, validate_new_user
from app.config import configure_logging, get_settings
from app.infrastructure.database import (
    build_engine,
    create_session_factory,
    initialize_database,
)
from app.infrastructure.repositories import RoleRepository


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the access control database.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Full name of the user (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address of the user (default: admin@example.com)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="Password of the user. Prompted interactively when omitted.",
    )
    parser.add_argument(
        "--role-key",
        default=None,
        help="Key of the role to assign. Created when it does not exist yet.",
    )
    parser.add_argument(
        "--permission",
        action="append",
        default=[],
        dest="permissions",
        help="Permission to attach to a newly created role. May be repeated; order is kept.",
    )
    return parser.parse_args(argv)


def _discard_created(
    session: Session, role_id: int | None, permission_ids: list[int]
) -> None:
    """Delete the role and permissions this run committed before failing."""

    if role_id is not None:
        delete_role(session, role_id)
    for permission_id in permission_ids:
        delete_permission(session, permission_id)


def main(argv: list[str] | None = None) -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args(argv)

    password = args.password or getpass("Password for the new user: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    try:
        validate_new_user(args.name, args.email, password)
    except ValueError as exc:
        raise SystemExit(f"Could not create the user: {exc}") from exc

    settings = get_settings()
    configure_logging(settings)
    engine = build_engine(settings)
    initialize_database(engine)

    session = create_session_factory(engine)()
    created_role_id: int | None = None
    created_permission_ids: list[int] = []
    try:
        role_id = None
        if args.role_key:
            role = RoleRepository(session).get_by_key(args.role_key)
            if role is None:
                for name in args.permissions:
                    created_permission_ids.append(
                        create_permission(session, permission=name).id
                    )
                role = create_role(
                    session, role_key=args.role_key, permission_ids=created_permission_ids
                )
                created_role_id = role.id
            role_id = role.id

        user = create_user(
            session,
            name=args.name,
            email=args.email,
            password=password,
            role_id=role_id,
        )
    except ValueError as exc:
        session.rollback()
        _discard_created(session, created_role_id, created_permission_ids)
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        _discard_created(session, created_role_id, created_permission_ids)
        raise SystemExit(f"Error while saving the user to the database: {exc}") from exc
    else:
        print(
            "User created successfully:\n"
            f"  ID: {user.id}\n"
            f"  Name: {user.name}\n"
            f"  Email: {user.email}\n"
            f"  Role: {user.role.role_key if user.role else '-'}"
        )
    finally:
        session.close()
        engine.dispose()


if __name__ == "__main__":
    main()
