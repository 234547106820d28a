#!/usr/bin/env python3
"""Create a user with any role (the only way to get an Admin or Editor).

Usage:
    python scripts/create_user.py alice alice@example.com --role Admin
"""

import argparse
import asyncio
import getpass
import sys

import logfire

from blog.config import Settings
from blog.domain.error import ValidationError
from blog.domain.service import UserService
from blog.domain.value import Role
from blog.util.di.container import create_container
from blog.util.observability import configure_logfire


async def create_user(username: str, email: str, password: str, role: Role) -> int:
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            try:
                user = await user_service.register(
                    username=username, email=email, password=password, role=role
                )
            except ValidationError as e:
                for error in e.errors:
                    print(f"error: {error}", file=sys.stderr)
                return 1
    finally:
        await container.close()

    print(f"Created {user.role.value} '{user.username}' ({user.email}) id={user.id}")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("username")
    parser.add_argument("email")
    parser.add_argument(
        "--role",
        choices=[role.value for role in Role],
        default=Role.USER.value,
    )
    parser.add_argument(
        "--password", help="Prompted for when omitted", default=None
    )
    args = parser.parse_args()

    configure_logfire(Settings())

    password = args.password or getpass.getpass("Password: ")
    with logfire.span("create_user", username=args.username, role=args.role):
        return asyncio.run(
            create_user(args.username, args.email, password, Role(args.role))
        )


if __name__ == "__main__":
    sys.exit(main())
