"""
Bootstrap an admin user.

Usage:
    python -m franchise_site.scripts.create_admin --email admin@example.com [--name "Site Admin"]

The password is read from ADMIN_PASSWORD or prompted for.

Dependencies: franchise_site.application.services, franchise_site.boundary.db
System role: First-user setup for a fresh database
"""

import asyncio
import getpass
import logging
import os
import sys

from franchise_site.application.services.user_service import UserService
from franchise_site.boundary.db import create_all_tables, get_async_session_factory
from franchise_site.configs import get_settings
from franchise_site.core.exceptions import FranchiseSiteException

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def _flag(name: str) -> str | None:
    if name in sys.argv:
        idx = sys.argv.index(name)
        if idx + 1 < len(sys.argv):
            return sys.argv[idx + 1]
    return None


async def create_admin(email: str, password: str, name: str | None = None) -> None:
    """
    Create the user inside its own transaction.

    Args:
        email: Login email
        password: Plain password (8-72 characters)
        name: Display name
    """
    await create_all_tables()
    session_factory = get_async_session_factory()
    async with session_factory() as session:
        service = UserService(session, get_settings().auth)
        user = await service.create_user(None, email=email, password=password, name=name)
        await session.commit()
    logger.info(f"Created admin user {user.email} ({user.id})")


def main():
    """CLI entry point."""
    email = _flag("--email")
    if not email:
        print("Usage: python -m franchise_site.scripts.create_admin --email EMAIL [--name NAME]")
        sys.exit(1)

    password = os.environ.get("ADMIN_PASSWORD") or getpass.getpass("Password: ")
    if not 8 <= len(password) <= 72:
        logger.error("Password must be between 8 and 72 characters")
        sys.exit(1)

    try:
        asyncio.run(create_admin(email, password, _flag("--name")))
    except FranchiseSiteException as e:
        logger.error(f"Error: {e.message}")
        sys.exit(1)


if __name__ == "__main__":
    main()
