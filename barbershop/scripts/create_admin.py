"""Create an admin account from the command line.

Usage: python -m barbershop.scripts.create_admin --email admin@example.com --name "Admin"
The password is read from --password or prompted for interactively.
"""

import argparse
import asyncio
import getpass
import logging
import sys

from pydantic import ValidationError

from barbershop.core.config import get_settings
from barbershop.core.database import create_engine_from_settings, create_session_factory
from barbershop.core.exceptions import BusinessLogicError
from barbershop.core.logging_config import configure_logging
import barbershop.models  # noqa: F401
from barbershop.modules.admins.schemas import AdminCreate
from barbershop.modules.admins.service import AdminService

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create a barbershop admin account")
    parser.add_argument("--email", required=True)
    parser.add_argument("--name", required=True)
    parser.add_argument("--password", help="omit to be prompted")
    return parser.parse_args(argv)


async def create_admin(email: str, name: str, password: str) -> int:
    settings = get_settings()
    engine = create_engine_from_settings(settings)
    session_factory = create_session_factory(engine)
    try:
        payload = AdminCreate(name=name, email=email, password=password)
        async with session_factory() as session:
            admin = await AdminService(session).create(payload)
        logger.info("Admin %s created with id %s", admin.email, admin.id)
        return 0
    except (ValidationError, BusinessLogicError) as exc:
        logger.error("Could not create admin: %s", exc)
        return 1
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(get_settings())
    password = args.password or getpass.getpass("Password: ")
    return asyncio.run(create_admin(args.email, args.name, password))


if __name__ == "__main__":
    sys.exit(main())
