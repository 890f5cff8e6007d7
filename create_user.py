"""
Register a user account from the command line.

Run this from the backend root:

    (.venv) python create_user.py "Ana" ana@example.com

It prompts for the password, creates the tables if needed and goes through
the same RegistrationService as POST /api/v1/auth/register.
"""

import argparse
import getpass
import logging
import sys

from sqlalchemy.orm import sessionmaker

from accounts_api.core.config import settings
from accounts_api.core.exceptions import RegistrationError
from accounts_api.core.security import BcryptHasher
from accounts_api.db.init_db import init_db
from accounts_api.db.session import make_engine
from accounts_api.services.registration_service import RegistrationService
from accounts_api.services.user_repository import SqlAlchemyUserRepository


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create an Accounts API user")
    parser.add_argument("name", help="Display name for the user")
    parser.add_argument("email", help="Unique email address for the account")
    parser.add_argument(
        "--db",
        dest="database_url",
        default=None,
        help="SQLAlchemy database URL (defaults to DATABASE_URL or sqlite:///./accounts.db)",
    )
    return parser.parse_args(argv)


def prompt_for_password() -> str:
    for _ in range(3):
        password = getpass.getpass("Password: ")
        confirm = getpass.getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match. Try again.", file=sys.stderr)
            continue
        return password
    raise SystemExit("Failed to set password after three attempts.")


def main(argv=None) -> int:
    logging.basicConfig(level=settings.log_level.upper())

    args = parse_args(argv)
    password = prompt_for_password()

    engine = make_engine(args.database_url or settings.database_url)
    init_db(engine)

    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        service = RegistrationService(
            SqlAlchemyUserRepository(db),
            BcryptHasher(),
            work_factor=settings.bcrypt_rounds,
        )
        outcome = service.register(args.name, args.email, password)
    except RegistrationError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
        engine.dispose()

    print(f"{outcome.msg}: {outcome.email}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
