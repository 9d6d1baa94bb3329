"""
Rodrise School Management Backend — Admin Seed Script
======================================================

What:  Ensures the default administrator account exists.
Why:   A fresh database has no users, so nobody could sign in to create one.
How:   Looks the account up by email; inserts it with a bcrypt hash only if
       it is missing. Running it again changes nothing (idempotent).
Who:   Operators, once per environment:
           rodrise-create-admin
           python -m app.scripts.create_admin
When:  After `alembic upgrade head`, before first sign-in.

Exit behaviour:
    Errors are logged and printed, never re-raised, so the exit code is 0.
    The engine is disposed on every path (success, already-exists, failure).

Concurrency:
    Not meant to run concurrently with itself. Two simultaneous runs can both
    miss the lookup; the unique constraint on users.email makes the second
    insert fail, and that failure is reported like any other.
"""

import asyncio
import logging
import sys
from typing import Optional, Tuple

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.config import settings
from app.models.user import User, UserRole
from app.security import hash_password

logger = logging.getLogger(__name__)

ADMIN_EMAIL = "admin@rodrise.com"
ADMIN_PASSWORD = "admin123"
ADMIN_FIRST_NAME = "Admin"
ADMIN_LAST_NAME = "User"


async def ensure_admin_user(session: AsyncSession) -> Tuple[User, bool]:
    """
    Return the admin user, creating and committing it if absent.

    Returns:
        (user, created) where created is False when the account already existed
    """
    result = await session.execute(select(User).where(User.email == ADMIN_EMAIL))
    existing = result.scalar_one_or_none()
    if existing is not None:
        return existing, False

    user = User(
        email=ADMIN_EMAIL,
        first_name=ADMIN_FIRST_NAME,
        last_name=ADMIN_LAST_NAME,
        password_hash=hash_password(ADMIN_PASSWORD),
        role=UserRole.ADMIN,
        is_active=True,
    )
    session.add(user)
    await session.commit()
    logger.info("Admin user %s inserted", ADMIN_EMAIL)
    return user, True


def _print_credentials() -> None:
    print(f"Email: {ADMIN_EMAIL}")
    print(f"Password: {ADMIN_PASSWORD}")


async def create_admin(engine: Optional[AsyncEngine] = None) -> None:
    """
    Run the seed against `engine` (the application engine by default) and
    dispose it afterwards.
    """
    if engine is None:
        from app.database import engine as app_engine
        engine = app_engine

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    try:
        async with session_factory() as session:
            user, created = await ensure_admin_user(session)

        if created:
            print("✅ Admin user created successfully!")
            _print_credentials()
            print(f"User ID: {user.id}")
        else:
            print("Admin user already exists!")
            _print_credentials()

    except Exception as e:
        logger.error("Error creating admin user: %s", str(e), exc_info=True)
        print(f"❌ Error creating admin user: {e}")

    finally:
        await engine.dispose()


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    asyncio.run(create_admin())


if __name__ == "__main__":
    main()
