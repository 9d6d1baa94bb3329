"""
Rodrise School Management Backend — Admin Seed Script Tests
============================================================

What we test:
    ✅ First run creates the admin with a bcrypt hash (cost 12)
    ✅ Second run reports "already exists" and leaves the row untouched
    ✅ Failures are printed, not raised, and the engine is still disposed
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.models.user import User, UserRole
from app.scripts.create_admin import ADMIN_EMAIL, ADMIN_PASSWORD, create_admin
from app.security import verify_password


async def _admins(engine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        result = await session.execute(select(User).where(User.email == ADMIN_EMAIL))
        return result.scalars().all()


class TestCreateAdmin:

    @pytest.mark.asyncio
    async def test_first_run_creates_admin(self, db_engine, capsys):
        await create_admin(db_engine)

        out = capsys.readouterr().out
        assert "✅ Admin user created successfully!" in out
        assert f"Email: {ADMIN_EMAIL}" in out
        assert f"Password: {ADMIN_PASSWORD}" in out
        assert "User ID: " in out

        (admin,) = await _admins(db_engine)
        assert admin.first_name == "Admin"
        assert admin.last_name == "User"
        assert admin.role == UserRole.ADMIN
        assert admin.is_active is True
        assert admin.password_hash.startswith("$2b$12$")
        assert verify_password(ADMIN_PASSWORD, admin.password_hash)

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, db_engine, capsys):
        await create_admin(db_engine)
        (first,) = await _admins(db_engine)
        capsys.readouterr()

        await create_admin(db_engine)

        out = capsys.readouterr().out
        assert "Admin user already exists!" in out
        assert "created successfully" not in out
        assert f"Email: {ADMIN_EMAIL}" in out

        (second,) = await _admins(db_engine)
        assert second.id == first.id
        assert second.password_hash == first.password_hash

        factory = async_sessionmaker(db_engine, class_=AsyncSession)
        async with factory() as session:
            count = await session.scalar(select(func.count()).select_from(User))
        assert count == 1

    @pytest.mark.asyncio
    async def test_failure_is_reported_and_engine_disposed(self, capsys):
        engine = MagicMock()
        engine.dispose = AsyncMock()

        with patch("app.scripts.create_admin.async_sessionmaker") as mock_factory, \
             patch(
                 "app.scripts.create_admin.ensure_admin_user",
                 AsyncMock(side_effect=RuntimeError("connection refused")),
             ):
            mock_factory.return_value = MagicMock()
            await create_admin(engine)

        out = capsys.readouterr().out
        assert "❌ Error creating admin user: connection refused" in out
        engine.dispose.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_tables_reported(self, tmp_path, capsys):
        from app.database import build_engine

        engine = build_engine(f"sqlite+aiosqlite:///{tmp_path}/empty.db")

        await create_admin(engine)

        assert "❌ Error creating admin user:" in capsys.readouterr().out
