"""Tests for startup schema management."""
import pytest
from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import create_async_engine

from employee_directory.database import engine
from employee_directory.errors import SchemaInitError
from employee_directory.schema import ensure_schema

LEGACY_EMPLOYEES = """
CREATE TABLE employees (
    id VARCHAR(7) PRIMARY KEY,
    name VARCHAR(50),
    role VARCHAR(40),
    gender VARCHAR(10),
    dob DATE,
    location VARCHAR(40),
    email VARCHAR(50),
    phone VARCHAR(10),
    join_date DATE,
    experience INTEGER,
    skills TEXT,
    achievement TEXT
)
"""


async def _employee_columns() -> set[str]:
    async with engine.connect() as conn:
        return await conn.run_sync(
            lambda sync_conn: {col["name"] for col in inspect(sync_conn).get_columns("employees")}
        )


async def _current_revision() -> str:
    async with engine.connect() as conn:
        result = await conn.execute(text("SELECT version_num FROM alembic_version"))
        return result.scalar_one()


@pytest.mark.asyncio
async def test_fresh_database_gets_full_table() -> None:
    columns = await _employee_columns()
    assert "profile_image" in columns
    assert "join_date" in columns
    assert await _current_revision() == "0002_add_profile_image"


@pytest.mark.asyncio
async def test_running_again_is_a_no_op() -> None:
    async with engine.begin() as conn:
        await conn.execute(
            text("INSERT INTO employees (id, name, profile_image) VALUES ('ABC1234', 'Jane Doe', 'uploads/x.png')")
        )

    await ensure_schema(engine)
    await ensure_schema(engine)

    async with engine.connect() as conn:
        rows = (await conn.execute(text("SELECT id, name, profile_image FROM employees"))).all()
    assert rows == [("ABC1234", "Jane Doe", "uploads/x.png")]


@pytest.mark.asyncio
async def test_untracked_table_without_photo_column_is_upgraded() -> None:
    async with engine.begin() as conn:
        await conn.execute(text("DROP TABLE employees"))
        await conn.execute(text("DROP TABLE alembic_version"))
        await conn.execute(text(LEGACY_EMPLOYEES))
        await conn.execute(text("INSERT INTO employees (id, name) VALUES ('OLD0001', 'Legacy Row')"))

    await ensure_schema(engine)

    assert "profile_image" in await _employee_columns()
    async with engine.connect() as conn:
        rows = (await conn.execute(text("SELECT id, name, profile_image FROM employees"))).all()
    assert rows == [("OLD0001", "Legacy Row", None)]
    assert await _current_revision() == "0002_add_profile_image"


@pytest.mark.asyncio
async def test_unreachable_database_is_fatal(tmp_path) -> None:
    broken = create_async_engine(f"sqlite+aiosqlite:///{(tmp_path / 'missing' / 'db.sqlite').as_posix()}")
    try:
        with pytest.raises(SchemaInitError):
            await ensure_schema(broken)
    finally:
        await broken.dispose()
