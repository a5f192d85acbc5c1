"""Test fixtures for the backend."""
import os
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

_workdir = Path(tempfile.mkdtemp(prefix="employee-directory-tests-"))
test_db_path = _workdir / "test_backend.db"
test_upload_dir = _workdir / "uploads"

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{test_db_path.as_posix()}"
os.environ["UPLOAD_DIR"] = str(test_upload_dir)
os.environ.setdefault("EMAIL_DOMAIN", "astrolitetech.com")

from employee_directory import models  # noqa: E402
from employee_directory.database import AsyncSessionLocal, engine  # noqa: E402
from employee_directory.main import app  # noqa: E402
from employee_directory.schema import ensure_schema  # noqa: E402
from employee_directory.services.change_feed import ChangeFeedTracker, Watermark  # noqa: E402


class TickingClock:
    """Deterministic clock: every reading is one second after the previous one."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 1, 1, 12, 0, 0)

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest_asyncio.fixture(autouse=True)
async def prepare_database():
    """Migrate a fresh database for each test and remove it afterwards."""

    await ensure_schema(engine)
    # ``users`` belongs to the registration service; tests stand it up themselves.
    async with engine.begin() as conn:
        await conn.run_sync(models.ExternalBase.metadata.create_all)
    yield
    await engine.dispose()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest_asyncio.fixture
async def session():
    async with AsyncSessionLocal() as session:
        yield session


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def change_feed(clock: TickingClock) -> ChangeFeedTracker:
    """Install a fresh tracker on the app, as if the process had just started."""

    tracker = ChangeFeedTracker(Watermark(clock=clock))
    app.state.change_feed = tracker
    return tracker


@pytest_asyncio.fixture
async def client() -> AsyncClient:
    """Provide an HTTP client for integration tests."""

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client


def valid_employee(**overrides: str) -> dict[str, str]:
    """Form fields for an employee that passes every check."""

    fields = {
        "id": "ABC1234",
        "name": "Jane Doe",
        "role": "Engineer",
        "gender": "Female",
        "dob": "1990-04-12",
        "location": "Chennai",
        "email": "jane.doe@astrolitetech.com",
        "phone": "9876543210",
        "joinDate": "2021-06-01",
        "experience": "5",
        "skills": "Python, SQL",
        "achievement": "Employee of the month",
    }
    fields.update(overrides)
    return fields
