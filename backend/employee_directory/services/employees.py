"""Employee validation, upsert, listing and deletion."""
from __future__ import annotations

import enum
import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..errors import (
    STORE_FAILURES,
    InvalidEmailFormat,
    InvalidIdFormat,
    InvalidPhoneFormat,
    MissingField,
    NotFound,
    StoreError,
    store_error,
)
from ..models import Employee
from ..schemas import EmployeeSubmission
from .media import MediaAttachmentHandler, PendingAttachment

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "id",
    "name",
    "role",
    "gender",
    "dob",
    "location",
    "email",
    "phone",
    "join_date",
    "experience",
    "skills",
    "achievement",
)

ID_PATTERN = re.compile(r"^[A-Z]{3}[0-9]{4}$")
PHONE_PATTERN = re.compile(r"^[0-9]{10}$")


class UpsertOutcome(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class UpsertResult:
    outcome: UpsertOutcome
    profile_image: str | None


@lru_cache
def email_pattern(domain: str) -> re.Pattern[str]:
    """Corporate address: starts with a letter, ends with a letter or digit before ``@domain``."""

    return re.compile(rf"^[a-zA-Z][a-zA-Z0-9._-]*[a-zA-Z0-9]@{re.escape(domain)}$")


def validate_submission(submission: EmployeeSubmission, email_domain: str) -> None:
    """Raise the first validation failure, checking presence before formats."""

    for field in REQUIRED_FIELDS:
        if not getattr(submission, field):
            raise MissingField()

    if not ID_PATTERN.fullmatch(submission.id):
        raise InvalidIdFormat()
    if not email_pattern(email_domain).fullmatch(submission.email):
        raise InvalidEmailFormat()
    if not PHONE_PATTERN.fullmatch(submission.phone):
        raise InvalidPhoneFormat()


def _column_values(submission: EmployeeSubmission) -> dict[str, Any]:
    """Convert the submitted strings into values for the typed columns."""

    # Dates must be ISO 8601 (YYYY-MM-DD); looser spellings a database might
    # accept are rejected here as store errors.
    try:
        return {
            "name": submission.name,
            "role": submission.role,
            "gender": submission.gender,
            "dob": date.fromisoformat(submission.dob),
            "location": submission.location,
            "email": submission.email,
            "phone": submission.phone,
            "join_date": date.fromisoformat(submission.join_date),
            "experience": int(submission.experience),
            "skills": submission.skills,
            "achievement": submission.achievement,
        }
    except ValueError as exc:
        raise StoreError(f"invalid input syntax: {exc}") from exc


async def upsert_employee(
    session: AsyncSession,
    submission: EmployeeSubmission,
    attachment: PendingAttachment | None,
    media: MediaAttachmentHandler,
    email_domain: str,
) -> UpsertResult:
    """Create the employee or overwrite every field of the existing one.

    A submission without an attachment clears ``profile_image``; the previous
    photo reference is not carried over.
    """

    validate_submission(submission, email_domain)
    values = _column_values(submission)
    values["profile_image"] = await media.store(attachment)

    try:
        employee = await session.get(Employee, submission.id)
        if employee is not None:
            for column, value in values.items():
                setattr(employee, column, value)
            outcome = UpsertOutcome.UPDATED
        else:
            session.add(Employee(id=submission.id, **values))
            outcome = UpsertOutcome.CREATED
        await session.commit()
    except STORE_FAILURES as exc:
        await session.rollback()
        logger.exception("Failed to upsert employee %s", submission.id)
        raise store_error(exc) from exc

    logger.info("Employee %s %s", submission.id, outcome.value)
    return UpsertResult(outcome=outcome, profile_image=values["profile_image"])


async def list_employees(session: AsyncSession) -> Sequence[Employee]:
    """Return every employee in store order."""

    try:
        result = await session.execute(select(Employee))
    except STORE_FAILURES as exc:
        logger.exception("Failed to list employees")
        raise store_error(exc) from exc
    return list(result.scalars().all())


async def delete_employee(session: AsyncSession, employee_id: str) -> None:
    """Delete one employee; uploaded photos stay on disk."""

    try:
        result = await session.execute(delete(Employee).where(Employee.id == employee_id))
        await session.commit()
    except STORE_FAILURES as exc:
        await session.rollback()
        logger.exception("Failed to delete employee %s", employee_id)
        raise store_error(exc) from exc

    if result.rowcount == 0:
        raise NotFound()
    logger.info("Employee %s deleted", employee_id)
