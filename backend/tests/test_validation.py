"""Unit tests for employee field validation."""
import pytest

from conftest import valid_employee
from employee_directory.errors import (
    InvalidEmailFormat,
    InvalidIdFormat,
    InvalidPhoneFormat,
    MissingField,
)
from employee_directory.schemas import EmployeeSubmission
from employee_directory.services.employees import validate_submission

DOMAIN = "astrolitetech.com"


def _submission(**overrides: str) -> EmployeeSubmission:
    return EmployeeSubmission(**valid_employee(**overrides))


def test_valid_submission_passes() -> None:
    validate_submission(_submission(), DOMAIN)


def test_zero_experience_counts_as_present() -> None:
    validate_submission(_submission(experience="0"), DOMAIN)


def test_presence_is_checked_before_formats() -> None:
    with pytest.raises(MissingField):
        validate_submission(_submission(id="bad", achievement=""), DOMAIN)


def test_id_is_checked_before_email_and_phone() -> None:
    with pytest.raises(InvalidIdFormat):
        validate_submission(_submission(id="AB12345", email="x@other.com", phone="1"), DOMAIN)


def test_email_is_checked_before_phone() -> None:
    with pytest.raises(InvalidEmailFormat):
        validate_submission(_submission(email="x@other.com", phone="1"), DOMAIN)


@pytest.mark.parametrize("employee_id", ["ABCD123", "ABC123", "ABC12345", "AbC1234", " ABC1234"])
def test_invalid_ids(employee_id: str) -> None:
    with pytest.raises(InvalidIdFormat):
        validate_submission(_submission(id=employee_id), DOMAIN)


@pytest.mark.parametrize(
    "email",
    [
        "a@astrolitetech.com",
        "1jane@astrolitetech.com",
        "jane.@astrolitetech.com",
        "jane@astrolitetechxcom",
        "jane@sub.astrolitetech.com",
        "jane doe@astrolitetech.com",
    ],
)
def test_invalid_emails(email: str) -> None:
    with pytest.raises(InvalidEmailFormat):
        validate_submission(_submission(email=email), DOMAIN)


@pytest.mark.parametrize("email", ["jd@astrolitetech.com", "jane.doe-2@astrolitetech.com", "J_Doe9@astrolitetech.com"])
def test_valid_emails(email: str) -> None:
    validate_submission(_submission(email=email), DOMAIN)


def test_email_domain_is_configurable() -> None:
    validate_submission(_submission(email="jane@example.org"), "example.org")
    with pytest.raises(InvalidEmailFormat):
        validate_submission(_submission(), "example.org")


@pytest.mark.parametrize("phone", ["123456789", "12345678901", "98765-4321", "+919876543"])
def test_invalid_phones(phone: str) -> None:
    with pytest.raises(InvalidPhoneFormat):
        validate_submission(_submission(phone=phone), DOMAIN)


@pytest.mark.parametrize(
    ("overrides", "error"),
    [
        ({"id": "ABC1234\n"}, InvalidIdFormat),
        ({"email": "jane.doe@astrolitetech.com\n"}, InvalidEmailFormat),
        ({"phone": "9876543210\n"}, InvalidPhoneFormat),
    ],
)
def test_trailing_newline_is_not_a_valid_ending(overrides: dict, error: type) -> None:
    with pytest.raises(error):
        validate_submission(_submission(**overrides), DOMAIN)
