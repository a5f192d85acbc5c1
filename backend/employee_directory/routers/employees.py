"""Employee endpoints."""
from typing import Sequence

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..dependencies import get_app_settings, get_db_session, get_media_handler
from ..models import Employee
from ..schemas import EmployeeRead, EmployeeSubmission, MessageResponse, UpsertResponse
from ..services import employees as employee_service
from ..services.employees import UpsertOutcome
from ..services.media import MediaAttachmentHandler

router = APIRouter(prefix="/api", tags=["employees"])


@router.get("/employees", response_model=list[EmployeeRead])
async def list_employees(session: AsyncSession = Depends(get_db_session)) -> Sequence[Employee]:
    """Return every employee with the full column set."""

    return await employee_service.list_employees(session)


@router.post(
    "/add-employee",
    response_model=UpsertResponse,
    responses={200: {"model": UpsertResponse, "description": "Employee updated"}},
    status_code=201,
)
async def add_employee(
    submission: EmployeeSubmission = Depends(EmployeeSubmission.as_form),
    profile_image: UploadFile | None = File(default=None, alias="profileImage"),
    session: AsyncSession = Depends(get_db_session),
    media: MediaAttachmentHandler = Depends(get_media_handler),
    settings: Settings = Depends(get_app_settings),
) -> JSONResponse:
    """Create the employee, or overwrite it when the id already exists."""

    # Attachment type and size are checked before any field validation.
    attachment = await media.accept(profile_image)
    result = await employee_service.upsert_employee(
        session, submission, attachment, media, settings.email_domain
    )

    if result.outcome is UpsertOutcome.UPDATED:
        body = UpsertResponse(message="Employee updated successfully", profile_image=result.profile_image)
        return JSONResponse(status_code=200, content=body.model_dump())
    body = UpsertResponse(message="Employee added successfully", profile_image=result.profile_image)
    return JSONResponse(status_code=201, content=body.model_dump())


@router.delete("/delete-employee/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    session: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    """Remove an employee; the photo file, if any, is kept."""

    await employee_service.delete_employee(session, employee_id)
    return MessageResponse(message="Employee deleted successfully")
