"""Pydantic schemas used across the backend API."""
from datetime import date

from fastapi import Form
from pydantic import BaseModel, Field


class EmployeeSubmission(BaseModel):
    """Raw multipart fields of an add/update request, exactly as sent."""

    id: str | None = None
    name: str | None = None
    role: str | None = None
    gender: str | None = None
    dob: str | None = None
    location: str | None = None
    email: str | None = None
    phone: str | None = None
    join_date: str | None = Field(default=None, alias="joinDate")
    experience: str | None = None
    skills: str | None = None
    achievement: str | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def as_form(
        cls,
        id: str | None = Form(default=None),
        name: str | None = Form(default=None),
        role: str | None = Form(default=None),
        gender: str | None = Form(default=None),
        dob: str | None = Form(default=None),
        location: str | None = Form(default=None),
        email: str | None = Form(default=None),
        phone: str | None = Form(default=None),
        join_date: str | None = Form(default=None, alias="joinDate"),
        experience: str | None = Form(default=None),
        skills: str | None = Form(default=None),
        achievement: str | None = Form(default=None),
    ) -> "EmployeeSubmission":
        """FastAPI dependency that collects the submission from form data."""

        return cls(
            id=id,
            name=name,
            role=role,
            gender=gender,
            dob=dob,
            location=location,
            email=email,
            phone=phone,
            join_date=join_date,
            experience=experience,
            skills=skills,
            achievement=achievement,
        )


class EmployeeRead(BaseModel):
    """Employee row as stored, using the column names."""

    id: str
    name: str | None = None
    role: str | None = None
    gender: str | None = None
    dob: date | None = None
    location: str | None = None
    email: str | None = None
    phone: str | None = None
    join_date: date | None = None
    experience: int | None = None
    skills: str | None = None
    achievement: str | None = None
    profile_image: str | None = None

    class Config:
        from_attributes = True


class UpsertResponse(BaseModel):
    """Result of POST /api/add-employee."""

    message: str
    profile_image: str | None = None


class MessageResponse(BaseModel):
    message: str


class HealthStatus(BaseModel):
    status: str


class UserFeedItem(BaseModel):
    """Public projection of a registered user."""

    username: str
    email: str | None = None
    profile_image: str | None = None

    class Config:
        from_attributes = True
