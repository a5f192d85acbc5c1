"""Employee model for the directory."""
from datetime import date

from sqlalchemy import Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Employee(Base):
    """Directory entry keyed by the caller-chosen employee id (e.g. ``ABC1234``)."""

    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(7), primary_key=True)
    name: Mapped[str | None] = mapped_column(String(50))
    role: Mapped[str | None] = mapped_column(String(40))
    gender: Mapped[str | None] = mapped_column(String(10))
    dob: Mapped[date | None] = mapped_column(Date)
    location: Mapped[str | None] = mapped_column(String(40))
    email: Mapped[str | None] = mapped_column(String(50))
    phone: Mapped[str | None] = mapped_column(String(10))
    join_date: Mapped[date | None] = mapped_column(Date)
    experience: Mapped[int | None] = mapped_column(Integer)
    skills: Mapped[str | None] = mapped_column(Text)
    achievement: Mapped[str | None] = mapped_column(Text)
    profile_image: Mapped[str | None] = mapped_column(String(255), nullable=True)
