"""Submission record types and their JSON (camelCase) wire shape."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from django.utils.dateparse import parse_datetime

from .constants import Status


def _text(data: dict, key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


@dataclass(frozen=True)
class ContactInfo:
    """Who is asking."""

    name: str
    email: str
    company: str
    phone: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ContactInfo":
        return cls(
            name=_text(data, "name"),
            email=_text(data, "email"),
            company=_text(data, "company"),
            phone=_text(data, "phone"),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "company": self.company,
            "phone": self.phone,
        }


@dataclass(frozen=True)
class ProjectDetails:
    """What they are asking for."""

    project_type: str
    description: str
    timeline: str
    budget: str = ""
    requirements: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectDetails":
        return cls(
            project_type=_text(data, "projectType"),
            description=_text(data, "description"),
            timeline=_text(data, "timeline"),
            budget=_text(data, "budget"),
            requirements=_text(data, "requirements"),
        )

    def to_dict(self) -> dict:
        return {
            "projectType": self.project_type,
            "description": self.description,
            "timeline": self.timeline,
            "budget": self.budget,
            "requirements": self.requirements,
        }


@dataclass(frozen=True)
class Submission:
    """One stored inquiry. ``id`` and ``timestamp`` never change after creation."""

    id: str
    timestamp: str
    contact_info: ContactInfo
    project_details: ProjectDetails
    status: str = Status.NEW
    notes: str | None = field(default=None)

    @classmethod
    def from_dict(cls, data: dict) -> "Submission":
        return cls(
            id=_text(data, "id"),
            timestamp=_text(data, "timestamp"),
            contact_info=ContactInfo.from_dict(data.get("contactInfo") or {}),
            project_details=ProjectDetails.from_dict(data.get("projectDetails") or {}),
            status=_text(data, "status") or Status.NEW,
            notes=data.get("notes"),
        )

    def to_dict(self) -> dict:
        record = {
            "id": self.id,
            "timestamp": self.timestamp,
            "contactInfo": self.contact_info.to_dict(),
            "projectDetails": self.project_details.to_dict(),
            "status": str(self.status),
        }
        if self.notes is not None:
            record["notes"] = self.notes
        return record

    @property
    def created_at(self) -> datetime | None:
        """The creation instant, or None if the stored timestamp is unparseable."""
        try:
            return parse_datetime(self.timestamp)
        except ValueError:
            return None

    def with_triage(self, *, status: str | None = None, notes: str | None = None) -> "Submission":
        """Return a copy with status and/or notes replaced."""
        changes: dict = {}
        if status is not None:
            changes["status"] = status
        if notes is not None:
            changes["notes"] = notes
        return replace(self, **changes)
