"""
Domain Entities - Graduate records and registration input.

Records are immutable snapshots of what the Record Store returned.
The client never creates a GraduateRecord itself: ids and timestamps are
always server-assigned.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..exceptions import MalformedResponseError


REQUIRED_FIELDS = ("name", "faculty", "graduation_year", "telephone")

# Wire names used by the Record Store
WIRE_NAMES = {
    "name": "name",
    "faculty": "faculty",
    "graduation_year": "graduationYear",
    "telephone": "telephone",
}


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp (accepts a trailing 'Z')."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as e:
        raise MalformedResponseError(f"Invalid createdAt timestamp: {value!r}", cause=e)


@dataclass(frozen=True)
class GraduateRecord:
    """
    A graduate as stored by the Record Store.

    The id is opaque and immutable. created_at is only used for the
    default newest-first ordering.
    """

    id: str
    name: str
    faculty: str
    graduation_year: int
    telephone: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Any) -> "GraduateRecord":
        """
        Build a record from its JSON representation.

        Raises:
            MalformedResponseError: If the payload is not a valid record
        """
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a record object, got {type(data).__name__}")

        record_id = data.get("_id", data.get("id"))
        if record_id in (None, ""):
            raise MalformedResponseError("Record is missing its id")

        missing = [
            wire for wire in WIRE_NAMES.values()
            if data.get(wire) in (None, "")
        ]
        if missing:
            raise MalformedResponseError(
                f"Record {record_id} is missing fields: {', '.join(missing)}"
            )

        try:
            year = int(data["graduationYear"])
        except (TypeError, ValueError) as e:
            raise MalformedResponseError(
                f"Record {record_id} has a non-integer graduationYear", cause=e
            )

        return cls(
            id=str(record_id),
            name=str(data["name"]),
            faculty=str(data["faculty"]),
            graduation_year=year,
            telephone=str(data["telephone"]),
            created_at=_parse_timestamp(data.get("createdAt")),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to the Record Store's JSON representation."""
        return {
            "_id": self.id,
            "name": self.name,
            "faculty": self.faculty,
            "graduationYear": self.graduation_year,
            "telephone": self.telephone,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass(frozen=True)
class GraduateFields:
    """
    User-supplied fields of a registration form.

    Values are kept as entered; graduation_year may still be text until
    validate() has accepted it.
    """

    name: str = ""
    faculty: str = ""
    graduation_year: Any = ""
    telephone: str = ""

    def validate(self) -> list[str]:
        """
        Validate the fields before they are sent to the store.

        Only presence and the integer year are checked; the store is the
        authority on everything else.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for field_name in REQUIRED_FIELDS:
            value = getattr(self, field_name)
            if value is None or str(value).strip() == "":
                errors.append(f"Missing required field: {field_name}")

        if not errors:
            try:
                int(str(self.graduation_year).strip())
            except ValueError:
                errors.append("graduation_year must be an integer")

        return errors

    def to_payload(self) -> dict[str, Any]:
        """Build the POST body expected by the store."""
        return {
            "name": str(self.name).strip(),
            "faculty": str(self.faculty).strip(),
            "graduationYear": int(str(self.graduation_year).strip()),
            "telephone": str(self.telephone).strip(),
        }
