from dataclasses import dataclass
import datetime as dt
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class PhotoRecord:
    """Client-side, read-only view of a stored photo."""

    id: int
    filename: str
    url: Optional[str] = None
    date: Optional[dt.date] = None
    grade: Optional[str] = None
    order: Optional[str] = None
    student: bool = False
    created_at: Optional[dt.datetime] = None
    pixel_width: Optional[int] = None
    pixel_height: Optional[int] = None

    @property
    def aspect_ratio(self) -> Optional[float]:
        """height / width, or None when the image size is unknown."""
        if not self.pixel_width or not self.pixel_height:
            return None
        return self.pixel_height / self.pixel_width

    def field_value(self, field: str) -> Optional[str]:
        """String form of a metadata field, as the store compares it."""
        value = getattr(self, field)
        if field == "student":
            return "true" if value else "false"
        if value is None or value == "":
            return None
        if isinstance(value, dt.date):
            return value.isoformat()
        return str(value)

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "PhotoRecord":
        """Build a record from the store's JSON representation."""
        raw_date = data.get("date")
        raw_created = data.get("created_at")
        return cls(
            id=int(data["id"]),
            filename=data["filename"],
            url=data.get("url"),
            date=dt.date.fromisoformat(raw_date) if isinstance(raw_date, str) else raw_date,
            grade=data.get("grade"),
            order=data.get("order"),
            student=bool(data.get("student", False)),
            created_at=dt.datetime.fromisoformat(raw_created) if isinstance(raw_created, str) else raw_created,
            pixel_width=data.get("pixel_width"),
            pixel_height=data.get("pixel_height"),
        )
