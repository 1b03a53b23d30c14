import datetime as dt
import logging
from typing import Dict, List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from photoboard.filters import parse_field
from photoboard.models.photo import Photo
from photoboard.schemas.enum import FilterField
from photoboard.schemas.photo import PhotoFeatures

logger = logging.getLogger(__name__)


class PhotoRepository:
    """SQL access to the photos table. Newest photos come first in every listing."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(
        self,
        filename: str,
        features: PhotoFeatures,
        pixel_width: Optional[int] = None,
        pixel_height: Optional[int] = None,
    ) -> Photo:
        photo = Photo(
            filename=filename,
            date=features.date,
            grade=features.grade.value if features.grade else None,
            order=features.order,
            student=features.student,
            pixel_width=pixel_width,
            pixel_height=pixel_height,
        )
        self.session.add(photo)
        await self.session.commit()
        await self.session.refresh(photo)
        logger.info(f"[INSERT] Photo {photo.id}: grade={photo.grade}, student={photo.student}")
        return photo

    async def list_all(self) -> List[Photo]:
        result = await self.session.execute(select(Photo).order_by(Photo.id.desc()))
        return list(result.scalars().all())

    async def query_by_field(self, field: str, value: str) -> List[Photo]:
        """
        Photos whose ``field`` equals ``value`` exactly.

        ``student`` matches "true"/"false" and ``date`` matches an ISO date;
        any other value for those fields matches nothing.
        """
        column_field = parse_field(field)
        condition = None
        if column_field is FilterField.STUDENT:
            if value in ("true", "false"):
                condition = Photo.student.is_(value == "true")
        elif column_field is FilterField.DATE:
            try:
                condition = Photo.date == dt.date.fromisoformat(value)
            except ValueError:
                logger.debug(f"Ignoring unparseable date filter value: {value!r}")
        elif column_field is FilterField.GRADE:
            condition = Photo.grade == value
        else:
            condition = Photo.order == value

        if condition is None:
            return []
        stmt = select(Photo).where(condition).order_by(Photo.id.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_by_id(self, photo_id: int) -> Optional[Photo]:
        return await self.session.get(Photo, photo_id)

    async def delete(self, photo_id: int) -> bool:
        result = await self.session.execute(delete(Photo).where(Photo.id == photo_id))
        await self.session.commit()
        return result.rowcount > 0

    async def stats(self) -> Dict[str, object]:
        total = await self.session.scalar(select(func.count(Photo.id)))
        students = await self.session.scalar(select(func.count(Photo.id)).where(Photo.student.is_(True)))
        rows = await self.session.execute(
            select(Photo.grade, func.count(Photo.id)).where(Photo.grade.is_not(None)).group_by(Photo.grade)
        )
        return {
            "total": total or 0,
            "students": students or 0,
            "by_grade": {grade: count for grade, count in rows.all()},
        }
