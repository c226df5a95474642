import json
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence
from uuid import UUID

from fastapi import Form, HTTPException, Query, Request, status


def to_uuid(value: str, label: str = "id") -> UUID:
    """Parse a path/query identifier, rejecting malformed ones with a 400."""
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Invalid {label}"
        )


def optional_uuid(value: Optional[str], label: str) -> Optional[UUID]:
    if value is None or value == "":
        return None
    return to_uuid(value, label)


# ============= Pagination =============


@dataclass
class PageParams:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def pages(self, total: int) -> int:
        return math.ceil(total / self.limit) if total else 0


def page_params(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(20, description="Page size"),
) -> PageParams:
    return PageParams(page=max(page, 1), limit=max(limit, 1))


def capped_page_params(
    page: int = Query(1, description="1-based page number"),
    limit: int = Query(20, description="Page size (max 100)"),
) -> PageParams:
    return PageParams(page=max(page, 1), limit=min(max(limit, 1), 100))


# ============= Multipart forms =============


@dataclass
class MediaItemForm:
    teacher_guide_id: Optional[UUID]
    title: Optional[str]


def parse_media_item_form(
    teacherGuideId: Optional[str] = Form(None),
    title: Optional[str] = Form(None),
) -> MediaItemForm:
    return MediaItemForm(
        teacher_guide_id=optional_uuid(teacherGuideId, "teacherGuideId"),
        title=title or None,
    )


@dataclass
class LectureForm:
    lecture_type: Optional[int]
    lecture_title: Optional[str]
    lecture_difficulty: Optional[str]
    teacher_guide_id: Optional[str]
    description: Optional[str]
    created_by: Optional[str]
    existing_pdf_urls: Optional[str]


async def parse_lecture_form(
    request: Request,
    lectureType: Optional[int] = Form(None),
    lectureTitle: Optional[str] = Form(None),
    lectureDifficulty: Optional[str] = Form(None),
    teacherGuideId: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    createdBy: Optional[str] = Form(None),
    existingPdfUrls: Optional[str] = Form(None),
) -> LectureForm:
    if lectureType is not None and lectureType not in (1, 2, 3):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="lectureType must be 1 (video), 2 (no video) or 3 (material only)",
        )
    # empty form values reach the parameters as None; "" means something here
    raw = await request.form()
    teacherGuideId = raw.get("teacherGuideId", teacherGuideId)
    existingPdfUrls = raw.get("existingPdfUrls", existingPdfUrls)

    return LectureForm(
        lecture_type=lectureType,
        lecture_title=lectureTitle,
        lecture_difficulty=lectureDifficulty,
        teacher_guide_id=teacherGuideId,
        description=description,
        created_by=createdBy,
        existing_pdf_urls=existingPdfUrls,
    )


# ============= PDF materials =============


def parse_keep_list(raw: Optional[str]) -> Optional[List[str]]:
    """
    Decode the ``existingPdfUrls`` form field.

    None means the field was not sent. Anything that is not a JSON list
    counts as an empty keep-list.
    """
    if raw is None:
        return None
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError):
        return []
    if not isinstance(parsed, list):
        return []
    return [url for url in parsed if url]


def merge_pdf_materials(
    existing: Sequence[str],
    keep: Optional[Sequence[str]],
    uploaded: Sequence[str],
) -> List[str]:
    """
    With a keep-list: keep-list + fresh uploads, de-duplicated in order.
    Without one: fresh uploads appended to what is stored.
    """
    if keep is None:
        return [*(existing or []), *uploaded]
    return list(dict.fromkeys([*keep, *uploaded]))
