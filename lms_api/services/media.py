import logging
from typing import List, Optional

from fastapi import HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from lms_api.storage.media import MediaStorageManager, MediaUploadError

logger = logging.getLogger(__name__)

# Upload targets on the media host
VISUAL_FOLDER = "visual/learning"
AUDITORY_FOLDER = "auditory/learning"
LECTURE_VIDEO_FOLDER = "python/lectures"
LECTURE_PDF_FOLDER = "python/materials"


def get_media_storage(request: Request) -> Optional[MediaStorageManager]:
    """FastAPI dependency: the manager created at startup, if any."""
    return getattr(request.app.state, "media_storage", None)


def has_file(upload: Optional[UploadFile]) -> bool:
    return upload is not None and bool(upload.filename)


async def upload_media(
    storage: Optional[MediaStorageManager],
    upload: UploadFile,
    folder: str,
    resource_type: str,
    force_pdf: bool = False,
) -> str:
    """
    Push one uploaded file to the media host and return its public URL.
    Any failure short-circuits the request with a 400 before a row is written.
    """
    if storage is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Upload error: media storage is not configured",
        )
    content = await upload.read()
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Upload error: {upload.filename} is empty",
        )
    try:
        result = await run_in_threadpool(
            storage.upload_bytes,
            content,
            upload.filename,
            folder,
            resource_type,
            upload.content_type,
            force_pdf,
        )
    except MediaUploadError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Upload error: {e}"
        )
    logger.info(f"Uploaded {upload.filename} -> {result.blob_name}")
    return result.url


async def upload_pdfs(
    storage: Optional[MediaStorageManager], uploads: Optional[List[UploadFile]]
) -> List[str]:
    urls = []
    for upload in uploads or []:
        if has_file(upload):
            urls.append(
                await upload_media(
                    storage, upload, LECTURE_PDF_FOLDER, "raw", force_pdf=True
                )
            )
    return urls
