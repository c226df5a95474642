from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.database.db import get_db
from lms_api.models.users import User as UserModel
from lms_api.schemas.base import MessageResponse, Page
from lms_api.schemas.papers import (
    PythonPaperCreate,
    PythonPaperDetail,
    PythonPaperResponse,
    PythonPaperUpdate,
    StartingPaperQuestionCreate,
    StartingPaperQuestionResponse,
    StartingPaperQuestionUpdate,
    StartingPaperTitleCreate,
    StartingPaperTitleDetail,
    StartingPaperTitleResponse,
    StartingPaperTitleUpdate,
)
from lms_api.services.auths import get_current_user, get_optional_user
from lms_api.services.papers import (
    PythonPaperService,
    StartingPaperQuestionService,
    StartingPaperTitleService,
)
from lms_api.utils import PageParams, capped_page_params, to_uuid

python_papers_router = APIRouter(prefix="/python/papers", tags=["python papers"])
starting_titles_router = APIRouter(
    prefix="/starting-paper-titles", tags=["starting paper titles"]
)
starting_questions_router = APIRouter(
    prefix="/starting-paper-questions", tags=["starting paper questions"]
)


# ============= Python papers =============


@python_papers_router.post(
    "", response_model=PythonPaperResponse, status_code=status.HTTP_201_CREATED
)
async def create_python_paper(
    paper: PythonPaperCreate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonPaperService.create_paper(db, paper)


@python_papers_router.get("", response_model=List[PythonPaperDetail])
async def list_python_papers(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonPaperService.list_papers(db)


@python_papers_router.get("/{paper_id}", response_model=PythonPaperDetail)
async def get_python_paper(
    paper_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonPaperService.get_paper(db, to_uuid(paper_id))


@python_papers_router.put("/{paper_id}", response_model=PythonPaperResponse)
async def update_python_paper(
    paper_id: str,
    paper: PythonPaperUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonPaperService.update_paper(db, to_uuid(paper_id), paper)


@python_papers_router.delete("/{paper_id}", response_model=MessageResponse)
async def delete_python_paper(
    paper_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await PythonPaperService.delete_paper(db, to_uuid(paper_id))


# ============= Starting paper titles =============


@starting_titles_router.post(
    "", response_model=StartingPaperTitleResponse, status_code=status.HTTP_201_CREATED
)
async def create_starting_paper_title(
    title: StartingPaperTitleCreate,
    current_user: Optional[UserModel] = Depends(get_optional_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperTitleService.create_title(db, title, current_user)


@starting_titles_router.get("", response_model=List[StartingPaperTitleDetail])
async def list_starting_paper_titles(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperTitleService.list_titles(db)


@starting_titles_router.get("/{title_id}", response_model=StartingPaperTitleDetail)
async def get_starting_paper_title(
    title_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperTitleService.get_title(db, to_uuid(title_id))


@starting_titles_router.put("/{title_id}", response_model=StartingPaperTitleResponse)
async def update_starting_paper_title(
    title_id: str,
    title: StartingPaperTitleUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperTitleService.update_title(db, to_uuid(title_id), title)


@starting_titles_router.delete("/{title_id}", response_model=MessageResponse)
async def delete_starting_paper_title(
    title_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperTitleService.delete_title(db, to_uuid(title_id))


# ============= Starting paper questions =============


@starting_questions_router.post(
    "", response_model=StartingPaperQuestionResponse, status_code=status.HTTP_201_CREATED
)
async def create_starting_paper_question(
    question: StartingPaperQuestionCreate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperQuestionService.create_question(db, question)


@starting_questions_router.get("", response_model=List[StartingPaperQuestionResponse])
async def list_starting_paper_questions(
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperQuestionService.list_questions(db)


@starting_questions_router.get(
    "/by-paper/{paper_id}", response_model=Page[StartingPaperQuestionResponse]
)
async def page_questions_by_paper(
    paper_id: str,
    params: PageParams = Depends(capped_page_params),
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Newest questions first; ``limit`` is capped at 100."""
    return await StartingPaperQuestionService.page_by_paper(
        db, to_uuid(paper_id, "starting paper id"), params
    )


@starting_questions_router.get(
    "/{question_id}", response_model=StartingPaperQuestionResponse
)
async def get_starting_paper_question(
    question_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperQuestionService.get_question(db, to_uuid(question_id))


@starting_questions_router.put(
    "/{question_id}", response_model=StartingPaperQuestionResponse
)
async def update_starting_paper_question(
    question_id: str,
    question: StartingPaperQuestionUpdate,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperQuestionService.update_question(
        db, to_uuid(question_id), question
    )


@starting_questions_router.delete("/{question_id}", response_model=MessageResponse)
async def delete_starting_paper_question(
    question_id: str,
    current_user: UserModel = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    return await StartingPaperQuestionService.delete_question(db, to_uuid(question_id))
