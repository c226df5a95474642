import logging
from typing import List, Optional
from uuid import UUID

from fastapi import HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from lms_api.models.papers import PythonPaper, StartingPaperQuestion, StartingPaperTitle
from lms_api.models.users import User
from lms_api.schemas.base import Page
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
from lms_api.services.auths import owner_id
from lms_api.services.base import CRUDService
from lms_api.utils import PageParams

logger = logging.getLogger(__name__)

papers = CRUDService(PythonPaper, label="Python paper", populate=("teacher_guide",))
starting_titles = CRUDService(
    StartingPaperTitle, label="Starting paper title", populate=("creator",)
)
starting_questions = CRUDService(StartingPaperQuestion, label="Starting paper question")


def check_correct_answer(answers: Optional[List[str]], correct_answer: str):
    """An MCQ question must list its correct answer among the options."""
    if answers and correct_answer not in answers:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="correctAnswer must be one of the provided answers",
        )


class PythonPaperService:

    @staticmethod
    async def create_paper(db: AsyncSession, data: PythonPaperCreate):
        paper = await papers.create(db, **data.model_dump())
        return PythonPaperResponse.model_validate(paper)

    @staticmethod
    async def list_papers(db: AsyncSession):
        return [PythonPaperDetail.model_validate(p) for p in await papers.list(db)]

    @staticmethod
    async def get_paper(db: AsyncSession, paper_id: UUID):
        return PythonPaperDetail.model_validate(await papers.get(db, paper_id))

    @staticmethod
    async def update_paper(db: AsyncSession, paper_id: UUID, data: PythonPaperUpdate):
        paper = await papers.update(db, paper_id, data.model_dump(exclude_unset=True))
        return PythonPaperResponse.model_validate(paper)

    @staticmethod
    async def delete_paper(db: AsyncSession, paper_id: UUID):
        return await papers.delete(db, paper_id)


class StartingPaperTitleService:

    @staticmethod
    async def create_title(
        db: AsyncSession, data: StartingPaperTitleCreate, current_user: Optional[User]
    ):
        title = await starting_titles.create(
            db,
            paper_title=data.paper_title,
            paper_number=data.paper_number,
            created_by=owner_id(current_user, data.created_by, "createdBy"),
        )
        return StartingPaperTitleResponse.model_validate(title)

    @staticmethod
    async def list_titles(db: AsyncSession):
        return [
            StartingPaperTitleDetail.model_validate(t)
            for t in await starting_titles.list(db)
        ]

    @staticmethod
    async def get_title(db: AsyncSession, title_id: UUID):
        return StartingPaperTitleDetail.model_validate(
            await starting_titles.get(db, title_id)
        )

    @staticmethod
    async def update_title(
        db: AsyncSession, title_id: UUID, data: StartingPaperTitleUpdate
    ):
        title = await starting_titles.update(
            db, title_id, data.model_dump(exclude_unset=True)
        )
        return StartingPaperTitleResponse.model_validate(title)

    @staticmethod
    async def delete_title(db: AsyncSession, title_id: UUID):
        return await starting_titles.delete(db, title_id)


class StartingPaperQuestionService:

    @staticmethod
    async def create_question(db: AsyncSession, data: StartingPaperQuestionCreate):
        check_correct_answer(data.answers, data.correct_answer)
        question = await starting_questions.create(db, **data.model_dump())
        return StartingPaperQuestionResponse.model_validate(question)

    @staticmethod
    async def list_questions(db: AsyncSession):
        return [
            StartingPaperQuestionResponse.model_validate(q)
            for q in await starting_questions.list(db)
        ]

    @staticmethod
    async def get_question(db: AsyncSession, question_id: UUID):
        return StartingPaperQuestionResponse.model_validate(
            await starting_questions.get(db, question_id)
        )

    @staticmethod
    async def page_by_paper(db: AsyncSession, paper_id: UUID, params: PageParams):
        items, total = await starting_questions.page(
            db,
            StartingPaperQuestion.starting_paper_id == paper_id,
            offset=params.offset,
            limit=params.limit,
        )
        return Page[StartingPaperQuestionResponse](
            items=[StartingPaperQuestionResponse.model_validate(q) for q in items],
            total=total,
            page=params.page,
            page_size=params.limit,
            pages=params.pages(total),
        )

    @staticmethod
    async def update_question(
        db: AsyncSession, question_id: UUID, data: StartingPaperQuestionUpdate
    ):
        question = await starting_questions.get(db, question_id)
        values = data.model_dump(exclude_unset=True)

        answers = values.get("answers")
        if answers is None:
            answers = question.answers
        correct_answer = values.get("correct_answer")
        if correct_answer is None:
            correct_answer = question.correct_answer
        check_correct_answer(answers, correct_answer)

        question = await starting_questions.apply(db, question, values)
        logger.info(f"Updated starting paper question {question_id}")
        return StartingPaperQuestionResponse.model_validate(question)

    @staticmethod
    async def delete_question(db: AsyncSession, question_id: UUID):
        return await starting_questions.delete(db, question_id)
