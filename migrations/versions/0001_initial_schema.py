"""initial LMS schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    return [
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _ref(name: str, nullable: bool = False):
    return sa.Column(name, sa.Uuid(as_uuid=True), nullable=nullable)


def _qanda_columns():
    return [
        sa.Column("question_title", sa.Text(), nullable=False),
        sa.Column("question_answer", sa.Text(), nullable=False),
        sa.Column("topic_tag", sa.String(100), nullable=True),
        sa.Column("score", sa.Float(), nullable=False, server_default="0"),
    ]


def _performance_columns():
    return [
        _ref("user_id"),
        sa.Column("total_study_time", sa.Float(), nullable=False, server_default="0"),
        sa.Column("resource_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("paper_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("lecture_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("average_score", sa.Float(), nullable=False, server_default="0"),
    ]


# table -> reference columns that get a plain (non-unique) index
INDEXED_REFERENCES = {
    "users": ["role_id"],
    "teacher_guides": ["created_by"],
    "teacher_guide_feedbacks": ["teacher_guide_id", "student_id"],
    "visual_learning": ["teacher_guide_id"],
    "auditory_learning": ["teacher_guide_id"],
    "kinesthetic_learning": ["teacher_guide_id"],
    "read_and_write_learning": ["teacher_guide_id"],
    "visual_qanda": ["visual_learning_id"],
    "auditory_qanda": ["auditory_learning_id"],
    "read_and_write_qanda": ["read_and_write_learning_id"],
    "python_qanda": ["paper_id"],
    "python_papers": ["teacher_guide_id"],
    "starting_paper_titles": ["created_by"],
    "python_video_lectures": ["teacher_guide_id", "created_by"],
    "feedbacks": ["video_lecture_id", "user_id"],
    "completed_lectures": ["user_id"],
    "student_performance": ["user_id"],
    "student_performance_history": ["user_id"],
}


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "user_roles",
        *_record_columns(),
        sa.Column("name", sa.String(100), nullable=False, unique=True),
        sa.Column("status", sa.Integer(), nullable=False, server_default="1"),
    )
    op.create_table(
        "users",
        *_record_columns(),
        sa.Column("username", sa.String(150), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(), nullable=True),
        sa.Column("first_name", sa.String(150), nullable=False),
        sa.Column("last_name", sa.String(150), nullable=False),
        sa.Column("age", sa.Integer(), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=False),
        sa.Column("difficulty_level", sa.String(50), nullable=True),
        sa.Column("suitability_for_coding", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("suitable_method", sa.String(50), nullable=True),
        sa.Column("entrance_test", sa.Integer(), nullable=False, server_default="0"),
        _ref("role_id", nullable=True),
        sa.Column("status", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("face_img_url", sa.String(), nullable=True),
    )
    op.create_table(
        "teacher_guides",
        *_record_columns(),
        sa.Column("course_info", sa.Text(), nullable=False),
        sa.Column("original_teacher_guide", sa.Text(), nullable=False),
        _ref("created_by"),
    )
    op.create_table(
        "teacher_guide_feedbacks",
        *_record_columns(),
        _ref("teacher_guide_id"),
        _ref("student_id"),
        sa.Column("student_feedback", sa.Text(), nullable=False),
    )

    # ============= Learning items =============
    op.create_table(
        "visual_learning",
        *_record_columns(),
        _ref("teacher_guide_id"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("video_url", sa.String(), nullable=False),
    )
    op.create_table(
        "auditory_learning",
        *_record_columns(),
        _ref("teacher_guide_id"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("audio_url", sa.String(), nullable=False),
    )
    op.create_table(
        "kinesthetic_learning",
        *_record_columns(),
        _ref("teacher_guide_id"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("instruction", sa.Text(), nullable=True),
        sa.Column("answer", sa.Text(), nullable=False),
    )
    op.create_table(
        "read_and_write_learning",
        *_record_columns(),
        _ref("teacher_guide_id"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    # ============= Q&A =============
    op.create_table(
        "visual_qanda", *_record_columns(), *_qanda_columns(), _ref("visual_learning_id")
    )
    op.create_table(
        "auditory_qanda", *_record_columns(), *_qanda_columns(), _ref("auditory_learning_id")
    )
    op.create_table(
        "read_and_write_qanda",
        *_record_columns(),
        *_qanda_columns(),
        _ref("read_and_write_learning_id"),
    )
    op.create_table("python_qanda", *_record_columns(), *_qanda_columns(), _ref("paper_id"))

    # ============= Papers =============
    op.create_table(
        "python_papers",
        *_record_columns(),
        sa.Column("paper_title", sa.String(255), nullable=False),
        sa.Column("paper_difficulty", sa.String(50), nullable=True),
        _ref("teacher_guide_id"),
    )
    op.create_table(
        "starting_paper_titles",
        *_record_columns(),
        sa.Column("paper_title", sa.String(255), nullable=False),
        sa.Column("paper_number", sa.Integer(), nullable=False),
        _ref("created_by"),
    )
    op.create_table(
        "starting_paper_questions",
        *_record_columns(),
        _ref("starting_paper_id"),
        sa.Column("question_title", sa.Text(), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("answers", sa.JSON(), nullable=False),
        sa.Column("correct_answer", sa.Text(), nullable=False),
    )
    op.create_index(
        "ix_starting_paper_questions_paper_created",
        "starting_paper_questions",
        ["starting_paper_id", "created_at"],
    )

    # ============= Lectures =============
    op.create_table(
        "python_video_lectures",
        *_record_columns(),
        sa.Column("lecture_type", sa.Integer(), nullable=False),
        sa.Column("lecture_title", sa.String(255), nullable=False),
        sa.Column("lecture_difficulty", sa.String(50), nullable=True),
        _ref("teacher_guide_id", nullable=True),
        sa.Column("video_url", sa.String(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("pdf_materials", sa.JSON(), nullable=False),
        _ref("created_by"),
    )
    op.create_table(
        "feedbacks",
        *_record_columns(),
        sa.Column("feedback", sa.Text(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        _ref("video_lecture_id"),
        _ref("user_id"),
        sa.UniqueConstraint("user_id", "video_lecture_id", name="uq_feedback_user_video"),
    )
    op.create_table(
        "completed_lectures",
        *_record_columns(),
        _ref("user_id"),
        sa.Column("lecture_id", sa.String(64), nullable=False),
        sa.Column("lecture_type", sa.String(50), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint(
            "user_id",
            "lecture_id",
            "lecture_type",
            name="uq_completed_lecture_user_lecture_type",
        ),
    )

    # ============= Progress =============
    op.create_table("student_performance", *_record_columns(), *_performance_columns())
    op.create_table(
        "student_performance_history", *_record_columns(), *_performance_columns()
    )
    counters = []
    for style in ("visual", "auditory", "kinesthetic", "read_and_write"):
        counters.append(
            sa.Column(f"{style}_learning_count", sa.Integer(), nullable=False, server_default="0")
        )
        counters.append(
            sa.Column(
                f"{style}_learning_total_point", sa.Float(), nullable=False, server_default="0"
            )
        )
    op.create_table(
        "learning_types",
        *_record_columns(),
        sa.Column("user_id", sa.Uuid(as_uuid=True), nullable=False, unique=True),
        *counters,
    )

    for table, columns in INDEXED_REFERENCES.items():
        for column in columns:
            op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    """Downgrade schema."""
    for table, columns in INDEXED_REFERENCES.items():
        for column in columns:
            op.drop_index(f"ix_{table}_{column}", table_name=table)
    op.drop_index(
        "ix_starting_paper_questions_paper_created", table_name="starting_paper_questions"
    )
    for table in (
        "learning_types",
        "student_performance_history",
        "student_performance",
        "completed_lectures",
        "feedbacks",
        "python_video_lectures",
        "starting_paper_questions",
        "starting_paper_titles",
        "python_papers",
        "python_qanda",
        "read_and_write_qanda",
        "auditory_qanda",
        "visual_qanda",
        "read_and_write_learning",
        "kinesthetic_learning",
        "auditory_learning",
        "visual_learning",
        "teacher_guide_feedbacks",
        "teacher_guides",
        "users",
        "user_roles",
    ):
        op.drop_table(table)
