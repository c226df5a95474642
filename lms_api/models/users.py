"""
User accounts and the roles they belong to.
"""

from sqlalchemy import Column, Integer, String, Uuid
from sqlalchemy.orm import relationship

from lms_api.database.db import Base
from lms_api.models.base import RecordMixin


class UserRole(RecordMixin, Base):
    """Named role (student, teacher, admin...) with an active flag."""

    __tablename__ = "user_roles"

    name = Column(String(100), nullable=False, unique=True)
    status = Column(Integer, nullable=False, default=1)

    def __repr__(self):
        return f"<UserRole {self.name}>"


class User(RecordMixin, Base):
    """Table to store user metadata and learning profile."""

    __tablename__ = "users"

    username = Column(String(150), nullable=False, unique=True)
    email = Column(String(255), nullable=False, unique=True)
    password_hash = Column(String, nullable=True)
    first_name = Column(String(150), nullable=False)
    last_name = Column(String(150), nullable=False)
    age = Column(Integer, nullable=False)
    phone_number = Column(String(50), nullable=False)

    # Learning profile, filled in after the entrance test
    difficulty_level = Column(String(50), nullable=True)
    suitability_for_coding = Column(Integer, nullable=False, default=0)  # 0 / 1
    suitable_method = Column(String(50), nullable=True)
    entrance_test = Column(Integer, nullable=False, default=0)  # 0 / 1

    role_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    status = Column(Integer, nullable=False, default=1)  # 0 / 1
    face_img_url = Column(String, nullable=True)

    role = relationship(
        "UserRole",
        primaryjoin="foreign(User.role_id) == UserRole.id",
        viewonly=True,
        lazy="raise",
    )

    def __repr__(self):
        return f"<User {self.username}>"
