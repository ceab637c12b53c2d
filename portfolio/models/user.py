import uuid
from typing import List, TYPE_CHECKING
from datetime import datetime
from enum import Enum
from sqlmodel import Field, Relationship, SQLModel, Column
from portfolio.core.clock import utcnow
from sqlalchemy import Enum as SAEnum

if TYPE_CHECKING:
    from portfolio.models.project import Project
    from portfolio.models.blog import Blog, BlogComment
    from portfolio.models.profile import Education, Certification
    from portfolio.models.course import Course
    from portfolio.models.purchase import Purchase

class UserRole(str, Enum):
    ADMIN = "admin"
    EDITOR = "editor"

class User(SQLModel, table=True):
    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Basic Info
    full_name: str = Field(max_length=255)
    email: str = Field(max_length=255, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    role: UserRole = Field(
        default=UserRole.EDITOR,
        sa_column=Column(SAEnum(UserRole, name="role", values_callable=lambda x: [e.value for e in x]), nullable=False)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    # Owned content, removed together with the user
    projects: List["Project"] = Relationship(back_populates="owner", sa_relationship_kwargs={"cascade": "all, delete"})
    blogs: List["Blog"] = Relationship(back_populates="author", sa_relationship_kwargs={"cascade": "all, delete"})
    comments: List["BlogComment"] = Relationship(back_populates="author", sa_relationship_kwargs={"cascade": "all, delete"})
    education: List["Education"] = Relationship(back_populates="owner", sa_relationship_kwargs={"cascade": "all, delete"})
    certifications: List["Certification"] = Relationship(back_populates="owner", sa_relationship_kwargs={"cascade": "all, delete"})
    courses: List["Course"] = Relationship(back_populates="owner", sa_relationship_kwargs={"cascade": "all, delete"})
    purchases: List["Purchase"] = Relationship(back_populates="buyer", sa_relationship_kwargs={"cascade": "all, delete"})
