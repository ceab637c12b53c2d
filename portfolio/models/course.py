import uuid
from decimal import Decimal
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from sqlmodel import Field, Relationship, SQLModel, Column
from portfolio.core.clock import utcnow
from sqlalchemy import JSON, Text

if TYPE_CHECKING:
    from portfolio.models.user import User
    from portfolio.models.purchase import Purchase

class Course(SQLModel, table=True):
    __tablename__ = "courses"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")

    title: str = Field(max_length=255)
    description: str = Field(sa_column=Column(Text, nullable=False))

    # Pricing, price stays empty for free courses
    is_paid: bool = Field(default=False)
    price: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)

    # Media
    media_urls: List[str] = Field(default=[], sa_column=Column(JSON))
    downloadable_links: List[str] = Field(default=[], sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    owner: Optional["User"] = Relationship(back_populates="courses")
    modules: List["CourseModule"] = Relationship(
        back_populates="course",
        sa_relationship_kwargs={"cascade": "all, delete", "order_by": "CourseModule.order_index"}
    )
    purchases: List["Purchase"] = Relationship(back_populates="course", sa_relationship_kwargs={"cascade": "all, delete"})


class CourseModule(SQLModel, table=True):
    __tablename__ = "course_modules"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    course_id: uuid.UUID = Field(foreign_key="courses.id", index=True, ondelete="CASCADE")

    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))
    order_index: int = Field(default=0)  # Position within the course

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    course: Optional[Course] = Relationship(back_populates="modules")
    lessons: List["CourseLesson"] = Relationship(
        back_populates="module",
        sa_relationship_kwargs={"cascade": "all, delete", "order_by": "CourseLesson.order_index"}
    )


class CourseLesson(SQLModel, table=True):
    __tablename__ = "course_lessons"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    module_id: uuid.UUID = Field(foreign_key="course_modules.id", index=True, ondelete="CASCADE")

    title: str = Field(max_length=255)
    content: Optional[str] = Field(default=None, sa_column=Column(Text))
    order_index: int = Field(default=0)  # Position within the module

    # Media
    video_url: Optional[str] = Field(default=None, max_length=255)
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    is_free_preview: bool = Field(default=False)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    module: Optional[CourseModule] = Relationship(back_populates="lessons")
