import uuid
from typing import List, TYPE_CHECKING
from datetime import datetime
from sqlmodel import Field, Relationship, SQLModel
from portfolio.core.clock import utcnow

if TYPE_CHECKING:
    from portfolio.models.blog import Blog
    from portfolio.models.project import Project


class BlogTag(SQLModel, table=True):
    __tablename__ = "blog_tags"

    blog_id: uuid.UUID = Field(foreign_key="blogs.id", primary_key=True, ondelete="CASCADE")
    tag_id: uuid.UUID = Field(foreign_key="tags.id", primary_key=True, ondelete="CASCADE")


class ProjectTag(SQLModel, table=True):
    __tablename__ = "project_tags"

    project_id: uuid.UUID = Field(foreign_key="projects.id", primary_key=True, ondelete="CASCADE")
    tag_id: uuid.UUID = Field(foreign_key="tags.id", primary_key=True, ondelete="CASCADE")


class Tag(SQLModel, table=True):
    __tablename__ = "tags"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=100, unique=True, index=True)  # e.g., "fastapi", "devops"
    created_at: datetime = Field(default_factory=utcnow)

    blogs: List["Blog"] = Relationship(back_populates="tags", link_model=BlogTag)
    projects: List["Project"] = Relationship(back_populates="tags", link_model=ProjectTag)
