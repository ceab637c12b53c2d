import uuid
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from enum import Enum
from sqlmodel import Field, Relationship, SQLModel, Column
from portfolio.core.clock import utcnow
from sqlalchemy import Text, Enum as SAEnum
from portfolio.models.tag import BlogTag

if TYPE_CHECKING:
    from portfolio.models.user import User
    from portfolio.models.tag import Tag

class BlogStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"

class Blog(SQLModel, table=True):
    __tablename__ = "blogs"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # Author
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")

    # Content
    title: str = Field(max_length=255, index=True)
    slug: str = Field(max_length=255, unique=True, index=True)  # URL-friendly title
    content: str = Field(sa_column=Column(Text, nullable=False))  # Full blog content (markdown/HTML)
    cover_image_url: Optional[str] = Field(default=None, max_length=255)

    # Status
    status: BlogStatus = Field(
        default=BlogStatus.DRAFT,
        sa_column=Column(SAEnum(BlogStatus, name="blog_status", values_callable=lambda x: [e.value for e in x]), nullable=False)
    )
    published_at: Optional[datetime] = None

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    author: Optional["User"] = Relationship(back_populates="blogs")
    tags: List["Tag"] = Relationship(back_populates="blogs", link_model=BlogTag)
    comments: List["BlogComment"] = Relationship(back_populates="blog", sa_relationship_kwargs={"cascade": "all, delete"})


class BlogComment(SQLModel, table=True):
    __tablename__ = "blog_comments"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # References
    blog_id: uuid.UUID = Field(foreign_key="blogs.id", index=True, ondelete="CASCADE")
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    parent_id: Optional[uuid.UUID] = Field(default=None, foreign_key="blog_comments.id", index=True, ondelete="CASCADE")  # None for top-level

    content: str = Field(sa_column=Column(Text, nullable=False))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    blog: Optional[Blog] = Relationship(back_populates="comments")
    author: Optional["User"] = Relationship(back_populates="comments")
    parent: Optional["BlogComment"] = Relationship(
        back_populates="replies",
        sa_relationship_kwargs={"remote_side": "BlogComment.id"}
    )
    replies: List["BlogComment"] = Relationship(back_populates="parent", sa_relationship_kwargs={"cascade": "all, delete"})
