import uuid
from typing import List, Optional, TYPE_CHECKING
from datetime import datetime
from enum import Enum
from sqlmodel import Field, Relationship, SQLModel, Column
from portfolio.core.clock import utcnow
from sqlalchemy import JSON, Text, Enum as SAEnum
from portfolio.models.tag import ProjectTag

if TYPE_CHECKING:
    from portfolio.models.user import User
    from portfolio.models.tag import Tag

class Difficulty(str, Enum):
    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

class Project(SQLModel, table=True):
    __tablename__ = "projects"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")

    # Content
    title: str = Field(max_length=255)
    description: str = Field(sa_column=Column(Text, nullable=False))
    tech_stack: List[str] = Field(default=[], sa_column=Column(JSON))  # e.g., ["python", "postgres"]
    difficulty: Difficulty = Field(
        default=Difficulty.BASIC,
        sa_column=Column(SAEnum(Difficulty, name="difficulty", values_callable=lambda x: [e.value for e in x]), nullable=False)
    )

    # Links
    github_url: str = Field(max_length=255)
    live_url: Optional[str] = Field(default=None, max_length=255)
    image_urls: List[str] = Field(default=[], sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    owner: Optional["User"] = Relationship(back_populates="projects")
    tags: List["Tag"] = Relationship(back_populates="projects", link_model=ProjectTag)
