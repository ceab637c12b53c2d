import uuid
from typing import Optional, TYPE_CHECKING
from datetime import date, datetime
from sqlmodel import Field, Relationship, SQLModel, Column
from portfolio.core.clock import utcnow
from sqlalchemy import Text

if TYPE_CHECKING:
    from portfolio.models.user import User

class Education(SQLModel, table=True):
    __tablename__ = "education"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")

    institution: str = Field(max_length=255)
    degree_or_course: str = Field(max_length=255)
    field_of_study: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)

    # Period, end_date stays empty while ongoing
    start_date: date
    end_date: Optional[date] = None

    grade_or_score: Optional[str] = Field(default=None, max_length=100)
    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    owner: Optional["User"] = Relationship(back_populates="education")


class Certification(SQLModel, table=True):
    __tablename__ = "certifications"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")

    title: str = Field(max_length=255)
    issued_by: str = Field(max_length=255)
    issue_date: date
    expiry_date: Optional[date] = None

    # Credential
    credential_id: Optional[str] = Field(default=None, max_length=255)
    credential_url: Optional[str] = Field(default=None, max_length=255)
    file_url: Optional[str] = Field(default=None, max_length=255)  # Uploaded certificate scan/pdf

    description: Optional[str] = Field(default=None, sa_column=Column(Text))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    owner: Optional["User"] = Relationship(back_populates="certifications")
