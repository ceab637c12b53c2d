import uuid
from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel
from portfolio.core.clock import utcnow

class Subscriber(SQLModel, table=True):
    __tablename__ = "subscribers"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(max_length=255, unique=True, index=True)
    name: Optional[str] = Field(default=None, max_length=255)

    subscribed_at: datetime = Field(default_factory=utcnow)
    unsubscribed_at: Optional[datetime] = None
