import uuid
from decimal import Decimal
from typing import Optional, TYPE_CHECKING
from datetime import datetime
from sqlmodel import Field, Relationship, SQLModel, Column
from portfolio.core.clock import utcnow
from sqlalchemy import Text, Enum as SAEnum
from enum import Enum

if TYPE_CHECKING:
    from portfolio.models.user import User
    from portfolio.models.course import Course

class PaymentMethod(str, Enum):
    STRIPE = "stripe"
    PAYPAL = "paypal"
    MPESA = "mpesa"
    BMAC = "bmac"  # Buy Me a Coffee

class Purchase(SQLModel, table=True):
    __tablename__ = "purchases"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)

    # References
    user_id: uuid.UUID = Field(foreign_key="users.id", index=True, ondelete="CASCADE")
    course_id: Optional[uuid.UUID] = Field(default=None, foreign_key="courses.id", index=True, ondelete="CASCADE")  # None for donations

    # Payment Details
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    payment_method: PaymentMethod = Field(
        sa_column=Column(SAEnum(PaymentMethod, name="payment_method", values_callable=lambda x: [e.value for e in x]), nullable=False)
    )
    payment_id: Optional[str] = Field(default=None, max_length=255)  # Gateway transaction/charge ID
    is_donation: bool = Field(default=False)
    message: Optional[str] = Field(default=None, sa_column=Column(Text))  # Note left with a donation
    status: str = Field(default="pending", max_length=50)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    buyer: Optional["User"] = Relationship(back_populates="purchases")
    course: Optional["Course"] = Relationship(back_populates="purchases")
