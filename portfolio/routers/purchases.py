import uuid
from decimal import Decimal
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel, Field
from portfolio.db.session import get_session
from portfolio.models.purchase import Purchase, PaymentMethod
from portfolio.services.purchase import PurchaseService

router = APIRouter()

class PurchaseCreate(BaseModel):
    user_id: uuid.UUID
    course_id: Optional[uuid.UUID] = None
    amount: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    payment_method: PaymentMethod
    payment_id: Optional[str] = None
    message: Optional[str] = None

class PurchaseStatusUpdate(BaseModel):
    status: str = Field(min_length=1, max_length=50)  # e.g., "completed", "failed", "refunded"
    payment_id: Optional[str] = None

def get_purchase_service(session: Session = Depends(get_session)) -> PurchaseService:
    return PurchaseService(session)

@router.get("/", response_model=List[Purchase])
def read_purchases(
    user_id: Optional[uuid.UUID] = None,
    course_id: Optional[uuid.UUID] = None,
    service: PurchaseService = Depends(get_purchase_service)
):
    return service.get_purchases(user_id=user_id, course_id=course_id)

@router.get("/{purchase_id}", response_model=Purchase)
def read_purchase(purchase_id: uuid.UUID, service: PurchaseService = Depends(get_purchase_service)):
    purchase = service.get(purchase_id)
    if not purchase:
        raise HTTPException(status_code=404, detail="Purchase not found")
    return purchase

@router.post("/", response_model=Purchase, status_code=status.HTTP_201_CREATED)
def create_purchase(purchase_in: PurchaseCreate, service: PurchaseService = Depends(get_purchase_service)):
    """
    Record a course purchase or, without a course, a donation.
    Status starts as "pending" until the payment provider confirms it.
    """
    return service.create_purchase(purchase_in.model_dump())

@router.patch("/{purchase_id}/status", response_model=Purchase)
def update_purchase_status(
    purchase_id: uuid.UUID,
    status_in: PurchaseStatusUpdate,
    service: PurchaseService = Depends(get_purchase_service)
):
    purchase = service.update_status(purchase_id, status_in.status, payment_id=status_in.payment_id)
    if not purchase:
        raise HTTPException(status_code=404, detail="Purchase not found")
    return purchase

@router.delete("/{purchase_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_purchase(purchase_id: uuid.UUID, service: PurchaseService = Depends(get_purchase_service)):
    if not service.delete(purchase_id):
        raise HTTPException(status_code=404, detail="Purchase not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
