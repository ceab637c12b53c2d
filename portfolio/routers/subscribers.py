import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel, EmailStr
from portfolio.db.session import get_session
from portfolio.models.subscriber import Subscriber
from portfolio.services.subscriber import SubscriberService

router = APIRouter()

class SubscribeRequest(BaseModel):
    email: EmailStr
    name: Optional[str] = None

class UnsubscribeRequest(BaseModel):
    email: EmailStr

def get_subscriber_service(session: Session = Depends(get_session)) -> SubscriberService:
    return SubscriberService(session)

@router.get("/", response_model=List[Subscriber])
def read_subscribers(active: bool = False, service: SubscriberService = Depends(get_subscriber_service)):
    if active:
        return service.get_active_subscribers()
    return service.get_all()

@router.post("/", response_model=Subscriber, status_code=status.HTTP_201_CREATED)
def subscribe(
    request: SubscribeRequest,
    response: Response,
    service: SubscriberService = Depends(get_subscriber_service)
):
    # 201 only when a row is created; reactivations and repeats answer 200
    if service.get_by_email(request.email):
        response.status_code = status.HTTP_200_OK
    return service.subscribe(request.email, name=request.name)

@router.post("/unsubscribe", response_model=Subscriber)
def unsubscribe(request: UnsubscribeRequest, service: SubscriberService = Depends(get_subscriber_service)):
    subscriber = service.unsubscribe(request.email)
    if not subscriber:
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return subscriber

@router.delete("/{subscriber_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subscriber(subscriber_id: uuid.UUID, service: SubscriberService = Depends(get_subscriber_service)):
    if not service.delete(subscriber_id):
        raise HTTPException(status_code=404, detail="Subscriber not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
