import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel, EmailStr
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.user import UserRole
from portfolio.services.user import UserService

router = APIRouter()

class UserCreate(BaseModel):
    full_name: str
    email: EmailStr
    password: str
    role: UserRole = UserRole.EDITOR

class UserUpdate(BaseModel):
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[UserRole] = None

    check_not_null = reject_null("full_name", "email", "password", "role")

class UserRead(BaseModel):
    id: uuid.UUID
    full_name: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime

def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)

@router.get("/", response_model=List[UserRead])
def read_users(service: UserService = Depends(get_user_service)):
    """
    Retrieve all users.
    """
    return service.get_all_users()

@router.get("/{user_id}", response_model=UserRead)
def read_user(user_id: uuid.UUID, service: UserService = Depends(get_user_service)):
    user = service.get(user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user

@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)):
    return service.create_user(user_in.full_name, user_in.email, user_in.password, role=user_in.role)

@router.patch("/{user_id}", response_model=UserRead)
def update_user(user_id: uuid.UUID, user_in: UserUpdate, service: UserService = Depends(get_user_service)):
    updated_user = service.update_user(user_id, user_in.model_dump(exclude_unset=True))
    if not updated_user:
        raise HTTPException(status_code=404, detail="User not found")
    return updated_user

@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: uuid.UUID, service: UserService = Depends(get_user_service)):
    """
    Delete a user together with everything they own.
    """
    if not service.delete(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
