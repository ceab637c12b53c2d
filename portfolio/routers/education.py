import uuid
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.profile import Education
from portfolio.services.profile import EducationService

router = APIRouter()

class EducationCreate(BaseModel):
    user_id: uuid.UUID
    institution: str
    degree_or_course: str
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: date
    end_date: Optional[date] = None
    grade_or_score: Optional[str] = None
    description: Optional[str] = None

class EducationUpdate(BaseModel):
    institution: Optional[str] = None
    degree_or_course: Optional[str] = None
    field_of_study: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    grade_or_score: Optional[str] = None
    description: Optional[str] = None

    check_not_null = reject_null("institution", "degree_or_course", "start_date")

def get_education_service(session: Session = Depends(get_session)) -> EducationService:
    return EducationService(session)

@router.get("/", response_model=List[Education])
def read_education(user_id: Optional[uuid.UUID] = None, service: EducationService = Depends(get_education_service)):
    if user_id:
        return service.get_user_education(user_id)
    return service.get_all()

@router.get("/{education_id}", response_model=Education)
def read_education_entry(education_id: uuid.UUID, service: EducationService = Depends(get_education_service)):
    entry = service.get(education_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Education entry not found")
    return entry

@router.post("/", response_model=Education, status_code=status.HTTP_201_CREATED)
def create_education(entry_in: EducationCreate, service: EducationService = Depends(get_education_service)):
    return service.create(entry_in.model_dump())

@router.patch("/{education_id}", response_model=Education)
def update_education(education_id: uuid.UUID, entry_in: EducationUpdate, service: EducationService = Depends(get_education_service)):
    entry = service.update(education_id, entry_in.model_dump(exclude_unset=True))
    if not entry:
        raise HTTPException(status_code=404, detail="Education entry not found")
    return entry

@router.delete("/{education_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_education(education_id: uuid.UUID, service: EducationService = Depends(get_education_service)):
    if not service.delete(education_id):
        raise HTTPException(status_code=404, detail="Education entry not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
