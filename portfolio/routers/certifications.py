import uuid
from datetime import date
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.profile import Certification
from portfolio.services.profile import CertificationService

router = APIRouter()

class CertificationCreate(BaseModel):
    user_id: uuid.UUID
    title: str
    issued_by: str
    issue_date: date
    expiry_date: Optional[date] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None
    file_url: Optional[str] = None
    description: Optional[str] = None

class CertificationUpdate(BaseModel):
    title: Optional[str] = None
    issued_by: Optional[str] = None
    issue_date: Optional[date] = None
    expiry_date: Optional[date] = None
    credential_id: Optional[str] = None
    credential_url: Optional[str] = None
    file_url: Optional[str] = None
    description: Optional[str] = None

    check_not_null = reject_null("title", "issued_by", "issue_date")

def get_certification_service(session: Session = Depends(get_session)) -> CertificationService:
    return CertificationService(session)

@router.get("/", response_model=List[Certification])
def read_certifications(user_id: Optional[uuid.UUID] = None, service: CertificationService = Depends(get_certification_service)):
    if user_id:
        return service.get_user_certifications(user_id)
    return service.get_all()

@router.get("/{certification_id}", response_model=Certification)
def read_certification(certification_id: uuid.UUID, service: CertificationService = Depends(get_certification_service)):
    certification = service.get(certification_id)
    if not certification:
        raise HTTPException(status_code=404, detail="Certification not found")
    return certification

@router.post("/", response_model=Certification, status_code=status.HTTP_201_CREATED)
def create_certification(certification_in: CertificationCreate, service: CertificationService = Depends(get_certification_service)):
    return service.create(certification_in.model_dump())

@router.patch("/{certification_id}", response_model=Certification)
def update_certification(
    certification_id: uuid.UUID,
    certification_in: CertificationUpdate,
    service: CertificationService = Depends(get_certification_service)
):
    certification = service.update(certification_id, certification_in.model_dump(exclude_unset=True))
    if not certification:
        raise HTTPException(status_code=404, detail="Certification not found")
    return certification

@router.delete("/{certification_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_certification(certification_id: uuid.UUID, service: CertificationService = Depends(get_certification_service)):
    if not service.delete(certification_id):
        raise HTTPException(status_code=404, detail="Certification not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
