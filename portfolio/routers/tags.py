from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel
from portfolio.db.session import get_session
from portfolio.models.tag import Tag
from portfolio.services.tag import TagService, normalize_tag_name

router = APIRouter()

class TagCreate(BaseModel):
    name: str

def get_tag_service(session: Session = Depends(get_session)) -> TagService:
    return TagService(session)

@router.get("/", response_model=List[Tag])
def read_tags(service: TagService = Depends(get_tag_service)):
    return service.get_all()

@router.get("/{name}", response_model=Tag)
def read_tag(name: str, service: TagService = Depends(get_tag_service)):
    tag = service.get_by_name(name)
    if not tag:
        raise HTTPException(status_code=404, detail="Tag not found")
    return tag

@router.post("/", response_model=Tag, status_code=status.HTTP_201_CREATED)
def create_tag(tag_in: TagCreate, service: TagService = Depends(get_tag_service)):
    name = normalize_tag_name(tag_in.name)
    if not name:
        raise HTTPException(status_code=400, detail="Tag name cannot be blank")
    # Duplicate names surface as a 409 from the unique constraint
    return service.create({"name": name})

@router.delete("/{name}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(name: str, service: TagService = Depends(get_tag_service)):
    if not service.delete_by_name(name):
        raise HTTPException(status_code=404, detail="Tag not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
