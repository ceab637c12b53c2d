import uuid
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel, Field
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.course import CourseModule, CourseLesson
from portfolio.services.course import ModuleService, LessonService

router = APIRouter()

class ModuleUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    order_index: Optional[int] = None

    check_not_null = reject_null("title", "order_index")

class LessonCreate(BaseModel):
    title: str
    content: Optional[str] = None
    order_index: int = 0
    video_url: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    is_free_preview: bool = False

def get_module_service(session: Session = Depends(get_session)) -> ModuleService:
    return ModuleService(session)

def get_lesson_service(session: Session = Depends(get_session)) -> LessonService:
    return LessonService(session)

@router.get("/{module_id}", response_model=CourseModule)
def read_module(module_id: uuid.UUID, service: ModuleService = Depends(get_module_service)):
    module = service.get(module_id)
    if not module:
        raise HTTPException(status_code=404, detail="Module not found")
    return module

@router.patch("/{module_id}", response_model=CourseModule)
def update_module(module_id: uuid.UUID, module_in: ModuleUpdate, service: ModuleService = Depends(get_module_service)):
    module = service.update(module_id, module_in.model_dump(exclude_unset=True))
    if not module:
        raise HTTPException(status_code=404, detail="Module not found")
    return module

@router.delete("/{module_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_module(module_id: uuid.UUID, service: ModuleService = Depends(get_module_service)):
    if not service.delete(module_id):
        raise HTTPException(status_code=404, detail="Module not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{module_id}/lessons", response_model=List[CourseLesson])
def read_module_lessons(module_id: uuid.UUID, service: ModuleService = Depends(get_module_service)):
    if not service.get(module_id):
        raise HTTPException(status_code=404, detail="Module not found")
    return service.get_lessons(module_id)

@router.post("/{module_id}/lessons", response_model=CourseLesson, status_code=status.HTTP_201_CREATED)
def create_module_lesson(
    module_id: uuid.UUID,
    lesson_in: LessonCreate,
    service: ModuleService = Depends(get_module_service),
    lesson_service: LessonService = Depends(get_lesson_service)
):
    if not service.get(module_id):
        raise HTTPException(status_code=404, detail="Module not found")
    return lesson_service.create({**lesson_in.model_dump(), "module_id": module_id})
