import uuid
from decimal import Decimal
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel, Field
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.course import Course, CourseModule, CourseLesson
from portfolio.services.course import CourseService, ModuleService, LessonService

router = APIRouter()

class CourseCreate(BaseModel):
    user_id: uuid.UUID
    title: str
    description: str
    is_paid: bool = False
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    media_urls: List[str] = []
    downloadable_links: List[str] = []

class CourseUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    is_paid: Optional[bool] = None
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    media_urls: Optional[List[str]] = None
    downloadable_links: Optional[List[str]] = None

    check_not_null = reject_null("title", "description", "is_paid", "media_urls", "downloadable_links")

class ModuleCreate(BaseModel):
    title: str
    description: Optional[str] = None
    order_index: int = 0

def get_course_service(session: Session = Depends(get_session)) -> CourseService:
    return CourseService(session)

def get_module_service(session: Session = Depends(get_session)) -> ModuleService:
    return ModuleService(session)

def get_course_or_404(course_id: uuid.UUID, service: CourseService) -> Course:
    course = service.get(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course

@router.get("/", response_model=List[Course])
def read_courses(service: CourseService = Depends(get_course_service)):
    return service.get_all()

@router.get("/{course_id}", response_model=Course)
def read_course(course_id: uuid.UUID, service: CourseService = Depends(get_course_service)):
    return get_course_or_404(course_id, service)

@router.post("/", response_model=Course, status_code=status.HTTP_201_CREATED)
def create_course(course_in: CourseCreate, service: CourseService = Depends(get_course_service)):
    return service.create_course(course_in.model_dump())

@router.patch("/{course_id}", response_model=Course)
def update_course(course_id: uuid.UUID, course_in: CourseUpdate, service: CourseService = Depends(get_course_service)):
    course = service.update_course(course_id, course_in.model_dump(exclude_unset=True))
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course

@router.delete("/{course_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_course(course_id: uuid.UUID, service: CourseService = Depends(get_course_service)):
    """
    Delete a course with its modules, lessons and purchases.
    """
    if not service.delete(course_id):
        raise HTTPException(status_code=404, detail="Course not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/{course_id}/modules", response_model=List[CourseModule])
def read_course_modules(course_id: uuid.UUID, service: CourseService = Depends(get_course_service)):
    get_course_or_404(course_id, service)
    return service.get_modules(course_id)

@router.post("/{course_id}/modules", response_model=CourseModule, status_code=status.HTTP_201_CREATED)
def create_course_module(
    course_id: uuid.UUID,
    module_in: ModuleCreate,
    service: CourseService = Depends(get_course_service),
    module_service: ModuleService = Depends(get_module_service)
):
    get_course_or_404(course_id, service)
    return module_service.create({**module_in.model_dump(), "course_id": course_id})

@router.get("/{course_id}/previews", response_model=List[CourseLesson])
def read_free_previews(
    course_id: uuid.UUID,
    service: CourseService = Depends(get_course_service),
    session: Session = Depends(get_session)
):
    get_course_or_404(course_id, service)
    return LessonService(session).get_free_previews(course_id)
