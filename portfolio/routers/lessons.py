import uuid
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel, Field
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.course import CourseLesson
from portfolio.services.course import LessonService

router = APIRouter()

class LessonUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    order_index: Optional[int] = None
    video_url: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, ge=0)
    is_free_preview: Optional[bool] = None

    check_not_null = reject_null("title", "order_index", "is_free_preview")

def get_lesson_service(session: Session = Depends(get_session)) -> LessonService:
    return LessonService(session)

@router.get("/{lesson_id}", response_model=CourseLesson)
def read_lesson(lesson_id: uuid.UUID, service: LessonService = Depends(get_lesson_service)):
    lesson = service.get(lesson_id)
    if not lesson:
        raise HTTPException(status_code=404, detail="Lesson not found")
    return lesson

@router.patch("/{lesson_id}", response_model=CourseLesson)
def update_lesson(lesson_id: uuid.UUID, lesson_in: LessonUpdate, service: LessonService = Depends(get_lesson_service)):
    lesson = service.update(lesson_id, lesson_in.model_dump(exclude_unset=True))
    if not lesson:
        raise HTTPException(status_code=404, detail="Lesson not found")
    return lesson

@router.delete("/{lesson_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lesson(lesson_id: uuid.UUID, service: LessonService = Depends(get_lesson_service)):
    if not service.delete(lesson_id):
        raise HTTPException(status_code=404, detail="Lesson not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
