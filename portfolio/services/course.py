from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status
from sqlmodel import select
from portfolio.models.course import Course, CourseModule, CourseLesson
from portfolio.services.base import CrudService


def check_pricing(is_paid: bool, price) -> None:
    if is_paid and price is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Paid courses need a price")


class CourseService(CrudService[Course]):
    model = Course

    def create_course(self, data: Dict[str, Any]) -> Course:
        check_pricing(data.get("is_paid", False), data.get("price"))
        return self.create(data)

    def update_course(self, course_id, data: Dict[str, Any]) -> Optional[Course]:
        course = self.get(course_id)
        if not course:
            return None
        check_pricing(data.get("is_paid", course.is_paid), data.get("price", course.price))
        return self.update(course_id, data)

    def get_modules(self, course_id) -> List[CourseModule]:
        return self.session.exec(
            select(CourseModule)
            .where(CourseModule.course_id == course_id)
            .order_by(CourseModule.order_index, CourseModule.created_at)
        ).all()


class ModuleService(CrudService[CourseModule]):
    model = CourseModule

    def get_lessons(self, module_id) -> List[CourseLesson]:
        return self.session.exec(
            select(CourseLesson)
            .where(CourseLesson.module_id == module_id)
            .order_by(CourseLesson.order_index, CourseLesson.created_at)
        ).all()


class LessonService(CrudService[CourseLesson]):
    model = CourseLesson

    def get_free_previews(self, course_id) -> List[CourseLesson]:
        return self.session.exec(
            select(CourseLesson)
            .join(CourseModule)
            .where(CourseModule.course_id == course_id, CourseLesson.is_free_preview == True)  # noqa: E712
            .order_by(CourseModule.order_index, CourseLesson.order_index)
        ).all()
