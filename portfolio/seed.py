import logging
import os
from datetime import date
from decimal import Decimal
from sqlmodel import Session, select
from portfolio.db.session import engine, create_db_and_tables
from portfolio.models import (
    User, UserRole, Project, Difficulty, Blog, BlogStatus,
    Education, Course, CourseModule, CourseLesson,
)
from portfolio.services.blog import BlogService
from portfolio.services.project import ProjectService
from portfolio.services.user import UserService

logger = logging.getLogger(__name__)

ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@portfolio.dev")


def seed_content(session: Session) -> User:
    """Create an admin user with a small set of demo content."""
    users = UserService(session)
    admin = users.get_user_by_email(ADMIN_EMAIL)
    if admin:
        logger.info("Admin %s already exists. Skipping seed.", ADMIN_EMAIL)
        return admin

    logger.info("Seeding admin user and demo content...")
    admin = users.create_user(
        "Site Admin",
        ADMIN_EMAIL,
        os.getenv("ADMIN_PASSWORD", "admin123"),
        role=UserRole.ADMIN
    )

    ProjectService(session).create_project(
        {
            "user_id": admin.id,
            "title": "Portfolio API",
            "description": "FastAPI + SQLModel backend for this site.",
            "tech_stack": ["python", "fastapi", "postgres"],
            "difficulty": Difficulty.INTERMEDIATE,
            "github_url": "https://github.com/example/portfolio-api",
        },
        tags=["python", "backend"]
    )

    BlogService(session).create_blog(
        {
            "user_id": admin.id,
            "title": "Hello, world",
            "slug": "hello-world",
            "content": "First post on the new platform.",
            "status": BlogStatus.PUBLISHED,
        },
        tags=["meta"]
    )

    session.add(Education(
        user_id=admin.id,
        institution="Open University",
        degree_or_course="BSc Computer Science",
        field_of_study="Computing",
        location="Remote",
        start_date=date(2016, 9, 1),
        end_date=date(2020, 6, 30),
    ))

    course = Course(
        user_id=admin.id,
        title="Intro to SQL",
        description="Relational modelling from first principles.",
        is_paid=True,
        price=Decimal("19.99"),
    )
    module = CourseModule(title="Tables and keys", order_index=1)
    module.lessons = [
        CourseLesson(title="What is a table?", order_index=1, duration_minutes=8, is_free_preview=True),
        CourseLesson(title="Primary and foreign keys", order_index=2, duration_minutes=12),
    ]
    course.modules = [module]
    session.add(course)
    session.commit()

    logger.info(
        "Seeded %d projects and %d blogs for %s",
        len(session.exec(select(Project)).all()),
        len(session.exec(select(Blog)).all()),
        ADMIN_EMAIL
    )
    return admin


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_db_and_tables()
    with Session(engine) as session:
        seed_content(session)
