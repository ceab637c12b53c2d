from sqlalchemy import func
from sqlmodel import select

from portfolio.core.security import verify_password
from portfolio.models import Blog, BlogStatus, CourseLesson, Project, User, UserRole
from portfolio.seed import ADMIN_EMAIL, seed_content


def test_seed_creates_admin_and_demo_content(session):
    admin = seed_content(session)

    assert admin.email == ADMIN_EMAIL
    assert admin.role == UserRole.ADMIN
    assert verify_password("admin123", admin.password_hash)

    blog = session.exec(select(Blog)).one()
    assert blog.status == BlogStatus.PUBLISHED
    assert blog.published_at is not None
    assert [t.name for t in blog.tags] == ["meta"]
    assert len(session.exec(select(Project)).all()) == 1
    assert len(session.exec(select(CourseLesson)).all()) == 2


def test_seed_is_idempotent(session):
    first = seed_content(session)
    second = seed_content(session)

    assert first.id == second.id
    assert session.exec(select(func.count()).select_from(User)).one() == 1
