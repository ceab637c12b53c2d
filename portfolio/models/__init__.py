# Import all models to register them with SQLModel
from portfolio.models.user import User, UserRole
from portfolio.models.tag import Tag, BlogTag, ProjectTag
from portfolio.models.project import Project, Difficulty
from portfolio.models.blog import Blog, BlogComment, BlogStatus
from portfolio.models.profile import Education, Certification
from portfolio.models.course import Course, CourseModule, CourseLesson
from portfolio.models.purchase import Purchase, PaymentMethod
from portfolio.models.subscriber import Subscriber

__all__ = [
    "User",
    "UserRole",
    "Tag",
    "BlogTag",
    "ProjectTag",
    "Project",
    "Difficulty",
    "Blog",
    "BlogComment",
    "BlogStatus",
    "Education",
    "Certification",
    "Course",
    "CourseModule",
    "CourseLesson",
    "Purchase",
    "PaymentMethod",
    "Subscriber",
]
