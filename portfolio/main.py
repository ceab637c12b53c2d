import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import IntegrityError
from portfolio import __version__
from portfolio.core.config import settings
from portfolio.db.session import create_db_and_tables

logger = logging.getLogger(__name__)

GREETING = "Hello Hono + Drizzle + Neon!"

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=__version__,
    lifespan=lifespan,
    description="API for a personal portfolio, blog and course platform"
)

@app.get("/", response_class=PlainTextResponse)
def read_root():
    return GREETING

@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    # Unique (email, slug, tag name) and foreign-key violations
    logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": "Conflicts with existing data or references a missing record"},
    )

from portfolio.routers import (  # noqa: E402
    users, projects, blogs, comments, tags, education, certifications,
    courses, modules, lessons, purchases, subscribers,
)

app.include_router(users.router, prefix="/api/v1/users", tags=["users"])
app.include_router(projects.router, prefix="/api/v1/projects", tags=["projects"])
app.include_router(blogs.router, prefix="/api/v1/blogs", tags=["blogs"])
app.include_router(comments.router, prefix="/api/v1/comments", tags=["comments"])
app.include_router(tags.router, prefix="/api/v1/tags", tags=["tags"])
app.include_router(education.router, prefix="/api/v1/education", tags=["education"])
app.include_router(certifications.router, prefix="/api/v1/certifications", tags=["certifications"])
app.include_router(courses.router, prefix="/api/v1/courses", tags=["courses"])
app.include_router(modules.router, prefix="/api/v1/modules", tags=["courses"])
app.include_router(lessons.router, prefix="/api/v1/lessons", tags=["courses"])
app.include_router(purchases.router, prefix="/api/v1/purchases", tags=["purchases"])
app.include_router(subscribers.router, prefix="/api/v1/subscribers", tags=["subscribers"])

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
