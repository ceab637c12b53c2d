import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.blog import Blog, BlogComment, BlogStatus
from portfolio.services.blog import BlogService, CommentService

router = APIRouter()

class BlogCreate(BaseModel):
    user_id: uuid.UUID
    title: str
    slug: str
    content: str
    cover_image_url: Optional[str] = None
    status: BlogStatus = BlogStatus.DRAFT
    tags: List[str] = []

class BlogUpdate(BaseModel):
    title: Optional[str] = None
    slug: Optional[str] = None
    content: Optional[str] = None
    cover_image_url: Optional[str] = None
    status: Optional[BlogStatus] = None
    tags: Optional[List[str]] = None

    check_not_null = reject_null("title", "slug", "content", "status", "tags")

class BlogRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    slug: str
    content: str
    cover_image_url: Optional[str]
    status: BlogStatus
    published_at: Optional[datetime]
    tags: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogRead":
        return cls(**blog.model_dump(), tags=[tag.name for tag in blog.tags])

class CommentCreate(BaseModel):
    user_id: uuid.UUID
    content: str
    parent_id: Optional[uuid.UUID] = None

def get_blog_service(session: Session = Depends(get_session)) -> BlogService:
    return BlogService(session)

def get_comment_service(session: Session = Depends(get_session)) -> CommentService:
    return CommentService(session)

def get_blog_or_404(blog_id: uuid.UUID, service: BlogService) -> Blog:
    blog = service.get(blog_id)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return blog

@router.get("/", response_model=List[BlogRead])
def read_blogs(
    status: Optional[BlogStatus] = None,
    tag: Optional[str] = None,
    service: BlogService = Depends(get_blog_service)
):
    return [BlogRead.from_blog(b) for b in service.get_blogs(status=status, tag=tag)]

@router.get("/slug/{slug}", response_model=BlogRead)
def read_blog_by_slug(slug: str, service: BlogService = Depends(get_blog_service)):
    blog = service.get_by_slug(slug)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return BlogRead.from_blog(blog)

@router.get("/{blog_id}", response_model=BlogRead)
def read_blog(blog_id: uuid.UUID, service: BlogService = Depends(get_blog_service)):
    return BlogRead.from_blog(get_blog_or_404(blog_id, service))

@router.post("/", response_model=BlogRead, status_code=status.HTTP_201_CREATED)
def create_blog(blog_in: BlogCreate, service: BlogService = Depends(get_blog_service)):
    blog = service.create_blog(blog_in.model_dump(exclude={"tags"}), tags=blog_in.tags)
    return BlogRead.from_blog(blog)

@router.patch("/{blog_id}", response_model=BlogRead)
def update_blog(blog_id: uuid.UUID, blog_in: BlogUpdate, service: BlogService = Depends(get_blog_service)):
    data = blog_in.model_dump(exclude_unset=True)
    tags = data.pop("tags", None)
    blog = service.update_blog(blog_id, data, tags=tags)
    if not blog:
        raise HTTPException(status_code=404, detail="Blog not found")
    return BlogRead.from_blog(blog)

@router.post("/{blog_id}/publish", response_model=BlogRead)
def publish_blog(blog_id: uuid.UUID, service: BlogService = Depends(get_blog_service)):
    blog = service.publish(get_blog_or_404(blog_id, service))
    return BlogRead.from_blog(blog)

@router.post("/{blog_id}/archive", response_model=BlogRead)
def archive_blog(blog_id: uuid.UUID, service: BlogService = Depends(get_blog_service)):
    blog = service.archive(get_blog_or_404(blog_id, service))
    return BlogRead.from_blog(blog)

@router.delete("/{blog_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_blog(blog_id: uuid.UUID, service: BlogService = Depends(get_blog_service)):
    if not service.delete(blog_id):
        raise HTTPException(status_code=404, detail="Blog not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# Comments

@router.get("/{blog_id}/comments", response_model=List[BlogComment])
def read_blog_comments(
    blog_id: uuid.UUID,
    service: BlogService = Depends(get_blog_service),
    comment_service: CommentService = Depends(get_comment_service)
):
    get_blog_or_404(blog_id, service)
    return comment_service.get_blog_comments(blog_id)

@router.post("/{blog_id}/comments", response_model=BlogComment, status_code=status.HTTP_201_CREATED)
def create_blog_comment(
    blog_id: uuid.UUID,
    comment_in: CommentCreate,
    service: BlogService = Depends(get_blog_service),
    comment_service: CommentService = Depends(get_comment_service)
):
    get_blog_or_404(blog_id, service)
    return comment_service.create_comment(
        blog_id,
        comment_in.user_id,
        comment_in.content,
        parent_id=comment_in.parent_id
    )
