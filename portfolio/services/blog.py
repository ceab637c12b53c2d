from typing import Any, Dict, List, Optional
from fastapi import HTTPException, status
from sqlmodel import select
from portfolio.core.clock import utcnow
from portfolio.models.blog import Blog, BlogComment, BlogStatus
from portfolio.models.tag import Tag
from portfolio.services.base import CrudService
from portfolio.services.tag import TagService, normalize_tag_name

class BlogService(CrudService[Blog]):
    model = Blog

    def get_by_slug(self, slug: str) -> Optional[Blog]:
        return self.session.exec(select(Blog).where(Blog.slug == slug)).first()

    def get_blogs(self, status: Optional[BlogStatus] = None, tag: Optional[str] = None) -> List[Blog]:
        statement = select(Blog)
        if status:
            statement = statement.where(Blog.status == status)
        if tag:
            statement = statement.where(Blog.tags.any(Tag.name == normalize_tag_name(tag)))
        return self.session.exec(statement.order_by(Blog.created_at.desc())).all()

    def create_blog(self, data: Dict[str, Any], tags: Optional[List[str]] = None) -> Blog:
        blog = Blog(**data)
        if blog.status == BlogStatus.PUBLISHED and not blog.published_at:
            blog.published_at = utcnow()
        if tags:
            blog.tags = TagService(self.session).get_or_create_many(tags)
        return self.save(blog)

    def update_blog(self, blog_id, data: Dict[str, Any], tags: Optional[List[str]] = None) -> Optional[Blog]:
        blog = self.get(blog_id)
        if not blog:
            return None
        for key, value in data.items():
            setattr(blog, key, value)
        if blog.status == BlogStatus.PUBLISHED and not blog.published_at:
            blog.published_at = utcnow()
        if tags is not None:
            blog.tags = TagService(self.session).get_or_create_many(tags)
        return self.save(blog)

    def publish(self, blog: Blog) -> Blog:
        """Mark a blog published, keeping the original publish time on re-publish."""
        blog.status = BlogStatus.PUBLISHED
        if not blog.published_at:
            blog.published_at = utcnow()
        return self.save(blog)

    def archive(self, blog: Blog) -> Blog:
        blog.status = BlogStatus.ARCHIVED
        return self.save(blog)


class CommentService(CrudService[BlogComment]):
    model = BlogComment

    def get_blog_comments(self, blog_id) -> List[BlogComment]:
        return self.session.exec(
            select(BlogComment)
            .where(BlogComment.blog_id == blog_id)
            .order_by(BlogComment.created_at)
        ).all()

    def get_replies(self, comment_id) -> List[BlogComment]:
        return self.session.exec(
            select(BlogComment)
            .where(BlogComment.parent_id == comment_id)
            .order_by(BlogComment.created_at)
        ).all()

    def create_comment(self, blog_id, user_id, content: str, parent_id=None) -> BlogComment:
        if parent_id is not None:
            parent = self.get(parent_id)
            if not parent:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Parent comment not found")
            # Replies stay in the thread of the same blog
            if parent.blog_id != blog_id:
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail="Parent comment belongs to a different blog"
                )
        comment = BlogComment(blog_id=blog_id, user_id=user_id, content=content, parent_id=parent_id)
        return self.save(comment)
