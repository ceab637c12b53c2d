import uuid
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel
from portfolio.db.session import get_session
from portfolio.models.blog import BlogComment
from portfolio.services.blog import CommentService

router = APIRouter()

class CommentUpdate(BaseModel):
    content: str

def get_comment_service(session: Session = Depends(get_session)) -> CommentService:
    return CommentService(session)

@router.get("/{comment_id}", response_model=BlogComment)
def read_comment(comment_id: uuid.UUID, service: CommentService = Depends(get_comment_service)):
    comment = service.get(comment_id)
    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment

@router.get("/{comment_id}/replies", response_model=List[BlogComment])
def read_replies(comment_id: uuid.UUID, service: CommentService = Depends(get_comment_service)):
    if not service.get(comment_id):
        raise HTTPException(status_code=404, detail="Comment not found")
    return service.get_replies(comment_id)

@router.patch("/{comment_id}", response_model=BlogComment)
def update_comment(comment_id: uuid.UUID, comment_in: CommentUpdate, service: CommentService = Depends(get_comment_service)):
    comment = service.update(comment_id, {"content": comment_in.content})
    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment

@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(comment_id: uuid.UUID, service: CommentService = Depends(get_comment_service)):
    """
    Delete a comment and every reply beneath it.
    """
    if not service.delete(comment_id):
        raise HTTPException(status_code=404, detail="Comment not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
