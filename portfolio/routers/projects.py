import uuid
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from pydantic import BaseModel
from portfolio.core.validators import reject_null
from portfolio.db.session import get_session
from portfolio.models.project import Project, Difficulty
from portfolio.services.project import ProjectService

router = APIRouter()

class ProjectCreate(BaseModel):
    user_id: uuid.UUID
    title: str
    description: str
    tech_stack: List[str] = []
    difficulty: Difficulty = Difficulty.BASIC
    github_url: str
    live_url: Optional[str] = None
    image_urls: List[str] = []
    tags: List[str] = []

class ProjectUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    tech_stack: Optional[List[str]] = None
    difficulty: Optional[Difficulty] = None
    github_url: Optional[str] = None
    live_url: Optional[str] = None
    image_urls: Optional[List[str]] = None
    tags: Optional[List[str]] = None

    check_not_null = reject_null("title", "description", "tech_stack", "difficulty", "github_url", "image_urls", "tags")

class ProjectRead(BaseModel):
    id: uuid.UUID
    user_id: uuid.UUID
    title: str
    description: str
    tech_stack: List[str]
    difficulty: Difficulty
    github_url: str
    live_url: Optional[str]
    image_urls: List[str]
    tags: List[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_project(cls, project: Project) -> "ProjectRead":
        return cls(**project.model_dump(), tags=[tag.name for tag in project.tags])

def get_project_service(session: Session = Depends(get_session)) -> ProjectService:
    return ProjectService(session)

@router.get("/", response_model=List[ProjectRead])
def read_projects(
    tag: Optional[str] = None,
    difficulty: Optional[Difficulty] = None,
    user_id: Optional[uuid.UUID] = None,
    service: ProjectService = Depends(get_project_service)
):
    projects = service.get_projects(tag=tag, difficulty=difficulty, user_id=user_id)
    return [ProjectRead.from_project(p) for p in projects]

@router.get("/{project_id}", response_model=ProjectRead)
def read_project(project_id: uuid.UUID, service: ProjectService = Depends(get_project_service)):
    project = service.get(project_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectRead.from_project(project)

@router.post("/", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(project_in: ProjectCreate, service: ProjectService = Depends(get_project_service)):
    project = service.create_project(project_in.model_dump(exclude={"tags"}), tags=project_in.tags)
    return ProjectRead.from_project(project)

@router.patch("/{project_id}", response_model=ProjectRead)
def update_project(project_id: uuid.UUID, project_in: ProjectUpdate, service: ProjectService = Depends(get_project_service)):
    data = project_in.model_dump(exclude_unset=True)
    tags = data.pop("tags", None)
    project = service.update_project(project_id, data, tags=tags)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return ProjectRead.from_project(project)

@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(project_id: uuid.UUID, service: ProjectService = Depends(get_project_service)):
    if not service.delete(project_id):
        raise HTTPException(status_code=404, detail="Project not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
