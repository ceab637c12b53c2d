from typing import Any, Dict, List, Optional
from sqlmodel import select
from portfolio.models.project import Project, Difficulty
from portfolio.models.tag import Tag
from portfolio.services.base import CrudService
from portfolio.services.tag import TagService, normalize_tag_name

class ProjectService(CrudService[Project]):
    model = Project

    def get_projects(
        self,
        tag: Optional[str] = None,
        difficulty: Optional[Difficulty] = None,
        user_id=None
    ) -> List[Project]:
        statement = select(Project)
        if user_id:
            statement = statement.where(Project.user_id == user_id)
        if tag:
            statement = statement.where(Project.tags.any(Tag.name == normalize_tag_name(tag)))
        if difficulty:
            statement = statement.where(Project.difficulty == difficulty)
        return self.session.exec(statement.order_by(Project.created_at.desc())).all()

    def create_project(self, data: Dict[str, Any], tags: Optional[List[str]] = None) -> Project:
        project = Project(**data)
        if tags:
            project.tags = TagService(self.session).get_or_create_many(tags)
        return self.save(project)

    def update_project(self, project_id, data: Dict[str, Any], tags: Optional[List[str]] = None) -> Optional[Project]:
        project = self.get(project_id)
        if not project:
            return None
        for key, value in data.items():
            setattr(project, key, value)
        if tags is not None:
            project.tags = TagService(self.session).get_or_create_many(tags)
        return self.save(project)
