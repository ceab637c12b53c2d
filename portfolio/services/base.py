import uuid
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, SQLModel, select
from portfolio.core.clock import utcnow

ModelType = TypeVar("ModelType", bound=SQLModel)

class CrudService(Generic[ModelType]):
    """Create/read/update/delete for a single table model.

    Database errors (unique or foreign-key violations) are re-raised after
    the session is rolled back so callers can keep using it.
    """

    model: Type[ModelType]

    def __init__(self, session: Session):
        self.session = session

    def get_all(self, skip: int = 0, limit: Optional[int] = None) -> List[ModelType]:
        statement = select(self.model).offset(skip)
        if limit is not None:
            statement = statement.limit(limit)
        return self.session.exec(statement).all()

    def get(self, obj_id: uuid.UUID) -> Optional[ModelType]:
        return self.session.get(self.model, obj_id)

    def create(self, data: Dict[str, Any]) -> ModelType:
        return self.save(self.model(**data))

    def update(self, obj_id: uuid.UUID, data: Dict[str, Any]) -> Optional[ModelType]:
        obj = self.get(obj_id)
        if not obj:
            return None
        for key, value in data.items():
            setattr(obj, key, value)
        return self.save(obj)

    def delete(self, obj_id: uuid.UUID) -> bool:
        obj = self.get(obj_id)
        if not obj:
            return False
        self.session.delete(obj)
        self.commit()
        return True

    def save(self, obj: ModelType) -> ModelType:
        if hasattr(obj, "updated_at"):
            obj.updated_at = utcnow()
        self.session.add(obj)
        self.commit()
        self.session.refresh(obj)
        return obj

    def commit(self):
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise

    def flush(self):
        try:
            self.session.flush()
        except IntegrityError:
            self.session.rollback()
            raise
