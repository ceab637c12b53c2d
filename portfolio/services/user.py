from typing import Any, Dict, List, Optional
from sqlmodel import select
from portfolio.core.security import get_password_hash
from portfolio.models.user import User, UserRole
from portfolio.services.base import CrudService

class UserService(CrudService[User]):
    model = User

    def get_all_users(self) -> List[User]:
        # Storage order, no sorting applied
        return self.session.exec(select(User)).all()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def create_user(self, full_name: str, email: str, password: str, role: UserRole = UserRole.EDITOR) -> User:
        user = User(
            full_name=full_name,
            email=email,
            password_hash=get_password_hash(password),
            role=role
        )
        return self.save(user)

    def update_user(self, user_id, data: Dict[str, Any]) -> Optional[User]:
        data = dict(data)
        password = data.pop("password", None)
        if password:
            data["password_hash"] = get_password_hash(password)
        return self.update(user_id, data)
