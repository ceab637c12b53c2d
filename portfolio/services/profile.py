from typing import List
from sqlmodel import select
from portfolio.models.profile import Education, Certification
from portfolio.services.base import CrudService

class EducationService(CrudService[Education]):
    model = Education

    def get_user_education(self, user_id) -> List[Education]:
        # Most recent first
        return self.session.exec(
            select(Education).where(Education.user_id == user_id).order_by(Education.start_date.desc())
        ).all()


class CertificationService(CrudService[Certification]):
    model = Certification

    def get_user_certifications(self, user_id) -> List[Certification]:
        return self.session.exec(
            select(Certification).where(Certification.user_id == user_id).order_by(Certification.issue_date.desc())
        ).all()
