from typing import Any, Dict, List, Optional
from sqlmodel import select
from portfolio.models.purchase import Purchase
from portfolio.services.base import CrudService

class PurchaseService(CrudService[Purchase]):
    model = Purchase

    def create_purchase(self, data: Dict[str, Any]) -> Purchase:
        data = dict(data)
        # No course means the payment is a donation, and only then
        data["is_donation"] = data.get("course_id") is None
        return self.create(data)

    def get_purchases(self, user_id=None, course_id=None) -> List[Purchase]:
        statement = select(Purchase)
        if user_id:
            statement = statement.where(Purchase.user_id == user_id)
        if course_id:
            statement = statement.where(Purchase.course_id == course_id)
        return self.session.exec(statement.order_by(Purchase.created_at.desc())).all()

    def update_status(self, purchase_id, status: str, payment_id: Optional[str] = None) -> Optional[Purchase]:
        data: Dict[str, Any] = {"status": status}
        if payment_id:
            data["payment_id"] = payment_id
        return self.update(purchase_id, data)
