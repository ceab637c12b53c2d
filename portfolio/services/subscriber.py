from typing import List, Optional
from sqlmodel import select
from portfolio.core.clock import utcnow
from portfolio.models.subscriber import Subscriber
from portfolio.services.base import CrudService

class SubscriberService(CrudService[Subscriber]):
    model = Subscriber

    def get_by_email(self, email: str) -> Optional[Subscriber]:
        return self.session.exec(select(Subscriber).where(Subscriber.email == email)).first()

    def get_active_subscribers(self) -> List[Subscriber]:
        return self.session.exec(select(Subscriber).where(Subscriber.unsubscribed_at == None)).all()  # noqa: E711

    def subscribe(self, email: str, name: Optional[str] = None) -> Subscriber:
        subscriber = self.get_by_email(email)
        if subscriber:
            # Returning subscriber gets reactivated rather than a second row
            if subscriber.unsubscribed_at is not None:
                subscriber.unsubscribed_at = None
                subscriber.subscribed_at = utcnow()
            if name:
                subscriber.name = name
        else:
            subscriber = Subscriber(email=email, name=name)
        return self.save(subscriber)

    def unsubscribe(self, email: str) -> Optional[Subscriber]:
        subscriber = self.get_by_email(email)
        if not subscriber:
            return None
        if subscriber.unsubscribed_at is None:
            subscriber.unsubscribed_at = utcnow()
        return self.save(subscriber)
