from typing import Iterable, List, Optional
from sqlmodel import select
from portfolio.models.tag import Tag
from portfolio.services.base import CrudService


def normalize_tag_name(name: str) -> str:
    return name.strip().lower()


class TagService(CrudService[Tag]):
    model = Tag

    def get_by_name(self, name: str) -> Optional[Tag]:
        return self.session.exec(select(Tag).where(Tag.name == normalize_tag_name(name))).first()

    def get_or_create(self, name: str) -> Tag:
        """Return the tag called `name`, adding it to the current transaction if missing.

        New tags are flushed, not committed: they land or roll back together
        with the blog or project that references them.
        """
        tag = self.get_by_name(name)
        if tag:
            return tag
        tag = Tag(name=normalize_tag_name(name))
        self.session.add(tag)
        self.flush()
        return tag

    def get_or_create_many(self, names: Iterable[str]) -> List[Tag]:
        """Resolve tag names to rows, keeping first-seen order and dropping duplicates/blanks."""
        seen = []
        for name in names:
            name = normalize_tag_name(name)
            if name and name not in seen:
                seen.append(name)
        return [self.get_or_create(name) for name in seen]

    def delete_by_name(self, name: str) -> bool:
        tag = self.get_by_name(name)
        if not tag:
            return False
        self.session.delete(tag)
        self.commit()
        return True
