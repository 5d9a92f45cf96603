"""Repository for Tag domain entities."""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learntrack.domain.catalog.entities import Tag
from learntrack.domain.catalog.exceptions import TagNameTakenError
from learntrack.domain.common.value_objects import TagId
from learntrack.infrastructure.catalog.mappers.tag_mapper import TagMapper
from learntrack.models import Tag as TagORM
from learntrack.models import learning_item_tags


class TagRepository:
    """Repository for Tag domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = TagMapper()

    def find_by_id(self, tag_id: TagId) -> Tag | None:
        orm_model = self.db.get(TagORM, tag_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> Tag | None:
        """Find a tag by its normalized name."""
        stmt = select(TagORM).where(TagORM.name == name)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Tag]:
        stmt = select(TagORM).order_by(TagORM.name)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def get_or_create_many(self, names: list[str]) -> list[Tag]:
        """
        Resolve raw names to tags, creating missing ones in one commit.

        Names are normalized and validated first; duplicates after
        normalization collapse to one tag.

        Raises:
            ValidationError: If any normalized name is invalid
        """
        wanted = list(dict.fromkeys(Tag.create(name).name for name in names))
        if not wanted:
            return []

        stmt = select(TagORM).where(TagORM.name.in_(wanted))
        by_name = {orm.name: orm for orm in self.db.execute(stmt).scalars().all()}

        missing = [TagORM(name=name) for name in wanted if name not in by_name]
        if missing:
            self.db.add_all(missing)
            self.db.commit()
            for orm_model in missing:
                self.db.refresh(orm_model)
                by_name[orm_model.name] = orm_model

        return [self.mapper.to_domain(by_name[name]) for name in wanted]

    def save(self, tag: Tag) -> Tag:
        """
        Save a tag entity (create or update).

        Raises:
            TagNameTakenError: If another tag already has the name
        """
        if tag.id.value == 0:
            orm_model = self.mapper.to_orm(tag)
            self.db.add(orm_model)
        else:
            existing = self.db.get(TagORM, tag.id.value)
            if not existing:
                raise ValueError(f"Tag {tag.id.value} not found")
            orm_model = self.mapper.to_orm(tag, existing)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise TagNameTakenError(tag.name) from e
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, tag_id: TagId) -> bool:
        """Delete a tag and its item associations. Returns False if not found."""
        orm_model = self.db.get(TagORM, tag_id.value)
        if not orm_model:
            return False
        self.db.execute(
            delete(learning_item_tags).where(learning_item_tags.c.tag_id == tag_id.value)
        )
        self.db.delete(orm_model)
        self.db.commit()
        return True
