"""Database models."""

from datetime import date, datetime

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from learntrack.database import Base

learning_item_tags = Table(
    "learning_item_tags",
    Base.metadata,
    Column(
        "learning_item_id",
        Integer,
        ForeignKey("learning_items.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("tag_id", Integer, ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class User(Base):
    """Account that owns learning items."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    learning_items: Mapped[list["LearningItem"]] = relationship(
        back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}')>"


class Category(Base):
    """Shared category, e.g. "Backend" or "Cloud"."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    color: Mapped[str] = mapped_column(String(9), nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name='{self.name}')>"


class Tag(Base):
    """Shared tag, stored in normalized lowercase form."""

    __tablename__ = "tags"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(30), unique=True, index=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Tag(id={self.id}, name='{self.name}')>"


class LearningItem(Base):
    """Course, book or certification tracked by a user."""

    __tablename__ = "learning_items"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False
    )
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description_md: Mapped[str] = mapped_column(Text, nullable=False, default="")
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Backlog")
    progress: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    user: Mapped[User] = relationship(back_populates="learning_items")
    category: Mapped[Category] = relationship()
    tags: Mapped[list[Tag]] = relationship(secondary=learning_item_tags, order_by=Tag.id)
    modules: Mapped[list["Module"]] = relationship(
        back_populates="learning_item",
        cascade="all, delete-orphan",
        order_by="Module.order",
    )

    __table_args__ = (
        CheckConstraint("progress >= 0 AND progress <= 100", name="ck_learning_items_progress"),
    )

    def __repr__(self) -> str:
        return f"<LearningItem(id={self.id}, title='{self.title[:50]}', status='{self.status}')>"


class Module(Base):
    """Ordered sub-unit of a learning item, e.g. a chapter or lesson."""

    __tablename__ = "modules"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    learning_item_id: Mapped[int] = mapped_column(
        ForeignKey("learning_items.id", ondelete="CASCADE"), index=True, nullable=False
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="Pendente")
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    learning_item: Mapped[LearningItem] = relationship(back_populates="modules")

    __table_args__ = (CheckConstraint('"order" >= 0', name="ck_modules_order"),)

    def __repr__(self) -> str:
        return f"<Module(id={self.id}, title='{self.title[:50]}', order={self.order})>"


class Dependency(Base):
    """Prerequisite edge: the source item requires the target item."""

    __tablename__ = "dependencies"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    source_item_id: Mapped[int] = mapped_column(
        ForeignKey("learning_items.id", ondelete="CASCADE"), index=True, nullable=False
    )
    target_item_id: Mapped[int] = mapped_column(
        ForeignKey("learning_items.id", ondelete="CASCADE"), index=True, nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint("source_item_id", "target_item_id", name="uq_dependencies_edge"),
        CheckConstraint("source_item_id != target_item_id", name="ck_dependencies_no_self"),
    )

    def __repr__(self) -> str:
        return f"<Dependency(id={self.id}, {self.source_item_id} -> {self.target_item_id})>"
