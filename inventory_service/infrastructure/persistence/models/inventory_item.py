"""Inventory item ORM model. Table: inventory."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from inventory_service.infrastructure.persistence.database import Base


class InventoryItem(Base):
    """One registered inventory item. id is assigned by the table (auto-increment)."""

    __tablename__ = "inventory"
    # AUTOINCREMENT on SQLite: ids of deleted rows are never handed out again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str] = mapped_column(
        Text, nullable=False, default="", server_default=""
    )
    # Blob name in the photo directory; non-owning reference.
    photo: Mapped[str | None] = mapped_column(String, nullable=True)
