from datetime import UTC, datetime

from sqlalchemy import DateTime, Select, String, select
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shelfcat.database import Base
from shelfcat.models.categorization import Categorization


class Category(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

    categorizations: Mapped[list["Categorization"]] = relationship(back_populates="category")
    books: Mapped[list["Book"]] = relationship(secondary="categorizations", viewonly=True)

    @classmethod
    def primaries(cls) -> Select:
        """Categories joined to their primary categorizations.

        This is a plain inner join, so a category shows up once for every
        primary categorization that points at it.
        """
        return select(cls).join(cls.categorizations).where(Categorization.primaries().whereclause)
