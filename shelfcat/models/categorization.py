from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, ForeignKey, Select, false, select
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shelfcat.database import Base


class Categorization(Base):
    __tablename__ = "categorizations"

    id: Mapped[int] = mapped_column(primary_key=True)
    book_id: Mapped[int | None] = mapped_column(ForeignKey("books.id"), index=True)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"), index=True)
    primary: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    created_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=lambda: datetime.now(UTC), onupdate=lambda: datetime.now(UTC))

    book: Mapped["Book"] = relationship(back_populates="categorizations")
    category: Mapped["Category"] = relationship(back_populates="categorizations")

    @classmethod
    def primaries(cls) -> Select:
        """Categorizations flagged as the primary one for their book."""
        return select(cls).where(cls.primary.is_(True))
