"""Queries over the categorization join table."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from shelfcat.models import Book, Categorization, Category


async def primary_categories(session: AsyncSession) -> list[Category]:
    """Every category with a primary categorization, one entry per join row."""
    result = await session.execute(Category.primaries().order_by(Categorization.id))
    return list(result.scalars().all())


async def count_primary_categories(session: AsyncSession) -> int:
    stmt = select(func.count()).select_from(Category.primaries().subquery())
    return (await session.execute(stmt)).scalar_one()


async def primary_categorizations(session: AsyncSession) -> list[Categorization]:
    result = await session.execute(Categorization.primaries().order_by(Categorization.id))
    return list(result.scalars().all())


async def categories_for_book(session: AsyncSession, book_id: int) -> list[Category]:
    stmt = (
        select(Category)
        .join(Category.categorizations)
        .where(Categorization.book_id == book_id)
        .order_by(Categorization.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def books_for_category(session: AsyncSession, category_id: int) -> list[Book]:
    stmt = (
        select(Book)
        .join(Book.categorizations)
        .where(Categorization.category_id == category_id)
        .order_by(Categorization.id)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())
