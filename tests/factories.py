"""Builders for test data.

Traits are plain async functions that take a saved Book, attach one more
categorization to it and hand the book back, so they can be passed to
create_book in any combination.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from shelfcat.models import Book, Categorization, Category

DEFAULT_BOOK_NAME = "Thing Explainer: Complicated Stuff in Simple Words"
SCIENCE_CATEGORY_NAME = "Science & Scientists"
FUN_FACTS_CATEGORY_NAME = "Trivia & Fun Facts"


async def _create_category(session: AsyncSession, name: str) -> Category:
    category = Category(name=name)
    session.add(category)
    await session.commit()
    return category


async def create_science_category(session: AsyncSession) -> Category:
    return await _create_category(session, SCIENCE_CATEGORY_NAME)


async def create_fun_facts_category(session: AsyncSession) -> Category:
    return await _create_category(session, FUN_FACTS_CATEGORY_NAME)


async def _categorize(session: AsyncSession, book: Book, category: Category, primary: bool) -> Book:
    session.add(Categorization(book_id=book.id, category_id=category.id, primary=primary))
    await session.commit()
    return book


async def with_primary_category(session: AsyncSession, book: Book) -> Book:
    return await _categorize(session, book, await create_science_category(session), primary=True)


async def with_secondary_category(session: AsyncSession, book: Book) -> Book:
    return await _categorize(session, book, await create_fun_facts_category(session), primary=False)


async def create_book(session: AsyncSession, *traits, name: str = DEFAULT_BOOK_NAME) -> Book:
    book = Book(name=name)
    session.add(book)
    await session.commit()
    for trait in traits:
        book = await trait(session, book)
    return book
