from shelfcat.models.book import Book
from shelfcat.models.categorization import Categorization
from shelfcat.models.category import Category

__all__ = ["Book", "Categorization", "Category"]
