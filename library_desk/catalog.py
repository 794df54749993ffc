from typing import List, Optional

from library_desk.book import Book


class Catalog:
    """Owns the collection of books and answers searches over it."""

    def __init__(self) -> None:
        self.books: List[Book] = []

    def __len__(self) -> int:
        return len(self.books)

    # ------------------------- Core operations ------------------------- #
    def add_book(self, book: Book) -> None:
        """Append a book. Duplicates are allowed (each object is one copy)."""
        self.books.append(book)

    def get_all_books(self) -> List[Book]:
        return list(self.books)

    # ------------------------- Searches ------------------------- #
    def search_by_title(self, query: str) -> List[Book]:
        """Case-insensitive substring match on the title, in insertion order."""
        needle = self._fold(query)
        return [b for b in self.books if needle in self._fold(b.title)]

    def search_by_author(self, query: str) -> List[Book]:
        """Case-insensitive substring match on the author, in insertion order."""
        needle = self._fold(query)
        return [b for b in self.books if needle in self._fold(b.author)]

    def filter_by_genre(self, genre: str) -> List[Book]:
        """Case-insensitive exact match on the genre."""
        wanted = self._fold(genre)
        return [b for b in self.books if self._fold(b.genre) == wanted]

    def list_by_title(self, title: str) -> List[Book]:
        """Every book whose title equals ``title``, ignoring case."""
        wanted = self._fold(title)
        return [b for b in self.books if self._fold(b.title) == wanted]

    def find_by_title(self, title: str) -> Optional[Book]:
        matches = self.list_by_title(title)
        return matches[0] if matches else None

    # ------------------------- Utilities ------------------------- #
    @staticmethod
    def _fold(raw: Optional[str]) -> str:
        if raw is None:
            return ""
        return raw.casefold()
