from typing import Callable, List, Optional, Tuple

from library_desk.book import Book, Reader
from library_desk.catalog import Catalog
from library_desk.ledger import IssueRecord, Ledger
from library_desk.librarian import Librarian, LoanResult

# (title, author, genre, isbn)
DEMO_BOOKS: List[Tuple[str, str, str, str]] = [
    ("Гарри Поттер", "Дж.К. Роулинг", "Фэнтези", "12345"),
    ("Война и мир", "Лев Толстой", "Классика", "54321"),
    ("Мастер и Маргарита", "Михаил Булгаков", "Классика", "67890"),
]

DEMO_READER: Tuple[str, str, str] = ("Ернар", "Алимов", "123")


def demo_reader() -> Reader:
    return Reader(*DEMO_READER)


def build_desk(with_books: bool = True) -> Tuple[Catalog, Ledger, Librarian]:
    """Compose a catalog, an empty ledger and a librarian over them."""
    catalog = Catalog()
    if with_books:
        for title, author, genre, isbn in DEMO_BOOKS:
            catalog.add_book(Book(title, author, genre, isbn))
    ledger = Ledger()
    return catalog, ledger, Librarian(catalog, ledger)


def run_demo(
    librarian: Librarian,
    reader: Reader,
    on_result: Optional[Callable[[LoanResult], None]] = None,
    show_issued: Optional[Callable[[List[IssueRecord]], None]] = None,
) -> List[LoanResult]:
    """Issue two books, show the ledger, return one, show it again.

    ``on_result`` is called after every operation and ``show_issued`` gets a
    snapshot of the ledger at each display step.
    """
    results: List[LoanResult] = []

    def step(result: LoanResult) -> None:
        results.append(result)
        if on_result:
            on_result(result)

    step(librarian.issue_book("Гарри Поттер", reader))
    step(librarian.issue_book("Война и мир", reader))
    if show_issued:
        show_issued(librarian.ledger.list_issued())

    step(librarian.return_book("Гарри Поттер", reader))
    if show_issued:
        show_issued(librarian.ledger.list_issued())
    return results
