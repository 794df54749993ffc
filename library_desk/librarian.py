import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from library_desk.book import Book, Reader
from library_desk.catalog import Catalog
from library_desk.ledger import IssueRecord, Ledger

logger = logging.getLogger(__name__)


class LoanStatus(Enum):
    """Outcome of an issue or return request"""
    ISSUED = "ISSUED"
    RETURNED = "RETURNED"
    UNAVAILABLE = "UNAVAILABLE"
    NOT_FOUND = "NOT_FOUND"
    NOT_ISSUED = "NOT_ISSUED"


@dataclass
class LoanResult:
    """Result of a single librarian operation"""
    status: LoanStatus
    title: str
    reader: Reader
    book: Optional[Book] = None
    record: Optional[IssueRecord] = None

    @property
    def ok(self) -> bool:
        return self.status in (LoanStatus.ISSUED, LoanStatus.RETURNED)

    @property
    def message(self) -> str:
        name = self.reader.full_name
        title = self.book.title if self.book else self.title
        if self.status is LoanStatus.ISSUED:
            return f"Книга '{title}' выдана читателю {name}."
        if self.status is LoanStatus.RETURNED:
            return f"Книга '{title}' возвращена читателем {name}."
        if self.status is LoanStatus.UNAVAILABLE:
            return f"Книга '{title}' недоступна."
        if self.status is LoanStatus.NOT_ISSUED:
            return f"Книга '{title}' не числится за читателем {name}."
        return f"Книга '{title}' не найдена."

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "title": self.title,
            "reader": self.reader.to_dict(),
            "book": self.book.to_dict() if self.book else None,
            "issued_at": self.record.issued_at.isoformat() if self.record else None,
            "message": self.message,
        }


class Librarian:
    """Applies the issue/return rules between a catalog and a ledger.

    The librarian holds no state of its own. A book can only be issued while
    it is available, and only returned while it is issued to that reader.
    """

    def __init__(self, catalog: Catalog, ledger: Ledger) -> None:
        self.catalog = catalog
        self.ledger = ledger

    def issue_book(self, title: str, reader: Reader) -> LoanResult:
        """Issue the first available book whose title contains ``title``."""
        matches = self.catalog.search_by_title(title)
        if not matches:
            logger.info(f"Issue refused: no book matches '{title}'")
            return LoanResult(LoanStatus.NOT_FOUND, title, reader)

        book = next((b for b in matches if b.available), None)
        if book is None:
            logger.info(f"Issue refused: every copy of '{title}' is out")
            return LoanResult(LoanStatus.UNAVAILABLE, title, reader)

        book.available = False
        record = self.ledger.record_issued(book, reader)
        return LoanResult(LoanStatus.ISSUED, title, reader, book=book, record=record)

    def return_book(self, title: str, reader: Reader) -> LoanResult:
        """Take back the book with exactly this title from ``reader``."""
        candidates = self.catalog.list_by_title(title)
        if not candidates:
            logger.info(f"Return refused: no book titled '{title}'")
            return LoanResult(LoanStatus.NOT_FOUND, title, reader)

        # Issued means flagged unavailable and recorded for this reader
        book = next(
            (b for b in candidates if not b.available and self.ledger.find_record(b, reader) is not None),
            None,
        )
        if book is None:
            logger.info(f"Return refused: '{title}' is not issued to {reader.ticket_number}")
            return LoanResult(LoanStatus.NOT_ISSUED, title, reader, book=candidates[0])

        record = self.ledger.record_returned(book, reader)
        # Same-title copies sharing an ISBN are interchangeable; free the one on the record
        record.book.available = True
        return LoanResult(LoanStatus.RETURNED, title, reader, book=record.book, record=record)
