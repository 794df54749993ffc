import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from library_desk.book import Book, Reader

logger = logging.getLogger(__name__)


@dataclass
class IssueRecord:
    """One book currently out with one reader."""
    book: Book
    reader: Reader
    issued_at: datetime = field(default_factory=datetime.now)

    def matches(self, book: Book, reader: Reader) -> bool:
        # Keyed by identifiers, not object identity
        return (
            self.book.isbn == book.isbn
            and self.book.title.casefold() == book.title.casefold()
            and self.reader.ticket_number == reader.ticket_number
        )

    def to_dict(self) -> dict:
        return {
            "book": self.book.to_dict(),
            "reader": self.reader.to_dict(),
            "issued_at": self.issued_at.isoformat(),
        }


class Ledger:
    """Keeps the list of currently issued books."""

    def __init__(self) -> None:
        self._records: List[IssueRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def record_issued(self, book: Book, reader: Reader, issued_at: Optional[datetime] = None) -> IssueRecord:
        record = IssueRecord(book=book, reader=reader, issued_at=issued_at or datetime.now())
        self._records.append(record)
        logger.info(f"Book '{book.title}' issued to reader {reader.full_name}")
        return record

    def record_returned(self, book: Book, reader: Reader) -> Optional[IssueRecord]:
        """Remove the first record for this book/reader pair.

        Returns the removed record, or None when nothing matched. A missing
        record is not an error.
        """
        record = self.find_record(book, reader)
        if record is None:
            logger.debug(f"No issue record for '{book.title}' and reader {reader.ticket_number}")
            return None
        self._records = [r for r in self._records if r is not record]
        logger.info(f"Book '{book.title}' returned by reader {reader.full_name}")
        return record

    def find_record(self, book: Book, reader: Reader) -> Optional[IssueRecord]:
        """First record for this book/reader pair, preferring the same Book object."""
        matches = [r for r in self._records if r.matches(book, reader)]
        for record in matches:
            if record.book is book:
                return record
        return matches[0] if matches else None

    def list_issued(self) -> List[IssueRecord]:
        return list(self._records)
