from __future__ import annotations


def _require(value: str | None, field_name: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValueError(f"{field_name} cannot be empty.")
    return cleaned


def _as_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


class Book:
    """A single book held in the catalog."""

    def __init__(self, title: str, author: str, genre: str, isbn: str, available: bool = True) -> None:
        self.title = _require(title, "Title")
        self.author = _require(author, "Author")
        self.genre = _require(genre, "Genre")
        self.isbn = _require(isbn, "ISBN")
        self.available = available

    def __str__(self) -> str:
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def __repr__(self) -> str:  # pragma: no cover
        return f"Book(title={self.title!r}, isbn={self.isbn!r}, available={self.available})"

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "isbn": self.isbn,
            "available": self.available,
        }

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            title=data["title"],
            author=data["author"],
            genre=data["genre"],
            isbn=data["isbn"],
            available=_as_bool(data.get("available", True)),
        )


class Reader:
    """A registered library reader identified by ticket number."""

    def __init__(self, first_name: str, last_name: str, ticket_number: str) -> None:
        self.first_name = _require(first_name, "First name")
        self.last_name = _require(last_name, "Last name")
        self.ticket_number = _require(ticket_number, "Ticket number")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.full_name} (ticket {self.ticket_number})"

    def to_dict(self) -> dict:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "ticket_number": self.ticket_number,
        }
