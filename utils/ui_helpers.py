import os
import json
from typing import List, Any, Optional
from rich.console import Console
from rich.table import Table

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: str) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # Unknown values are ignored; the current mode stays

def get_output_mode() -> str:
    return os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()

def _status_label(book: Any) -> str:
    return "доступна" if book.available else "выдана"

def _format_date(record: Any) -> str:
    return record.issued_at.strftime(settings.datetime_format)

def print_books_result(books: List[Any], title: str = "Книги", mode: Optional[str] = None) -> None:
    """Print books in the current output mode.
    - plain: '<isbn> - <title>, <author> [<genre>] (<status>)' lines, or 'Книги не найдены.'
    - json: JSON array of book dicts
    - rich: Rich table
    """
    mode = mode or get_output_mode()

    if mode == "json":
        print(json.dumps([b.to_dict() for b in books], ensure_ascii=False))
        return

    if not books:
        print("Книги не найдены.")
        return

    if mode == "rich":
        table = Table(title=f"📚 {title}", show_lines=True, header_style="bold cyan")
        table.add_column("ISBN", style="magenta", no_wrap=True)
        table.add_column("Название", style="white")
        table.add_column("Автор", style="white")
        table.add_column("Жанр", style="white")
        table.add_column("Статус", style="white")
        for b in books:
            status = "[green]доступна[/]" if b.available else "[yellow]выдана[/]"
            table.add_row(b.isbn, b.title, b.author, b.genre, status)
        _console.print(table)
    else:
        for b in books:
            print(f"{b.isbn} - {b.title}, {b.author} [{b.genre}] ({_status_label(b)})")

def print_issued_result(records: List[Any], mode: Optional[str] = None) -> None:
    """Print the issued-books snapshot in the current output mode."""
    mode = mode or get_output_mode()

    if mode == "json":
        print(json.dumps([r.to_dict() for r in records], ensure_ascii=False))
        return

    if mode == "rich":
        if not records:
            _console.print("[dim]Выданных книг нет.[/]")
            return
        table = Table(title="📖 Выданные книги", show_lines=True, header_style="bold cyan")
        table.add_column("Книга", style="white")
        table.add_column("Читатель", style="white")
        table.add_column("Билет", style="magenta", no_wrap=True)
        table.add_column("Дата", style="dim")
        for r in records:
            table.add_row(r.book.title, r.reader.full_name, r.reader.ticket_number, _format_date(r))
        _console.print(table)
        return

    print()
    print("Выданные книги:")
    if not records:
        print("Выданных книг нет.")
        return
    for r in records:
        print(f"- {r.book.title}, читатель: {r.reader.full_name}, дата: {_format_date(r)}")

def print_loan_result(result: Any, mode: Optional[str] = None) -> None:
    """Print one issue/return outcome in the current output mode."""
    mode = mode or get_output_mode()

    if mode == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        style = "green" if result.ok else "yellow"
        icon = "✅" if result.ok else "⚠️"
        _console.print(f"[{style}]{icon} {result.message}[/]")
    else:
        print(result.message)
