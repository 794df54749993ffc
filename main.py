import logging
import sys
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich import box
import typer

from config import settings
from library_desk.book import Reader
from library_desk.catalog import Catalog
from library_desk.ledger import Ledger
from library_desk.librarian import Librarian
from library_desk.seed import build_desk, demo_reader, run_demo
from utils.ui_helpers import (
    set_output_mode,
    print_books_result,
    print_issued_result,
    print_loan_result,
)

APP_NAME = settings.app_name

console = Console()
logger = logging.getLogger(__name__)


def configure_logging() -> int:
    """Set up the root handler and the app's log level from settings."""
    level = getattr(logging, settings.effective_log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once a handler exists, so set the package level directly
    logging.getLogger("library_desk").setLevel(level)
    return level


# Session-wide desk: one catalog, ledger and librarian per process
class DeskManager:
    _desk: Optional[Tuple[Catalog, Ledger, Librarian]] = None
    _reader: Optional[Reader] = None

    @classmethod
    def get_instance(cls) -> Tuple[Catalog, Ledger, Librarian]:
        """Return the session desk, seeding it on first use."""
        if cls._desk is None:
            cls._desk = build_desk()
            logger.debug(f"Desk seeded with {len(cls._desk[0])} books")
        return cls._desk

    @classmethod
    def get_reader(cls) -> Reader:
        if cls._reader is None:
            cls._reader = demo_reader()
        return cls._reader

    @classmethod
    def reset(cls) -> None:
        """Drop the session desk so the next call starts from the seed data."""
        cls._desk = None
        cls._reader = None


# --- Typer CLI Application ---
app = typer.Typer(help=APP_NAME)

@app.callback()
def _global_options(
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Формат вывода: plain | json | rich (по умолчанию: plain)",
    )
):
    """Общие параметры CLI (например, формат вывода)."""
    configure_logging()
    if output:
        set_output_mode(output)

@app.command("demo")
def cli_demo():
    """Выдать две книги, показать выданные, вернуть одну и показать снова."""
    _, _, librarian = build_desk()
    run_demo(
        librarian,
        demo_reader(),
        on_result=print_loan_result,
        show_issued=print_issued_result,
    )

@app.command("list")
def cli_list():
    """Показать все книги каталога."""
    catalog, _, _ = DeskManager.get_instance()
    print_books_result(catalog.get_all_books(), title="Каталог")

@app.command("search")
def cli_search(
    query: str = typer.Argument(..., help="Поисковый запрос"),
    author: bool = typer.Option(False, "--author", "-a", help="Искать по автору, а не по названию"),
):
    """Найти книги по части названия или автора."""
    catalog, _, _ = DeskManager.get_instance()
    books = catalog.search_by_author(query) if author else catalog.search_by_title(query)
    print_books_result(books, title=f"Результаты поиска: '{query}'")

@app.command("genre")
def cli_genre(genre: str = typer.Argument(..., help="Жанр")):
    """Показать книги указанного жанра."""
    catalog, _, _ = DeskManager.get_instance()
    print_books_result(catalog.filter_by_genre(genre), title=f"Жанр: {genre}")

@app.command("issue")
def cli_issue(titles: List[str] = typer.Argument(..., help="Названия книг")):
    """Выдать книги демонстрационному читателю и показать выданные."""
    _, ledger, librarian = build_desk()
    reader = demo_reader()
    for title in titles:
        print_loan_result(librarian.issue_book(title, reader))
    print_issued_result(ledger.list_issued())


# Interactive menu helpers (always rich output)
def list_all_books():
    catalog, _, _ = DeskManager.get_instance()
    books = catalog.get_all_books()
    print_books_result(books, title="Каталог", mode="rich")
    console.print(f"[dim]📊 Всего книг: {len(books)}[/]")

def search():
    """Поиск книг по названию или автору."""
    catalog, _, _ = DeskManager.get_instance()
    query: str = Prompt.ask("Введите поисковый запрос").strip()
    books = catalog.search_by_title(query) or catalog.search_by_author(query)
    print_books_result(books, title=f"Результаты поиска: '{query}'", mode="rich")

def issue():
    _, _, librarian = DeskManager.get_instance()
    title: str = Prompt.ask("Название книги для выдачи").strip()
    print_loan_result(librarian.issue_book(title, DeskManager.get_reader()), mode="rich")

def give_back():
    _, _, librarian = DeskManager.get_instance()
    title: str = Prompt.ask("Название возвращаемой книги").strip()
    print_loan_result(librarian.return_book(title, DeskManager.get_reader()), mode="rich")

def show_issued():
    _, ledger, _ = DeskManager.get_instance()
    print_issued_result(ledger.list_issued(), mode="rich")

def run_menu():
    """Простое интерактивное меню библиотекаря."""
    configure_logging()

    def render_menu() -> None:
        menu_items = [
            ("1", "Показать каталог", "📚"),
            ("2", "Найти книгу", "🔎"),
            ("3", "Выдать книгу", "➕"),
            ("4", "Принять книгу", "↩️"),
            ("5", "Показать выданные книги", "📖"),
            ("0", "Выход", "🚪"),
        ]

        table = Table.grid(padding=(0, 2))
        table.add_column(justify="right", style="bold cyan", width=4)
        table.add_column(justify="left", style="white")
        for key, label, icon in menu_items:
            table.add_row(f"[reverse]{key}[/]", f"{icon} {label}")

        panel = Panel(
            table,
            title=f"{APP_NAME} - читатель {DeskManager.get_reader().full_name}",
            border_style="cyan",
            box=box.HEAVY,
            padding=(1, 2),
        )
        console.print(panel)

    actions = {
        "1": list_all_books,
        "2": search,
        "3": issue,
        "4": give_back,
        "5": show_issued,
    }

    while True:
        render_menu()
        choice = Prompt.ask("Выберите пункт меню", choices=["1", "2", "3", "4", "5", "0"], default="1").strip()
        if choice == "0":
            console.print("[green]До свидания![/]")
            break
        actions[choice]()
        print()  # blank line between operations

def run() -> None:
    """Console-script entry point: commands when given, the menu otherwise."""
    if len(sys.argv) > 1:
        app()
    else:
        run_menu()

if __name__ == "__main__":
    run()
