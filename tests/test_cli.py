import json

from typer.testing import CliRunner
from unittest.mock import patch

from main import app, DeskManager

runner = CliRunner()


def test_demo_plain_output():
    result = runner.invoke(app, ["demo"])
    assert result.exit_code == 0
    out = result.stdout
    assert "Книга 'Гарри Поттер' выдана читателю Ернар Алимов." in out
    assert "Книга 'Война и мир' выдана читателю Ернар Алимов." in out
    assert "Книга 'Гарри Поттер' возвращена читателем Ернар Алимов." in out
    assert out.count("Выданные книги:") == 2
    assert out.count("- Гарри Поттер, читатель: Ернар Алимов, дата:") == 1
    assert out.count("- Война и мир, читатель: Ернар Алимов, дата:") == 2

def test_demo_output_order():
    out = runner.invoke(app, ["demo"]).stdout
    first_display = out.index("Выданные книги:")
    assert out.index("выдана читателю") < first_display
    assert out.index("возвращена читателем") > first_display

def test_demo_json_output():
    result = runner.invoke(app, ["--output", "json", "demo"])
    assert result.exit_code == 0
    lines = [json.loads(line) for line in result.stdout.splitlines() if line.strip()]
    statuses = [item["status"] for item in lines if isinstance(item, dict)]
    assert statuses == ["ISSUED", "ISSUED", "RETURNED"]
    snapshots = [item for item in lines if isinstance(item, list)]
    assert [len(s) for s in snapshots] == [2, 1]
    assert snapshots[1][0]["book"]["title"] == "Война и мир"

def test_list_books():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "12345 - Гарри Поттер, Дж.К. Роулинг [Фэнтези] (доступна)" in result.stdout
    assert "67890 - Мастер и Маргарита, Михаил Булгаков [Классика] (доступна)" in result.stdout

def test_list_shows_issued_status():
    _, _, librarian = DeskManager.get_instance()
    librarian.issue_book("Война и мир", DeskManager.get_reader())

    result = runner.invoke(app, ["list"])
    assert "54321 - Война и мир, Лев Толстой [Классика] (выдана)" in result.stdout

def test_search_by_title():
    result = runner.invoke(app, ["search", "мастер"])
    assert result.exit_code == 0
    assert "Мастер и Маргарита" in result.stdout
    assert "Гарри Поттер" not in result.stdout

def test_search_by_author():
    result = runner.invoke(app, ["search", "роулинг", "--author"])
    assert result.exit_code == 0
    assert "Гарри Поттер" in result.stdout
    assert "Война и мир" not in result.stdout

def test_search_no_match():
    result = runner.invoke(app, ["search", "Анна Каренина"])
    assert result.exit_code == 0
    assert "Книги не найдены." in result.stdout

def test_genre_filter_json():
    result = runner.invoke(app, ["-o", "json", "genre", "КЛАССИКА"])
    assert result.exit_code == 0
    books = json.loads(result.stdout)
    assert [b["isbn"] for b in books] == ["54321", "67890"]

def test_issue_command_reports_unavailable():
    result = runner.invoke(app, ["issue", "Война и мир", "Война и мир", "Анна Каренина"])
    assert result.exit_code == 0
    assert "Книга 'Война и мир' выдана читателю Ернар Алимов." in result.stdout
    assert "Книга 'Война и мир' недоступна." in result.stdout
    assert "Книга 'Анна Каренина' не найдена." in result.stdout
    assert result.stdout.count("- Война и мир, читатель:") == 1

def test_rich_output_mode():
    result = runner.invoke(app, ["--output", "rich", "list"])
    assert result.exit_code == 0
    assert "12345" in result.stdout
    assert "12345 - Гарри Поттер" not in result.stdout

def test_invalid_output_mode_falls_back_to_plain():
    result = runner.invoke(app, ["--output", "xml", "list"])
    assert result.exit_code == 0
    assert "12345 - Гарри Поттер" in result.stdout

@patch("main.Prompt.ask")
def test_menu_issue_and_return(mock_ask, capsys):
    from main import run_menu

    mock_ask.side_effect = ["3", "Гарри Поттер", "4", "Гарри Поттер", "0"]
    run_menu()

    _, ledger, _ = DeskManager.get_instance()
    assert len(ledger) == 0
    out = capsys.readouterr().out
    assert "выдана читателю" in out
    assert "возвращена читателем" in out
    assert "До свидания!" in out

@patch("main.Prompt.ask")
def test_menu_keeps_session_state(mock_ask):
    from main import run_menu

    mock_ask.side_effect = ["3", "Война и мир", "0"]
    run_menu()

    catalog, ledger, _ = DeskManager.get_instance()
    assert catalog.find_by_title("Война и мир").available is False
    assert [r.book.title for r in ledger.list_issued()] == ["Война и мир"]

@patch("main.Prompt.ask")
def test_menu_catalog_and_issued_tables(mock_ask, capsys):
    from main import run_menu

    mock_ask.side_effect = ["5", "3", "Мастер", "1", "5", "0"]
    run_menu()

    out = capsys.readouterr().out
    assert "Выданных книг нет." in out
    assert "Каталог" in out
    assert "Всего книг: 3" in out
    assert "Выданные книги" in out
    # rich tables, not the plain line format
    assert "67890 - Мастер и Маргарита" not in out
