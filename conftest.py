import logging

import pytest

from library_desk.seed import build_desk, demo_reader
from utils.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture(autouse=True)
def clean_session(monkeypatch):
    # Each test starts from the seed data and the default output mode
    from main import DeskManager

    monkeypatch.delenv(OUTPUT_MODE_ENV, raising=False)
    DeskManager.reset()
    yield
    DeskManager.reset()
    logging.getLogger("library_desk").setLevel(logging.NOTSET)


@pytest.fixture
def desk():
    return build_desk()


@pytest.fixture
def catalog(desk):
    return desk[0]


@pytest.fixture
def ledger(desk):
    return desk[1]


@pytest.fixture
def librarian(desk):
    return desk[2]


@pytest.fixture
def reader():
    return demo_reader()
