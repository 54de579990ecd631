import logging

import pytest

from bookkeeping import logging_setup
from bookkeeping.config import get_settings
from bookkeeping.domain import CategoryType
from bookkeeping.factory import FinanceFactory


@pytest.fixture(autouse=True)
def _reset_package_state(monkeypatch):
    """Undo logging configuration and cached settings between tests."""
    monkeypatch.delenv("BOOKKEEPING_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    pkg_logger = logging.getLogger("bookkeeping")
    for h in list(pkg_logger.handlers):
        pkg_logger.removeHandler(h)
    pkg_logger.propagate = True
    pkg_logger.setLevel(logging.NOTSET)
    logging_setup._CONFIGURED = False


@pytest.fixture
def salary():
    return FinanceFactory.create_category("Salary", CategoryType.INCOME)


@pytest.fixture
def food():
    return FinanceFactory.create_category("Food", CategoryType.EXPENSE)


@pytest.fixture
def mortgage():
    return FinanceFactory.create_category("Mortgage", CategoryType.EXPENSE)
