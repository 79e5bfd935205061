"""Tests for the function list view-model"""

from unittest.mock import Mock

import pytest

from lambdalog.errors import FetchError
from lambdalog.models.account import AccountContext
from lambdalog.models.cached_list import CachedListSource, Page
from lambdalog.viewmodels.functions import FunctionListViewModel

CONTEXT = AccountContext("dev", "us-east-1")


@pytest.fixture(name="cache")
def cache_fixture() -> Mock:
    """Create a cache holding two function names"""
    cache = Mock()
    cache.read.return_value = ["orders-api", "payments-api"]
    return cache


def _viewmodel(fetch_page: Mock, cache: Mock) -> FunctionListViewModel:
    source = CachedListSource[str](
        "functions", Mock(return_value=fetch_page), cache=cache, sort_key=lambda x: x
    )
    return FunctionListViewModel(CONTEXT, source)


def test_load_shows_cached_functions_then_refreshed(cache: Mock) -> None:
    """Test that a background refresh replaces the list on sync"""
    # Arrange
    fetch_page = Mock(return_value=Page(["payments-api", "billing-api"]))
    viewmodel = _viewmodel(fetch_page, cache)

    # Act
    viewmodel.load()
    cached = viewmodel.selection.items
    viewmodel.selection.next()
    viewmodel._source.task.wait(timeout=5)  # pylint: disable=protected-access
    changed = viewmodel.sync()

    # Assert
    assert cached == ["orders-api", "payments-api"]
    assert changed
    assert viewmodel.selection.items == ["billing-api", "payments-api"]
    assert viewmodel.selected_function == "payments-api"
    assert not viewmodel.refreshing
    assert viewmodel.status_text() == "Row 2/2"


def test_status_while_refreshing(cache: Mock) -> None:
    """Test that the status shows a running refresh"""
    # Arrange
    viewmodel = _viewmodel(Mock(return_value=Page([])), cache)
    source = Mock()
    source.load.return_value = (["orders-api"], Mock())
    source.refreshing = True
    viewmodel._source = source  # pylint: disable=protected-access

    # Act
    viewmodel.load()

    # Assert
    assert viewmodel.status_text() == "Row 1/1 | Refreshing..."


def test_status_after_failed_refresh(cache: Mock) -> None:
    """Test that a failed refresh keeps the cached list and says so"""
    # Arrange
    viewmodel = _viewmodel(Mock(side_effect=FetchError("functions", "throttled")), cache)

    # Act
    viewmodel.load()
    viewmodel._source.task.wait(timeout=5)  # pylint: disable=protected-access
    changed = viewmodel.sync()

    # Assert
    assert changed
    assert viewmodel.refresh_failed
    assert viewmodel.selection.items == ["orders-api", "payments-api"]
    assert viewmodel.status_text() == "Row 1/2 | Refresh failed, showing cached list"


def test_load_without_cache_raises_fetch_error() -> None:
    """Test that a failed listing without cached names raises"""
    # Arrange
    cache = Mock()
    cache.read.return_value = None
    viewmodel = _viewmodel(Mock(side_effect=FetchError("functions", "denied")), cache)

    # Act and Assert
    with pytest.raises(FetchError):
        viewmodel.load()
    assert viewmodel.selected_function is None
    assert viewmodel.status_text() == "No functions"
