import pytest

from aoc_search.utils import observer


def test_empty_history():
    observer.clear_history()
    assert observer.average_search_time() is None
    assert observer.last_search_time() is None


def test_average_and_last():
    observer.clear_history()
    observer.record_search(0.1)
    observer.record_search(0.3)
    assert observer.average_search_time() == pytest.approx(0.2)
    assert observer.last_search_time() == 0.3


def test_history_is_bounded():
    observer.clear_history()
    for _ in range(observer._HISTORY_LEN + 5):
        observer.record_search(0.01)
    assert len(observer._search_durations) == observer._HISTORY_LEN
