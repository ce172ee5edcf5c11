from concurrent.futures import ThreadPoolExecutor

import pytest

from services.errors import BackendUnavailable
from services.question_browser import EMPTY, ERROR, LOADING, READY, QuestionBrowser


@pytest.fixture
def browser(catalog, preferences):
    b = QuestionBrowser(catalog, preferences, user_id=1, executor=ThreadPoolExecutor(max_workers=1))
    yield b
    b.close()


def test_initial_state_is_loading(browser):
    assert browser.display_state() == LOADING


def test_refresh_loads_all_questions(browser):
    assert browser.refresh() is True
    view = browser.view()
    assert browser.display_state() == READY
    assert (view.total_filtered, view.total_pages, len(view.items)) == (12, 3, 5)


def test_refresh_merges_saved_preferences(browser, preferences):
    preferences.upsert({"userId": 1, "questionId": 4, "isFavorite": True})
    browser.refresh()
    browser.toggle_favorites_only()
    assert [q.id for q in browser.view().items] == [4]


def test_filter_change_resets_page(browser):
    browser.refresh()
    browser.set_page(3)
    assert browser.view().page == 3
    browser.set_search("question")
    assert browser.criteria.page == 1


def test_out_of_range_page_is_clamped(browser):
    browser.refresh()
    browser.set_difficulty("easy")
    browser.set_page(2)
    view = browser.view()
    assert view.page == 1
    assert browser.criteria.page == 1
    assert len(view.items) == 5


def test_no_matches_is_distinct_from_error(browser):
    browser.refresh()
    browser.set_search("zzz-not-here")
    assert browser.display_state() == EMPTY
    browser.reset_filters()
    assert browser.display_state() == READY


def test_failed_fetch_reports_error_and_retry_recovers(catalog, preferences, monkeypatch):
    browser = QuestionBrowser(catalog, preferences, user_id=1)
    real_get_all = catalog.get_all

    def broken():
        raise BackendUnavailable("down")

    monkeypatch.setattr(catalog, "get_all", broken)
    assert browser.refresh() is False
    assert browser.display_state() == ERROR
    assert browser.last_error

    monkeypatch.setattr(catalog, "get_all", real_get_all)
    assert browser.refresh() is True
    assert browser.display_state() == READY
    browser.close()


def test_stale_fetch_is_discarded(browser, catalog):
    old = browser.begin_fetch()
    new = browser.begin_fetch()
    questions = catalog.get_all()

    assert browser.complete_fetch(new, questions[:2], []) is True
    assert browser.complete_fetch(old, questions, []) is False
    assert browser.view().total_filtered == 2
    assert browser.fail_fetch(old, "late failure") is False
    assert browser.display_state() == READY


def test_toggle_favorite_updates_view_and_persists(browser, preferences):
    browser.refresh()
    browser.toggle_favorite(7)
    assert next(q for q in browser.items if q.id == 7).favorite is True

    browser.wait_for_saves(timeout=5)
    assert preferences.lookup_for_user(1)[7].is_favorite is True

    browser.toggle_favorite(7)
    browser.wait_for_saves(timeout=5)
    assert next(q for q in browser.items if q.id == 7).favorite is False
    assert preferences.lookup_for_user(1)[7].is_favorite is False


def test_toggle_completed_keeps_favorite(browser, preferences):
    browser.refresh()
    browser.toggle_favorite(3)
    browser.toggle_completed(3)
    browser.wait_for_saves(timeout=5)
    pref = preferences.lookup_for_user(1)[3]
    assert pref.is_favorite and pref.is_completed


def test_expanded_is_not_persisted_and_survives_refresh(browser, preferences):
    browser.refresh()
    browser.toggle_expanded(2)
    assert preferences.get_for_user(1) == []
    browser.refresh()
    assert next(q for q in browser.items if q.id == 2).expanded is True


def test_toggle_unknown_question_is_noop(browser):
    browser.refresh()
    before = list(browser.items)
    assert browser.toggle_favorite(999) is None
    assert browser.items == before


def test_finished_saves_are_not_retained(browser):
    browser.refresh()
    for _ in range(4):
        browser.toggle_favorite(2).result(timeout=5)
    latest = browser.toggle_completed(2)
    latest.result(timeout=5)

    assert browser._pending == [latest]
