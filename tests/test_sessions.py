import pytest

from manifest_mastery.errors import SessionNotFoundError
from manifest_mastery.sessions import SessionStore, generate_session_id


def test_create_and_get():
    store = SessionStore()
    session_id, wizard = store.create()

    assert store.get(session_id) is wizard
    assert len(store) == 1


def test_sessions_are_independent():
    store = SessionStore()
    first_id, first = store.create()
    _, second = store.create()

    first.select_goal("Get a promotion")

    assert second.selected_goals == []
    assert store.get(first_id).selected_goals == ["Get a promotion"]


def test_options_apply_to_new_sessions():
    store = SessionStore(sequence="compact", max_goals=2, auto_generate=False)
    _, wizard = store.create()

    assert wizard.max_goals == 2
    assert wizard.auto_generate is False
    assert "overview" not in [s.step_id.value for s in wizard.steps]


def test_delete():
    store = SessionStore()
    session_id, _ = store.create()

    store.delete(session_id)

    with pytest.raises(SessionNotFoundError):
        store.get(session_id)
    with pytest.raises(SessionNotFoundError):
        store.delete(session_id)


def test_session_id_format():
    session_id = generate_session_id()
    assert len(session_id) == 32
    assert session_id.isalnum()


def test_store_evicts_oldest_when_full():
    store = SessionStore(max_sessions=2)
    first_id, _ = store.create()
    second_id, _ = store.create()

    third_id, _ = store.create()

    assert len(store) == 2
    with pytest.raises(SessionNotFoundError):
        store.get(first_id)
    assert store.get(second_id) is not None
    assert store.get(third_id) is not None


def test_store_stays_capped():
    store = SessionStore(max_sessions=3)
    for _ in range(10):
        store.create()
    assert len(store) == 3


def test_invalid_session_limit():
    with pytest.raises(ValueError):
        SessionStore(max_sessions=0)
