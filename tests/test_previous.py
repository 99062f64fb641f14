from leptographic.hooks.previous import Previous, PreviousDetailed, PreviousWith


def test_previous_starts_empty():
    assert Previous().previous is None


def test_previous_returns_prior_value():
    tracker = Previous()
    assert tracker.update(0) is None
    assert tracker.previous == 0
    assert tracker.update(5) == 0
    assert tracker.previous == 5


def test_previous_handles_none_values():
    tracker = Previous()
    tracker.update(None)
    assert tracker.update(3) is None
    assert tracker.previous == 3


def test_previous_with_only_advances_when_predicate_holds():
    tracker = PreviousWith(lambda prev, curr: prev["id"] != curr["id"])
    alice = {"id": 1, "name": "Alice"}
    renamed = {"id": 1, "name": "Alicia"}
    bob = {"id": 2, "name": "Bob"}
    assert tracker.update(alice) is None
    assert tracker.update(renamed) is None
    assert tracker.update(bob) == renamed
    assert tracker.previous == renamed


def test_previous_with_first_update_never_sets():
    tracker = PreviousWith(lambda prev, curr: True)
    assert tracker.update("a") is None
    assert tracker.update("b") == "a"
    assert tracker.update("c") == "b"


def test_previous_detailed_first_render():
    tracker = PreviousDetailed()
    assert tracker.is_first_render is True
    assert tracker.update(0) is False
    assert tracker.is_first_render is True
    assert tracker.previous == 0


def test_previous_detailed_tracks_changes():
    tracker = PreviousDetailed()
    tracker.update(1)
    assert tracker.update(1) is False
    assert tracker.is_first_render is False
    assert tracker.update(2) is True
    assert tracker.has_changed is True
    assert tracker.previous == 2