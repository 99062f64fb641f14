import threading

from leptographic.hooks.id_generator import (
    FormIds,
    IdGenerator,
    RelatedIds,
    use_custom_id_pattern,
    use_form_ids,
    use_id,
    use_id_with_prefix,
    use_related_ids,
    use_stable_id,
)


def _number(identifier: str, prefix: str) -> int:
    assert identifier.startswith(prefix + "-")
    return int(identifier[len(prefix) + 1 :].split("-")[0])


def test_generator_counts_up_from_start():
    gen = IdGenerator(start=5)
    assert [gen.next_id() for _ in range(3)] == [5, 6, 7]


def test_generator_is_unique_across_threads():
    gen = IdGenerator()
    results = []
    lock = threading.Lock()

    def work():
        local = [gen.next_id() for _ in range(200)]
        with lock:
            results.extend(local)

    threads = [threading.Thread(target=work) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert sorted(results) == list(range(800))
    assert gen.next_id() == 800


def test_use_id_is_unique_and_increasing():
    first = use_id()
    second = use_id()
    assert first != second
    assert _number(second, "leptos-radix") > _number(first, "leptos-radix")


def test_use_id_with_prefix():
    first = use_id_with_prefix("dialog")
    second = use_id_with_prefix("button")
    assert _number(second, "button") > _number(first, "dialog")


def test_related_ids_share_base():
    ids = use_related_ids("tooltip")
    assert isinstance(ids, RelatedIds)
    assert ids.trigger_id == ids.base_id + "-trigger"
    assert ids.content_id == ids.base_id + "-content"
    assert ids.label_id == ids.base_id + "-label"
    assert ids.description_id == ids.base_id + "-description"
    _number(ids.base_id, "tooltip")


def test_form_ids_share_base():
    ids = use_form_ids("username")
    assert isinstance(ids, FormIds)
    n = _number(ids.input_id, "username")
    assert ids.input_id == f"username-{n}-input"
    assert ids.label_id == f"username-{n}-label"
    assert ids.description_id == f"username-{n}-description"
    assert ids.error_id == f"username-{n}-error"


def test_custom_id_pattern():
    ids = use_custom_id_pattern("modal", ["header", "body", "footer"])
    n = _number(ids[0], "modal")
    assert ids == [f"modal-{n}-header", f"modal-{n}-body", f"modal-{n}-footer"]


def test_custom_id_pattern_empty():
    assert use_custom_id_pattern("modal", []) == []


def test_stable_id_is_deterministic():
    assert use_stable_id("my-unique-key") == use_stable_id("my-unique-key")
    assert use_stable_id("a") != use_stable_id("b")


def test_stable_id_values():
    assert use_stable_id("") == "leptos-radix-stable-0"
    assert use_stable_id("a") == "leptos-radix-stable-97"


def test_stable_id_fits_in_32_bits():
    value = int(use_stable_id("x" * 100).rsplit("-", 1)[1])
    assert 0 <= value < 2**32