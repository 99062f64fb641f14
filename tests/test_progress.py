import math

import pytest

from leptographic.components.progress import (
    DEFAULT_MAX,
    Progress,
    ProgressContext,
    ProgressIndicator,
)


def test_progress_renders_progressbar_role():
    root = Progress(ProgressIndicator(), value=50.0).render()
    assert root.tag == "div"
    assert root.attrs["role"] == "progressbar"
    assert root.attrs["aria-valuemin"] == "0"


def test_indicator_renders_inside_progress_with_parent_context():
    root = Progress(ProgressIndicator(), value=100.0, max=100.0).render()
    (indicator,) = root.children
    assert indicator.attrs["data-state"] == "complete"
    assert indicator.attrs["style"] == "transform: translateX(-0%)"


def test_default_max_is_100():
    progress = Progress(value=50.0)
    assert progress.max_value == DEFAULT_MAX
    assert 'aria-valuemax="100"' in progress.render().render()


@pytest.mark.parametrize("bad_max", [0.0, -5.0, math.nan])
def test_invalid_max_falls_back_to_default(bad_max):
    assert Progress(value=10.0, max=bad_max).max_value == DEFAULT_MAX


def test_valid_custom_max_is_kept():
    progress = Progress(value=10.0, max=20.0)
    assert progress.max_value == 20.0
    assert progress.render().attrs["data-max"] == 20.0


@pytest.mark.parametrize("value", [150.0, -1.0, math.nan, None])
def test_value_outside_range_is_indeterminate(value):
    root = Progress(value=value).render()
    assert root.attrs["data-state"] == "indeterminate"
    assert root.attrs["aria-valuenow"] is None
    assert "aria-valuenow" not in root.render()


def test_loading_state_below_max():
    root = Progress(value=25.0).render()
    assert root.attrs["data-state"] == "loading"
    assert 'aria-valuenow="25"' in root.render()


def test_complete_state_at_max():
    assert Progress(value=100.0).render().attrs["data-state"] == "complete"


def test_custom_class_is_appended():
    root = Progress(class_="w-48").render()
    assert root.attrs["class"].endswith(" w-48")
    assert root.attrs["class"].startswith("relative overflow-hidden")


def test_indicator_translation_follows_percentage():
    indicator = ProgressIndicator().render(ProgressContext(25.0, 100.0))
    assert indicator.attrs["style"] == "transform: translateX(-75%)"
    assert indicator.attrs["data-value"] == 25.0
    assert indicator.attrs["data-state"] == "loading"


def test_indicator_without_context_falls_back():
    indicator = ProgressIndicator().render(None)
    assert indicator.attrs["style"] == "transform: translateX(-100%)"
    assert indicator.attrs["data-state"] == "indeterminate"
    assert indicator.attrs["data-value"] is None


def test_indicator_class_is_appended():
    indicator = ProgressIndicator(class_="extra").render(None)
    assert indicator.attrs["class"].endswith(" extra")


def test_callable_child_receives_context():
    seen = []
    Progress(lambda ctx: seen.append(ctx), value=40.0, max=80.0).render()
    assert seen == [ProgressContext(40.0, 80.0)]