"""
Tests for primary body selection.
"""

from skeleton_engine.common.enums import JointType
from skeleton_engine.common.models import Body
from skeleton_engine.processing.body_selector import default_body


def _at_spine_base(body_factory, x, y, z, is_tracked=True):
    return body_factory({JointType.SPINE_BASE: (x, y, z)}, is_tracked=is_tracked)


class TestDefaultBody:
    """Tests for picking the body in front of the sensor."""

    def test_empty_input_returns_none(self):
        assert default_body([]) is None

    def test_no_tracked_body_returns_none(self):
        assert default_body([Body.untracked() for _ in range(6)]) is None

    def test_picks_closest_spine_base(self, body_factory):
        far = _at_spine_base(body_factory, 0.5, 0.0, 3.5)
        near = _at_spine_base(body_factory, 0.2, 0.0, 1.8)
        middle = _at_spine_base(body_factory, -0.4, 0.0, 2.5)

        assert default_body([far, near, middle]) is near

    def test_ignores_untracked_even_when_closer(self, body_factory):
        stale = _at_spine_base(body_factory, 0.0, 0.0, 0.5, is_tracked=False)
        tracked = _at_spine_base(body_factory, 0.0, 0.0, 2.0)

        assert default_body([stale, tracked]) is tracked

    def test_tie_keeps_first(self, body_factory):
        first = _at_spine_base(body_factory, 1.0, 0.0, 2.0)
        second = _at_spine_base(body_factory, -1.0, 0.0, 2.0)

        assert default_body([first, second]) is first
        assert default_body([second, first]) is second

    def test_accepts_any_iterable(self, body_factory):
        body = _at_spine_base(body_factory, 0.0, 0.0, 2.0)

        assert default_body(b for b in [Body.untracked(), body]) is body
