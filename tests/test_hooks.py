"""
Tests for the in-memory hook registry
"""
import pytest

from optionkit.host.hooks import Hooks


class TestFilters:
    """Tests for filters"""

    def test_no_filters_returns_value(self):
        assert Hooks().apply_filters("foo", 1) == 1

    def test_priority_order(self):
        hooks = Hooks()
        hooks.add_filter("foo", lambda value: value + "b", 20)
        hooks.add_filter("foo", lambda value: value + "a", 5)
        hooks.add_filter("foo", lambda value: value + "c", 20)

        assert hooks.apply_filters("foo", "") == "abc"

    def test_extra_args(self):
        hooks = Hooks()
        hooks.add_filter("foo", lambda value, name, flag: (value, name, flag))

        assert hooks.apply_filters("foo", 1, "bar", True) == (1, "bar", True)

    def test_remove_filter(self):
        hooks = Hooks()

        def callback(value):
            return value * 2

        hooks.add_filter("foo", callback, 3)

        assert hooks.has_filter("foo", callback)
        assert hooks.remove_filter("foo", callback) is False
        assert hooks.remove_filter("foo", callback, 3) is True
        assert not hooks.has_filter("foo")
        assert hooks.apply_filters("foo", 2) == 2

    def test_errors_propagate(self):
        hooks = Hooks()

        def fail(value):
            raise ValueError("bad value")

        hooks.add_filter("foo", fail)

        with pytest.raises(ValueError):
            hooks.apply_filters("foo", 1)


class TestActions:
    """Tests for actions"""

    def test_do_action(self):
        hooks = Hooks()
        calls = []
        hooks.add_action("foo", lambda *args: calls.append(("late", args)), 11)
        hooks.add_action("foo", lambda *args: calls.append(("early", args)))

        hooks.do_action("foo", 1, 2)

        assert calls == [("early", (1, 2)), ("late", (1, 2))]

    def test_remove_action(self):
        hooks = Hooks()

        def callback():
            pass

        hooks.add_action("foo", callback)

        assert hooks.has_action("foo")
        assert hooks.remove_action("foo", callback) is True
        assert not hooks.has_action("foo")

    def test_remove_all(self):
        hooks = Hooks()
        hooks.add_action("foo", print)
        hooks.add_filter("foo", str)
        hooks.add_filter("bar", str)

        hooks.remove_all("foo")
        assert not hooks.has_action("foo")
        assert not hooks.has_filter("foo")
        assert hooks.has_filter("bar")

        hooks.remove_all()
        assert not hooks.has_filter("bar")
