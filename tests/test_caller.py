"""Tests for caller.py: CallerToken."""

from __future__ import annotations

import gc
import weakref

from diagcore.caller import CallerToken


class _Operator:
    """Stand-in for a component that raises errors."""


class TestCallerToken:
    """Tests for CallerToken identity and ownership."""

    def test_matches_origin(self) -> None:
        """A token matches the object it was created from."""
        op = _Operator()

        assert CallerToken.of(op).matches(op)

    def test_does_not_match_other_live_object(self) -> None:
        """A token does not match a distinct live object."""
        op, other = _Operator(), _Operator()

        assert not CallerToken.of(op).matches(other)

    def test_equal_tokens_for_same_object(self) -> None:
        """Tokens compare by value."""
        op = _Operator()

        assert CallerToken.of(op) == CallerToken.of(op)

    def test_does_not_keep_object_alive(self) -> None:
        """Holding a token does not extend the tagged object's lifetime."""
        op = _Operator()
        ref = weakref.ref(op)
        token = CallerToken.of(op)

        del op
        gc.collect()

        assert ref() is None
        assert token.type_name == "_Operator"

    def test_str_shows_type(self) -> None:
        """str() shows the type name and id."""
        op = _Operator()
        token = CallerToken.of(op)

        assert str(token) == f"<_Operator at {id(op):#x}>"
