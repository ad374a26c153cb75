"""Opaque correlation tokens for errors.

A CallerToken records which object raised an error without keeping a
reference to it. Catching code compares the token against objects it has on
hand to find out which component the error came from.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CallerToken"]


@dataclass(frozen=True, slots=True)
class CallerToken:
    """Comparison-only reference to the component that raised an error.

    The token stores ``id(obj)`` and the object's type name, never the
    object itself, so it neither extends the object's lifetime nor allows
    dereferencing it.

    Note:
        CPython may reuse an id once the tagged object is collected. A match
        is only meaningful while the original object is still alive.

    Attributes:
        ident: ``id()`` of the tagged object
        type_name: Qualified type name, for display only
    """

    ident: int
    type_name: str

    @classmethod
    def of(cls, obj: object) -> CallerToken:
        """Create a token identifying obj."""
        return cls(id(obj), type(obj).__qualname__)

    def matches(self, obj: object) -> bool:
        """Return True if obj is the object this token was created from."""
        return id(obj) == self.ident and type(obj).__qualname__ == self.type_name

    def __str__(self) -> str:
        return f"<{self.type_name} at {self.ident:#x}>"
