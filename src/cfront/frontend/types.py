"""
C Type Representation
=====================

Types are currently a bare name naming a primitive type keyword. Only
``int`` is accepted by the parser; the keyword set already reserves
``long``, ``unsigned``, ``short`` and ``struct`` for later use.

CType is a frozen dataclass rather than a plain string so that
qualifiers, struct tags and typedef names can be added as fields later
without changing the code that builds or compares types.
"""

from dataclasses import dataclass


# Type keywords the parser accepts in a type position
PRIMITIVE_TYPE_NAMES = frozenset({"int"})


@dataclass(frozen=True)
class CType:
    """
    A C type.

    Attributes:
        name: The primitive type keyword, e.g. "int"
    """
    name: str

    def __str__(self) -> str:
        return self.name

    @property
    def is_primitive(self) -> bool:
        """Return True if this names one of the accepted primitive types."""
        return self.name in PRIMITIVE_TYPE_NAMES


TYPE_INT = CType("int")
