"""
finite_field.py

A small field abstraction for chaining arithmetic over a finite structure.

Classes:
 - Field: protocol listing the capabilities a field-like structure must expose
   (sum, multiply, both identities, both inverse lookups).
 - RingField: Field view bound to one ModularRing; creates FieldElements.
 - FieldElement: mutable value bound to a Field, with chainable
   sum / subtract / multiply / divide.

No field axioms are verified: a composite modulus gives a ring where some
elements have no multiplicative inverse, and division by them raises NoInverseError.
"""

from typing import Any, Optional, Protocol, runtime_checkable
from errors import InvalidArgument, NoInverseError


@runtime_checkable
class Field(Protocol):
    """
    Capabilities FieldElement relies on. Any object exposing them can stand in
    for a ring-backed field.
    """
    additive_identity: int
    multiplicative_identity: int

    def sum(self, x: int, y: int) -> int: ...

    def multiply(self, x: int, y: int) -> int: ...

    def inverse_of(self, x: int) -> Optional[int]: ...

    def additive_inverse_of(self, x: int) -> Optional[int]: ...


class RingField:
    """
    Field view over a ModularRing. Holds no state besides the ring reference.
    """
    additive_identity = 0
    multiplicative_identity = 1

    def __init__(self, ring: Any):
        self._ring = ring

    @property
    def ring(self):
        return self._ring

    def sum(self, x: int, y: int) -> int:
        return self._ring.sum(x, y)

    def multiply(self, x: int, y: int) -> int:
        return self._ring.multiply(x, y)

    def inverse_of(self, x: int) -> Optional[int]:
        """x^(-1), so that x * x^(-1) = 1; None if it does not exist."""
        return self._ring.find_inverse_variable(x)

    def additive_inverse_of(self, x: int) -> Optional[int]:
        """-x, so that x + (-x) = 0; None if it does not exist."""
        return self._ring.find_additive_inverse_variable(x)

    def new_element(self, initial_value: int) -> "FieldElement":
        return FieldElement(initial_value, self)

    def __repr__(self):
        return f"RingField({self._ring!r})"


class FieldElement:
    """
    A value in a Field. Every mutating method returns the element itself:

        field.new_element(2).divide(3).subtract(1).value
    """
    __slots__ = ("_value", "_field")

    def __init__(self, initial_value: int, field: Field):
        if initial_value is None or field is None:
            raise InvalidArgument("`initial_value` and `field` are required")
        self._value = initial_value
        self._field = field

    @property
    def value(self) -> int:
        return self._value

    @property
    def field(self) -> Field:
        return self._field

    def set_to_additive_identity(self) -> "FieldElement":
        self._value = self._field.additive_identity
        return self

    def set_to_multiplicative_identity(self) -> "FieldElement":
        self._value = self._field.multiplicative_identity
        return self

    def sum(self, addend: int) -> "FieldElement":
        if addend is None:
            raise InvalidArgument("`addend` must be provided")
        self._value = self._field.sum(self._value, addend)
        return self

    def subtract(self, subtrahend: int) -> "FieldElement":
        """
        x - y = x + (-y)
        """
        if subtrahend is None:
            raise InvalidArgument("`subtrahend` must be provided")
        negated = self._field.additive_inverse_of(subtrahend)
        if negated is None:
            raise NoInverseError(f"{subtrahend} has no additive inverse")
        self._value = self._field.sum(self._value, negated)
        return self

    def multiply(self, multiplier: int) -> "FieldElement":
        if multiplier is None:
            raise InvalidArgument("`multiplier` must be provided")
        self._value = self._field.multiply(self._value, multiplier)
        return self

    def divide(self, divisor: int) -> "FieldElement":
        """
        x / y = x * y^(-1)
        """
        if divisor is None or divisor == self._field.additive_identity:
            raise InvalidArgument("`divisor` must be provided and can't be the additive identity")
        inverse = self._field.inverse_of(divisor)
        if inverse is None:
            raise NoInverseError(f"{divisor} has no multiplicative inverse")
        self._value = self._field.multiply(self._value, inverse)
        return self

    def clone(self) -> "FieldElement":
        return FieldElement(self._value, self._field)

    def __repr__(self):
        return f"FieldElement({self._value} in {self._field!r})"
