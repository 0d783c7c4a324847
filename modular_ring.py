"""
modular_ring.py

The ring Z_n over an arbitrary finite set of integer representatives.

Classes / functions:
 - ModularRing: sorted representatives, cached addition/multiplication tables,
   inverse lookups and a Field view (see finite_field.RingField).
 - operation_table(representatives, operation): symmetric size x size table.
 - mod_sum(n, a, b), mod_multiply(n, a, b): the plain modular formulas.

Tables are built once at construction with numpy and only copies are handed out.

NOTE: operation_table evaluates the operation on row/column *indices*, not on
the representative values. For the canonical 0..n-1 set both coincide; for
other sets (e.g. from_range(3, 9)) the tables describe residues by position.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union
import logging
import numbers

import numpy as np

from errors import InvalidArgument
from finite_field import RingField, FieldElement
from rendering import format_table, format_summary
from utils import increasing_range

logger = logging.getLogger(__name__)


def mod_sum(n: int, a: int, b: int) -> int:
    """
    Z_n sum (a +_n b).
    Example: for n = 7, a = b = 5 the result is 3.
    """
    return (a + b) % n


def mod_multiply(n: int, a: int, b: int) -> int:
    """
    Z_n product (a *_n b).
    Example: for n = 7, a = b = 5 the result is 4.
    """
    return (a * b) % n


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _validate_representatives(representatives: Any) -> List[int]:
    """
    Check that representatives is a non-empty 1-D sequence of distinct integers
    and return it as a plain list of ints (unsorted).
    """
    msg = "`representatives` must be provided and be a sequence with at least 1 element"
    if representatives is None or isinstance(representatives, (str, bytes)):
        raise InvalidArgument(msg)
    if isinstance(representatives, np.ndarray):
        if representatives.ndim != 1:
            raise InvalidArgument(msg)
        items = representatives.tolist()
    elif isinstance(representatives, Sequence):
        items = list(representatives)
    else:
        raise InvalidArgument(msg)
    if len(items) == 0:
        raise InvalidArgument(msg)

    for item in items:
        if not _is_integer(item):
            raise InvalidArgument(f"representative {item!r} is not an integer")
    values = [int(item) for item in items]
    if len(set(values)) != len(values):
        raise InvalidArgument("`representatives` must not contain duplicates")
    return values


def operation_table(representatives: Sequence[int], operation: Callable[[int, int], int]) -> np.ndarray:
    """
    Build the size x size table of a commutative operation.

    For i in [0, size) and j in [i, size) the operation is applied to the
    indices (i, j) and stored at [i][j] and [j][i].

    :param representatives: the ring's representatives (only their count is used)
    :param operation: binary operation, e.g. ModularRing.sum
    :return: numpy int64 array of shape (size, size)
    """
    if representatives is None or len(representatives) == 0:
        raise InvalidArgument("`representatives` must be provided and be a sequence with at least 1 element")
    if operation is None or not callable(operation):
        raise InvalidArgument("`operation` must be provided and be callable")

    n = len(representatives)
    matrix = np.zeros((n, n), dtype=np.int64)
    for i in range(n):
        for j in range(i, n):
            # a * b == b * a
            matrix[i, j] = matrix[j, i] = operation(i, j)
    return matrix


class ModularRing:
    """
    Z_n for an ordered set of integer representatives.

    Typical usage:
        z7 = ModularRing.from_count(7)
        z7.find_inverse_variable(3)          # -> 5
        z7.element(2).divide(3).value        # -> 3
    """

    def __init__(self, representatives: Union[Sequence[int], np.ndarray]):
        values = _validate_representatives(representatives)
        self._representatives: Tuple[int, ...] = tuple(sorted(values))
        self._size = len(self._representatives)
        self._index: Dict[int, int] = {v: i for i, v in enumerate(self._representatives)}

        self._addition = operation_table(self._representatives, self.sum)
        self._multiplication = operation_table(self._representatives, self.multiply)
        self._field = RingField(self)
        logger.debug("built Z_%d tables over %s", self._size, self._representatives)

    @classmethod
    def from_range(cls, start: int, stop: int) -> "ModularRing":
        """Ring over the inclusive range [start, stop]."""
        return cls(increasing_range(start, stop))

    @classmethod
    def from_count(cls, n: int) -> "ModularRing":
        """Canonical Z_n over [0, n-1]."""
        return cls(increasing_range(0, n - 1))

    @property
    def representatives(self) -> Tuple[int, ...]:
        return self._representatives

    @property
    def size(self) -> int:
        return self._size

    def sum(self, a: int, b: int) -> int:
        return mod_sum(self._size, a, b)

    def multiply(self, a: int, b: int) -> int:
        return mod_multiply(self._size, a, b)

    def addition_table(self) -> np.ndarray:
        return self._addition.copy()

    def multiplication_table(self) -> np.ndarray:
        return self._multiplication.copy()

    def formatted_addition_table(self, config: Optional[Dict[str, Any]] = None) -> str:
        return format_table(self.addition_table(), self._representatives, config)

    def formatted_multiplication_table(self, config: Optional[Dict[str, Any]] = None) -> str:
        return format_table(self.multiplication_table(), self._representatives, config)

    def _row_lookup(self, table: np.ndarray, variable: int, target: int) -> Optional[int]:
        """
        Return the representative at the first column of variable's row that holds target.
        """
        if not _is_integer(variable):
            raise InvalidArgument(f"`variable` must be an integer, got {variable!r}")
        if variable not in self._index:
            raise InvalidArgument(f"representatives do not include {variable!r}")
        hits = np.flatnonzero(table[self._index[variable]] == target)
        if hits.size == 0:
            return None
        return self._representatives[int(hits[0])]

    def find_inverse_variable(self, variable: int) -> Optional[int]:
        """
        Multiplicative inverse of variable: x * x^(-1) = 1.
        Returns None when variable has no inverse in this ring.
        """
        if variable is None or (_is_integer(variable) and variable == 0):
            raise InvalidArgument("`variable` must be provided and must not be equal to 0")
        return self._row_lookup(self._multiplication, variable, 1)

    def find_additive_inverse_variable(self, variable: int) -> Optional[int]:
        """
        Additive inverse of variable: x + (-x) = 0.
        Returns None when no column of variable's row sums to 0.
        """
        if variable is None:
            raise InvalidArgument("`variable` must be provided")
        return self._row_lookup(self._addition, variable, 0)

    def find_all_inverse_variables(self) -> List[Tuple[int, Optional[int]]]:
        return [(v, self.find_inverse_variable(v)) for v in self._representatives if v != 0]

    def find_all_additive_inverse_variables(self) -> List[Tuple[int, Optional[int]]]:
        return [(v, self.find_additive_inverse_variable(v)) for v in self._representatives]

    def all_variables_summary(self, formatted: bool = False,
                              config: Optional[Dict[str, Any]] = None) -> Union[List[Dict[str, Optional[int]]], str]:
        """
        Additive and multiplicative inverse of every representative.

        :param formatted: if True return a plain-text table instead of the records
        :param config: rendering options (see config.DEFAULT_CONFIG)
        :return: list of {"variable", "additive_inverse", "inverse"} dicts, or a string
        """
        records = [
            {
                "variable": v,
                "additive_inverse": self.find_additive_inverse_variable(v),
                "inverse": self.find_inverse_variable(v) if v != 0 else None,
            }
            for v in self._representatives
        ]
        if not formatted:
            return records
        return format_summary(records, config)

    def is_field(self) -> bool:
        raise NotImplementedError("field axiom checking is not implemented")

    def as_field(self) -> RingField:
        return self._field

    def element(self, initial_value: int) -> FieldElement:
        """Shortcut for as_field().new_element(initial_value)."""
        return self._field.new_element(initial_value)

    def __repr__(self):
        return f"ModularRing(size={self._size}, representatives={list(self._representatives)})"


# demo
if __name__ == "__main__":
    import sys
    from config import DEFAULT_CONFIG, load_config
    from utils import setup_basic_logger
    logger = setup_basic_logger(__name__, level=logging.DEBUG)
    cfg = load_config(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_CONFIG.copy()
    print(mod_sum(7, 5, 5), mod_multiply(7, 6, 1))
    z7 = ModularRing.from_count(7)
    print(z7.formatted_addition_table(cfg))
    print(z7.all_variables_summary(formatted=True, config=cfg))
    print(ModularRing.from_count(5).element(2).divide(3).subtract(1).value)
