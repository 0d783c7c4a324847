"""Tests for the Z_n ring: construction, tables and inverse lookups."""

import logging
import math

import numpy as np
import pytest

from errors import InvalidArgument
from modular_ring import ModularRing, mod_multiply, mod_sum, operation_table


def test_static_formulas():
    assert mod_sum(7, 5, 5) == 3
    assert mod_multiply(7, 5, 5) == 4
    assert mod_multiply(7, 6, 1) == 6


def test_z7_sum_and_multiply():
    z7 = ModularRing.from_count(7)
    assert z7.sum(5, 5) == 3
    assert z7.multiply(5, 5) == 4


@pytest.mark.parametrize("n", [1, 2, 4, 6, 7, 9])
def test_from_count_matches_modular_arithmetic(n):
    ring = ModularRing.from_count(n)
    assert ring.size == n
    assert ring.representatives == tuple(range(n))
    add, mul = ring.addition_table(), ring.multiplication_table()
    for a in range(n):
        for b in range(n):
            assert ring.sum(a, b) == (a + b) % n
            assert ring.multiply(a, b) == (a * b) % n
            assert add[a][b] == (a + b) % n
            assert mul[a][b] == (a * b) % n


@pytest.mark.parametrize("ring", [
    ModularRing.from_count(5),
    ModularRing.from_count(8),
    ModularRing.from_range(3, 9),
    ModularRing([10, -2, 4]),
])
def test_tables_are_symmetric(ring):
    for table in (ring.addition_table(), ring.multiplication_table()):
        assert table.shape == (ring.size, ring.size)
        assert np.array_equal(table, table.T)


def test_tables_are_copies():
    ring = ModularRing.from_count(3)
    table = ring.addition_table()
    table[0][0] = 99
    assert ring.addition_table()[0][0] == 0
    mul = ring.multiplication_table()
    mul[:] = -1
    assert ring.multiplication_table()[1][1] == 1


def test_representatives_sorted_and_input_untouched():
    given = [2, 0, 1]
    ring = ModularRing(given)
    assert ring.representatives == (0, 1, 2)
    assert given == [2, 0, 1]


def test_accepts_tuple_range_and_numpy_array():
    assert ModularRing((1, 0)).size == 2
    assert ModularRing(range(4)).size == 4
    assert ModularRing(np.arange(3)).representatives == (0, 1, 2)


@pytest.mark.parametrize("bad", [None, [], (), "012", {0, 1}, {0: 1}, 5, [0, 1.5], [0, "1"]])
def test_invalid_representatives(bad):
    with pytest.raises(InvalidArgument):
        ModularRing(bad)


def test_duplicates_rejected():
    with pytest.raises(InvalidArgument):
        ModularRing([0, 1, 1, 2])


def test_empty_convenience_constructors():
    with pytest.raises(InvalidArgument):
        ModularRing.from_count(0)
    with pytest.raises(InvalidArgument):
        ModularRing.from_range(5, 4)


def test_from_range_is_inclusive():
    ring = ModularRing.from_range(3, 9)
    assert ring.representatives == (3, 4, 5, 6, 7, 8, 9)
    assert ring.size == 7


def test_operation_table_validation():
    with pytest.raises(InvalidArgument):
        operation_table([], lambda a, b: a)
    with pytest.raises(InvalidArgument):
        operation_table([0, 1], None)
    with pytest.raises(InvalidArgument):
        operation_table([0, 1], 3)


def test_operation_table_uses_indices():
    seen = []

    def op(i, j):
        seen.append((i, j))
        return i * 10 + j

    table = operation_table([100, 200, 300], op)
    assert seen == [(0, 0), (0, 1), (0, 2), (1, 1), (1, 2), (2, 2)]
    assert table[2][0] == table[0][2] == 2


@pytest.mark.parametrize("n", [2, 5, 6, 9, 11])
def test_additive_inverses(n):
    ring = ModularRing.from_count(n)
    for x in ring.representatives:
        y = ring.find_additive_inverse_variable(x)
        assert y == (n - x) % n
        assert ring.sum(x, y) == 0


@pytest.mark.parametrize("p", [2, 3, 5, 7, 13])
def test_prime_modulus_has_all_inverses(p):
    ring = ModularRing.from_count(p)
    for x in range(1, p):
        y = ring.find_inverse_variable(x)
        assert y is not None
        assert ring.multiply(x, y) == 1


@pytest.mark.parametrize("n", [4, 6, 9])
def test_composite_modulus_missing_inverses(n):
    ring = ModularRing.from_count(n)
    missing = 0
    for x in range(1, n):
        y = ring.find_inverse_variable(x)
        if math.gcd(x, n) == 1:
            assert ring.multiply(x, y) == 1
        else:
            assert y is None
            missing += 1
    assert missing > 0


def test_inverse_lookup_errors():
    ring = ModularRing.from_count(5)
    with pytest.raises(InvalidArgument):
        ring.find_inverse_variable(0)
    with pytest.raises(InvalidArgument):
        ring.find_inverse_variable(None)
    with pytest.raises(InvalidArgument):
        ring.find_inverse_variable(7)
    with pytest.raises(InvalidArgument):
        ring.find_additive_inverse_variable(None)
    with pytest.raises(InvalidArgument):
        ring.find_additive_inverse_variable(-1)
    assert ring.find_additive_inverse_variable(0) == 0


def test_non_canonical_representatives_follow_positions():
    ring = ModularRing.from_range(3, 9)
    # position 0 behaves as residue 0, position 1 as residue 1
    assert ring.find_inverse_variable(3) is None
    assert ring.find_inverse_variable(4) == 4
    assert ring.find_additive_inverse_variable(3) == 3
    assert ring.find_additive_inverse_variable(4) == 9


def test_find_all_inverse_variables():
    ring = ModularRing.from_count(4)
    assert ring.find_all_inverse_variables() == [(1, 1), (2, None), (3, 3)]
    assert ring.find_all_additive_inverse_variables() == [(0, 0), (1, 3), (2, 2), (3, 1)]


def test_all_variables_summary_raw():
    ring = ModularRing.from_count(4)
    assert ring.all_variables_summary() == [
        {"variable": 0, "additive_inverse": 0, "inverse": None},
        {"variable": 1, "additive_inverse": 3, "inverse": 1},
        {"variable": 2, "additive_inverse": 2, "inverse": None},
        {"variable": 3, "additive_inverse": 1, "inverse": 3},
    ]


def test_all_variables_summary_formatted():
    text = ModularRing.from_count(4).all_variables_summary(formatted=True, config={"missing_marker": "n/a"})
    assert isinstance(text, str)
    assert "Additive inverse" in text
    assert text.count("n/a") == 2


def test_formatted_tables():
    ring = ModularRing.from_count(3)
    text = ring.formatted_multiplication_table()
    lines = text.splitlines()
    assert len(lines) == ring.size + 2
    assert lines[-1].split() == ["2", "0", "2", "1"]
    assert ring.formatted_addition_table().splitlines()[-1].split() == ["2", "2", "0", "1"]


def test_is_field_not_implemented():
    with pytest.raises(NotImplementedError):
        ModularRing.from_count(5).is_field()


def test_as_field_is_bound_to_ring():
    ring = ModularRing.from_count(5)
    assert ring.as_field() is ring.as_field()
    assert ring.as_field().ring is ring


def test_construction_logs_table_build(caplog):
    caplog.set_level(logging.DEBUG, logger="modular_ring")
    ModularRing.from_count(3)
    assert "Z_3" in caplog.text


@pytest.mark.parametrize("bad", [[1], (1,), {1}, "1", 1.0, True, False])
def test_lookups_reject_non_integers(bad):
    ring = ModularRing.from_count(5)
    with pytest.raises(InvalidArgument):
        ring.find_inverse_variable(bad)
    with pytest.raises(InvalidArgument):
        ring.find_additive_inverse_variable(bad)


def test_lookups_accept_numpy_integers():
    ring = ModularRing.from_count(5)
    assert ring.find_inverse_variable(np.int64(3)) == 2
    assert ring.find_additive_inverse_variable(np.int64(0)) == 0
