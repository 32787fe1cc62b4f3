import itertools

import pytest

from coinvalue.domain.monetary.coin import COIN, Coin
from coinvalue.domain.monetary.errors import DivisionByZeroError

# Representative amounts: zero, single units, both signs, protocol-scale and beyond 64 bits
SAMPLE_VALUES = [0, 1, -1, 7, -7, 100, 1_000_000, -100_000_000, 10**18, 2**70 + 3, -(2**65)]
SAMPLE_COINS = [Coin(v) for v in SAMPLE_VALUES]
NONZERO_COINS = [c for c in SAMPLE_COINS if not c.is_zero()]


# region Addition and subtraction


def test_add_and_subtract_are_exact():
    assert Coin(2).add(Coin(3)) == Coin(5)
    assert Coin(2).subtract(Coin(3)) == Coin(-1)
    assert Coin(2) + Coin(3) == Coin(5)
    assert Coin(2) - Coin(3) == Coin(-1)

    # Far beyond any machine word
    big = Coin(2**100)
    assert (big + big).value == 2**101
    assert (big - big).is_zero()


@pytest.mark.parametrize("a, b", list(itertools.product(SAMPLE_COINS, repeat=2)))
def test_add_is_commutative(a, b):
    assert a.add(b) == b.add(a)


@pytest.mark.parametrize("a, b, c", list(itertools.combinations(SAMPLE_COINS, 3)))
def test_add_is_associative(a, b, c):
    assert a.add(b).add(c) == a.add(b.add(c))


@pytest.mark.parametrize("a", SAMPLE_COINS)
def test_additive_inverse(a):
    assert a.add(a.negate()).is_zero()
    assert (a + -a).is_zero()
    assert a.subtract(a) == Coin.ZERO


def test_operations_do_not_mutate_operands():
    a = Coin(10)
    b = Coin(3)

    a.add(b)
    a.subtract(b)
    a.multiply(b)
    a.divide(b)
    a.shift_left(2)
    a.negate()

    assert a == Coin(10)
    assert b == Coin(3)


def test_arithmetic_requires_coin_operands():
    with pytest.raises(TypeError):
        Coin(1).add(1)
    with pytest.raises(TypeError):
        Coin(1).subtract(1)
    with pytest.raises(TypeError):
        Coin(1) + 1
    with pytest.raises(TypeError):
        1 - Coin(1)
    with pytest.raises(TypeError):
        Coin(1).divide(1)


# endregion

# region Multiplication


def test_multiply_by_integer_and_by_coin():
    assert Coin(3).multiply(4) == Coin(12)
    assert Coin(3).multiply(Coin(4)) == Coin(12)
    assert Coin(3) * 4 == Coin(12)
    assert 4 * Coin(3) == Coin(12)
    assert Coin(3) * Coin(-4) == Coin(-12)

    # Coin x Coin is a raw-integer product
    assert COIN.multiply(COIN).value == 10**16


def test_multiply_rejects_non_integral_factors():
    with pytest.raises(TypeError):
        Coin(3).multiply(1.5)
    with pytest.raises(TypeError):
        Coin(3).multiply(True)
    with pytest.raises(TypeError):
        Coin(3) * 1.5


# endregion

# region Division


def test_divide_and_remainder_of_one_hundred_by_three():
    quotient, remainder = Coin(100).divide_and_remainder(Coin(3))

    assert quotient.value == 33
    assert remainder.value == 1


@pytest.mark.parametrize(
    "dividend, divisor, quotient, remainder",
    [
        (7, 2, 3, 1),
        (-7, 2, -3, -1),
        (7, -2, -3, 1),
        (-7, -2, 3, -1),
        (6, 3, 2, 0),
        (0, 5, 0, 0),
        (1, 5, 0, 1),
        (-1, 5, 0, -1),
    ],
)
def test_divide_truncates_toward_zero(dividend, divisor, quotient, remainder):
    result = Coin(dividend).divide_and_remainder(Coin(divisor))

    assert result == (Coin(quotient), Coin(remainder))
    assert Coin(dividend).divide(Coin(divisor)) == Coin(quotient)


@pytest.mark.parametrize("a, b", list(itertools.product(SAMPLE_COINS, NONZERO_COINS)))
def test_division_identity(a, b):
    q, r = a.divide_and_remainder(b)

    assert q.multiply(b).add(r) == a
    assert abs(r.value) < abs(b.value)
    # Remainder is zero or has the sign of the dividend
    assert r.is_zero() or r.signum() == a.signum()


def test_divide_by_zero_raises():
    with pytest.raises(DivisionByZeroError):
        Coin(5).divide(Coin(0))
    with pytest.raises(DivisionByZeroError):
        Coin(5).divide_and_remainder(Coin.ZERO)
    with pytest.raises(DivisionByZeroError):
        Coin(0).divide(Coin(0))

    # Still a ZeroDivisionError for generic handlers
    with pytest.raises(ZeroDivisionError):
        Coin(5).divide(Coin(0))


# endregion

# region Shifts


def test_shift_left_and_right():
    assert Coin(3).shift_left(2) == Coin(12)
    assert Coin(12).shift_right(2) == Coin(3)
    assert Coin(13).shift_right(2) == Coin(3)
    assert Coin(3) << 4 == Coin(48)
    assert Coin(48) >> 4 == Coin(3)
    assert Coin(5).shift_left(0) == Coin(5)


def test_shift_right_floors_while_divide_truncates():
    # Arithmetic shift rounds toward negative infinity
    assert Coin(-3).shift_right(1) == Coin(-2)
    assert Coin(-1).shift_right(10) == Coin(-1)

    # Division rounds toward zero
    assert Coin(-3).divide(Coin(2)) == Coin(-1)
    assert Coin(-1).divide(Coin(1024)) == Coin(0)


@pytest.mark.parametrize("a", SAMPLE_COINS)
@pytest.mark.parametrize("n", [0, 1, 7, 64, 200])
def test_shift_left_then_right_is_exact(a, n):
    assert a.shift_left(n).shift_right(n) == a


def test_shift_rejects_negative_distance():
    with pytest.raises(ValueError):
        Coin(1).shift_left(-1)
    with pytest.raises(ValueError):
        Coin(1).shift_right(-1)
    with pytest.raises(ValueError):
        Coin(1) << -1


# endregion

# region Sign


def test_negate_abs_and_unary_operators():
    assert Coin(5).negate() == Coin(-5)
    assert Coin(-5).negate() == Coin(5)
    assert Coin(0).negate() == Coin(0)
    assert -Coin(5) == Coin(-5)
    assert +Coin(5) == Coin(5)
    assert abs(Coin(-5)) == Coin(5)
    assert abs(Coin(5)) == Coin(5)


# endregion
