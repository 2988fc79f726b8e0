# coding= utf-8
"""
Arbitrary precision decimal arithmetic.

Every value on the stack is a :class:`decimal.Decimal` produced through a
:class:`decimal.Context` built by :func:`new_context`: 34 significant digits,
round-half-to-even and the exponent limits of IEEE 754 decimal128. No signal is
trapped by default, so division by zero gives a signed Infinity, 0/0 gives NaN
and overflow gives Infinity, all of which then flow through later operations
like any other value.

The decimal module has no trigonometric functions and no cube root; those are
computed with :mod:`mpmath` at the working precision plus a few guard digits and
rounded back through the context.

Functions here never use the thread's global decimal context: always pass the
context that owns the calculation.
"""
import math
from decimal import (Context, Decimal, DivisionByZero, ROUND_DOWN, ROUND_FLOOR,
                     ROUND_HALF_EVEN)

import mpmath

from rpn.errors import MathError, RangeError

PRECISION = 34
EMAX = 6144
EMIN = -6143
GUARD_DIGITS = 10
UINT64_MAX = 2 ** 64 - 1

NAN = Decimal('NaN')
INFINITY = Decimal('Infinity')
NEG_INFINITY = Decimal('-Infinity')
ZERO = Decimal(0)
ONE = Decimal(1)
NEG_ONE = Decimal(-1)


def new_context(trap_division=False):
    """
    Builds the arithmetic context. With `trap_division` set, dividing by zero
    raises :exc:`decimal.DivisionByZero` instead of returning Infinity.
    """
    traps = [DivisionByZero] if trap_division else []
    return Context(prec=PRECISION, rounding=ROUND_HALF_EVEN, Emin=EMIN,
                   Emax=EMAX, capitals=1, clamp=0, flags=[], traps=traps)


def big(text, ctx):
    """ A decimal value from a decimal literal string, rounded to `ctx`. """
    return ctx.create_decimal(text)


def big_uint(n, ctx):
    """ A decimal value from an unsigned 64-bit integer. """
    if n < 0 or n > UINT64_MAX:
        raise RangeError('%d does not fit in an unsigned 64-bit integer' % n)
    return ctx.create_decimal(n)


def is_integral(value):
    return value.is_finite() and value == value.to_integral_value()


def to_uint64(value):
    """
    Converts a decimal value to a Python int in the unsigned 64-bit range, for
    bitwise operations.

    Non-integral values are truncated toward zero; the second item of the
    returned tuple tells whether that happened, so callers can tell the user.
    NaN, Infinity and anything outside [0, 2**64-1] raise :exc:`RangeError`.
    """
    if not value.is_finite():
        raise RangeError('%s cannot be used as an unsigned 64-bit integer' % value)
    whole = value.to_integral_value(rounding=ROUND_DOWN)
    if whole.is_signed() and whole != 0:
        raise RangeError('%s is outside the unsigned 64-bit range' % value)
    if whole.adjusted() > 20:
        raise RangeError('%s is outside the unsigned 64-bit range' % value)
    n = int(whole)
    if n > UINT64_MAX:
        raise RangeError('%s is outside the unsigned 64-bit range' % value)
    return n, whole != value


def floor(ctx, x):
    return x.to_integral_value(rounding=ROUND_FLOOR, context=ctx)


def modulo(ctx, y, x):
    """ y modulo x; the result takes the sign of y. """
    return ctx.remainder(y, x)


def percent(ctx, y, x):
    """ x percent of y. """
    return ctx.divide(ctx.multiply(y, x), 100)


def factorial(ctx, x):
    if not is_integral(x) or x.is_signed() and x != 0:
        raise MathError('factorial requires a non-negative integer, got %s' % x)
    # Anything past the largest exponent would only become Infinity anyway.
    if x.adjusted() > 6:
        return INFINITY
    n = int(x)
    if math.lgamma(n + 1) / math.log(10) > ctx.Emax + 1:
        return INFINITY
    return ctx.create_decimal(math.factorial(n))


def _workdps(ctx):
    return mpmath.workdps(ctx.prec + GUARD_DIGITS)


def _to_mpf(value):
    if value.is_nan():
        return mpmath.mpf('nan')
    if value.is_infinite():
        return -mpmath.inf if value.is_signed() else mpmath.inf
    return mpmath.mpf(str(value))


def _from_mpf(result, ctx):
    if isinstance(result, mpmath.mpc):
        if result.imag != 0:
            return NAN
        result = result.real
    if mpmath.isnan(result):
        return NAN
    if mpmath.isinf(result):
        return NEG_INFINITY if result < 0 else INFINITY
    return ctx.plus(Decimal(mpmath.nstr(result, ctx.prec + GUARD_DIGITS)))


def pi(ctx):
    with _workdps(ctx):
        return _from_mpf(+mpmath.pi, ctx)


def e(ctx):
    return ctx.exp(Decimal(1))


def cbrt(ctx, x):
    if not x.is_finite():
        return x
    with _workdps(ctx):
        root = mpmath.cbrt(_to_mpf(x.copy_abs()))
        if x.is_signed():
            root = -root
        return _from_mpf(root, ctx)


def _reduce_degrees(ctx, x):
    """ x modulo 360, exact. Integral angles of any size reduce as ints. """
    if is_integral(x):
        return Decimal(int(x) % 360)
    return ctx.remainder(x, 360)


def _trig(func, quadrants):
    """
    `quadrants` holds the exact results at 0, 90, 180 and 270 degrees, which
    a conversion to radians could only approximate.
    """
    def trig(ctx, x, degrees=False):
        if degrees and x.is_finite():
            x = _reduce_degrees(ctx, x)
            if is_integral(x) and int(x) % 90 == 0:
                return quadrants[int(x) // 90]
        with _workdps(ctx):
            angle = _to_mpf(x)
            if degrees:
                angle = mpmath.radians(angle)
            return _from_mpf(func(angle), ctx)
    return trig


def _arctrig(func):
    def arctrig(ctx, x, degrees=False):
        with _workdps(ctx):
            angle = func(_to_mpf(x))
            if degrees and not isinstance(angle, mpmath.mpc):
                angle = mpmath.degrees(angle)
            return _from_mpf(angle, ctx)
    return arctrig


sin = _trig(mpmath.sin, (ZERO, ONE, ZERO, NEG_ONE))
cos = _trig(mpmath.cos, (ONE, ZERO, NEG_ONE, ZERO))
tan = _trig(mpmath.tan, (ZERO, INFINITY, ZERO, NEG_INFINITY))
asin = _arctrig(mpmath.asin)
acos = _arctrig(mpmath.acos)
atan = _arctrig(mpmath.atan)
