# coding= utf-8
"""
Rendering of decimal values for display.

Base 10 output keeps up to the configured number of decimals, drops zeros that
carry no information and, when it makes a difference, adds a digit-grouped
copy of the number in parentheses: "1000 (1,000)".

Bases 2, 8 and 16 show integers only. Fractions are cut off (the magnitude is
floored) and the full value is shown next to the result, as in
"0xff (truncated from 255.5)". These bases only go up to 2**64-1.
"""
from decimal import ROUND_FLOOR

from rpn.arith import UINT64_MAX

UINT64_ONLY = 'Invalid number: non decimal base only supports uint64 numbers.'

_PREFIXES = {
    2: ('0b', 'b'),
    8: ('0', 'o'),
    16: ('0x', 'x'),
}


def strip_trailing_digits(text, digits):
    """
    Removes insignificant zeros after the decimal point (and the point itself
    if nothing is left after it), then cuts the fraction to `digits` places.
    """
    if '.' in text:
        text = text.rstrip('0').rstrip('.')

    i = text.find('.')
    if i >= 0:
        if digits <= 0:
            text = text[:i]
        else:
            text = text[:i + 1 + digits]
    if text == '-0':
        return '0'
    return text


def commaf_with_digits(value, decimals):
    """ `value` with thousands separators and at most `decimals` decimals. """
    return strip_trailing_digits(format(value, ',.%df' % decimals), decimals)


def format_number(value, base=10, decimals=6, grouped=True):
    """
    Formats `value` in `base` (2, 8, 10 or 16) for display.

    `grouped` adds the digit-grouped rendering to base 10 numbers that have
    four or more integer digits; single-shot evaluation turns it off.

    This never raises for a number that does not fit the requested base: the
    returned string says so instead.
    """
    if value.is_nan():
        return 'NaN'
    if value.is_infinite():
        return '-Infinity' if value.is_signed() else 'Infinity'

    clean = strip_trailing_digits(format(value, '.%df' % decimals), decimals)

    if base == 10:
        if not grouped:
            return clean
        human = commaf_with_digits(value, decimals)
        if human != clean:
            return '%s (%s)' % (clean, human)
        return clean

    if base not in _PREFIXES:
        raise ValueError('unsupported base %r' % base)
    prefix, spec = _PREFIXES[base]

    sign = ''
    if value.is_signed() and not value.is_zero():
        sign = '-'
    magnitude = value.copy_abs()

    suffix = ''
    if magnitude != magnitude.to_integral_value():
        suffix = ' (truncated from %s)' % clean
        magnitude = magnitude.to_integral_value(rounding=ROUND_FLOOR)

    if magnitude.adjusted() >= 20:
        return UINT64_ONLY
    n = int(magnitude)
    if n > UINT64_MAX:
        return UINT64_ONLY

    return '%s%s%s%s' % (sign, prefix, format(n, spec), suffix)


def format_stack(values, base=10, decimals=6, grouped=True):
    """
    Lines listing the stack from top to bottom. The two topmost entries are
    tagged x and y, the rest with their position from the bottom.
    """
    lines = ['===== Stack =====']
    last = len(values) - 1
    for ix in range(last, -1, -1):
        if ix == last:
            tag = ' x'
        elif ix == last - 1:
            tag = ' y'
        else:
            tag = '%2d' % ix
        lines.append('%s: %s' % (tag, format_number(values[ix], base, decimals, grouped)))
    return lines
