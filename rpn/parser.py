import re

from rpn import arith
from rpn.errors import ParseError, RangeError

# Characters other than letters, digits and whitespace that survive cleaning.
# A comma is not among them, so "1,000" reads as 1000; supporting a comma as
# the decimal point would start here.
OPERATOR_CHARS = '+-*/%^=.?'

COMMENT = '#'

_DECIMAL = re.compile(r'-?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$')
_BASES = (
    (re.compile(r'0[bB](.*)$'), 2, re.compile(r'[01]+$')),
    (re.compile(r'0[xX](.*)$'), 16, re.compile(r'[0-9a-fA-F]+$')),
    # A leading 0 followed by anything but a point, or o before a digit.
    (re.compile(r'(?:0(?!\.)|o(?=\d))(.+)$'), 8, re.compile(r'[0-7]+$')),
)


def is_comment(text):
    return text.lstrip().startswith(COMMENT)


def clean(text):
    """
    Drops every character that is not alphanumeric, whitespace or one of
    OPERATOR_CHARS, so that pasted amounts such as "$2,500.00" read as plain
    numbers.
    """
    return ''.join(c for c in text
                   if c.isalnum() or c.isspace() or c in OPERATOR_CHARS)


def parse_number(word, ctx):
    """
    Turns a literal into a decimal value, or raises :exc:`ParseError`.

    Base prefixes are 0b/0B (binary), 0x/0X (hexadecimal), and a leading 0 or o
    not followed by a point (octal); these are unsigned 64-bit integers. Anything
    else must be a decimal number with an optional leading minus sign, fraction
    and exponent.
    """
    for prefix, base, digits in _BASES:
        found = prefix.match(word)
        if found is None:
            continue
        if digits.match(found.group(1)) is None:
            raise ParseError('not a valid base %d number: %r' % (base, word))
        n = int(found.group(1), base)
        if n > arith.UINT64_MAX:
            raise RangeError('%s does not fit in an unsigned 64-bit integer' % word)
        return arith.big_uint(n, ctx)

    if _DECIMAL.match(word) is None:
        raise ParseError('not a number or operation: %r' % word)
    return arith.big(word, ctx)


class Parser(object):
    """
    Splits one line of calculator input into words.

    The parser is stateful: each instance is given the line to work on, and
    each call to :meth:`next_word` advances through it, raising
    :exc:`StopIteration` once nothing but whitespace is left. The line is
    cleaned (see :func:`clean`) when the parser is built; a comment line
    produces no words at all.

    :meth:`generate` wraps next_word into a plain generator for the
    dispatcher to loop over.
    """
    def __init__(self, text):
        self.text = '' if is_comment(text) else clean(text)
        self.pos = 0

    @property
    def is_finished(self):
        return self.pos >= len(self.text)

    def _consume(self, pattern):
        """
        Consume (advancing self.pos) some characters based on a regex applied
        at self.pos. Returns None when nothing matched.
        """
        if self.is_finished:
            raise StopIteration()
        found = re.compile(pattern).match(self.text, self.pos)
        if found is None:
            return None
        self.pos = found.end()
        return found.group()

    def parse_whitespace(self):
        return self._consume(r'\s*')

    def parse_word(self):
        return self._consume(r'\S+')

    def next_word(self):
        self.parse_whitespace()
        return self.parse_word()

    def generate(self):
        while True:
            try:
                yield self.next_word()
            except StopIteration:
                return
