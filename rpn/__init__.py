# coding= utf-8
"""
Implements an RPN calculator, i.e., an object holding a stack of arbitrary
precision decimal numbers and applying operations to it from lines of input,
in a read-eval-print loop until explicitly told otherwise.

Usage should be as simple as:
    >>> import rpn_repl
    >>> rpn_repl.main([])

Which should put you in the calculator REPL until given an end of file (^D on
Linux) or the quit word.

The calculator may also be given strings to evaluate:
    >>> m = rpn.Machine()
    >>> m.eval('10 2 /')
    '= 5'

Wherein the return value is what the REPL prints for the line. Lines given to
:meth:`Machine.calc` instead raise an :exc:`RPNError` on failure, with the stack
left exactly as it was before the line.

Numbers are shown in decimal, binary, octal or hexadecimal; the latter three
only for integers up to 2**64-1, cutting off (and mentioning) any fraction.
"""
__version__ = '1.0.0'

from rpn.errors import *
from rpn.machine import *
from rpn.parser import Parser, parse_number
