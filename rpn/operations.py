# coding= utf-8
"""
The catalogue of calculator operations.

The catalogue is an ordered list mixing :class:`Operation` entries, which the
dispatcher can execute, with :class:`Annotation` lines that only exist to be
shown, in order, by the help command.

An operation's handler receives the top of the stack reversed (x is args[0], y
is args[1], ...) and returns a list of values to push plus the number of cells
it consumed from the stack. Operations that only change settings or print
something consume nothing and return nothing.
"""
from dataclasses import dataclass
from typing import Callable

from rpn import __version__
from rpn import arith
from rpn.errors import MathError
from rpn.formatting import format_number

PROGRAM_NAME = 'rpn'


@dataclass(frozen=True)
class Operation:
    name: str
    desc: str
    arity: int
    fn: Callable
    # Variadic handlers get the whole stack, not just `arity` items.
    variadic: bool = False


@dataclass(frozen=True)
class Annotation:
    text: str = ''
    bold: bool = False


def stackmethod(name, desc, func):
    """
    Turns a plain function into an :class:`Operation`.

    The function gets its arguments from the stack in the order they pop off
    (so from the stack [1, 2] a two-argument function is called as func(2, 1))
    and all of them are consumed. Its return value (or values) go back on the
    stack.
    """
    num_args = func.__code__.co_argcount

    def handler(args):
        ret = func(*args[:num_args])
        if ret is None:
            return [], num_args
        if isinstance(ret, (list, tuple)):
            return list(ret), num_args
        return [ret], num_args
    return Operation(name, desc, num_args, handler)


def constant(name, desc, value):
    return Operation(name, desc, 0, lambda args: ([value], 0))


def control(name, desc, action):
    """ An operation that neither reads nor changes the stack. """
    def handler(args):
        action()
        return [], 0
    return Operation(name, desc, 0, handler)


def standard_operations(machine):
    """
    Builds the catalogue for `machine`. Handlers that need the settings, the
    stack or the output reach them through the machine.
    """
    settings = machine.settings
    ctx = settings.context

    def uint_args(*values):
        # Convert everything first so a failing operand leaves no notes behind.
        converted = [arith.to_uint64(value) for value in values]
        for value, (n, truncated) in zip(values, converted):
            if truncated:
                machine.note('%s truncated to %d' % (
                    format_number(value, 10, settings.decimals, grouped=False), n))
        return [n for n, truncated in converted]

    def bitwise(name, desc, func):
        def handler(args):
            x, y = uint_args(args[0], args[1])
            return [arith.big_uint(func(y, x) & arith.UINT64_MAX, ctx)], 2
        return Operation(name, desc, 2, handler)

    def total(args):
        result = arith.ZERO
        for value in args:
            result = ctx.add(result, value)
        return [result], len(args)

    def set_format(args):
        x = args[0]
        if not arith.is_integral(x) or x.is_signed() and x != 0 or x > ctx.prec:
            raise MathError('fmt requires an integer between 0 and %d, got %s' % (
                ctx.prec, x))
        settings.set_decimals(int(x))
        return [], 1

    def print_stack():
        for line in machine.stack_lines():
            machine.emit(line)

    def toggle_debug():
        machine.emit('Debugging state: %s' % settings.toggle_debug())

    return [
        Annotation('Online help for %s (v%s).' % (PROGRAM_NAME, __version__), bold=True),
        Annotation(),
        Annotation('Data entry:', bold=True),
        Annotation('  number <ENTER> - push a number on top of the stack.'),
        Annotation('  operation <ENTER> - perform an operation on the stack (see below).'),
        Annotation(),
        Annotation('  It\'s also possible to separate multiple operations with space:'),
        Annotation('    10 2 3 * - (result = 4)'),
        Annotation(),
        Annotation('  Prefix numbers with 0x to indicate hexadecimal, 0b for binary,'),
        Annotation('  and 0 or o for octal. Lines starting with # are ignored.'),
        Annotation(),
        Annotation('Operations:', bold=True),
        Annotation(),
        Annotation('Basic Operations', bold=True),
        stackmethod('+', 'Add x to y', lambda x, y: ctx.add(y, x)),
        stackmethod('-', 'Subtract x from y', lambda x, y: ctx.subtract(y, x)),
        stackmethod('*', 'Multiply x and y', lambda x, y: ctx.multiply(y, x)),
        stackmethod('/', 'Divide y by x', lambda x, y: ctx.divide(y, x)),
        stackmethod('chs', 'Change signal of x', lambda x: ctx.minus(x)),
        stackmethod('inv', 'Invert x (1/x)', lambda x: ctx.divide(1, x)),
        stackmethod('^', 'Raise y to the power of x', lambda x, y: ctx.power(y, x)),
        stackmethod('mod', 'Calculate y modulo x', lambda x, y: arith.modulo(ctx, y, x)),
        stackmethod('sqr', 'Calculate square root of x', lambda x: ctx.sqrt(x)),
        stackmethod('cbr', 'Calculate cubic root of x', lambda x: arith.cbrt(ctx, x)),
        stackmethod('%', 'Calculate x% of y', lambda x, y: arith.percent(ctx, y, x)),
        stackmethod('floor', 'Largest integer not greater than x', lambda x: arith.floor(ctx, x)),
        Operation('sum', 'Sum all elements in stack', 1, total, variadic=True),
        stackmethod('fac', 'Calculate factorial of x', lambda x: arith.factorial(ctx, x)),
        Annotation(),
        Annotation('Bitwise Operations', bold=True),
        bitwise('and', 'Logical AND between x and y', lambda y, x: y & x),
        bitwise('or', 'Logical OR between x and y', lambda y, x: y | x),
        bitwise('xor', 'Logical XOR between x and y', lambda y, x: y ^ x),
        bitwise('lshift', 'Shift y left x times', lambda y, x: y << x if x < 64 else 0),
        bitwise('rshift', 'Shift y right x times', lambda y, x: y >> x),
        Annotation(),
        Annotation('Trigonometric Operations', bold=True),
        stackmethod('sin', 'Sine of x', lambda x: arith.sin(ctx, x, settings.degrees)),
        stackmethod('cos', 'Cosine of x', lambda x: arith.cos(ctx, x, settings.degrees)),
        stackmethod('tan', 'Tangent of x', lambda x: arith.tan(ctx, x, settings.degrees)),
        stackmethod('asin', 'Arcsine of x', lambda x: arith.asin(ctx, x, settings.degrees)),
        stackmethod('acos', 'Arccosine of x', lambda x: arith.acos(ctx, x, settings.degrees)),
        stackmethod('atan', 'Arctangent of x', lambda x: arith.atan(ctx, x, settings.degrees)),
        Annotation(),
        Annotation('Logarithmic Operations', bold=True),
        stackmethod('ln', 'Natural logarithm of x', lambda x: ctx.ln(x)),
        stackmethod('log', 'Base 10 logarithm of x', lambda x: ctx.log10(x)),
        Annotation(),
        Annotation('Miscellaneous Operations', bold=True),
        stackmethod('f2c', 'Convert x in Fahrenheit to Celsius',
                    lambda x: ctx.divide(ctx.multiply(ctx.subtract(x, 32), 5), 9)),
        stackmethod('c2f', 'Convert x in Celsius to Fahrenheit',
                    lambda x: ctx.add(ctx.divide(ctx.multiply(x, 9), 5), 32)),
        Annotation(),
        Annotation('Stack Operations', bold=True),
        control('p', 'Display stack', print_stack),
        control('c', 'Clear stack', machine.stack.clear),
        control('=', 'Print top of stack (x)', lambda: machine.emit(machine.format_top())),
        Operation('d', 'Drop top of stack (x)', 1, lambda args: ([], 1)),
        Operation('x', 'Exchange x and y', 2, lambda args: ([args[0], args[1]], 2)),
        Operation('dup', 'Duplicate top of stack (x)', 1, lambda args: ([args[0], args[0]], 1)),
        Annotation(),
        Annotation('Math and Physical constants', bold=True),
        constant('PI', 'The famous transcedental number', arith.pi(ctx)),
        constant('E', 'Another famous transcedental number', arith.e(ctx)),
        constant('C', 'Speed of light in vacuum, in m/s', arith.big('299792458', ctx)),
        constant('MOL', 'Avogadro\'s number', arith.big('6.02214076e23', ctx)),
        Annotation(),
        Annotation('Computer constants', bold=True),
        constant('KB', 'Kilobyte', ctx.power(10, 3)),
        constant('MB', 'Megabyte', ctx.power(10, 6)),
        constant('GB', 'Gigabyte', ctx.power(10, 9)),
        constant('TB', 'Terabyte', ctx.power(10, 12)),
        constant('KIB', 'Kibibyte', ctx.power(2, 10)),
        constant('MIB', 'Mebibyte', ctx.power(2, 20)),
        constant('GIB', 'Gibibyte', ctx.power(2, 30)),
        constant('TIB', 'Tebibyte', ctx.power(2, 40)),
        Annotation(),
        Annotation('Program Control', bold=True),
        control('dec', 'Output in decimal', lambda: settings.set_base(10)),
        control('bin', 'Output in binary', lambda: settings.set_base(2)),
        control('oct', 'Output in octal', lambda: settings.set_base(8)),
        control('hex', 'Output in hexadecimal', lambda: settings.set_base(16)),
        control('deg', 'All angles in degrees', lambda: settings.set_degrees(True)),
        control('rad', 'All angles in radians', lambda: settings.set_degrees(False)),
        Operation('fmt', 'Display x decimal places (0-%d)' % ctx.prec, 1, set_format),
        control('debug', 'Toggle debugging', toggle_debug),
        Annotation(),
        Annotation('Please Note:', bold=True),
        Annotation('  - x means the number at the top of the stack'),
        Annotation('  - y means the second number from the top of the stack'),
        Annotation('  - help, h or ? shows this help; quit, exit or q leaves'),
    ]


def opmap(ops):
    """ Maps operation names to their :class:`Operation`, skipping annotations. """
    return dict((op.name, op) for op in ops if isinstance(op, Operation))
