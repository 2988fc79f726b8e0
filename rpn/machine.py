# coding= utf-8
import logging
from decimal import DecimalException, DivisionByZero

from rpn.config import Settings
from rpn.errors import (InternalInconsistency, MathError, ParseError, Quit,
                        RPNError, StackUnderflow)
from rpn.formatting import format_number, format_stack
from rpn.operations import Annotation, Operation, opmap, standard_operations
from rpn.output import Renderer
from rpn.parser import Parser, parse_number
from rpn.stack import Stack

log = logging.getLogger(__name__)

HELP_WORDS = ('help', 'h', '?')
QUIT_WORDS = ('quit', 'exit', 'q')

SIGNAL_MESSAGES = {
    DivisionByZero: "can't divide by zero",
}


class Machine(object):
    """
    An RPN calculator. It has a stack, a catalogue of operations and the
    settings that decide how results look.

    Lines are given to :meth:`calc`, which processes every word on the line in
    order: numbers are pushed, operations are applied. The first error stops
    the line and puts the stack back the way it was before the line started,
    then propagates to the caller.

    :meth:`eval` is the interactive flavour of calc: it reports errors instead
    of raising them and returns the text to show for the line:
        >>> m = Machine()
        >>> m.eval('1 2 +')
        '= 3'
    """
    def __init__(self, settings=None, renderer=None):
        self.settings = settings if settings is not None else Settings()
        self.renderer = renderer if renderer is not None else Renderer()
        self.stack = Stack()
        self.ops = standard_operations(self)
        self.words = opmap(self.ops)

    @property
    def data_stack(self):
        return self.stack.list

    def emit(self, text):
        self.renderer.write(text)

    def note(self, text):
        log.debug('note: %s', text)
        self.emit('Note: %s' % text)

    def format_top(self):
        return format_number(self.stack.top(), self.settings.base,
                             self.settings.decimals, self.settings.interactive)

    def stack_lines(self):
        return format_stack(self.stack.list, self.settings.base,
                            self.settings.decimals, self.settings.interactive)

    def operation(self, op):
        """
        Applies `op` to the stack. Returns the values it pushed and the number
        of cells it removed.
        """
        length = len(self.stack)
        if length < op.arity:
            raise StackUnderflow(
                'this operation requires at least %d items in the stack' % op.arity)

        # args holds the stack reversed, so handlers see x as args[0].
        if op.variadic:
            args = self.stack.reversed()
        else:
            args = self.stack.top_n(op.arity)

        try:
            ret, remove = op.fn(args)
        except DecimalException as e:
            message = type(e).__name__
            for signal, text in SIGNAL_MESSAGES.items():
                if isinstance(e, signal):
                    message = text
            raise MathError('%s: %s' % (op.name, message))

        if remove > len(self.stack):
            raise InternalInconsistency(
                '(internal) operation %r wants to pop %d items, but we only have %d'
                % (op.name, remove, len(self.stack)))
        self.stack.drop(remove)
        self.stack.push(*ret)
        return ret, remove

    def calc(self, text):
        """
        Evaluates one line of input. Returns True when an operation changed the
        stack, meaning the new top of the stack is worth printing.
        """
        self.stack.save()
        autoprint = False
        try:
            for word in Parser(text).generate():
                log.debug('token %r, stack %r', word, self.stack.list)
                op = self.words.get(word)
                if op is not None:
                    ret, remove = self.operation(op)
                    if ret or remove:
                        autoprint = True
                elif word in HELP_WORDS:
                    self.help()
                elif word in QUIT_WORDS:
                    raise Quit()
                else:
                    self.stack.push(parse_number(word, self.settings.context))
        except RPNError:
            log.debug('restoring stack to %r', self.stack.saved_list)
            self.stack.restore()
            raise
        return autoprint

    def eval(self, text=''):
        """
        Evaluates one line as the interactive loop does. Returns the result to
        show ('= value', or an empty string when there is nothing new to show);
        errors are written through the renderer.
        """
        try:
            autoprint = self.calc(text)
        except ParseError as e:
            self.renderer.error('%s. Use "help" for online-help.' % e)
            return ''
        except RPNError as e:
            self.renderer.error('ERROR: %s' % e)
            return ''
        if autoprint:
            return '= ' + self.format_top()
        return ''

    def help_lines(self, bold=lambda text: text):
        for entry in self.ops:
            if isinstance(entry, Operation):
                yield '  - %s: %s' % (bold(entry.name), entry.desc)
            elif isinstance(entry, Annotation):
                yield bold(entry.text) if entry.bold else entry.text

    def help(self):
        self.renderer.page(self.help_lines)

