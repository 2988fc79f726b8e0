# coding= utf-8
from rpn.arith import ZERO
from rpn.errors import StackUnderflow


class Stack(object):
    """
    The operand stack. The top of the stack (x) is the last element of `list`,
    the one below it (y) the second to last, and so on.

    A copy of the stack is kept in `saved_list` by :meth:`save`, which the
    dispatcher calls before every input line; :meth:`restore` brings that copy
    back when anything on the line fails, so a line is either applied as a
    whole or not at all.
    """
    def __init__(self, values=()):
        self.list = list(values)
        self.saved_list = []

    def __len__(self):
        return len(self.list)

    def __iter__(self):
        return iter(self.list)

    def __repr__(self):
        return 'Stack(%r)' % self.list

    def save(self):
        self.saved_list = list(self.list)

    def restore(self):
        self.list = list(self.saved_list)

    def push(self, *values):
        self.list.extend(values)

    def clear(self):
        self.list = []

    def top(self):
        """ The topmost element, or zero on an empty stack. """
        if not self.list:
            return ZERO
        return self.list[-1]

    def top_n(self, n):
        """
        The last `n` elements, topmost first (so x is [0], y is [1]). The stack
        itself is not changed.
        """
        if len(self.list) < n:
            raise StackUnderflow(
                'this operation requires at least %d items in the stack' % n)
        return self.list[::-1][:n]

    def reversed(self):
        return self.list[::-1]

    def drop(self, n):
        if len(self.list) < n:
            raise StackUnderflow('cannot drop %d items from a stack of %d' % (
                n, len(self.list)))
        if n:
            del self.list[-n:]
