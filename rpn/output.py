import sys

from colorama import Fore, Style

from rpn.pager import Pager


class Renderer(object):
    """
    Where everything the calculator prints ends up: results, the stack
    listing, notes, errors and the help text.

    Writes go to `stream` (standard output, looked up at write time, when not
    given). Bold and colored text is only produced when `color` is on, which
    defaults to whether the stream is a terminal.
    """
    def __init__(self, stream=None, color=None):
        self._stream = stream
        self._color = color

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    @property
    def color(self):
        if self._color is None:
            return self.stream.isatty()
        return self._color

    def bold(self, text, color=None):
        if color is None:
            color = self.color
        if not color:
            return text
        return '%s%s%s' % (Style.BRIGHT, text, Style.RESET_ALL)

    def write(self, text=''):
        self.stream.write(text + '\n')

    def error(self, text):
        if self.color:
            text = '%s%s%s' % (Fore.RED, text, Style.RESET_ALL)
        self.write(text)

    def page(self, render):
        """
        Shows the lines produced by `render(bold)` through a :class:`Pager`.
        `bold` styles a piece of text when the pager in use can show it.
        """
        with Pager(self.stream) as pager:
            bold = lambda text: self.bold(text, color=pager.color_support)
            for line in render(bold):
                pager.write(line + '\n')
