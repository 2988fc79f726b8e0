# coding= utf-8
"""
Display and arithmetic settings shared by the dispatcher, the formatter and the
operations that change them (dec, bin, oct, hex, deg, rad, fmt, debug).
"""
import logging
from dataclasses import dataclass, field
from decimal import Context

from rpn import arith

BASES = (2, 8, 10, 16)
DEFAULT_DECIMALS = 6

PROMPTS = {
    10: '',
    2: 'bin',
    8: 'oct',
    16: 'hex',
}


@dataclass
class Settings:
    """
    Everything about a calculator session that is not the stack itself.

    `interactive` is off for single-shot evaluation, where results are printed
    without the digit-grouped annotation. `trap_division_by_zero` turns
    division by zero into an error instead of a signed Infinity.
    """
    base: int = 10
    decimals: int = DEFAULT_DECIMALS
    degrees: bool = False
    debug: bool = False
    interactive: bool = True
    trap_division_by_zero: bool = False
    context: Context = field(default=None, repr=False)

    def __post_init__(self):
        if self.context is None:
            self.context = arith.new_context(self.trap_division_by_zero)
        self.set_base(self.base)
        self.set_decimals(self.decimals)
        self._apply_log_level()

    def set_base(self, base):
        if base not in BASES:
            raise ValueError('unsupported base %r (use one of %s)' % (
                base, ', '.join(str(b) for b in BASES)))
        self.base = base

    def set_decimals(self, decimals):
        if decimals < 0 or decimals > self.context.prec:
            raise ValueError('decimal count must be between 0 and %d, got %r' % (
                self.context.prec, decimals))
        self.decimals = decimals

    def set_degrees(self, degrees):
        self.degrees = degrees

    def toggle_debug(self):
        self.debug = not self.debug
        self._apply_log_level()
        return self.debug

    def _apply_log_level(self):
        logging.getLogger('rpn').setLevel(
            logging.DEBUG if self.debug else logging.WARNING)

    @property
    def prompt(self):
        """ The input prompt, showing the output base and angle mode. """
        parts = [PROMPTS[self.base]]
        if self.degrees:
            parts.append('deg')
        return ' '.join(p for p in parts if p) + '> '
