# coding= utf-8
"""
Error kinds raised while evaluating a line. Any of them aborts the rest of the
line and puts the stack back the way it was before the line began.
"""


class RPNError(Exception): pass
class ParseError(RPNError): pass
class MathError(RPNError): pass
class StackUnderflow(RPNError): pass
class RangeError(RPNError): pass
class InternalInconsistency(RPNError): pass


class Quit(Exception):
    """ Raised by the quit/exit/q control words. Not an error. """
