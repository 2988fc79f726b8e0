import argparse
import logging
import readline  # line editing and history for input()
import sys

import colorama

import rpn
from rpn.config import BASES, DEFAULT_DECIMALS, Settings


def rpn_repl(machine, read_line=None):
    if read_line is None:
        read_line = input

    print('Type "help" for help, "quit" or an end of file (Ctrl+D) to quit.')

    while True:
        if machine.settings.debug:
            for line in machine.stack_lines():
                print(line)

        try:
            cmd = read_line(machine.settings.prompt)
        except EOFError:
            print()
            return 0

        try:
            result = machine.eval(cmd.strip())
        except rpn.Quit:
            print('Bye.')
            return 0
        if result:
            print(result)


def single_shot(machine, text):
    """
    Evaluates `text` once and returns the formatted top of the stack. Errors
    propagate to the caller.
    """
    machine.calc(text)
    return machine.format_top()


def parse_args(argv):
    parser = argparse.ArgumentParser(
        prog='rpn', description='An RPN calculator. With an expression, '
        'evaluate it and print the result; without one, start the REPL.')
    parser.add_argument('-b', '--base', type=int, choices=BASES, default=10,
                        help='output base (default: 10)')
    parser.add_argument('-d', '--decimals', type=int, default=DEFAULT_DECIMALS,
                        help='decimal places shown (default: %(default)s)')
    parser.add_argument('--degrees', action='store_true',
                        help='trigonometric functions work in degrees')
    parser.add_argument('--trap-division', action='store_true',
                        help='make division by zero an error instead of Infinity')
    parser.add_argument('--debug', action='store_true',
                        help='show the stack before each prompt and log each token')
    parser.add_argument('expression', nargs=argparse.REMAINDER,
                        help='expression to evaluate, e.g. 1 2 +')
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)

    logging.basicConfig(format='[%(levelname)s] %(message)s')
    colorama.just_fix_windows_console()

    try:
        settings = Settings(base=args.base, decimals=args.decimals,
                            degrees=args.degrees, debug=args.debug,
                            interactive=not args.expression,
                            trap_division_by_zero=args.trap_division)
    except ValueError as e:
        parser.error(str(e))
    machine = rpn.Machine(settings)

    if not args.expression:
        return rpn_repl(machine)

    try:
        print(single_shot(machine, ' '.join(args.expression)))
    except rpn.Quit:
        print('Bye.')
    except rpn.RPNError as e:
        sys.stderr.write('ERROR: %s\n' % e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
