import sys
import logging
import argparse

from pycalc import CalcError, calculate


__version__ = '0.1'

logger = logging.getLogger('pycalc')


def build_parser():
    ap = argparse.ArgumentParser(prog='pycalc', description='Evaluate arithmetic expressions line by line.')
    ap.add_argument('expression', nargs='*', help='expressions to evaluate instead of reading stdin')
    ap.add_argument('--prompt', default='> ', help='prompt shown when reading from a terminal')
    ap.add_argument('-v', '--verbose', action='store_true', help='log tokens and trees')

    return ap


def run_line(line, out=None):
    try:
        value = calculate(line)

    except CalcError as e:
        logger.debug('Fault in %r: %s', line, e)

        print('error: {}'.format(e), file=out)

        return False

    print(' = {}'.format(value), file=out)

    return True


def repl(prompt, stdin=None, out=None):
    ok = True

    while True:
        if prompt:
            print(prompt, end='', file=out, flush=True)

        line = (stdin or sys.stdin).readline()

        if not line:
            return ok

        if line.strip():
            ok = run_line(line, out) and ok


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.expression:
        results = [run_line(x) for x in args.expression]

        return 0 if all(results) else 1

    try:
        repl(args.prompt if sys.stdin.isatty() else '')

    except KeyboardInterrupt:
        print()

    return 0


if __name__ == '__main__':
    sys.exit(main())
