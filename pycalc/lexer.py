import logging

from re import compile

from pycalc.utils import SyntaxFault, format_number


__version__ = '0.1'

__all__ = ['Token', 'Lexer', 'tokenize', 'lit', 'LITERAL',
           'PLUS', 'MINUS', 'TIMES', 'DIVIDE', 'POWER', 'LPAREN', 'RPAREN']

logger = logging.getLogger(__name__)

LITERAL = 'literal'

NUMBER_RUN = compile(r'[0-9.]+')


class Token:
    __slots__ = ['kind', 'value']

    def __init__(self, kind, value=None):
        self.kind = kind
        self.value = value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented

        return self.kind == other.kind and self.value == other.value

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        if self.kind == LITERAL:
            return 'lit({})'.format(format_number(self.value))

        return 'Token({!r})'.format(self.kind)

    def __str__(self):
        return format_number(self.value) if self.kind == LITERAL else self.kind

    @property
    def is_literal(self):
        return self.kind == LITERAL


def lit(value):
    return Token(LITERAL, float(value))


PLUS = Token('+')
MINUS = Token('-')
TIMES = Token('*')
DIVIDE = Token('/')
POWER = Token('^')
LPAREN = Token('(')
RPAREN = Token(')')

SINGLE_CHAR = {t.kind: t for t in [PLUS, MINUS, TIMES, DIVIDE, POWER, LPAREN, RPAREN]}


class Lexer:
    """Splits one line of text into tokens, one `next_token` call at a time.

    The only state is the unconsumed rest of the line. Whitespace between
    tokens is skipped; `next_token` returns None once nothing but whitespace
    remains.
    """

    __slots__ = ['source', 'remaining']

    def __init__(self, source):
        if type(source) is not str:
            raise TypeError('Lexer works on strings, got {} instead!'.format(type(source)))

        self.source = source
        self.remaining = source

    @property
    def position(self):
        return len(self.source) - len(self.remaining)

    def next_token(self):
        self.remaining = self.remaining.lstrip()

        if not self.remaining:
            return None

        head = self.remaining[0]

        if head in SINGLE_CHAR:
            self.remaining = self.remaining[1:]

            return SINGLE_CHAR[head]

        a = NUMBER_RUN.match(self.remaining)

        if a is None:
            raise SyntaxFault('Unrecognized character "{}" at column {}!'.format(head, self.position),
                              self.position, head)

        run = a.group()

        try:
            token = lit(run)

        except ValueError:
            raise SyntaxFault('Malformed number "{}" at column {}!'.format(run, self.position),
                              self.position, run) from None

        self.remaining = self.remaining[len(run):]

        return token

    def __iter__(self):
        while True:
            token = self.next_token()

            if token is None:
                return

            yield token


def tokenize(source):
    tokens = list(Lexer(source))

    logger.debug('Tokenized %r into %s', source, tokens)

    return tokens
