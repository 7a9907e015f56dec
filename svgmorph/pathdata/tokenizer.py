import re

from svgpathtools.path import COMMANDS, COMMAND_RE

from svgmorph.pathdata.errors import PathSyntaxError

UPPERCASE = set('MZLHVCSQTA')

SEPARATOR_RE = re.compile(r'[\s,]+')
NUMBER_RE = re.compile(r'^[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$')


def is_number(token):
    return NUMBER_RE.match(token) is not None


def tokenize(pathdef):
    """Split path data into command letters and numeric literals.

    Fields are separated by whitespace and commas. A command letter glued
    to its numbers ('M0', '10L20') is split off; any other character stays
    in its token so that the parser can report it.
    """
    tokens = []
    for field in SEPARATOR_RE.split(pathdef):
        for token in COMMAND_RE.split(field):
            if token:
                tokens.append(token)
    return tokens


class TokenCursor:
    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.position = 0

    def __len__(self):
        return len(self.tokens)

    @property
    def exhausted(self):
        return self.position >= len(self.tokens)

    def peek(self):
        if self.exhausted:
            return None
        return self.tokens[self.position]

    def next(self):
        token = self.peek()
        if token is None:
            raise PathSyntaxError('Unexpected end of path data', None, self.position)
        self.position += 1
        return token

    def rewind(self):
        if self.position == 0:
            raise IndexError('cannot rewind before the first token')
        self.position -= 1

    def take(self, count):
        if self.position + count > len(self.tokens):
            raise PathSyntaxError('Unexpected end of path data, %s more values expected' % (
                self.position + count - len(self.tokens)), None, len(self.tokens))
        taken = self.tokens[self.position:self.position + count]
        self.position += count
        return taken
