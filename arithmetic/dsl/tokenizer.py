from .errors import LexicalError
from .results import Err, Ok
from .tokens import Token, TokenType

SINGLE_CHAR_TOKENS = {
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.STAR,
    '/': TokenType.SLASH,
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
}


def is_digit(char):
    # str.isdigit() also accepts non-ASCII digits such as '²'.
    return '0' <= char <= '9'


def tokenize(text):
    """
    Split ``text`` into tokens, terminated by a single END token.

    Returns:
        Ok(list of Token) or Err(LexicalError) for the first character that
        is not whitespace, a digit, an operator or a parenthesis.
    """
    tokens = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char.isspace():
            pos += 1
            continue

        if is_digit(char):
            start = pos
            while pos < length and is_digit(text[pos]):
                pos += 1
            tokens.append(Token(TokenType.NUMBER, text[start:pos], start))
            continue

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is None:
            return Err(LexicalError(char, pos))

        tokens.append(Token(kind, char, pos))
        pos += 1

    tokens.append(Token(TokenType.END, None, length))
    return Ok(tokens)
