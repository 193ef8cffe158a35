import enum
from dataclasses import dataclass
from typing import Optional, Union

from calclang.errors import CalcError
from calclang.utils import PrintableEnum


class TokenizerError(CalcError):
    pass


class TokenType(PrintableEnum):
    IDENTIFIER = enum.auto()
    NUMBER = enum.auto()
    STRING = enum.auto()
    PLUS = enum.auto()
    MINUS = enum.auto()
    STAR = enum.auto()
    SLASH = enum.auto()
    SEMICOLON = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()
    EQUAL = enum.auto()
    EQUAL_EQUAL = enum.auto()
    BANG_EQUAL = enum.auto()
    BANG = enum.auto()
    EXPR_END = enum.auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    pos: int
    value: Optional[Union[float, str]] = None

    def __str__(self) -> str:
        return f"<{self.type}@{self.pos}>{self.lexeme}"


def _is_digit(s: str) -> bool:
    return "0" <= s <= "9"


def _is_valid_in_identifier(s: str) -> bool:
    return (s.isascii() and s.isalnum()) or s == "_"


def _is_identifier_start(s: str) -> bool:
    return (s.isascii() and s.isalpha()) or s == "_"


SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    ";": TokenType.SEMICOLON,
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
    "=": TokenType.EQUAL,
    "!": TokenType.BANG,
}

# checked before SINGLE_CHAR_TOKENS, "==" must not become two EQUAL tokens
DOUBLE_CHAR_TOKENS = {
    "==": TokenType.EQUAL_EQUAL,
    "!=": TokenType.BANG_EQUAL,
}


def _consume_digits(code: str, i: int) -> int:
    while i < len(code) and _is_digit(code[i]):
        i += 1
    return i


def tokenize(code: str) -> list[Token]:
    """Splits one line into tokens, always terminated by an EXPR_END token.

    Characters that can't start a token (whitespace, unknown symbols) are skipped. Token positions
    are 1-based columns; the EXPR_END token sits one past the last character. Lexical errors report
    the 0-based index of the character where scanning stopped.
    """
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if _is_digit(char):
            number_end_idx = _consume_digits(code, i)
            if number_end_idx < len(code) and code[number_end_idx] == ".":
                fraction_start_idx = number_end_idx + 1
                number_end_idx = _consume_digits(code, fraction_start_idx)
                if number_end_idx == fraction_start_idx:
                    raise TokenizerError("Expected number after '.'", pos=fraction_start_idx)
            lexeme = code[i:number_end_idx]
            tokens.append(Token(type=TokenType.NUMBER, lexeme=lexeme, pos=i + 1, value=float(lexeme)))
            i = number_end_idx
        elif _is_identifier_start(char):
            ident_end_idx = i + 1
            while ident_end_idx < len(code) and _is_valid_in_identifier(code[ident_end_idx]):
                ident_end_idx += 1
            lexeme = code[i:ident_end_idx]
            tokens.append(Token(type=TokenType.IDENTIFIER, lexeme=lexeme, pos=i + 1, value=lexeme))
            i = ident_end_idx
        elif char == '"':
            string_end_idx = i + 1
            while string_end_idx < len(code) and code[string_end_idx] not in '"\n':
                string_end_idx += 1
            if string_end_idx >= len(code) or code[string_end_idx] != '"':
                raise TokenizerError("Unexpected end of line in string", pos=string_end_idx)
            lexeme = code[i : string_end_idx + 1]
            tokens.append(Token(type=TokenType.STRING, lexeme=lexeme, pos=i + 1, value=lexeme[1:-1]))
            i = string_end_idx + 1
        elif code[i : i + 2] in DOUBLE_CHAR_TOKENS:
            lexeme = code[i : i + 2]
            tokens.append(Token(type=DOUBLE_CHAR_TOKENS[lexeme], lexeme=lexeme, pos=i + 1))
            i += 2
        elif char in SINGLE_CHAR_TOKENS:
            tokens.append(Token(type=SINGLE_CHAR_TOKENS[char], lexeme=char, pos=i + 1))
            i += 1
        else:
            i += 1

    tokens.append(Token(type=TokenType.EXPR_END, lexeme="", pos=len(code) + 1))
    return tokens
