"""
Whitespace tokenizer producing word tokens for indexing and querying.
"""
import re
import unicodedata
from abc import ABC, abstractmethod
from enum import Enum

from ..exceptions import InvalidWordError


class TokenType(Enum):
    WORD = "word"
    MINUS_WORD = "minus_word"


class Token:
    """A single token cut out of a text."""

    def __init__(self, token_type: TokenType, processed_form: str, position: int, length: int):
        self.token_type = token_type
        self.processed_form = processed_form
        self.position = position
        self.length = length

    def __repr__(self):
        return f"Token({self.token_type.name}, {self.processed_form!r}, {self.position})"


def is_valid_word(word: str) -> bool:
    """A word is valid when it is non-empty and holds no control characters."""
    return bool(word) and not any(unicodedata.category(c) == "Cc" for c in word)


class Tokenizer(ABC):
    @abstractmethod
    def tokenize(self, text: str) -> list[Token]:
        raise NotImplementedError()


class WhitespaceTokenizer(Tokenizer):
    """
    Splits text on spaces, tabs and line breaks and validates every token.
    Any other control character stays inside its token and is rejected.
    """

    pattern = re.compile(r"[^ \t\n\r]+")

    def tokenize(self, text: str) -> list[Token]:
        """
        Split text into word tokens.

        Args:
            text: Raw text

        Returns:
            List of WORD tokens in order of appearance

        Raises:
            InvalidWordError: If a token contains control characters
        """
        tokens = []
        for match in self.pattern.finditer(text or ""):
            word = match.group()
            if not is_valid_word(word):
                raise InvalidWordError(word)
            tokens.append(Token(
                token_type=TokenType.WORD,
                processed_form=word,
                position=match.start(),
                length=len(word)
            ))
        return tokens
