"""
Preprocessing module for text processing in the search server.
Includes lowercase conversion and stop word filtering.
"""
from abc import ABC, abstractmethod
from typing import Iterable

from .tokenizer import Token, TokenType, WhitespaceTokenizer


class TokenPreprocessor(ABC):
    @abstractmethod
    def preprocess(self, token: Token, document: str) -> Token:
        raise NotImplementedError()

    def preprocess_all(self, tokens: list[Token], document: str) -> list[Token]:
        return [self.preprocess(token, document) for token in tokens]


class LowercasePreprocessor(TokenPreprocessor):
    def preprocess(self, token: Token, document: str) -> Token:
        token.processed_form = token.processed_form.lower()
        return token


class StopWordsPreprocessor(TokenPreprocessor):
    """Preprocessor for removing stop words."""

    def __init__(self, stop_words: Iterable[str] = ()):
        """
        Args:
            stop_words: Words to drop; compared case-insensitively
        """
        self.stop_words = frozenset(word.lower() for word in stop_words)

    def preprocess(self, token: Token, document: str) -> Token:
        """
        If token is a stop word, replace its processed_form with empty string.

        Minus words are checked too, after the parser has stripped the prefix.
        """
        if token.token_type in (TokenType.WORD, TokenType.MINUS_WORD) \
                and token.processed_form.lower() in self.stop_words:
            token.processed_form = ""
        return token


class PreprocessingPipeline:
    """Pipeline of token preprocessors."""

    def __init__(self, preprocessors, name="Default Pipeline"):
        self.preprocessors = preprocessors
        self.name = name

    def preprocess(self, tokens: list[Token], document: str) -> list[Token]:
        """
        Apply all preprocessors to the tokens in place.

        Args:
            tokens: List of tokens to preprocess
            document: Original document text

        Returns:
            The same list of tokens
        """
        for preprocessor in self.preprocessors:
            preprocessor.preprocess_all(tokens, document)

        return tokens


def split_into_words(text: str) -> list[str]:
    """Tokenize text and return lowercased words, stop words included."""
    tokens = WhitespaceTokenizer().tokenize(text)
    PreprocessingPipeline([LowercasePreprocessor()], name="SplitPipeline").preprocess(tokens, text)
    return [token.processed_form for token in tokens]


def parse_stop_words(stop_words) -> frozenset:
    """
    Normalize stop words given either as a text or as an iterable of words.

    Raises:
        InvalidWordError: If a stop word contains control characters
    """
    if stop_words is None:
        return frozenset()
    if isinstance(stop_words, str):
        return frozenset(split_into_words(stop_words))

    words = []
    for item in stop_words:
        words.extend(split_into_words(item))
    return frozenset(words)


def create_preprocessing_pipeline(stop_words=(), name="IndexingPipeline") -> PreprocessingPipeline:
    """Build the lowercase + stop word pipeline shared by indexing and querying."""
    return PreprocessingPipeline(
        [LowercasePreprocessor(), StopWordsPreprocessor(stop_words)],
        name=name
    )
