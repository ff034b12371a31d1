import logging

from ..exceptions import MalformedQueryError
from ..preprocessing.preprocess import PreprocessingPipeline, create_preprocessing_pipeline
from ..preprocessing.tokenizer import TokenType, WhitespaceTokenizer

logger = logging.getLogger(__name__)

MINUS_PREFIX = "-"


class Query:
    """Parsed query: words that must match and words that exclude a document."""

    def __init__(self, plus_words=None, minus_words=None):
        self.minus_words = frozenset(minus_words or ())
        # exclusion wins over inclusion
        self.plus_words = frozenset(plus_words or ()) - self.minus_words

    def __repr__(self):
        return f"Query(plus={sorted(self.plus_words)}, minus={sorted(self.minus_words)})"

    def __eq__(self, other):
        if not isinstance(other, Query):
            return NotImplemented
        return self.plus_words == other.plus_words and self.minus_words == other.minus_words


class QueryParser:
    """
    Splits a query into plus and minus words.

    grammar:
    query: term*
    term: MINUS word | word
    word: any run of non-whitespace characters not starting with MINUS
    """

    def __init__(self, pipeline: PreprocessingPipeline = None):
        self.tokenizer = WhitespaceTokenizer()
        self.pipeline = pipeline or create_preprocessing_pipeline(name="QueryPipeline")

    def tokenize(self, text):
        tokens = self.tokenizer.tokenize(text)
        for token in tokens:
            word = token.processed_form
            if not word.startswith(MINUS_PREFIX):
                continue
            stripped = word[len(MINUS_PREFIX):]
            if not stripped:
                raise MalformedQueryError(word, "minus word is empty")
            if stripped.startswith(MINUS_PREFIX):
                raise MalformedQueryError(word, "minus word has more than one minus")
            token.token_type = TokenType.MINUS_WORD
            token.processed_form = stripped
        return tokens

    def parse(self, text) -> Query:
        """
        Parse a raw query.

        Args:
            text: Query string

        Returns:
            Query with stop words removed from both word sets

        Raises:
            InvalidWordError: If a term contains control characters
            MalformedQueryError: If a minus term is empty or doubled
        """
        try:
            tokens = self.tokenize(text)
        except MalformedQueryError as e:
            logger.warning("Rejected query %r: %s", text, e)
            raise

        self.pipeline.preprocess(tokens, text)

        plus_words = set()
        minus_words = set()
        for token in tokens:
            if not token.processed_form:
                continue
            if token.token_type == TokenType.MINUS_WORD:
                minus_words.add(token.processed_form)
            else:
                plus_words.add(token.processed_form)

        return Query(plus_words, minus_words)
