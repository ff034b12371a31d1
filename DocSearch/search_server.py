"""
In-memory search server: document ingestion, ranked search and matching.
"""
import logging
from typing import Dict, List, Tuple

from .config import load_config, merge_config, DEFAULT_CONFIG
from .exceptions import DocumentNotFoundError, DuplicateIdError, InvalidDocumentIdError
from .locking import ReadWriteLock
from .preprocessing.document import DocumentData, DocumentStatus, compute_average_rating
from .preprocessing.preprocess import create_preprocessing_pipeline, parse_stop_words
from .preprocessing.tokenizer import TokenType, WhitespaceTokenizer
from .query.parser import Query, QueryParser
from .tfidf_search.filters import make_filter
from .tfidf_search.tfidf_search import InvertedIndex, compute_tf, rank_documents

logger = logging.getLogger(__name__)


class SearchServer:
    """
    Owns the document store and the inverted index.
    Ingestion takes the write lock, searches and matching take the read lock.
    """

    def __init__(self, stop_words=None, config=None):
        """
        Initialize the search server.

        Args:
            stop_words: Initial stop words as a text or an iterable of words
                (overrides config["stop_words"])
            config: Configuration dictionary (overrides config.json)
        """
        self.config = merge_config(DEFAULT_CONFIG, config) if config is not None else load_config()

        search_config = self.config.get("search", {})
        self.max_result_document_count = search_config.get("max_result_document_count", 5)
        self.relevance_epsilon = search_config.get("relevance_epsilon", 1e-6)

        self.inverted_index = InvertedIndex()
        self.tokenizer = WhitespaceTokenizer()
        self._lock = ReadWriteLock()

        self.stop_words = frozenset()
        self._rebuild_pipelines(self.stop_words)
        self.set_stop_words(self.config.get("stop_words", "") if stop_words is None else stop_words)

    def _rebuild_pipelines(self, stop_words):
        self.pipeline = create_preprocessing_pipeline(stop_words, name="IndexingPipeline")
        self.query_parser = QueryParser(create_preprocessing_pipeline(stop_words, name="QueryPipeline"))

    def set_stop_words(self, stop_words):
        """
        Replace the stop words. Documents added earlier keep their index entries.

        Raises:
            InvalidWordError: If a stop word contains control characters
        """
        words = parse_stop_words(stop_words)
        with self._lock.write_locked():
            self.stop_words = words
            self._rebuild_pipelines(words)
        logger.info("Stop words set to %s", sorted(words))

    def _split_into_words_no_stop(self, text) -> List[str]:
        tokens = self.tokenizer.tokenize(text)
        self.pipeline.preprocess(tokens, text)
        return [token.processed_form for token in tokens
                if token.token_type == TokenType.WORD and token.processed_form]

    def add_document(self, document_id: int, document: str,
                     status: DocumentStatus = DocumentStatus.ACTUAL, ratings: List[int] = None):
        """
        Index a document.

        Args:
            document_id: Non-negative identifier, unique within the server
            document: Document text
            status: Caller supplied classification
            ratings: Rating values; their truncated mean is stored

        Raises:
            InvalidDocumentIdError: If document_id is negative
            DuplicateIdError: If document_id was already added
            InvalidWordError: If a word contains control characters
        """
        if document_id < 0:
            logger.warning("Rejected document with negative id %d", document_id)
            raise InvalidDocumentIdError(document_id)

        with self._lock.write_locked():
            if document_id in self.inverted_index:
                logger.warning("Rejected duplicate document id %d", document_id)
                raise DuplicateIdError(document_id)

            # everything is computed before the index is touched
            words = self._split_into_words_no_stop(document)
            data = DocumentData(
                status=status,
                rating=compute_average_rating(ratings or []),
                word_count=len(words),
                word_frequencies=compute_tf(words)
            )
            self.inverted_index.add_document(document_id, data)

        logger.debug("Added document %d with %d distinct words", document_id, len(data.word_frequencies))

    def find_top_documents(self, raw_query: str, document_filter=None):
        """
        Search for the documents most relevant to the query.

        Args:
            raw_query: Query string; words prefixed with '-' exclude documents
            document_filter: None for ACTUAL documents only, a DocumentStatus,
                or a callable (document_id, status, rating) -> bool

        Returns:
            List of at most max_result_document_count Document results

        Raises:
            InvalidWordError, MalformedQueryError: If the query is malformed
        """
        predicate = make_filter(document_filter)
        with self._lock.read_locked():
            query = self.query_parser.parse(raw_query)
            return rank_documents(
                self.inverted_index,
                query,
                predicate,
                top_k=self.max_result_document_count,
                epsilon=self.relevance_epsilon
            )

    def match_document(self, raw_query: str, document_id: int) -> Tuple[List[str], DocumentStatus]:
        """
        Report which plus words of the query occur in a document.

        Returns:
            (sorted matched words, document status); the word list is empty if
            the document contains a minus word

        Raises:
            DocumentNotFoundError: If no document has this id
            InvalidWordError, MalformedQueryError: If the query is malformed
        """
        with self._lock.read_locked():
            query = self.query_parser.parse(raw_query)
            data = self.inverted_index.documents.get(document_id)
            if data is None:
                raise DocumentNotFoundError(document_id)
            return match_query(self.inverted_index, query, document_id), data.status

    def document_count(self) -> int:
        with self._lock.read_locked():
            return self.inverted_index.document_count

    def get_document_ids(self) -> List[int]:
        """Document ids in insertion order."""
        with self._lock.read_locked():
            return list(self.inverted_index.documents)

    def get_document(self, document_id: int) -> DocumentData:
        with self._lock.read_locked():
            data = self.inverted_index.documents.get(document_id)
            if data is None:
                raise DocumentNotFoundError(document_id)
            return data.copy()

    def get_word_frequencies(self, document_id: int) -> Dict[str, float]:
        with self._lock.read_locked():
            data = self.inverted_index.documents.get(document_id)
            return dict(data.word_frequencies) if data else {}

    def __len__(self):
        return self.document_count()

    def __iter__(self):
        return iter(self.get_document_ids())


def match_query(inverted_index: InvertedIndex, query: Query, document_id: int) -> List[str]:
    """Sorted plus words present in the document, or [] if a minus word is present."""
    for word in query.minus_words:
        if inverted_index.contains_word(document_id, word):
            return []
    return sorted(word for word in query.plus_words
                  if inverted_index.contains_word(document_id, word))
