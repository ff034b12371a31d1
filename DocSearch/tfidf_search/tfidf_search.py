import logging
import math
from collections import Counter, defaultdict
from functools import cmp_to_key
from typing import Callable, Dict, List

from ..preprocessing.document import Document, DocumentData
from ..query.parser import Query

logger = logging.getLogger(__name__)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6


class InvertedIndex:
    """Inverted index mapping words to document occurrences."""

    def __init__(self):
        self.index = defaultdict(dict)  # {word: {doc_id: tf}}
        self.documents = {}  # {doc_id: DocumentData}, insertion ordered

    @property
    def document_count(self) -> int:
        return len(self.documents)

    def __contains__(self, doc_id):
        return doc_id in self.documents

    def add_document(self, doc_id: int, document: DocumentData):
        """
        Add a document to the inverted index.

        Args:
            doc_id: Identifier of the document, not yet present
            document: Stored metadata holding the document's term frequencies
        """
        self.documents[doc_id] = document

        for word, tf in document.word_frequencies.items():
            self.index[word][doc_id] = tf

    def get_postings(self, word: str) -> Dict[int, float]:
        """Term frequencies of a word per document; empty for unknown words."""
        return self.index.get(word, {})

    def get_document_frequency(self, word: str) -> int:
        """
        Get the number of documents containing the given word.
        """
        return len(self.get_postings(word))

    def get_inverse_document_frequency(self, word: str) -> float:
        """
        Calculate the inverse document frequency for a word.
        IDF(t) = ln(N/DF(t))

        Args:
            word: The word to calculate IDF for

        Returns:
            IDF value for the word, 0 for unknown words
        """
        df = self.get_document_frequency(word)
        if df == 0:
            return 0
        return math.log(self.document_count / df)

    def contains_word(self, doc_id: int, word: str) -> bool:
        return doc_id in self.get_postings(word)


def compute_tf(words: List[str]) -> Dict[str, float]:
    """
    Compute term frequency (TF) for each distinct word.
    TF(t,d) = f(t,d) / |d|

    Args:
        words: Words of a document after stop word removal

    Returns:
        Dictionary mapping words to their TF scores
    """
    if not words:
        return {}
    inv_word_count = 1.0 / len(words)
    return {word: freq * inv_word_count for word, freq in Counter(words).items()}


def compare_documents(epsilon: float = RELEVANCE_EPSILON):
    """
    Build a comparison function ordering documents by relevance descending,
    then rating descending, then id ascending.
    Relevances closer than epsilon count as equal.
    """
    def compare(lhs: Document, rhs: Document) -> int:
        if abs(lhs.relevance - rhs.relevance) >= epsilon:
            return -1 if lhs.relevance > rhs.relevance else 1
        if lhs.rating != rhs.rating:
            return -1 if lhs.rating > rhs.rating else 1
        return (lhs.id > rhs.id) - (lhs.id < rhs.id)
    return compare


def sort_documents(documents: List[Document], epsilon: float = RELEVANCE_EPSILON) -> List[Document]:
    """
    Sort results best first. The epsilon comparison is not transitive, so the
    input is put in id order first to make the outcome independent of it.
    """
    ordered = sorted(documents, key=lambda doc: doc.id)
    ordered.sort(key=cmp_to_key(compare_documents(epsilon)))
    return ordered


def find_all_documents(inverted_index: InvertedIndex, query: Query,
                       document_filter: Callable) -> List[Document]:
    """
    Score every document matching a plus word, drop excluded and filtered ones.

    Returns:
        Unsorted list of Document results
    """
    relevance = defaultdict(float)
    # sorted so float sums are identical across runs
    for word in sorted(query.plus_words):
        postings = inverted_index.get_postings(word)
        if not postings:
            continue
        idf = inverted_index.get_inverse_document_frequency(word)
        for doc_id, tf in postings.items():
            relevance[doc_id] += idf * tf

    for word in query.minus_words:
        for doc_id in inverted_index.get_postings(word):
            relevance.pop(doc_id, None)

    results = []
    for doc_id, score in relevance.items():
        data = inverted_index.documents[doc_id]
        if document_filter(doc_id, data.status, data.rating):
            results.append(Document(id=doc_id, relevance=score, rating=data.rating, status=data.status))
    return results


def rank_documents(inverted_index: InvertedIndex, query: Query, document_filter: Callable,
                   top_k: int = MAX_RESULT_DOCUMENT_COUNT,
                   epsilon: float = RELEVANCE_EPSILON) -> List[Document]:
    """
    Rank documents by relevance to a parsed query.

    Args:
        inverted_index: Index to search
        query: Parsed query
        document_filter: Callable (document_id, status, rating) -> bool
        top_k: Number of top results to return
        epsilon: Tolerance for treating relevances as equal

    Returns:
        At most top_k Document results, best first
    """
    if not query.plus_words:
        return []

    results = sort_documents(find_all_documents(inverted_index, query, document_filter), epsilon)

    logger.debug("Query %r matched %d documents", query, len(results))
    return results[:top_k]
