"""
Document status and the records kept for and returned from the search server.
"""
from enum import Enum
from typing import Dict, List


class DocumentStatus(Enum):
    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3

    def __str__(self):
        return f"Status: {self.value}"


def compute_average_rating(ratings: List[int]) -> int:
    """
    Arithmetic mean of the ratings truncated toward zero; 0 for no ratings.
    """
    if not ratings:
        return 0
    total = sum(ratings)
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average


class DocumentData:
    """
    Stored metadata of an ingested document.
    Word frequencies are kept so a single document can be inspected without
    scanning the inverted index.
    """

    def __init__(self, status: DocumentStatus, rating: int, word_count: int,
                 word_frequencies: Dict[str, float] = None):
        self.status = status
        self.rating = rating
        self.word_count = word_count
        self.word_frequencies = word_frequencies or {}

    def copy(self) -> "DocumentData":
        return DocumentData(self.status, self.rating, self.word_count, dict(self.word_frequencies))

    def __repr__(self):
        return (f"DocumentData(status={self.status.name}, rating={self.rating}, "
                f"word_count={self.word_count})")


class Document:
    """
    A document returned as a search result.
    """

    def __init__(self, id: int = 0, relevance: float = 0.0, rating: int = 0,
                 status: DocumentStatus = DocumentStatus.ACTUAL):
        self.id = id
        self.relevance = relevance
        self.rating = rating
        self.status = status

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return (self.id, self.relevance, self.rating, self.status) == \
            (other.id, other.relevance, other.rating, other.status)

    def __repr__(self):
        return f"Document(id={self.id}, relevance={self.relevance}, rating={self.rating}, status={self.status.name})"

    def __str__(self):
        return f"{{ document_id = {self.id}, relevance = {self.relevance:.6f}, rating = {self.rating} }}"
