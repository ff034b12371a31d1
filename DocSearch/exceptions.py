"""
Exceptions raised by the search server.
Every failure is detected before the index is touched, so a raised error
always leaves the server in the state it had before the call.
"""
from enum import Enum


class ErrorKind(Enum):
    DUPLICATE_ID = "DuplicateId"
    INVALID_DOCUMENT_ID = "InvalidDocumentId"
    INVALID_WORD = "InvalidWord"
    MALFORMED_QUERY = "MalformedQuery"
    DOCUMENT_NOT_FOUND = "DocumentNotFound"


class SearchServerError(Exception):
    """Base class for all search server errors."""
    kind = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class DuplicateIdError(SearchServerError, ValueError):
    kind = ErrorKind.DUPLICATE_ID

    def __init__(self, document_id: int):
        super().__init__(f"Document with id {document_id} already exists")
        self.document_id = document_id


class InvalidDocumentIdError(SearchServerError, ValueError):
    kind = ErrorKind.INVALID_DOCUMENT_ID

    def __init__(self, document_id: int):
        super().__init__(f"Document id must be non-negative, got {document_id}")
        self.document_id = document_id


class InvalidWordError(SearchServerError, ValueError):
    kind = ErrorKind.INVALID_WORD

    def __init__(self, word: str):
        super().__init__(f"Word {word!r} contains invalid characters")
        self.word = word


class MalformedQueryError(SearchServerError, ValueError):
    kind = ErrorKind.MALFORMED_QUERY

    def __init__(self, term: str, reason: str):
        super().__init__(f"Malformed query term {term!r}: {reason}")
        self.term = term
        self.reason = reason


class DocumentNotFoundError(SearchServerError, KeyError):
    kind = ErrorKind.DOCUMENT_NOT_FOUND

    def __init__(self, document_id: int):
        super().__init__(f"Document with id {document_id} not found")
        self.document_id = document_id
