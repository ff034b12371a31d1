"""
DocSearch - in-memory document search server with TF-IDF ranking.
"""
from .exceptions import (
    ErrorKind,
    SearchServerError,
    DuplicateIdError,
    InvalidDocumentIdError,
    InvalidWordError,
    MalformedQueryError,
    DocumentNotFoundError,
)
from .preprocessing.document import Document, DocumentData, DocumentStatus
from .query.parser import Query, QueryParser
from .search_server import SearchServer
from .tfidf_search.filters import default_filter, status_filter

__all__ = [
    "ErrorKind",
    "SearchServerError",
    "DuplicateIdError",
    "InvalidDocumentIdError",
    "InvalidWordError",
    "MalformedQueryError",
    "DocumentNotFoundError",
    "Document",
    "DocumentData",
    "DocumentStatus",
    "Query",
    "QueryParser",
    "SearchServer",
    "default_filter",
    "status_filter",
]
