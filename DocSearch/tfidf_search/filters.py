"""
Document filters for ranked search.
A filter is any callable taking (document_id, status, rating) and returning bool.
"""
from ..preprocessing.document import DocumentStatus


def status_filter(status: DocumentStatus):
    """Build a filter admitting only documents with the given status."""
    def predicate(document_id, document_status, rating):
        return document_status == status
    return predicate


def default_filter():
    """Filter admitting only ACTUAL documents."""
    return status_filter(DocumentStatus.ACTUAL)


def make_filter(document_filter=None):
    """
    Turn the value passed to a search into a filter callable.

    Args:
        document_filter: None (default filter), a DocumentStatus, or a callable

    Returns:
        Callable (document_id, status, rating) -> bool
    """
    if document_filter is None:
        return default_filter()
    if isinstance(document_filter, DocumentStatus):
        return status_filter(document_filter)
    if callable(document_filter):
        return document_filter
    raise TypeError(f"Expected DocumentStatus or callable filter, got {type(document_filter).__name__}")
