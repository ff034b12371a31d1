import pytest

from DocSearch.preprocessing.document import DocumentStatus
from DocSearch.search_server import SearchServer


@pytest.fixture
def server():
    return SearchServer(config={"stop_words": ""})


@pytest.fixture
def numbers_server():
    """Three documents whose relevance order for 'two three one' is 0, 2, 1."""
    server = SearchServer(config={"stop_words": ""})
    server.add_document(0, "one two three", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "three five four", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "six one two seven", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    return server
