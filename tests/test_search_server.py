import math

import pytest

from DocSearch import (
    DocumentNotFoundError,
    DocumentStatus,
    DuplicateIdError,
    ErrorKind,
    InvalidDocumentIdError,
    InvalidWordError,
    MalformedQueryError,
    SearchServer,
)

RATINGS = [1, 2, 3]


def test_adding_documents(server):
    server.add_document(2, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
    found = server.find_top_documents("cat")
    assert len(found) == 1
    assert found[0].id == 2
    assert server.document_count() == 1


def test_stop_words_excluded_from_added_document_content(server):
    server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
    found = server.find_top_documents("in")
    assert len(found) == 1
    assert found[0].id == 42

    server = SearchServer(stop_words="in the")
    server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
    assert server.find_top_documents("in") == []


def test_minus_words(server):
    server.add_document(1, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
    server.add_document(2, "cat in city", DocumentStatus.ACTUAL, RATINGS)
    found = server.find_top_documents("in -the city")
    assert [doc.id for doc in found] == [2]


def test_matching():
    server = SearchServer(stop_words="the a b")
    server.add_document(42, "cat in the city", DocumentStatus.ACTUAL, RATINGS)
    server.add_document(43, "cat in city", DocumentStatus.ACTUAL, RATINGS)
    words, status = server.match_document("in the city", 42)
    assert words == ["city", "in"]
    assert status == DocumentStatus.ACTUAL


def test_matching_with_minus_word_returns_empty(server):
    server.add_document(42, "cat in the city", DocumentStatus.BANNED, RATINGS)
    words, status = server.match_document("cat -city", 42)
    assert words == []
    assert status == DocumentStatus.BANNED


def test_matching_unknown_document(server):
    with pytest.raises(DocumentNotFoundError) as excinfo:
        server.match_document("cat", 7)
    assert excinfo.value.kind == ErrorKind.DOCUMENT_NOT_FOUND


def test_matching_empty_document(server):
    server.add_document(5, "", DocumentStatus.ACTUAL, [])
    assert server.match_document("", 5) == ([], DocumentStatus.ACTUAL)
    assert server.find_top_documents("cat") == []


def test_sort_by_relevance(numbers_server):
    found = numbers_server.find_top_documents("two three one")
    assert [doc.id for doc in found] == [0, 2, 1]
    assert all(a.relevance >= b.relevance for a, b in zip(found, found[1:]))


def test_results_are_deterministic(numbers_server):
    assert numbers_server.find_top_documents("two three one") == \
        numbers_server.find_top_documents("two three one")


def test_equal_relevance_sorted_by_rating_then_id(server):
    server.add_document(3, "cat", DocumentStatus.ACTUAL, [1])
    server.add_document(1, "cat", DocumentStatus.ACTUAL, [1])
    server.add_document(2, "cat", DocumentStatus.ACTUAL, [9])
    server.add_document(4, "dog", DocumentStatus.ACTUAL, [1])
    assert [doc.id for doc in server.find_top_documents("cat")] == [2, 1, 3]


def test_rating(server):
    server.add_document(0, "three five four", DocumentStatus.ACTUAL, [7, 2, 7])
    assert server.find_top_documents("two three one")[0].rating == 5


def test_rating_truncates_toward_zero(server):
    server.add_document(0, "cat", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(1, "dog", DocumentStatus.ACTUAL, [-7, 2])
    server.add_document(2, "bird", DocumentStatus.ACTUAL, [])
    assert server.get_document(0).rating == -1
    assert server.get_document(1).rating == -2
    assert server.get_document(2).rating == 0


def test_predicate(server):
    server.add_document(0, "three five four", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(1, "six seven five four", DocumentStatus.BANNED, [17, 22, 7])
    found = server.find_top_documents(
        "three five four", lambda document_id, status, rating: status == DocumentStatus.BANNED)
    assert [doc.id for doc in found] == [1]


def test_search_by_status(server):
    server.add_document(0, "three five four", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(1, "six seven five four", DocumentStatus.BANNED, [17, 22, 7])
    found = server.find_top_documents("three five four", DocumentStatus.BANNED)
    assert [doc.id for doc in found] == [1]
    by_predicate = server.find_top_documents(
        "three five four", lambda document_id, status, rating: status == DocumentStatus.BANNED)
    assert found == by_predicate


def test_relevance_computing(server):
    server.add_document(0, "three five four", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(1, "three eight nine", DocumentStatus.ACTUAL, [6, 2, 7])
    relevance = server.find_top_documents("three one four")[0].relevance
    assert relevance == pytest.approx(math.log(2 / 2) / 3 + math.log(2) / 3)


def test_result_count_is_limited(server):
    for i in range(10):
        server.add_document(i, "cat city", DocumentStatus.ACTUAL, [i])
    assert len(server.find_top_documents("cat")) == 5


def test_max_result_document_count_from_config():
    server = SearchServer(config={"search": {"max_result_document_count": 2}})
    for i in range(4):
        server.add_document(i, "cat", DocumentStatus.ACTUAL, [i])
    assert [doc.id for doc in server.find_top_documents("cat")] == [3, 2]


def test_empty_query_returns_nothing(numbers_server):
    assert numbers_server.find_top_documents("") == []
    assert numbers_server.find_top_documents("-one") == []


def test_duplicate_id_rejected(server):
    server.add_document(1, "cat", DocumentStatus.ACTUAL, [1])
    with pytest.raises(DuplicateIdError) as excinfo:
        server.add_document(1, "dog", DocumentStatus.BANNED, [9])
    assert excinfo.value.kind == ErrorKind.DUPLICATE_ID
    assert server.document_count() == 1
    assert server.get_document(1).status == DocumentStatus.ACTUAL
    assert server.find_top_documents("dog", DocumentStatus.BANNED) == []


def test_negative_id_rejected(server):
    with pytest.raises(InvalidDocumentIdError):
        server.add_document(-1, "cat", DocumentStatus.ACTUAL, [1])
    assert server.document_count() == 0


def test_failed_ingestion_leaves_index_untouched(server):
    server.add_document(1, "cat city", DocumentStatus.ACTUAL, [1])
    with pytest.raises(InvalidWordError):
        server.add_document(2, "dog bi\x12rd", DocumentStatus.ACTUAL, [1])
    assert server.document_count() == 1
    assert server.get_document_ids() == [1]
    assert set(server.inverted_index.index) == {"cat", "city"}


def test_malformed_queries(server):
    server.add_document(1, "cat city", DocumentStatus.ACTUAL, [1])
    with pytest.raises(MalformedQueryError):
        server.find_top_documents("cat -")
    with pytest.raises(MalformedQueryError):
        server.match_document("cat --city", 1)


def test_set_stop_words_last_value_wins(server):
    server.set_stop_words("cat")
    server.set_stop_words("in the")
    server.add_document(1, "cat in the city", DocumentStatus.ACTUAL, [1])
    assert server.get_word_frequencies(1) == {"cat": 0.5, "city": 0.5}


def test_set_stop_words_invalid_keeps_previous(server):
    server.set_stop_words("in")
    with pytest.raises(InvalidWordError):
        server.set_stop_words("th\x01e")
    assert server.stop_words == frozenset({"in"})


def test_stop_word_filtering_is_idempotent():
    entries = []
    for _ in range(2):
        server = SearchServer(stop_words="in the")
        server.add_document(1, "cat in the city", DocumentStatus.ACTUAL, [1])
        entries.append({word: dict(postings) for word, postings in server.inverted_index.index.items()})
    assert entries[0] == entries[1]


def test_document_ids_in_insertion_order(server):
    for document_id in (5, 1, 3):
        server.add_document(document_id, "cat", DocumentStatus.ACTUAL, [])
    assert server.get_document_ids() == [5, 1, 3]
    assert list(server) == [5, 1, 3]
    assert len(server) == 3


def test_word_frequencies(server):
    server.add_document(1, "Cat cat city", DocumentStatus.ACTUAL, [])
    frequencies = server.get_word_frequencies(1)
    assert frequencies["cat"] == pytest.approx(2 / 3)
    assert frequencies["city"] == pytest.approx(1 / 3)
    assert server.get_word_frequencies(99) == {}


def test_get_document_unknown(server):
    with pytest.raises(DocumentNotFoundError):
        server.get_document(3)


def test_case_insensitive_search(server):
    server.add_document(1, "Fluffy CAT", DocumentStatus.ACTUAL, [])
    assert [doc.id for doc in server.find_top_documents("cat FLUFFY")] == [1]


def test_get_document_returns_copy(server):
    server.add_document(1, "cat city", DocumentStatus.ACTUAL, [4])
    data = server.get_document(1)
    data.status = DocumentStatus.BANNED
    data.rating = 100
    data.word_frequencies["dog"] = 1.0
    stored = server.get_document(1)
    assert stored.status == DocumentStatus.ACTUAL
    assert stored.rating == 4
    assert "dog" not in stored.word_frequencies
    assert [doc.id for doc in server.find_top_documents("cat")] == [1]
