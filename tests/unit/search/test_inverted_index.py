"""Unit tests for the append-only inverted index."""

import pytest

from search_server.search.errors import InvalidArgumentError, OutOfRangeError, PreconditionViolationError
from search_server.search.index import InvertedIndex
from search_server.search.models import DocumentData, DocumentStatus
from search_server.search.stop_words import StopWordSet


@pytest.fixture
def index() -> InvertedIndex:
    return InvertedIndex(StopWordSet("and with"))


@pytest.mark.unit
class TestAddDocument:
    """Adding documents records postings and metadata."""

    def test_records_term_frequencies_without_stop_words(self, index):
        index.add_document(3, "fluffy cat and fluffy tail", DocumentStatus.ACTUAL, [4])

        assert dict(index.term_postings("fluffy")) == {3: 0.5}
        assert dict(index.term_postings("cat")) == {3: 0.25}
        assert dict(index.term_postings("and")) == {}

    def test_frequencies_of_a_document_sum_to_one(self, index):
        index.add_document(0, "a b c a b a d and with", DocumentStatus.ACTUAL, [])

        total = sum(index.term_postings(term).get(0, 0.0) for term in "abcd")
        assert total == pytest.approx(1.0)

    def test_identical_texts_get_identical_frequencies(self, index):
        index.add_document(0, "cat dog cat", DocumentStatus.ACTUAL, [])
        index.add_document(1, "cat dog cat", DocumentStatus.BANNED, [])

        assert dict(index.term_postings("cat")) == {0: pytest.approx(2 / 3), 1: pytest.approx(2 / 3)}

    def test_returns_and_stores_metadata(self, index):
        data = index.add_document(7, "cat", DocumentStatus.BANNED, [7, 2, 7])

        assert data == DocumentData(status=DocumentStatus.BANNED, rating=5)
        assert index.document_data(7) == data

    def test_stop_word_only_document_is_still_indexed(self, index):
        index.add_document(4, "and with and", DocumentStatus.ACTUAL, [1, 2])

        assert index.document_count == 1
        assert 4 in index
        assert index.document_data(4).rating == 1
        assert index.get_stats()["num_terms"] == 0

    def test_empty_document_is_still_indexed(self, index):
        index.add_document(0, "", DocumentStatus.IRRELEVANT, [])

        assert index.document_ids == (0,)
        assert index.document_data(0) == DocumentData(status=DocumentStatus.IRRELEVANT, rating=0)

    def test_negative_id_is_rejected(self, index):
        with pytest.raises(InvalidArgumentError, match="negative"):
            index.add_document(-1, "text", DocumentStatus.ACTUAL, [])

        assert index.document_count == 0

    def test_duplicate_id_is_rejected_and_index_unchanged(self, index):
        index.add_document(1, "cat", DocumentStatus.ACTUAL, [5])

        with pytest.raises(InvalidArgumentError, match="existing"):
            index.add_document(1, "dog", DocumentStatus.BANNED, [1])

        assert index.document_count == 1
        assert index.has_term("dog") is False
        assert index.document_data(1).status == DocumentStatus.ACTUAL

    def test_control_characters_are_rejected_before_mutation(self, index):
        with pytest.raises(InvalidArgumentError):
            index.add_document(2, "cat \x12dog", DocumentStatus.ACTUAL, [])

        assert index.document_count == 0
        assert 2 not in index
        assert index.has_term("cat") is False

    def test_failed_rating_average_leaves_index_unchanged(self, index):
        index.add_document(0, "white cat", DocumentStatus.ACTUAL, [1])

        with pytest.raises(TypeError):
            index.add_document(1, "fluffy cat", DocumentStatus.ACTUAL, [1, "two"])  # type: ignore[list-item]

        assert index.document_count == 1
        assert 1 not in index
        assert dict(index.term_postings("cat")) == {0: 0.5}
        assert index.has_term("fluffy") is False

    def test_accepts_ratings_from_a_generator(self, index):
        data = index.add_document(1, "fluffy cat", DocumentStatus.ACTUAL, (rating for rating in [1, 2, 6]))

        assert data.rating == 3
        assert index.document_ids == (1,)


@pytest.mark.unit
class TestLookups:
    """Positional and metadata lookups."""

    def test_document_id_at_follows_insertion_order(self, index):
        for document_id in (42, 3, 17):
            index.add_document(document_id, "cat", DocumentStatus.ACTUAL, [])

        assert [index.document_id_at(position) for position in range(3)] == [42, 3, 17]
        assert index.document_ids == (42, 3, 17)
        assert len(index) == 3

    @pytest.mark.parametrize("position", [-1, 1, 10])
    def test_document_id_at_out_of_range(self, index, position):
        index.add_document(0, "cat", DocumentStatus.ACTUAL, [])

        with pytest.raises(OutOfRangeError):
            index.document_id_at(position)

    def test_out_of_range_is_an_index_error(self, index):
        with pytest.raises(IndexError):
            index.document_id_at(0)

    def test_term_postings_are_read_only(self, index):
        index.add_document(0, "cat", DocumentStatus.ACTUAL, [])
        postings = index.term_postings("cat")

        with pytest.raises(TypeError):
            postings[1] = 1.0  # type: ignore[index]

    def test_unknown_term_has_empty_postings(self, index):
        assert len(index.term_postings("missing")) == 0

    def test_unknown_document_data_is_precondition_violation(self, index):
        with pytest.raises(PreconditionViolationError):
            index.document_data(99)

    def test_get_stats(self, index):
        index.add_document(0, "cat dog", DocumentStatus.ACTUAL, [])
        index.add_document(1, "cat", DocumentStatus.ACTUAL, [])

        stats = index.get_stats()

        assert stats["num_terms"] == 2
        assert stats["num_documents"] == 2
        assert stats["avg_postings_per_term"] == 1.5
