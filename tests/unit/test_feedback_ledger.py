"""Unit tests for FeedbackLedger bucket semantics."""

import math

import pytest
from conftest import make_ref

from rated_ir.core.domain import FeedbackLedger
from rated_ir.core.domain.exceptions import InvalidRatingError

pytestmark = pytest.mark.unit


class TestRecording:
    def test_new_ledger_is_empty(self):
        ledger = FeedbackLedger()
        assert ledger.is_empty()
        assert len(ledger) == 0
        assert dict(ledger.positives()) == {}
        assert dict(ledger.negatives()) == {}

    def test_record_dispatches_on_sign(self):
        ledger = FeedbackLedger()
        a, d = make_ref("A.txt"), make_ref("D.txt")

        ledger.record(a, 1.0)
        ledger.record(d, -0.5)

        assert dict(ledger.positives()) == {a: 1.0}
        assert dict(ledger.negatives()) == {d: -0.5}
        assert not ledger.is_empty()
        assert len(ledger) == 2

    def test_zero_rating_is_positive_and_marks_rated(self):
        ledger = FeedbackLedger()
        doc = make_ref("neutral.txt")

        ledger.record(doc, 0.0)

        assert ledger.has_rating(doc)
        assert dict(ledger.positives()) == {doc: 0.0}
        assert not ledger.negatives()

    def test_rerating_moves_document_between_buckets(self):
        """A +r then -r re-rating leaves the document only in the negative bucket."""
        ledger = FeedbackLedger()
        doc = make_ref("flip.txt")

        ledger.record(doc, 0.75)
        ledger.record(doc, -0.75)

        assert doc not in ledger.positives()
        assert dict(ledger.negatives()) == {doc: -0.75}
        assert len(ledger) == 1

        ledger.record(doc, 0.25)
        assert dict(ledger.positives()) == {doc: 0.25}
        assert doc not in ledger.negatives()

    def test_rerating_same_sign_overwrites(self):
        ledger = FeedbackLedger()
        doc = make_ref("again.txt")
        ledger.record(doc, 0.2)
        ledger.record(doc, 0.9)
        assert dict(ledger.positives()) == {doc: 0.9}

    def test_has_rating_false_for_unrated(self):
        ledger = FeedbackLedger()
        ledger.record(make_ref("a.txt"), 1.0)
        assert not ledger.has_rating(make_ref("b.txt"))


class TestValidation:
    @pytest.mark.parametrize("rating", [1.5, -1.01, math.inf, -math.inf, math.nan])
    def test_out_of_range_ratings_rejected(self, rating):
        ledger = FeedbackLedger()
        with pytest.raises(InvalidRatingError):
            ledger.record(make_ref("x.txt"), rating)
        assert ledger.is_empty()

    def test_record_positive_rejects_negative(self):
        with pytest.raises(InvalidRatingError):
            FeedbackLedger().record_positive(make_ref("x.txt"), -0.1)

    def test_record_negative_rejects_zero(self):
        with pytest.raises(InvalidRatingError):
            FeedbackLedger().record_negative(make_ref("x.txt"), 0.0)

    def test_rejected_rerating_keeps_previous_rating(self):
        """A failed update must not remove the document from its old bucket."""
        ledger = FeedbackLedger()
        doc = make_ref("keep.txt")
        ledger.record(doc, 0.5)

        with pytest.raises(InvalidRatingError):
            ledger.record(doc, -3.0)

        assert dict(ledger.positives()) == {doc: 0.5}
        assert not ledger.negatives()

    def test_views_are_read_only(self):
        ledger = FeedbackLedger()
        with pytest.raises(TypeError):
            ledger.positives()[make_ref("x.txt")] = 1.0  # type: ignore[index]


def test_summary_lists_both_buckets():
    ledger = FeedbackLedger()
    ledger.record(make_ref("good.txt"), 1.0)
    ledger.record(make_ref("bad.txt"), -0.5)

    summary = ledger.summary()

    assert "Positive docs: good.txt=+1.00" in summary
    assert "Negative docs: bad.txt=-0.50" in summary
