"""Unit tests for graded and binary feedback strategies."""

import pytest
from conftest import DictCorpus, make_ref

from rated_ir.core.domain import FeedbackLedger, HashMapVector
from rated_ir.core.domain.exceptions import InvalidConfigurationError
from rated_ir.core.services import BinaryFeedback, GradedFeedback, RevisionWeights, build_strategy

pytestmark = pytest.mark.unit


class TestGradedFeedback:
    @pytest.mark.parametrize(
        "response,expected",
        [("1", 1.0), ("-1", -1.0), (" 0.5 ", 0.5), ("0", 0.0), ("-0.25", -0.25), ("+1", 1.0)],
    )
    def test_parse_valid(self, response, expected):
        assert GradedFeedback().parse(response) == expected

    @pytest.mark.parametrize("response", ["", "yes", "1.5", "-2", "nan", "inf", "u"])
    def test_parse_invalid(self, response):
        assert GradedFeedback().parse(response) is None

    def test_prompt_mentions_document_and_scale(self):
        text = GradedFeedback().prompt_text(3, make_ref("paper.txt"))
        assert "#3:paper.txt" in text
        assert "-1" in text and "+1" in text

    def test_revise_uses_configured_weights(self, query_vector):
        good = make_ref("good.txt")
        corpus = DictCorpus({good: HashMapVector({"deep": 1.0})})
        ledger = FeedbackLedger()
        strategy = GradedFeedback(RevisionWeights(alpha=1.0, beta=2.0, gamma=1.0))
        strategy.record(ledger, good, 1.0)

        revised = strategy.revise(query_vector, ledger, corpus.vector_of)

        assert revised.weight("deep") == pytest.approx(2.0)
        assert revised.weight("machine") == pytest.approx(1.0)


class TestBinaryFeedback:
    @pytest.mark.parametrize("response,expected", [("y", 1.0), ("YES", 1.0), ("n", -1.0), (" no ", -1.0)])
    def test_parse(self, response, expected):
        assert BinaryFeedback().parse(response) == expected

    @pytest.mark.parametrize("response", ["", "0.5", "maybe"])
    def test_parse_invalid(self, response):
        assert BinaryFeedback().parse(response) is None

    def test_irrelevant_document_is_subtracted(self, query_vector):
        bad = make_ref("bad.txt")
        corpus = DictCorpus({bad: HashMapVector({"machine": 2.0, "washing": 2.0})})
        ledger = FeedbackLedger()
        strategy = BinaryFeedback()
        strategy.record(ledger, bad, strategy.parse("n"))

        revised = strategy.revise(query_vector, ledger, corpus.vector_of)

        assert revised.weight("machine") == pytest.approx(0.0)
        assert revised.weight("washing") == pytest.approx(-1.0)
        assert revised.weight("learning") == pytest.approx(1.0)


def test_build_strategy_by_mode():
    assert isinstance(build_strategy("graded"), GradedFeedback)
    assert isinstance(build_strategy("binary"), BinaryFeedback)


def test_build_strategy_unknown_mode():
    with pytest.raises(InvalidConfigurationError):
        build_strategy("thumbs")
