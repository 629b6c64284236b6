"""
Unit tests for DictationQuestion.

Tests construction, response helpers and grading through form data.
"""

import pytest

from dictation_toolkit.core.models import Gap
from dictation_toolkit.extractor import NoGapsFound
from dictation_toolkit.question import DictationQuestion, DisplayMode
from dictation_toolkit.scoring import ScoringConfig, Weighting


@pytest.fixture
def question():
    return DictationQuestion.from_transcript("She [went] to the [store, shop].")


@pytest.fixture
def audio_question():
    return DictationQuestion.from_transcript(
        "She [went] to the [store].", enable_audio=True, max_plays=2
    )


class TestConstruction:
    """Tests for building questions."""

    def test_from_transcript_extracts_gaps(self, question):
        assert question.gaps == (Gap(0, ("went",)), Gap(1, ("store", "shop")))
        assert question.gap_count == 2
        assert question.display_mode == DisplayMode.STANDARD

    def test_from_transcript_when_no_gaps_then_raises(self):
        with pytest.raises(NoGapsFound):
            DictationQuestion.from_transcript("Nothing to fill in.")

    def test_when_gaps_empty_then_raises(self):
        with pytest.raises(ValueError, match="at least one gap"):
            DictationQuestion(transcript="x", gaps=())

    def test_when_gap_indices_out_of_order_then_raises(self):
        with pytest.raises(ValueError, match="0..N-1"):
            DictationQuestion(transcript="x", gaps=(Gap(1, ("a",)), Gap(0, ("b",))))

    def test_when_negative_max_plays_then_raises(self):
        with pytest.raises(ValueError, match="max_plays"):
            DictationQuestion(transcript="[a]", gaps=(Gap(0, ("a",)),), max_plays=-1)

    def test_gaps_list_stored_as_tuple(self):
        q = DictationQuestion(transcript="[a]", gaps=[Gap(0, ("a",))])
        assert isinstance(q.gaps, tuple)


class TestResponseKeys:
    """Tests for form key handling."""

    def test_expected_keys_without_audio(self, question):
        assert question.expected_keys() == ["gap_0", "gap_1"]

    def test_expected_keys_with_audio(self, audio_question):
        assert audio_question.expected_keys() == ["gap_0", "gap_1", "playcount"]

    def test_correct_response_uses_primary(self, question):
        assert question.correct_response() == {"gap_0": "went", "gap_1": "store"}

    def test_responses_from_form(self, question):
        form = {"gap_0": " went ", "gap_1": "shop", "playcount": 3, "other": "x"}
        assert question.responses_from_form(form) == {0: "went", 1: "shop"}

    def test_responses_from_form_skips_missing(self, question):
        assert question.responses_from_form({"gap_1": "shop"}) == {1: "shop"}


class TestResponseState:
    """Tests for completeness, summaries and comparison."""

    def test_is_complete_response(self, question):
        assert question.is_complete_response({"gap_0": "went", "gap_1": "shop"})
        assert not question.is_complete_response({"gap_0": "went", "gap_1": ""})
        assert not question.is_complete_response({"gap_0": "went"})

    def test_is_gradable_response(self, question):
        assert question.is_gradable_response({"gap_1": "shop"})
        assert not question.is_gradable_response({"gap_0": "", "gap_1": "  "})
        assert not question.is_gradable_response({})

    def test_validation_error(self, question):
        assert question.validation_error({}) == "Please enter an answer."
        assert question.validation_error({"gap_0": "went"}) == ""

    def test_summarise_response_skips_blanks(self, question):
        assert question.summarise_response({"gap_0": "went", "gap_1": "shop"}) == "went, shop"
        assert question.summarise_response({"gap_1": "shop"}) == "shop"
        assert question.summarise_response({}) == ""

    def test_is_same_response(self, question):
        a = {"gap_0": "went", "gap_1": "shop"}
        assert question.is_same_response(a, dict(a))
        assert not question.is_same_response(a, {"gap_0": "went", "gap_1": "shops"})

    def test_is_same_response_ignores_playcount_without_audio(self, question):
        a = {"gap_0": "went", "playcount": 1}
        b = {"gap_0": "went", "playcount": 2}
        assert question.is_same_response(a, b)

    def test_is_same_response_compares_playcount_with_audio(self, audio_question):
        a = {"gap_0": "went", "playcount": 1}
        assert not audio_question.is_same_response(a, {"gap_0": "went", "playcount": 2})
        assert audio_question.is_same_response(a, {"gap_0": "went", "playcount": "1"})

    def test_is_same_response_compares_unparseable_playcount_raw(self, audio_question):
        """Non-numeric play counts are compared as submitted."""
        a = {"gap_0": "went", "playcount": "x"}
        assert not audio_question.is_same_response(a, {"gap_0": "went", "playcount": "y"})
        assert audio_question.is_same_response(a, {"gap_0": "went", "playcount": "x"})

    def test_can_play_respects_limit(self, audio_question):
        assert audio_question.can_play(0)
        assert audio_question.can_play(1)
        assert not audio_question.can_play(2)

    def test_can_play_unlimited(self):
        q = DictationQuestion.from_transcript("[a]", enable_audio=True, max_plays=0)
        assert q.can_play(100)

    def test_can_play_without_audio(self, question):
        assert not question.can_play(0)


class TestGrading:
    """Tests for grading through form data."""

    def test_grade_all_correct(self, question):
        result = question.grade({"gap_0": "Went", "gap_1": "shop"})
        assert result.aggregate == 1.0

    def test_grade_length_weighted_by_default(self, question):
        """'went' (4) correct, 'store' (5) unanswered: 4 / 9."""
        result = question.grade({"gap_0": "went"})
        assert result.aggregate == pytest.approx(4 / 9)

    def test_grade_uniform(self):
        q = DictationQuestion.from_transcript(
            "She [went] to the [store].",
            scoring=ScoringConfig.similarity(weighting=Weighting.UNIFORM),
        )
        assert q.grade({"gap_0": "went"}).aggregate == pytest.approx(0.5)

    def test_grade_empty_form(self, question):
        aggregate, gap_scores = question.grade({})
        assert aggregate == 0.0
        assert len(gap_scores) == 2

    def test_feedback(self, question):
        rows = question.feedback({"gap_0": "wnet", "gap_1": "shop"})
        assert [r.correct for r in rows] == ["went", "shop"]
        assert rows[0].score == pytest.approx(0.5)
        assert not rows[0].is_correct
        assert rows[1].is_correct
