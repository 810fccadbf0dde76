"""Unit tests for the scoring service."""

import pytest

from carescore.core.exceptions import InstrumentNotFoundError, ValidationError
from carescore.models.enums import InstrumentKey, SeverityLevel
from carescore.services.scoring import ScoreResult, ScoringService, score_assessment


def answers_for(catalog, key: InstrumentKey, value: int) -> dict[str, int]:
    """Answer every item of an instrument with the same value."""
    instrument = catalog.get_instrument(key)
    return {question.id: value for question in instrument.questions}


class TestAnswerValidation:
    """Tests for answer set preconditions."""

    def test_missing_item_raises(self, catalog) -> None:
        """A missing question id is a validation error naming the id."""
        answers = answers_for(catalog, InstrumentKey.PHQ9, 1)
        del answers["phq9_4"]

        with pytest.raises(ValidationError) as exc_info:
            ScoringService(catalog).score(InstrumentKey.PHQ9, answers)

        assert exc_info.value.field == "phq9_4"
        assert "phq9_4" in str(exc_info.value)

    def test_empty_answers_raise(self, catalog) -> None:
        """Missing answers are never defaulted to zero."""
        with pytest.raises(ValidationError) as exc_info:
            ScoringService(catalog).score(InstrumentKey.GAD7, {})

        assert exc_info.value.field == "gad7_1"

    def test_value_outside_options_raises(self, catalog) -> None:
        """Values must be one of the item's defined options."""
        answers = answers_for(catalog, InstrumentKey.PHQ9, 0)
        answers["phq9_2"] = 4

        with pytest.raises(ValidationError) as exc_info:
            ScoringService(catalog).score(InstrumentKey.PHQ9, answers)

        assert exc_info.value.field == "phq9_2"

    def test_whodas_rejects_zero(self, catalog) -> None:
        """WHODAS items start at 1, so 0 is invalid."""
        answers = answers_for(catalog, InstrumentKey.WHODAS2, 1)
        answers["whodas_7"] = 0

        with pytest.raises(ValidationError) as exc_info:
            ScoringService(catalog).score(InstrumentKey.WHODAS2, answers)

        assert exc_info.value.field == "whodas_7"

    @pytest.mark.parametrize("bad_value", ["2", 1.5, None, True])
    def test_non_integer_values_rejected(self, catalog, bad_value) -> None:
        """Strings, floats, None and booleans are not option values."""
        answers = answers_for(catalog, InstrumentKey.DSM5_CC, 1)
        answers["dsm5_3"] = bad_value

        with pytest.raises(ValidationError):
            ScoringService(catalog).score(InstrumentKey.DSM5_CC, answers)

    def test_unknown_instrument_raises(self, catalog) -> None:
        """Unknown instrument keys raise InstrumentNotFoundError."""
        with pytest.raises(InstrumentNotFoundError):
            ScoringService(catalog).score("PCL-5", {})

    def test_extra_keys_ignored(self, catalog) -> None:
        """Answers for other instruments do not affect the score."""
        answers = answers_for(catalog, InstrumentKey.GAD7, 1)
        answers.update(answers_for(catalog, InstrumentKey.PHQ9, 3))

        result = ScoringService(catalog).score(InstrumentKey.GAD7, answers)

        assert result.score == 7


class TestScoringService:
    """Tests for generic scoring behaviour."""

    def test_result_fields(self, catalog) -> None:
        """ScoreResult carries score, level, interpretation and bounds."""
        result = ScoringService(catalog).score(
            "PHQ-9", answers_for(catalog, InstrumentKey.PHQ9, 1)
        )

        assert isinstance(result, ScoreResult)
        assert result.instrument == InstrumentKey.PHQ9
        assert result.score == 9
        assert result.raw_score == 9
        assert result.max_score == 27
        assert result.severity_level == SeverityLevel.MILD
        assert result.interpretation == (
            "Mild depression. Consider counseling, follow-up monitoring."
        )

    def test_order_independent(self, catalog) -> None:
        """Insertion order of the answer mapping does not matter."""
        answers = {f"dsm5_{i}": i - 1 for i in range(1, 6)}
        reversed_answers = dict(reversed(list(answers.items())))
        service = ScoringService(catalog)

        assert service.score("DSM-5-CC", answers) == service.score(
            "DSM-5-CC", reversed_answers
        )

    def test_idempotent(self, catalog) -> None:
        """Scoring twice yields identical results."""
        answers = answers_for(catalog, InstrumentKey.WHODAS2, 3)
        service = ScoringService(catalog)

        first = service.score(InstrumentKey.WHODAS2, answers)
        second = service.score(InstrumentKey.WHODAS2, answers)

        assert first == second
        assert repr(first) == repr(second)

    def test_answers_not_mutated(self, catalog) -> None:
        """The caller's answer mapping is left untouched."""
        answers = answers_for(catalog, InstrumentKey.GAD7, 2)
        snapshot = dict(answers)

        ScoringService(catalog).score(InstrumentKey.GAD7, answers)

        assert answers == snapshot

    def test_fixture_catalog_injection(self, mini_catalog) -> None:
        """The service scores against whichever catalog it is given."""
        result = ScoringService(mini_catalog).score("GAD-7", {"q1": 2, "q2": 1})

        assert result.score == 3
        assert result.severity_level == SeverityLevel.SEVERE
        assert result.interpretation == "High."

    def test_module_level_helper(self) -> None:
        """score_assessment uses the default catalog."""
        answers = {f"gad7_{i}": 0 for i in range(1, 8)}
        result = score_assessment("GAD-7", answers)

        assert result.score == 0
        assert result.severity_level == SeverityLevel.MINIMAL

    @pytest.mark.parametrize("key", list(InstrumentKey))
    def test_every_item_value_scores(self, catalog, key) -> None:
        """Uniform answers at every option value classify without error."""
        instrument = catalog.get_instrument(key)
        service = ScoringService(catalog)

        for value in sorted(instrument.questions[0].option_values):
            result = service.score(key, answers_for(catalog, key, value))
            assert instrument.min_score <= result.score <= instrument.max_score
            assert result.severity_level in instrument.severity_levels
