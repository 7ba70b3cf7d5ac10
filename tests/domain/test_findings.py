"""Tests for NormalisedFinding count defaults and guideline derivation."""

from __future__ import annotations

import pytest

from a11yctl.domain.findings import MergedFindings, NormalisedFinding, guideline_id_for


class TestGuidelineId:
    @pytest.mark.parametrize(
        ("criterion_id", "expected"),
        [("1.4.3", "1.4"), ("1.1.1", "1.1"), ("4.1.2", "4.1"), ("2.4.10", "2.4"), ("3.1", "3.1")],
    )
    def test_first_two_components(self, criterion_id: str, expected: str) -> None:
        assert guideline_id_for(criterion_id) == expected

    def test_property_on_finding(self) -> None:
        finding = NormalisedFinding.model_validate({"wcagCriterionId": "1.4.11"})
        assert finding.guideline_id == "1.4"

    def test_no_criterion_no_guideline(self) -> None:
        assert NormalisedFinding.model_validate({}).guideline_id is None


class TestCountDefaults:
    def test_explicit_count(self) -> None:
        finding = NormalisedFinding.model_validate({"occurrenceCount": 4})
        assert finding.aggregation_count == 4
        assert finding.accumulation_count == 4

    def test_missing_count(self) -> None:
        finding = NormalisedFinding.model_validate({"wcagCriterionId": "1.1.1"})
        assert finding.aggregation_count == 1
        assert finding.accumulation_count == 0

    def test_zero_count(self) -> None:
        finding = NormalisedFinding.model_validate({"occurrenceCount": 0})
        assert finding.aggregation_count == 1
        assert finding.accumulation_count == 0

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_count(self, value: float) -> None:
        finding = NormalisedFinding.model_validate({"occurrenceCount": value})
        assert finding.occurrence_count is None
        assert finding.aggregation_count == 1
        assert finding.accumulation_count == 0

    @pytest.mark.parametrize("value", ["3", None, True, [2], {"n": 1}])
    def test_non_numeric_count(self, value: object) -> None:
        finding = NormalisedFinding.model_validate({"occurrenceCount": value})
        assert finding.occurrence_count is None
        assert finding.aggregation_count == 1
        assert finding.accumulation_count == 0

    def test_float_count_preserved(self) -> None:
        finding = NormalisedFinding.model_validate({"occurrenceCount": 2.5})
        assert finding.aggregation_count == 2.5


class TestCoerce:
    def test_dict(self) -> None:
        finding = NormalisedFinding.coerce({"wcagCriterionId": "4.1.2", "ruleId": "button-name"})
        assert finding is not None
        assert finding.wcag_criterion_id == "4.1.2"
        assert finding.rule_id == "button-name"

    def test_extra_fields_kept(self) -> None:
        finding = NormalisedFinding.coerce({"impact": "serious"})
        assert finding is not None
        assert finding.model_extra == {"impact": "serious"}

    @pytest.mark.parametrize("raw", ["1.1.1", 3, None, ["1.1.1"]])
    def test_non_object(self, raw: object) -> None:
        assert NormalisedFinding.coerce(raw) is None

    def test_blank_or_non_string_criterion(self) -> None:
        assert NormalisedFinding.model_validate({"wcagCriterionId": ""}).wcag_criterion_id is None
        assert NormalisedFinding.model_validate({"wcagCriterionId": 1.1}).wcag_criterion_id is None


class TestMergedFindings:
    def test_extend_appends_in_order(self) -> None:
        merged = MergedFindings()
        merged.extend({"compliance": [{"a": 1}], "other": [{"b": 1}]})
        merged.extend({"compliance": [{"a": 2}]})
        assert merged.compliance == [{"a": 1}, {"a": 2}]
        assert merged.other == [{"b": 1}]

    def test_extend_ignores_non_arrays(self) -> None:
        merged = MergedFindings()
        merged.extend({"compliance": "nope", "other": None})
        assert merged.compliance == []
        assert merged.other == []
