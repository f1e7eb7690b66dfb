import math

import pytest

from vitals_insights.core.analysis.classification import (
    InsightInputError,
    classify_range,
    classify_score,
    severity,
    strongest_component,
    weakest_component,
)
from vitals_insights.core.models.data_models import InsightStatus
from vitals_insights.core.models.output_models import ComponentInsight


def component(name, status):
    return ComponentInsight(metric_name=name, user_value="", optimal_range="", analysis="", status=status)


class TestClassifyRange:
    @pytest.mark.parametrize("value", [420, 450.5, 539.99, 540])
    def test_inside_range_is_optimal(self, value):
        assert classify_range(value, (420, 540)) == InsightStatus.OPTIMAL

    def test_below_range_buckets(self):
        assert classify_range(96, (100, 200)) == InsightStatus.GOOD
        assert classify_range(95, (100, 200)) == InsightStatus.FAIR
        assert classify_range(86, (100, 200)) == InsightStatus.FAIR
        assert classify_range(85, (100, 200)) == InsightStatus.POOR

    def test_above_range_buckets(self):
        assert classify_range(104, (50, 100)) == InsightStatus.GOOD
        assert classify_range(105, (50, 100)) == InsightStatus.FAIR
        assert classify_range(114, (50, 100)) == InsightStatus.FAIR
        assert classify_range(115, (50, 100)) == InsightStatus.POOR

    def test_zero_bound_saturates_to_poor(self):
        assert classify_range(-1, (0, 15)) == InsightStatus.POOR
        assert classify_range(5, (0, 0)) == InsightStatus.POOR

    def test_zero_width_range_holds_its_value(self):
        assert classify_range(0, (0, 0)) == InsightStatus.OPTIMAL

    def test_inverted_range_rejected(self):
        with pytest.raises(InsightInputError, match="lower bound"):
            classify_range(10, (20, 5))

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_value_rejected(self, value):
        with pytest.raises(InsightInputError):
            classify_range(value, (0, 15))

    @pytest.mark.parametrize("value, bounds", [
        (10**20, (0, 15)),
        (10**400, (0, 15)),
        (10**400, (0.0, 15.0)),
        (-10**400, (0.5, 15.0)),
    ])
    def test_huge_integer_far_outside_range_is_poor(self, value, bounds):
        assert classify_range(value, bounds) == InsightStatus.POOR

    def test_huge_integer_bounds(self):
        assert classify_range(10**400, (0, 10**401)) == InsightStatus.OPTIMAL

    def test_input_error_is_value_error(self):
        with pytest.raises(ValueError):
            classify_range(1, (2, 1))


class TestClassifyScore:
    @pytest.mark.parametrize("score, expected", [
        (100, InsightStatus.OPTIMAL),
        (90, InsightStatus.OPTIMAL),
        (89.999, InsightStatus.GOOD),
        (80, InsightStatus.GOOD),
        (79.999, InsightStatus.FAIR),
        (65, InsightStatus.FAIR),
        (64.999, InsightStatus.POOR),
        (0, InsightStatus.POOR),
    ])
    def test_cut_points(self, score, expected):
        assert classify_score(score) == expected

    def test_nan_rejected(self):
        with pytest.raises(InsightInputError):
            classify_score(math.nan)

    @pytest.mark.parametrize("score, expected", [
        (10**20, InsightStatus.OPTIMAL),
        (10**400, InsightStatus.OPTIMAL),
        (-10**400, InsightStatus.POOR),
    ])
    def test_huge_integers_classified(self, score, expected):
        assert classify_score(score) == expected


class TestSeverity:
    def test_total_order(self):
        ranks = [severity(s) for s in (InsightStatus.OPTIMAL, InsightStatus.GOOD,
                                       InsightStatus.FAIR, InsightStatus.POOR)]
        assert ranks == [0, 1, 2, 3]

    def test_weakest_prefers_first_on_tie(self):
        components = [
            component("A", InsightStatus.GOOD),
            component("B", InsightStatus.FAIR),
            component("C", InsightStatus.FAIR),
        ]
        assert weakest_component(components).metric_name == "B"

    def test_strongest_prefers_first_on_tie(self):
        components = [
            component("A", InsightStatus.FAIR),
            component("B", InsightStatus.GOOD),
            component("C", InsightStatus.GOOD),
        ]
        assert strongest_component(components).metric_name == "B"

    def test_empty_components_rejected(self):
        with pytest.raises(InsightInputError):
            weakest_component([])
        with pytest.raises(InsightInputError):
            strongest_component([])
