import pytest

from conftest import make_sleep_result
from vitals_insights import generate_sleep_insight
from vitals_insights.core.analysis.sleep_insights import SleepInsightEngine
from vitals_insights.core.models.data_models import InsightStatus
from vitals_insights.utils.constants import sleep_metric_order


def by_name(insight):
    return {c.metric_name: c for c in insight.component_breakdown}


class TestBalancedNight:
    def test_all_components_optimal(self, balanced_night):
        insight = generate_sleep_insight(balanced_night)
        assert [c.status for c in insight.component_breakdown] == [InsightStatus.OPTIMAL] * 5

    def test_congratulatory_headline(self, balanced_night):
        insight = generate_sleep_insight(balanced_night)
        assert insight.headline == "Your sleep was well balanced across all key metrics. Great job!"

    def test_recommendation_uses_first_weakest_entry(self, balanced_night):
        # Every metric ties, so the weakest is Duration, the first evaluated
        insight = generate_sleep_insight(balanced_night)
        assert insight.recommendation == "Aim to be in bed 30 minutes earlier tonight to meet your sleep need."

    def test_display_values(self, balanced_night):
        components = by_name(generate_sleep_insight(balanced_night))
        assert components["Duration"].user_value == "7h 30m"
        assert components["Duration"].optimal_range == "7-9h"
        assert components["Deep Sleep"].user_value == "1h 15m"
        assert components["Deep Sleep"].optimal_range == "58m–1h 43m"
        assert components["REM Sleep"].user_value == "1h 40m"
        assert components["REM Sleep"].optimal_range == "1h 30m–1h 52m"
        assert components["Efficiency"].user_value == "93%"
        assert components["Efficiency"].optimal_range == "90-95%"
        assert components["Onset"].user_value == "10 min"
        assert components["Onset"].optimal_range == "≤15m"

    def test_optimal_analysis_text(self, balanced_night):
        components = by_name(generate_sleep_insight(balanced_night))
        assert components["Deep Sleep"].analysis == "Your Deep Sleep met the optimal range."


class TestHeadlineSynthesis:
    def test_slow_onset(self):
        insight = generate_sleep_insight(make_sleep_result(time_to_fall_asleep=30))
        assert by_name(insight)["Onset"].status == InsightStatus.POOR
        assert insight.headline == (
            "While your sleep duration was on point, long sleep onset delayed restorative processes."
        )
        assert insight.recommendation == "Create a calming wind-down routine to help you fall asleep faster."

    def test_weakest_tie_goes_to_earliest_metric(self):
        insight = generate_sleep_insight(make_sleep_result(deep_sleep=3000, sleep_efficiency=0.85))
        components = by_name(insight)
        assert components["Deep Sleep"].status == InsightStatus.FAIR
        assert components["Efficiency"].status == InsightStatus.FAIR
        assert insight.headline == (
            "While your sleep duration was on point, a lack of Deep Sleep may impact physical recovery today."
        )
        assert insight.recommendation == (
            "To improve Deep Sleep, avoid caffeine after 2 PM and keep your room cool (≈19 °C)."
        )

    def test_strongest_skips_non_optimal_duration(self):
        insight = generate_sleep_insight(make_sleep_result(time_asleep=21600, deep_sleep=3600, rem_sleep=3000))
        components = by_name(insight)
        assert components["Duration"].status == InsightStatus.FAIR
        assert components["REM Sleep"].status == InsightStatus.POOR
        assert insight.headline == "While your Deep Sleep was strong, low REM Sleep could affect mental clarity."
        assert insight.recommendation == (
            "Avoid alcohol before bed and maintain a consistent wake-up time to support REM Sleep."
        )

    def test_low_efficiency(self):
        insight = generate_sleep_insight(make_sleep_result(sleep_efficiency=0.70))
        assert insight.headline == (
            "While your sleep duration was on point, restlessness reduced your sleep efficiency."
        )
        assert insight.recommendation == (
            "Limit screen time before bed and ensure a dark, quiet bedroom to boost efficiency."
        )

    def test_short_duration(self):
        insight = generate_sleep_insight(
            make_sleep_result(time_asleep=18000, deep_sleep=3000, rem_sleep=4000)
        )
        assert by_name(insight)["Duration"].status == InsightStatus.POOR
        assert insight.headline == (
            "While your Deep Sleep was strong, short sleep duration may leave you under-rested."
        )


class TestAnalysisTemplates:
    def test_good_efficiency(self):
        components = by_name(generate_sleep_insight(make_sleep_result(sleep_efficiency=0.88)))
        assert components["Efficiency"].status == InsightStatus.GOOD
        assert components["Efficiency"].analysis == (
            "Your Efficiency was close to optimal – small adjustments could make it perfect."
        )

    def test_fair_onset(self):
        components = by_name(generate_sleep_insight(make_sleep_result(time_to_fall_asleep=16.5)))
        assert components["Onset"].status == InsightStatus.FAIR
        assert components["Onset"].analysis == "Your Onset was outside the optimal range. Aim for improvement."

    def test_poor_duration(self):
        components = by_name(generate_sleep_insight(
            make_sleep_result(time_asleep=18000, deep_sleep=3000, rem_sleep=4000)
        ))
        assert components["Duration"].user_value == "5h"
        assert components["Duration"].analysis == (
            "Your Duration was well outside the optimal range and needs attention."
        )


class TestRemOverride:
    def test_two_hours_of_rem_is_optimal(self):
        components = by_name(generate_sleep_insight(make_sleep_result(rem_sleep=7200)))
        rem = components["REM Sleep"]
        assert rem.status == InsightStatus.OPTIMAL
        assert rem.user_value == "2h"
        assert rem.optimal_range == "2h+"
        assert rem.analysis == "Excellent REM sleep duration (2h+)"

    @pytest.mark.parametrize("time_asleep", [14400, 27000, 50000])
    def test_override_ignores_personal_band(self, time_asleep):
        components = by_name(generate_sleep_insight(
            make_sleep_result(time_asleep=time_asleep, rem_sleep=7200)
        ))
        assert components["REM Sleep"].status == InsightStatus.OPTIMAL

    def test_just_below_override_uses_band(self):
        components = by_name(generate_sleep_insight(make_sleep_result(rem_sleep=7199)))
        assert components["REM Sleep"].status == InsightStatus.FAIR


class TestEngineContract:
    def test_breakdown_order_is_fixed(self):
        nights = [
            make_sleep_result(),
            make_sleep_result(time_to_fall_asleep=60, sleep_efficiency=0.5),
            make_sleep_result(time_asleep=18000, deep_sleep=100, rem_sleep=7500),
        ]
        for night in nights:
            names = [c.metric_name for c in generate_sleep_insight(night).component_breakdown]
            assert names == sleep_metric_order

    def test_idempotent(self):
        night = make_sleep_result(deep_sleep=3000, time_to_fall_asleep=22)
        first = generate_sleep_insight(night)
        second = generate_sleep_insight(night)
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    def test_engine_instance_matches_module_function(self, balanced_night):
        assert SleepInsightEngine().generate_insight(balanced_night) == generate_sleep_insight(balanced_night)
