"""
Constants used throughout the Vitals Insights core.
This includes optimal ranges, classification cut points and the canned
sentence tables the insight engines draw their text from.
"""

# Metric identifiers, in the order each engine evaluates them
DURATION = 'Duration'
DEEP_SLEEP = 'Deep Sleep'
REM_SLEEP = 'REM Sleep'
EFFICIENCY = 'Efficiency'
ONSET = 'Onset'

HEART_RATE_VARIABILITY = 'Heart Rate Variability'
RESTING_HEART_RATE = 'Resting Heart Rate'
SLEEP_QUALITY = 'Sleep Quality'
PHYSIOLOGICAL_STRESS = 'Physiological Stress'

sleep_metric_order = [DURATION, DEEP_SLEEP, REM_SLEEP, EFFICIENCY, ONSET]
recovery_metric_order = [HEART_RATE_VARIABILITY, RESTING_HEART_RATE, SLEEP_QUALITY]

# Fractional deviation cut points for the range classifier
range_deviation_thresholds = {
    'good': 0.05,   # deviation below this is good
    'fair': 0.15,   # deviation below this is fair, anything else is poor
}

# Absolute cut points for 0-100 component scores
score_thresholds = {
    'optimal': 90,
    'good': 80,
    'fair': 65,
}

# Optimal ranges for sleep metrics
sleep_ranges = {
    'duration_minutes': (420.0, 540.0),      # 7-9h
    'sleep_efficiency': (0.90, 0.95),        # fraction of time in bed asleep
    'onset_minutes': (0.0, 15.0),            # time to fall asleep
    'deep_sleep_fraction': (0.13, 0.23),     # of total time asleep
    'rem_sleep_fraction': (0.20, 0.25),      # of total time asleep
}

# REM beyond this many seconds is always optimal
rem_override_seconds = 120 * 60

# Display strings for the fixed ranges
sleep_range_labels = {
    DURATION: '7-9h',
    EFFICIENCY: '90-95%',
    ONSET: '≤15m',
    'rem_override': '2h+',
}

# Per-status analysis templates shared by every sleep metric
sleep_analysis_templates = {
    'optimal': "Your {name} met the optimal range.",
    'good': "Your {name} was close to optimal – small adjustments could make it perfect.",
    'fair': "Your {name} was outside the optimal range. Aim for improvement.",
    'poor': "Your {name} was well outside the optimal range and needs attention.",
}

rem_override_analysis = "Excellent REM sleep duration (2h+)"

sleep_balanced_headline = "Your sleep was well balanced across all key metrics. Great job!"
sleep_headline_template = "While your {positive}, {negative}."

# Phrase used for the strongest metric in a sleep headline
sleep_positive_phrases = {
    EFFICIENCY: 'sleep was highly efficient',
    DURATION: 'sleep duration was on point',
    DEEP_SLEEP: 'Deep Sleep was strong',
    REM_SLEEP: 'REM Sleep was strong',
    ONSET: 'you fell asleep quickly',
    'default': 'overall sleep quality was solid',
}

# Phrase used for the weakest metric in a sleep headline
sleep_negative_phrases = {
    DEEP_SLEEP: 'a lack of Deep Sleep may impact physical recovery today',
    REM_SLEEP: 'low REM Sleep could affect mental clarity',
    DURATION: 'short sleep duration may leave you under-rested',
    EFFICIENCY: 'restlessness reduced your sleep efficiency',
    ONSET: 'long sleep onset delayed restorative processes',
    'default': 'imbalances could impact your day',
}

sleep_recommendations = {
    DEEP_SLEEP: "To improve Deep Sleep, avoid caffeine after 2 PM and keep your room cool (≈19 °C).",
    DURATION: "Aim to be in bed 30 minutes earlier tonight to meet your sleep need.",
    REM_SLEEP: "Avoid alcohol before bed and maintain a consistent wake-up time to support REM Sleep.",
    EFFICIENCY: "Limit screen time before bed and ensure a dark, quiet bedroom to boost efficiency.",
    ONSET: "Create a calming wind-down routine to help you fall asleep faster.",
    'default': "Maintain good sleep hygiene for continued improvements.",
}

# Nightly directive keyed by the lower edge of each sleep score band
sleep_score_directives = [
    (85, "Excellent sleep quality. Your body is well-rested and ready for optimal performance."),
    (70, "Good sleep quality. Maintain your current sleep habits for continued improvement."),
    (50, "Fair sleep quality. Consider improving your sleep routine for better recovery."),
    (0, "Poor sleep quality. Focus on sleep hygiene and consider adjusting your schedule."),
]

# Recovery component analysis text
hrv_analysis = {
    'above': "Your HRV of {value} is {delta} above baseline, indicating strong autonomic recovery.",
    'below': "Your HRV of {value} is {delta} below baseline, suggesting reduced recovery.",
}

rhr_analysis = {
    'below': "Your Resting HR of {value} is {delta} below baseline, signaling a well-recovered cardiovascular system.",
    'above': "Your Resting HR of {value} is {delta} above baseline, indicating potential fatigue.",
}

baseline_range_template = "vs. {baseline} baseline"

# Sleep sub-score narrative bands. These deliberately differ from score_thresholds.
sleep_quality_analysis = [
    (85, "Last night’s sleep score of {score} contributed positively to today’s recovery."),
    (70, "Sleep score of {score} provided a reasonable boost to recovery."),
    (50, "Sleep score of {score} may limit recovery. Prioritize sleep quality tonight."),
    (0, "Low sleep score of {score} is significantly constraining recovery today."),
]

recovery_stable_headline = "Your body is in a stable, well-recovered state, ready for a productive day."
recovery_mixed_headline = "Mixed signals detected – monitor your recovery closely today."

# Headline keyed by the primary limiter. Physiological Stress is kept even though
# the stress component is not part of the breakdown.
recovery_limiter_headlines = {
    HEART_RATE_VARIABILITY: "Suboptimal HRV is limiting your body’s ability to recover.",
    RESTING_HEART_RATE: "Elevated Resting Heart Rate is constraining today’s readiness.",
    SLEEP_QUALITY: "Suboptimal sleep is the primary factor limiting recovery.",
    PHYSIOLOGICAL_STRESS: "Elevated stress is curbing recovery capacity today.",
    'default': "One or more factors are limiting your recovery today.",
}

# Training recommendation keyed by the lower edge of each final score band
recovery_recommendations = [
    (85, "Your body is primed. Push maximal intensity or aim for a personal record today."),
    (65, "You are well-recovered. Execute your planned workout with discipline and focus."),
    (40, "Recovery is compromised. Reduce training volume by ~25% or adopt lower intensity."),
    (0, "Recovery is low. Take a strategic rest day with active recovery only."),
]
