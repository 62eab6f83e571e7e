"""
Canned assistant replies and the rule tables that pick between them.

Templates use str.format fields; `{value}` is the latest reading for the
topic, `{positives}` / `{concerns}` are comma-joined phrase lists.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

NO_DATA_REPLY = (
    "I don't have any health data to analyze yet. "
    "Please add your health metrics first."
)

FALLBACK_REPLY = (
    "I'm your AI health assistant. I can provide insights based on your health metrics "
    "and answer questions about steps, heart rate, oxygen levels, hydration, and sleep. "
    "How can I help you today?"
)

GREETING = (
    "Hello! I'm your AI health assistant. I can provide insights based on your health metrics "
    "and answer questions about steps, heart rate, oxygen levels, hydration, and sleep. "
    "How can I help you today?"
)


# Bands: "low" (value < low_below), "high" (value > high_above),
# "borderline" (value < borderline_below), otherwise "good".
@dataclass(frozen=True)
class TopicRule:
    topic: str
    field: str
    keywords: Tuple[str, ...]
    low_below: float
    templates: Dict[str, str]
    borderline_below: Optional[float] = None
    high_above: Optional[float] = None

    def band(self, value: float) -> str:
        if value < self.low_below:
            return "low"
        if self.high_above is not None and value > self.high_above:
            return "high"
        if self.borderline_below is not None and value < self.borderline_below:
            return "borderline"
        return "good"


STEPS_RULE = TopicRule(
    topic="steps",
    field="steps",
    keywords=("steps", "walking"),
    low_below=5000,
    borderline_below=10000,
    templates={
        "low": (
            "You've walked {value} steps today, which is below the recommended 10,000 steps. "
            "Try to incorporate more walking into your day, perhaps by taking the stairs instead "
            "of the elevator or going for a short walk during your lunch break."
        ),
        "borderline": (
            "You've walked {value} steps today, which is good but still below the recommended "
            "10,000 steps. You're on the right track! Try to add a short evening walk to reach your goal."
        ),
        "good": (
            "Great job! You've walked {value} steps today, exceeding the recommended 10,000 steps. "
            "Keep up the good work!"
        ),
    },
)

HEART_RULE = TopicRule(
    topic="heart_rate",
    field="heart_rate",
    keywords=("heart", "bpm"),
    low_below=60,
    high_above=100,
    templates={
        "low": (
            "Your heart rate is {value} BPM, which is below the normal resting range (60-100 BPM). "
            "This could be normal for athletes, but if you're experiencing symptoms like dizziness "
            "or fatigue, consider consulting a healthcare professional."
        ),
        "good": (
            "Your heart rate is {value} BPM, which is within the normal resting range (60-100 BPM). "
            "This indicates good cardiovascular health."
        ),
        "high": (
            "Your heart rate is {value} BPM, which is above the normal resting range (60-100 BPM). "
            "This could be due to recent physical activity, stress, or caffeine intake. "
            "If it persists at rest, consider consulting a healthcare professional."
        ),
    },
)

OXYGEN_RULE = TopicRule(
    topic="oxygen_level",
    field="oxygen_level",
    keywords=("oxygen", "spo2"),
    low_below=95,
    templates={
        "low": (
            "Your oxygen level is {value}%, which is below the normal range (95-100%). "
            "If this reading is accurate and consistent, consider consulting a healthcare professional."
        ),
        "good": (
            "Your oxygen level is {value}%, which is within the normal range (95-100%). "
            "This indicates good respiratory function."
        ),
    },
)

HYDRATION_RULE = TopicRule(
    topic="hydration",
    field="hydration",
    keywords=("water", "hydration"),
    low_below=1500,
    borderline_below=2500,
    templates={
        "low": (
            "You've consumed {value} ml of water today, which is below the recommended daily intake "
            "(2000-3000 ml). Try to drink more water throughout the day to stay properly hydrated."
        ),
        "borderline": (
            "You've consumed {value} ml of water today, which is good but could be improved. "
            "Aim for at least 2500 ml daily for optimal hydration."
        ),
        "good": (
            "Great job! You've consumed {value} ml of water today, which meets or exceeds the "
            "recommended daily intake. Staying well-hydrated supports overall health and cognitive function."
        ),
    },
)

SLEEP_RULE = TopicRule(
    topic="sleep_hours",
    field="sleep_hours",
    keywords=("sleep", "rest"),
    low_below=6,
    borderline_below=7,
    templates={
        "low": (
            "You slept for {value} hours last night, which is below the recommended 7-9 hours for adults. "
            "Chronic sleep deprivation can affect your health and cognitive function. Try to establish "
            "a regular sleep schedule and create a relaxing bedtime routine."
        ),
        "borderline": (
            "You slept for {value} hours last night, which is slightly below the recommended 7-9 hours "
            "for adults. Try to get to bed a bit earlier tonight."
        ),
        "good": (
            "You slept for {value} hours last night, which is within the recommended 7-9 hours for adults. "
            "Good quality sleep is essential for physical and mental health."
        ),
    },
)

# Checked in order; the first topic whose keyword appears wins.
TOPIC_RULES: Tuple[TopicRule, ...] = (
    STEPS_RULE,
    HEART_RULE,
    OXYGEN_RULE,
    HYDRATION_RULE,
    SLEEP_RULE,
)

OVERALL_KEYWORDS: Tuple[str, ...] = ("health", "overall")


@dataclass(frozen=True)
class CompositeCheck:
    """
    One metric's contribution to the overall summary.

    A value inside [ok_min, ok_max] counts as positive when `positive_min` is
    unset; with `positive_min` set, only values >= positive_min are positive
    and in-range values below it contribute nothing.
    """

    field: str
    concern: str
    positive: str
    ok_min: Optional[float] = None
    ok_max: Optional[float] = None
    positive_min: Optional[float] = None

    def classify(self, value: float) -> Optional[str]:
        if self.ok_min is not None and value < self.ok_min:
            return "concern"
        if self.ok_max is not None and value > self.ok_max:
            return "concern"
        if self.positive_min is not None and value < self.positive_min:
            return None
        return "positive"


OVERALL_CHECKS: Tuple[CompositeCheck, ...] = (
    CompositeCheck("steps", "low step count", "excellent step count", ok_min=5000, positive_min=10000),
    CompositeCheck("heart_rate", "heart rate outside normal range", "healthy heart rate", ok_min=60, ok_max=100),
    CompositeCheck("oxygen_level", "oxygen level below recommended range", "good oxygen levels", ok_min=95),
    CompositeCheck("hydration", "insufficient hydration", "good hydration", ok_min=2000),
    CompositeCheck("sleep_hours", "insufficient sleep", "healthy sleep duration", ok_min=7),
)

OVERALL_EXCELLENT = (
    "Your overall health metrics look excellent! You're maintaining {positives}. "
    "Keep up the great work and continue with your healthy habits."
)

OVERALL_NEEDS_WORK = (
    "I've noticed several areas for improvement in your health metrics: {concerns}. "
    "Consider focusing on these areas to improve your overall health."
)

OVERALL_MIXED = (
    "Your health metrics show some strengths and areas for improvement. "
    "Positives: {positives}. Areas to focus on: {concerns}. "
    "Small improvements in these areas can lead to significant health benefits."
)
