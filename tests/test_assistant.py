from __future__ import annotations

import pytest

from agents.assistant import OVERALL_TOPIC, HealthAssistant, health_assistant
from agents.responses import FALLBACK_REPLY, NO_DATA_REPLY, SLEEP_RULE, STEPS_RULE


def test_no_data_reply_regardless_of_question() -> None:
    assert health_assistant.reply("How are my steps?", []) == NO_DATA_REPLY
    assert health_assistant.reply("", []) == NO_DATA_REPLY


def test_unmatched_question_gets_fallback(make_reading) -> None:
    assert health_assistant.reply("What's the weather like?", [make_reading()]) == FALLBACK_REPLY


@pytest.mark.parametrize(
    ("question", "topic"),
    [
        ("How many STEPS did I take?", "steps"),
        ("Was I walking enough", "steps"),
        ("what's my BPM", "heart_rate"),
        ("SpO2 today?", "oxygen_level"),
        ("Did I drink enough water?", "hydration"),
        ("how was my rest", "sleep_hours"),
        ("How is my overall health?", OVERALL_TOPIC),
        ("tell me a joke", None),
    ],
)
def test_match_topic_is_case_insensitive(question: str, topic) -> None:
    assert health_assistant.match_topic(question) == topic


def test_first_matching_topic_wins() -> None:
    # steps is checked before sleep, heart before the overall keywords
    assert health_assistant.match_topic("Do my steps affect my sleep?") == "steps"
    assert health_assistant.match_topic("Is my heart health okay?") == "heart_rate"


def test_steps_reply_bands(make_reading) -> None:
    good = health_assistant.reply("steps?", [make_reading(steps=12000)])
    assert good == (
        "Great job! You've walked 12000 steps today, exceeding the recommended 10,000 steps. "
        "Keep up the good work!"
    )
    low = health_assistant.reply("steps?", [make_reading(steps=4999)])
    assert low.startswith("You've walked 4999 steps today, which is below the recommended")
    mid = health_assistant.reply("steps?", [make_reading(steps=5000)])
    assert "which is good but still below" in mid


def test_band_boundaries() -> None:
    assert STEPS_RULE.band(9999) == "borderline"
    assert STEPS_RULE.band(10000) == "good"
    assert SLEEP_RULE.band(5.9) == "low"
    assert SLEEP_RULE.band(6) == "borderline"
    assert SLEEP_RULE.band(7) == "good"


def test_heart_rate_reply_uses_high_band(make_reading) -> None:
    reply = health_assistant.reply("heart?", [make_reading(heart_rate=110)])
    assert reply.startswith("Your heart rate is 110 BPM, which is above the normal resting range")


def test_sleep_reply_keeps_fractional_hours(make_reading) -> None:
    reply = health_assistant.reply("How did I sleep?", [make_reading(sleep_hours=7.5)])
    assert reply.startswith("You slept for 7.5 hours last night, which is within the recommended")


def test_reply_uses_most_recent_reading(make_series) -> None:
    series = make_series([{"hydration": 1000}, {"hydration": 2900}])
    reply = health_assistant.reply("water", series)
    assert reply.startswith("You've consumed 1000 ml of water today, which is below")


def test_overall_mixed_summary(make_reading) -> None:
    reading = make_reading(steps=3000, heart_rate=70, oxygen_level=98, hydration=2800, sleep_hours=7.5)
    concerns, positives = health_assistant.overall_findings(reading)
    assert concerns == ["low step count"]
    assert positives == [
        "healthy heart rate",
        "good oxygen levels",
        "good hydration",
        "healthy sleep duration",
    ]
    reply = health_assistant.reply("How's my health?", [reading])
    assert reply.startswith("Your health metrics show some strengths and areas for improvement.")
    assert "Areas to focus on: low step count." in reply


def test_overall_moderate_steps_contribute_nothing(make_reading) -> None:
    reading = make_reading(steps=7000)
    concerns, positives = health_assistant.overall_findings(reading)
    assert concerns == []
    assert "excellent step count" not in positives
    assert health_assistant.overall_reply(reading).startswith("Your overall health metrics look excellent!")


def test_overall_needs_work(make_reading) -> None:
    reading = make_reading(steps=1000, heart_rate=120, oxygen_level=90, hydration=500, sleep_hours=4)
    reply = HealthAssistant().overall_reply(reading)
    assert reply.startswith(
        "I've noticed several areas for improvement in your health metrics: low step count, "
        "heart rate outside normal range, oxygen level below recommended range, "
        "insufficient hydration, insufficient sleep."
    )
