from typing import List, Optional, Sequence, Tuple

from agents.responses import (
    FALLBACK_REPLY,
    NO_DATA_REPLY,
    OVERALL_CHECKS,
    OVERALL_EXCELLENT,
    OVERALL_KEYWORDS,
    OVERALL_MIXED,
    OVERALL_NEEDS_WORK,
    TOPIC_RULES,
    TopicRule,
)
from logging_setup import get_logger
from metrics import HealthReading, format_value

logger = get_logger(__name__)

OVERALL_TOPIC = "overall"


class HealthAssistant:
    """
    Rule-based health assistant.

    It does not understand language: the question is lower-cased and scanned
    for topic keywords, and the latest reading for that topic is compared to
    fixed breakpoints to pick one of a few canned replies.
    """

    def __init__(self, rules: Sequence[TopicRule] = TOPIC_RULES):
        self.rules = tuple(rules)

    def match_topic(self, question: str) -> Optional[str]:
        """Return the first topic whose keyword occurs in the question, or None."""
        text = (question or "").lower()
        for rule in self.rules:
            if any(word in text for word in rule.keywords):
                return rule.topic
        if any(word in text for word in OVERALL_KEYWORDS):
            return OVERALL_TOPIC
        return None

    def overall_findings(self, reading: HealthReading) -> Tuple[List[str], List[str]]:
        """Return (concerns, positives) for the composite summary."""
        concerns: List[str] = []
        positives: List[str] = []
        for check in OVERALL_CHECKS:
            verdict = check.classify(reading.value(check.field))
            if verdict == "concern":
                concerns.append(check.concern)
            elif verdict == "positive":
                positives.append(check.positive)
        return concerns, positives

    def overall_reply(self, reading: HealthReading) -> str:
        concerns, positives = self.overall_findings(reading)
        if not concerns:
            return OVERALL_EXCELLENT.format(positives=", ".join(positives))
        if not positives:
            return OVERALL_NEEDS_WORK.format(concerns=", ".join(concerns))
        return OVERALL_MIXED.format(
            positives=", ".join(positives),
            concerns=", ".join(concerns),
        )

    def topic_reply(self, rule: TopicRule, reading: HealthReading) -> str:
        value = reading.value(rule.field)
        band = rule.band(value)
        return rule.templates[band].format(value=format_value(value))

    def reply(self, question: str, readings: Sequence[HealthReading]) -> str:
        """Answer a question about the most recent reading in `readings`."""
        if not readings:
            return NO_DATA_REPLY

        latest = readings[0]
        topic = self.match_topic(question)
        logger.debug("assistant_topic", topic=topic)

        if topic is None:
            return FALLBACK_REPLY
        if topic == OVERALL_TOPIC:
            return self.overall_reply(latest)
        rule = next(r for r in self.rules if r.topic == topic)
        return self.topic_reply(rule, latest)


health_assistant = HealthAssistant()
