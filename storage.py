"""
In-memory storage for the per-session reading series.

Nothing here touches the disk: the series is generated once when a session
loads and lives in that session's state until the browser tab is closed.
"""

import random
from datetime import date, datetime, timedelta
from typing import Iterator, List, Optional

from health_config import DATA_SEED, SERIES_LENGTH
from logging_setup import get_logger
from metrics import HealthReading

logger = get_logger(__name__)


def generate_mock_series(
    length: int = SERIES_LENGTH,
    seed: Optional[int] = None,
    today: Optional[date] = None,
) -> List[HealthReading]:
    """
    Build `length` daily readings ending today, most recent first.

    Ranges are half-open: steps [5000, 12000), heart rate [60, 100),
    oxygen [95, 100), hydration [1500, 3000), sleep whole hours [5, 10).
    """
    rng = random.Random(seed)
    today = today or date.today()
    now = datetime.now()

    readings: List[HealthReading] = []
    for offset in range(length):
        day = today - timedelta(days=offset)
        readings.append(
            HealthReading(
                date=day,
                steps=rng.randrange(5000, 12000),
                heart_rate=rng.randrange(60, 100),
                oxygen_level=rng.randrange(95, 100),
                hydration=rng.randrange(1500, 3000),
                sleep_hours=float(rng.randrange(5, 10)),
                created_at=datetime.combine(day, now.time()),
            )
        )
    logger.debug("mock_series_generated", length=length, seed=seed)
    return readings


class ReadingStore:
    """
    Ordered window of daily readings, most recent first.

    The window never grows beyond `max_length`: prepending a reading to a full
    window drops the oldest entry.
    """

    def __init__(self, readings: Optional[List[HealthReading]] = None, max_length: int = SERIES_LENGTH):
        if max_length < 1:
            raise ValueError("max_length must be at least 1")
        self.max_length = max_length
        self._readings: List[HealthReading] = list(readings or [])[:max_length]

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[HealthReading]:
        return iter(list(self._readings))

    @property
    def readings(self) -> List[HealthReading]:
        return list(self._readings)

    def is_empty(self) -> bool:
        return not self._readings

    def latest(self) -> Optional[HealthReading]:
        return self._readings[0] if self._readings else None

    def values(self, metric: str) -> List[float]:
        return [r.value(metric) for r in self._readings]

    def prepend(self, reading: HealthReading) -> "ReadingStore":
        self._readings.insert(0, reading)
        del self._readings[self.max_length:]
        logger.info("reading_added", date=reading.date.isoformat(), size=len(self._readings))
        return self

    def add_hydration(self, amount: int) -> Optional[HealthReading]:
        """Add `amount` ml to the latest reading. Returns the updated reading, or None if empty."""
        latest = self.latest()
        if latest is None:
            return None
        updated = latest.with_value("hydration", latest.hydration + amount)
        self._readings[0] = updated
        logger.info("hydration_quick_add", amount=amount, hydration=updated.hydration)
        return updated


def load_store(seed: Optional[int] = DATA_SEED, length: int = SERIES_LENGTH) -> ReadingStore:
    """Create a session store filled with freshly generated mock readings."""
    return ReadingStore(generate_mock_series(length, seed=seed), max_length=length)
