from datetime import datetime
from typing import Any, Dict, Optional, Tuple

import gradio as gr
from pydantic import BaseModel, Field, ValidationError

from logging_setup import get_logger
from metrics import HealthReading
from storage import ReadingStore

logger = get_logger(__name__)

FORM_FIELDS = ("steps", "heart_rate", "oxygen_level", "hydration", "sleep_hours")

FIELD_LABELS: Dict[str, str] = {
    "steps": "Steps",
    "heart_rate": "Heart rate",
    "oxygen_level": "Oxygen level",
    "hydration": "Hydration",
    "sleep_hours": "Sleep hours",
}

# (min, max) accepted by the entry form, inclusive
FIELD_BOUNDS: Dict[str, Tuple[float, float]] = {
    "steps": (0, 100000),
    "heart_rate": (40, 220),
    "oxygen_level": (80, 100),
    "hydration": (0, 5000),
    "sleep_hours": (0, 24),
}

FORM_DEFAULTS: Dict[str, float] = {
    "steps": 0,
    "heart_rate": 70,
    "oxygen_level": 98,
    "hydration": 2000,
    "sleep_hours": 8,
}

QUICK_ADD_AMOUNTS = (250, 500, 1000)


class ReadingForm(BaseModel):
    steps: int = Field(FORM_DEFAULTS["steps"], ge=0, le=100000)
    heart_rate: int = Field(FORM_DEFAULTS["heart_rate"], ge=40, le=220)
    oxygen_level: int = Field(FORM_DEFAULTS["oxygen_level"], ge=80, le=100)
    hydration: int = Field(FORM_DEFAULTS["hydration"], ge=0, le=5000)
    sleep_hours: float = Field(FORM_DEFAULTS["sleep_hours"], ge=0, le=24)


def _error_message(field: str, error_type: str) -> str:
    label = FIELD_LABELS[field]
    lo, hi = FIELD_BOUNDS[field]
    if error_type in {"greater_than_equal", "less_than_equal"}:
        return f"{label} must be between {lo} and {hi}."
    if error_type == "int_from_float":
        return f"{label} must be a whole number."
    if error_type in {"missing", "int_type", "float_type"}:
        return f"{label} is required."
    return f"{label} must be a number."


def validate_reading_form(values: Dict[str, Any]) -> Tuple[Optional[ReadingForm], Dict[str, str]]:
    """
    Validate raw form values.

    Returns (form, {}) on success, or (None, {field: message}) with one
    message per invalid field.
    """
    try:
        return ReadingForm(**values), {}
    except ValidationError as exc:
        errors: Dict[str, str] = {}
        for err in exc.errors():
            field = str(err["loc"][0]) if err.get("loc") else ""
            if field in FIELD_LABELS and field not in errors:
                errors[field] = _error_message(field, err["type"])
        return None, errors


def build_reading(form: ReadingForm, now: Optional[datetime] = None) -> HealthReading:
    """Turn a validated form into a reading dated and stamped with `now`."""
    now = now or datetime.now()
    return HealthReading(
        date=now.date(),
        steps=form.steps,
        heart_rate=form.heart_rate,
        oxygen_level=form.oxygen_level,
        hydration=form.hydration,
        sleep_hours=form.sleep_hours,
        created_at=now,
    )


def submit_reading_action(steps, heart_rate, oxygen_level, hydration, sleep_hours, store: ReadingStore):
    """
    Gradio callback: validate the entry form and prepend a new reading.

    Outputs: store, status, five per-field error messages, five field values
    (reset to defaults after a successful save).
    """
    values = {
        "steps": steps,
        "heart_rate": heart_rate,
        "oxygen_level": oxygen_level,
        "hydration": hydration,
        "sleep_hours": sleep_hours,
    }
    form, errors = validate_reading_form(values)
    if form is None:
        return (
            store,
            "Please fix the highlighted fields.",
            *[errors.get(f, "") for f in FORM_FIELDS],
            *[gr.update() for _ in FORM_FIELDS],
        )

    if store is None:
        store = ReadingStore()

    try:
        store.prepend(build_reading(form))
    except Exception:
        logger.exception("reading_save_failed")
        gr.Warning("Error saving health metrics. Something went wrong. Please try again.")
        return (
            store,
            "",
            *["" for _ in FORM_FIELDS],
            *[gr.update() for _ in FORM_FIELDS],
        )

    gr.Info("Health metrics saved. Your health data has been successfully recorded.")
    return (
        store,
        "Health metrics saved.",
        *["" for _ in FORM_FIELDS],
        *[FORM_DEFAULTS[f] for f in FORM_FIELDS],
    )


def quick_add_hydration_action(amount: int, store: ReadingStore):
    """Gradio callback: add `amount` ml to the latest reading's hydration."""
    if store is None or store.is_empty():
        return store, "No reading to update yet."
    updated = store.add_hydration(int(amount))
    return store, f"Added {int(amount)} ml. Today's hydration: {updated.hydration} ml."
