"""
Recurrence rule models.

A task's ``repeat`` text is parsed once into one of these variants; code past
the validation boundary works with the variant and never re-reads the text.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

MIN_INTERVAL_DAYS = 1
MAX_INTERVAL_DAYS = 400

IntervalDays = Annotated[int, Field(ge=MIN_INTERVAL_DAYS, le=MAX_INTERVAL_DAYS)]


class _RuleBase(BaseModel):
    model_config = ConfigDict(frozen=True)


class NoRepeat(_RuleBase):
    """One-shot task (empty rule text)."""

    kind: Literal["none"] = "none"

    def to_text(self) -> str:
        return ""


class Yearly(_RuleBase):
    """Same calendar day every year (rule text ``y``)."""

    kind: Literal["yearly"] = "yearly"

    def to_text(self) -> str:
        return "y"


class EveryNDays(_RuleBase):
    """Fixed interval in days (rule text ``d <n>``)."""

    kind: Literal["days"] = "days"
    interval: IntervalDays

    def to_text(self) -> str:
        return f"d {self.interval}"


class MultiDaySelect(_RuleBase):
    """Several day intervals from the same anchor (rule text ``d n1,n2,...``)."""

    kind: Literal["multi_days"] = "multi_days"
    intervals: tuple[IntervalDays, ...] = Field(..., min_length=1)

    def to_text(self) -> str:
        return "d " + ",".join(str(n) for n in self.intervals)


RecurrenceRule = Annotated[
    Union[NoRepeat, Yearly, EveryNDays, MultiDaySelect],
    Field(discriminator="kind"),
]
