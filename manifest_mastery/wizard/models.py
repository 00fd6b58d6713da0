"""Data models for wizard answers and derived text."""

from dataclasses import dataclass, field, fields
from typing import Optional


@dataclass
class GoalDetail:
    """Answers to the five questions asked about one selected goal."""
    goal: str
    what_to_achieve: str = ""
    how_to_know: str = ""
    is_realistic: str = ""
    importance: str = ""
    timeline: str = ""

    @classmethod
    def answer_fields(cls) -> list[str]:
        """Names of the editable answer fields."""
        return [f.name for f in fields(cls) if f.name != "goal"]

    def is_complete(self) -> bool:
        return all(getattr(self, name).strip() for name in self.answer_fields())


@dataclass
class LimitingBelief:
    """Five-field reflection on a fear holding the user back."""
    fear: str = ""
    triggering_situation: str = ""
    advice_to_friend: str = ""
    small_step: str = ""
    new_belief: str = ""

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def is_complete(self) -> bool:
        return all(getattr(self, name).strip() for name in self.field_names())


@dataclass
class DerivedText:
    """Text generated from the selected goals."""
    affirmations: list[str] = field(default_factory=list)
    gratitude: list[str] = field(default_factory=list)
    manifestation_script: str = ""


@dataclass
class ValidationResult:
    """Outcome of a step validator."""
    ok: bool
    reason: Optional[str] = None

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def failed(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)


@dataclass
class Progress:
    """Position of the current step in the progress-tracked range."""
    position: int
    total: int

    @property
    def percent(self) -> int:
        if self.total <= 1:
            return 100
        return int(((self.position - 1) / (self.total - 1)) * 100)
