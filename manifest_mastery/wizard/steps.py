"""Wizard step definitions and per-step validators."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .models import ValidationResult


class StepId(str, Enum):
    """Named wizard steps."""
    WELCOME = "welcome"
    INTRO = "intro"
    GOALS = "goals"
    BELIEFS = "beliefs"
    AFFIRMATIONS = "affirmations"
    VISION_BOARD = "vision_board"
    SCRIPT = "script"
    OVERVIEW = "overview"
    PLAN = "plan"


def validate_goals(state) -> ValidationResult:
    if not state.selected_goals:
        return ValidationResult.failed("Please select at least one goal.")
    for goal in state.selected_goals:
        detail = state.goal_details.get(goal)
        if detail is None or not detail.is_complete():
            return ValidationResult.failed(
                "Please answer all questions for each selected goal."
            )
    return ValidationResult.passed()


def validate_beliefs(state) -> ValidationResult:
    if not state.belief.is_complete():
        return ValidationResult.failed(
            "Please fill in all fields about your limiting beliefs."
        )
    return ValidationResult.passed()


def validate_affirmations(state) -> ValidationResult:
    if not state.derived.affirmations or not state.derived.gratitude:
        return ValidationResult.failed(
            "Please generate affirmations and gratitude statements."
        )
    return ValidationResult.passed()


def validate_vision_board(state) -> ValidationResult:
    if any(goal not in state.vision_board for goal in state.selected_goals):
        return ValidationResult.failed("Please upload an image for each selected goal.")
    return ValidationResult.passed()


def validate_script(state) -> ValidationResult:
    if not state.derived.manifestation_script:
        return ValidationResult.failed("Please generate your manifestation script.")
    return ValidationResult.passed()


def always_pass(state) -> ValidationResult:
    return ValidationResult.passed()


VALIDATORS: dict[StepId, Callable[..., ValidationResult]] = {
    StepId.GOALS: validate_goals,
    StepId.BELIEFS: validate_beliefs,
    StepId.AFFIRMATIONS: validate_affirmations,
    StepId.VISION_BOARD: validate_vision_board,
    StepId.SCRIPT: validate_script,
}


@dataclass(frozen=True)
class StepDescriptor:
    """One screen of the wizard."""
    step_id: StepId
    title: str
    next_label: Optional[str] = None
    instructions: Optional[str] = None  # key into SECTION_INSTRUCTIONS
    tracks_progress: bool = True
    generates: Optional[str] = None  # derived text regenerated on entry

    @property
    def validator(self) -> Callable[..., ValidationResult]:
        return VALIDATORS.get(self.step_id, always_pass)


_DESCRIPTORS = {
    StepId.WELCOME: StepDescriptor(
        StepId.WELCOME,
        title="Manifest Mastery",
        next_label="Get Started",
        tracks_progress=False,
    ),
    StepId.INTRO: StepDescriptor(
        StepId.INTRO,
        title="Welcome to ManifestMastery",
        next_label="Continue to Career Goals",
        tracks_progress=False,
    ),
    StepId.GOALS: StepDescriptor(
        StepId.GOALS,
        title="Career Goals",
        next_label="Next: Limiting Beliefs",
        instructions="career_goals",
    ),
    StepId.BELIEFS: StepDescriptor(
        StepId.BELIEFS,
        title="Limiting Belief",
        next_label="Next: Affirm & Be Grateful",
        instructions="limiting_beliefs",
    ),
    StepId.AFFIRMATIONS: StepDescriptor(
        StepId.AFFIRMATIONS,
        title="Affirmations & Gratitude",
        next_label="Next: Vision Board",
        instructions="affirmations_gratitude",
        generates="affirmations",
    ),
    StepId.VISION_BOARD: StepDescriptor(
        StepId.VISION_BOARD,
        title="Vision Board",
        next_label="Generate Manifestation Script",
        instructions="vision_board",
    ),
    StepId.SCRIPT: StepDescriptor(
        StepId.SCRIPT,
        title="Your Career Manifestation Script",
        next_label="View Overview",
        instructions="manifestation_script",
        generates="script",
    ),
    StepId.OVERVIEW: StepDescriptor(
        StepId.OVERVIEW,
        title="Vision Board Overview",
        next_label="View 30 Minutes Plan",
        instructions="vision_board",
    ),
    StepId.PLAN: StepDescriptor(
        StepId.PLAN,
        title="Your 30 Minutes Plan",
        instructions="thirty_minute_plan",
        tracks_progress=False,
    ),
}

SEQUENCES = {
    "full": [
        StepId.WELCOME,
        StepId.INTRO,
        StepId.GOALS,
        StepId.BELIEFS,
        StepId.AFFIRMATIONS,
        StepId.VISION_BOARD,
        StepId.SCRIPT,
        StepId.OVERVIEW,
        StepId.PLAN,
    ],
    "compact": [
        StepId.WELCOME,
        StepId.INTRO,
        StepId.GOALS,
        StepId.BELIEFS,
        StepId.AFFIRMATIONS,
        StepId.VISION_BOARD,
        StepId.SCRIPT,
        StepId.PLAN,
    ],
}


def build_sequence(name: str = "full") -> list[StepDescriptor]:
    """
    Build the ordered step list for a named sequence.

    Args:
        name: "full" (with the overview screen) or "compact"

    Returns:
        Ordered step descriptors

    Raises:
        ValueError: If the sequence name is unknown
    """
    if name not in SEQUENCES:
        raise ValueError(
            f"Unknown step sequence {name!r}, expected one of {sorted(SEQUENCES)}"
        )
    return [_DESCRIPTORS[step_id] for step_id in SEQUENCES[name]]
