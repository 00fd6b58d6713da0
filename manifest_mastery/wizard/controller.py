"""Wizard controller: step navigation, answers and generated text."""

import logging
from dataclasses import asdict
from typing import Optional, Union

from ..errors import (
    GoalNotSelectedError,
    UnknownFieldError,
    UnknownGoalError,
)
from ..vision.images import decode_image
from . import summary
from .catalog import CAREER_GOALS
from .models import DerivedText, GoalDetail, LimitingBelief, Progress, ValidationResult
from .steps import StepDescriptor, StepId, build_sequence
from .templates import TEMPLATES, render_joined, render_per_goal

logger = logging.getLogger(__name__)


class WizardController:
    """Holds one user's wizard session in memory."""

    def __init__(
        self,
        sequence: str = "full",
        max_goals: int = 3,
        auto_generate: bool = True,
        max_upload_bytes: Optional[int] = None,
        goal_catalog: Optional[list[str]] = None,
        templates: Optional[dict] = None,
    ):
        """
        Initialize a fresh session at the first step.

        Args:
            sequence: Step sequence name ("full" or "compact")
            max_goals: Most goals that may be selected at once
            auto_generate: Regenerate derived text when entering the steps that show it
            max_upload_bytes: Size limit for vision board uploads
            goal_catalog: Goals the user may choose from
            templates: Template table for generated text
        """
        self.steps: list[StepDescriptor] = build_sequence(sequence)
        self.max_goals = max_goals
        self.auto_generate = auto_generate
        self.max_upload_bytes = max_upload_bytes
        self.goal_catalog = goal_catalog if goal_catalog is not None else CAREER_GOALS
        self.templates = templates if templates is not None else TEMPLATES

        self.step_index = 0
        self.error: Optional[str] = None
        self.selected_goals: list[str] = []
        self.goal_details: dict[str, GoalDetail] = {}
        self.belief = LimitingBelief()
        self.vision_board: dict[str, str] = {}
        self.derived = DerivedText()

    # Navigation

    @property
    def current_step(self) -> StepDescriptor:
        return self.steps[self.step_index]

    @property
    def is_last_step(self) -> bool:
        return self.step_index == len(self.steps) - 1

    def validate_step(self, step: Union[StepId, str, None] = None) -> ValidationResult:
        """Run the validator for a step (the current one by default) without side effects."""
        if step is None:
            descriptor = self.current_step
        else:
            try:
                step = StepId(step)
            except ValueError:
                raise ValueError(f"Unknown step: {step!r}") from None
            descriptor = next((s for s in self.steps if s.step_id == step), None)
            if descriptor is None:
                raise ValueError(f"Step {step.value!r} is not part of this wizard")
        return descriptor.validator(self)

    def advance(self) -> ValidationResult:
        """
        Move to the next step if the current one validates.

        On failure the error message is set and the step is unchanged.
        """
        if self.is_last_step:
            result = ValidationResult.failed("You have reached the final step.")
        else:
            result = self.validate_step()

        if not result.ok:
            self.error = result.reason
            logger.warning(f"Cannot leave step {self.current_step.step_id.value}: {result.reason}")
            return result

        self.error = None
        self.step_index += 1
        logger.info(f"Advanced to step {self.current_step.step_id.value}")
        self._on_enter(self.current_step)
        return result

    def retreat(self):
        """Move back one step. Always allowed."""
        self.error = None
        if self.step_index > 0:
            self.step_index -= 1
            logger.info(f"Went back to step {self.current_step.step_id.value}")

    def _on_enter(self, step: StepDescriptor):
        if not self.auto_generate or step.generates is None:
            return
        if step.generates == "affirmations":
            self.generate_affirmations()
        elif step.generates == "script":
            self.generate_script()

    def progress(self) -> Optional[Progress]:
        """Progress through the tracked steps, or None outside them."""
        tracked = [s.step_id for s in self.steps if s.tracks_progress]
        if self.current_step.step_id not in tracked:
            return None
        return Progress(
            position=tracked.index(self.current_step.step_id) + 1,
            total=len(tracked),
        )

    # Goals

    def select_goal(self, name: str):
        """
        Toggle a goal in the selection.

        Adding beyond the limit is ignored. Removing drops the goal's
        answers and vision image too. Any change to the selection discards
        the generated text, which then has to be generated again.
        """
        if name in self.selected_goals:
            self.selected_goals.remove(name)
            self.goal_details.pop(name, None)
            self.vision_board.pop(name, None)
            self.derived = DerivedText()
            logger.info(f"Deselected goal: {name}")
            return

        if name not in self.goal_catalog:
            raise UnknownGoalError(f"Unknown goal: {name!r}")

        if len(self.selected_goals) >= self.max_goals:
            logger.debug(f"Ignoring goal {name!r}: already {self.max_goals} selected")
            return

        self.selected_goals.append(name)
        self.goal_details[name] = GoalDetail(goal=name)
        self.derived = DerivedText()
        logger.info(f"Selected goal: {name}")

    def set_goal_field(self, index: int, field: str, value: str):
        """Write an answer for the selected goal at the given position."""
        if not 0 <= index < len(self.selected_goals):
            raise GoalNotSelectedError(f"No selected goal at index {index}")
        self.set_goal_field_by_name(self.selected_goals[index], field, value)

    def set_goal_field_by_name(self, goal: str, field: str, value: str):
        """Write an answer for a selected goal."""
        if goal not in self.selected_goals:
            raise GoalNotSelectedError(f"Goal is not selected: {goal!r}")
        if field not in GoalDetail.answer_fields():
            raise UnknownFieldError(f"Unknown goal field: {field!r}")

        detail = self.goal_details.setdefault(goal, GoalDetail(goal=goal))
        setattr(detail, field, value)
        logger.debug(f"Set {field} for goal {goal!r}")

    # Limiting belief

    def set_belief_field(self, field: str, value: str):
        if field not in LimitingBelief.field_names():
            raise UnknownFieldError(f"Unknown belief field: {field!r}")
        setattr(self.belief, field, value)
        logger.debug(f"Set belief field {field}")

    # Vision board

    def upload_vision_image(self, goal: str, file_bytes: Optional[bytes]) -> str:
        """
        Store an image for a goal, replacing any earlier one.

        Returns:
            The stored data URL

        Raises:
            GoalNotSelectedError: If the goal is not selected
            InvalidFileError: If no file was given or it cannot be decoded
        """
        if goal not in self.selected_goals:
            raise GoalNotSelectedError(f"Goal is not selected: {goal!r}")

        decoded = decode_image(file_bytes, max_bytes=self.max_upload_bytes)
        self.vision_board[goal] = decoded.data_url
        logger.info(
            f"Stored {decoded.mime_type} image ({decoded.width}x{decoded.height}) for goal {goal!r}"
        )
        return decoded.data_url

    # Generated text

    def generate_affirmations(self):
        """Recompute affirmations and gratitude statements from the selected goals."""
        self.derived.affirmations = render_per_goal(
            "affirmation", self.selected_goals, self.templates
        )
        self.derived.gratitude = render_per_goal(
            "gratitude", self.selected_goals, self.templates
        )
        logger.info(f"Generated affirmations for {len(self.selected_goals)} goals")

    def generate_script(self) -> str:
        self.derived.manifestation_script = render_joined(
            "manifestation_script", self.selected_goals, self.templates
        )
        logger.info("Generated manifestation script")
        return self.derived.manifestation_script

    # Summaries

    def overview(self) -> dict:
        return summary.build_overview(self)

    def plan(self) -> dict:
        return summary.build_plan(self)

    def snapshot(self) -> dict:
        """Plain-data view of the whole session."""
        progress = self.progress()
        return {
            "step": self.current_step.step_id.value,
            "step_index": self.step_index,
            "step_title": self.current_step.title,
            "next_label": self.current_step.next_label,
            "steps": [s.step_id.value for s in self.steps],
            "progress": (
                {
                    "position": progress.position,
                    "total": progress.total,
                    "percent": progress.percent,
                }
                if progress
                else None
            ),
            "error": self.error,
            "selected_goals": list(self.selected_goals),
            "goal_details": [
                asdict(self.goal_details.get(goal, GoalDetail(goal=goal)))
                for goal in self.selected_goals
            ],
            "belief": asdict(self.belief),
            "vision_board": dict(self.vision_board),
            "affirmations": list(self.derived.affirmations),
            "gratitude": list(self.derived.gratitude),
            "manifestation_script": self.derived.manifestation_script,
        }
