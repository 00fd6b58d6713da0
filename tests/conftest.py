import io

import pytest
from PIL import Image

from manifest_mastery.wizard.controller import WizardController

GOAL_ANSWERS = {
    "what_to_achieve": "Lead the platform team",
    "how_to_know": "My title changes to team lead",
    "is_realistic": "Yes, my manager supports it",
    "importance": "I want more ownership",
    "timeline": "By next summer",
}

BELIEF_ANSWERS = {
    "fear": "I fear I am not ready",
    "triggering_situation": "Speaking in planning meetings",
    "advice_to_friend": "You have done harder things",
    "small_step": "Volunteer to present one slide",
    "new_belief": "I grow by doing",
}


def make_image_bytes(fmt: str = "PNG", size=(64, 32), color=(200, 40, 120)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, fmt)
    return buffer.getvalue()


@pytest.fixture
def png_bytes():
    return make_image_bytes()


@pytest.fixture
def wizard():
    return WizardController()


@pytest.fixture
def manual_wizard():
    """Wizard that only generates text when asked to."""
    return WizardController(auto_generate=False)


def fill_goals(wizard: WizardController, goals: list[str]):
    for goal in goals:
        wizard.select_goal(goal)
    for index in range(len(goals)):
        for field, value in GOAL_ANSWERS.items():
            wizard.set_goal_field(index, field, value)


def fill_belief(wizard: WizardController):
    for field, value in BELIEF_ANSWERS.items():
        wizard.set_belief_field(field, value)


def go_to(wizard: WizardController, step_id):
    """Advance until the wizard sits on step_id, failing if a step blocks."""
    while wizard.current_step.step_id != step_id:
        result = wizard.advance()
        assert result.ok, result.reason
