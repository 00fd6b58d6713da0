"""HTTP API models."""

from typing import Optional

from pydantic import BaseModel


class ProgressModel(BaseModel):
    """Position in the progress-tracked steps."""

    position: int
    total: int
    percent: int


class GoalDetailModel(BaseModel):
    goal: str
    what_to_achieve: str = ""
    how_to_know: str = ""
    is_realistic: str = ""
    importance: str = ""
    timeline: str = ""


class LimitingBeliefModel(BaseModel):
    fear: str = ""
    triggering_situation: str = ""
    advice_to_friend: str = ""
    small_step: str = ""
    new_belief: str = ""


class SessionState(BaseModel):
    """Full snapshot of a wizard session."""

    session_id: str
    step: str
    step_index: int
    step_title: str
    next_label: Optional[str] = None
    steps: list[str]
    progress: Optional[ProgressModel] = None
    error: Optional[str] = None
    selected_goals: list[str] = []
    goal_details: list[GoalDetailModel] = []
    belief: LimitingBeliefModel
    vision_board: dict[str, str] = {}
    affirmations: list[str] = []
    gratitude: list[str] = []
    manifestation_script: str = ""


class GoalSelection(BaseModel):
    """Body for toggling a goal."""

    goal: str


class FieldUpdate(BaseModel):
    """Body for writing one answer field."""

    field: str
    value: str


class TransitionResponse(BaseModel):
    """Result of an advance or retreat."""

    ok: bool
    reason: Optional[str] = None
    state: SessionState


class ValidationResponse(BaseModel):
    step: str
    ok: bool
    reason: Optional[str] = None


class OverviewCard(BaseModel):
    goal: str
    image: Optional[str] = None
    goal_statement: str = ""
    limiting_belief: str = ""
    affirmation: Optional[str] = None
    gratitude: Optional[str] = None


class OverviewResponse(BaseModel):
    cards: list[OverviewCard]
    manifestation_script: str = ""


class PlanActivity(BaseModel):
    name: str
    minutes: int
    description: str = ""
    items: list[str] = []
    images: list[str] = []


class PlanResponse(BaseModel):
    """The daily 30 minutes plan."""

    activities: list[PlanActivity]
    total_minutes: int
    limiting_belief: str = ""
