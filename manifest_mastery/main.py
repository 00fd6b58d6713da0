"""Main FastAPI application."""

import logging
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from fastapi.responses import Response

from .api.models import (
    FieldUpdate,
    GoalSelection,
    OverviewResponse,
    PlanResponse,
    SessionState,
    TransitionResponse,
    ValidationResponse,
)
from .config import settings
from .errors import (
    GoalNotSelectedError,
    InvalidFileError,
    SessionNotFoundError,
    UnknownFieldError,
    UnknownGoalError,
    WizardError,
)
from .sessions import SessionStore
from .vision.renderer import VisionBoardRenderer, panels_from_session
from .wizard.catalog import (
    BELIEF_PROMPTS,
    CAREER_GOALS,
    GOAL_PROMPTS,
    SECTION_INSTRUCTIONS,
)
from .wizard.controller import WizardController
from .wizard.steps import build_sequence

VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Manifest Mastery",
    description="Manifest your dreams with guided career goal reflection",
    version=VERSION,
)

# Initialize components
sessions = SessionStore(
    sequence=settings.step_sequence,
    max_goals=settings.max_goals,
    auto_generate=settings.auto_generate,
    max_upload_bytes=settings.max_upload_bytes,
    max_sessions=settings.max_sessions,
)
renderer = VisionBoardRenderer(
    width=settings.board_width,
    height=settings.board_height,
    title=settings.board_title,
)

ERROR_STATUS = {
    SessionNotFoundError: 404,
    InvalidFileError: 400,
    GoalNotSelectedError: 409,
    UnknownGoalError: 422,
    UnknownFieldError: 422,
}


def to_http_error(error: WizardError) -> HTTPException:
    """Map a domain error to an HTTP error response."""
    status_code = ERROR_STATUS.get(type(error), 400)
    return HTTPException(status_code=status_code, detail=str(error))


def get_wizard(session_id: str) -> WizardController:
    try:
        return sessions.get(session_id)
    except SessionNotFoundError as e:
        raise to_http_error(e)


def session_state(session_id: str, wizard: WizardController) -> SessionState:
    return SessionState(session_id=session_id, **wizard.snapshot())


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Manifest Mastery",
        "version": VERSION,
        "endpoints": {
            "catalog": "/api/catalog",
            "sessions": "/api/sessions",
            "status": "/status",
        },
    }


@app.get("/status")
async def status():
    """Server status endpoint."""
    return {
        "status": "running",
        "version": VERSION,
        "timestamp": datetime.utcnow().isoformat(),
        "sessions": len(sessions),
    }


@app.get("/api/catalog")
async def catalog():
    """Goals, prompts and step list a front end needs to draw the wizard."""
    return {
        "career_goals": CAREER_GOALS,
        "max_goals": settings.max_goals,
        "section_instructions": SECTION_INSTRUCTIONS,
        "goal_prompts": {
            field: {"question": question, "placeholder": placeholder}
            for field, (question, placeholder) in GOAL_PROMPTS.items()
        },
        "belief_prompts": {
            field: {"question": question, "placeholder": placeholder}
            for field, (question, placeholder) in BELIEF_PROMPTS.items()
        },
        "steps": [
            {
                "id": step.step_id.value,
                "title": step.title,
                "next_label": step.next_label,
                "instructions": step.instructions,
            }
            for step in build_sequence(settings.step_sequence)
        ],
    }


@app.post("/api/sessions", response_model=SessionState, status_code=201)
async def create_session():
    """Start a new wizard session."""
    session_id, wizard = sessions.create()
    return session_state(session_id, wizard)


@app.get("/api/sessions/{session_id}", response_model=SessionState)
async def read_session(session_id: str):
    return session_state(session_id, get_wizard(session_id))


@app.delete("/api/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str):
    """Discard a session and everything in it."""
    try:
        sessions.delete(session_id)
    except SessionNotFoundError as e:
        raise to_http_error(e)
    return Response(status_code=204)


@app.post("/api/sessions/{session_id}/goals", response_model=SessionState)
async def toggle_goal(session_id: str, selection: GoalSelection):
    """Select a goal, or deselect it if already selected."""
    wizard = get_wizard(session_id)
    try:
        wizard.select_goal(selection.goal)
    except WizardError as e:
        raise to_http_error(e)
    return session_state(session_id, wizard)


@app.put("/api/sessions/{session_id}/goals/{index}", response_model=SessionState)
async def update_goal_field(session_id: str, index: int, update: FieldUpdate):
    """Answer one question about the selected goal at index."""
    wizard = get_wizard(session_id)
    try:
        wizard.set_goal_field(index, update.field, update.value)
    except WizardError as e:
        raise to_http_error(e)
    return session_state(session_id, wizard)


@app.put("/api/sessions/{session_id}/belief", response_model=SessionState)
async def update_belief_field(session_id: str, update: FieldUpdate):
    wizard = get_wizard(session_id)
    try:
        wizard.set_belief_field(update.field, update.value)
    except WizardError as e:
        raise to_http_error(e)
    return session_state(session_id, wizard)


@app.post("/api/sessions/{session_id}/vision/{goal}", response_model=SessionState)
async def upload_vision_image(
    session_id: str,
    goal: str,
    file: Optional[UploadFile] = File(None),
):
    """
    Upload the vision board image for a goal.

    A second upload for the same goal replaces the first.
    """
    wizard = get_wizard(session_id)
    file_bytes = None
    if file is not None:
        # One byte past the limit is enough for decode_image to reject it
        limit = wizard.max_upload_bytes
        file_bytes = await file.read(limit + 1 if limit is not None else -1)

    try:
        wizard.upload_vision_image(goal, file_bytes)
    except WizardError as e:
        logger.warning(f"Rejected upload for {goal!r} in session {session_id}: {e}")
        raise to_http_error(e)

    return session_state(session_id, wizard)


@app.get("/api/sessions/{session_id}/vision.png")
async def vision_board_image(session_id: str):
    """Render the vision board as a downloadable PNG wallpaper."""
    wizard = get_wizard(session_id)
    png = renderer.render(panels_from_session(wizard))
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": 'attachment; filename="vision-board.png"'},
    )


@app.post("/api/sessions/{session_id}/affirmations", response_model=SessionState)
async def generate_affirmations(session_id: str):
    wizard = get_wizard(session_id)
    wizard.generate_affirmations()
    return session_state(session_id, wizard)


@app.post("/api/sessions/{session_id}/script", response_model=SessionState)
async def generate_script(session_id: str):
    wizard = get_wizard(session_id)
    wizard.generate_script()
    return session_state(session_id, wizard)


@app.get("/api/sessions/{session_id}/validation", response_model=ValidationResponse)
async def validate_current_step(session_id: str):
    """Check the current step without moving."""
    wizard = get_wizard(session_id)
    result = wizard.validate_step()
    return ValidationResponse(
        step=wizard.current_step.step_id.value,
        ok=result.ok,
        reason=result.reason,
    )


@app.post("/api/sessions/{session_id}/advance", response_model=TransitionResponse)
async def advance(session_id: str):
    """
    Move to the next step.

    A step that does not validate is not an HTTP error; the response
    carries ok=false and the session keeps the error message.
    """
    wizard = get_wizard(session_id)
    result = wizard.advance()
    return TransitionResponse(
        ok=result.ok,
        reason=result.reason,
        state=session_state(session_id, wizard),
    )


@app.post("/api/sessions/{session_id}/retreat", response_model=TransitionResponse)
async def retreat(session_id: str):
    wizard = get_wizard(session_id)
    wizard.retreat()
    return TransitionResponse(ok=True, state=session_state(session_id, wizard))


@app.get("/api/sessions/{session_id}/overview", response_model=OverviewResponse)
async def overview(session_id: str):
    return get_wizard(session_id).overview()


@app.get("/api/sessions/{session_id}/plan", response_model=PlanResponse)
async def plan(session_id: str):
    """The daily 30 minutes plan built from the session's answers."""
    return get_wizard(session_id).plan()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )
