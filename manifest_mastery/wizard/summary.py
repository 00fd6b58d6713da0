"""Overview cards and the 30 minutes plan built from a finished session."""

from typing import Optional

from .templates import HOOPONOPONO_MANTRA


def _at(items: list[str], index: int) -> Optional[str]:
    return items[index] if index < len(items) else None


def build_overview(state) -> dict:
    """
    Build the vision board overview.

    Args:
        state: Wizard controller (or anything with the same answer attributes)

    Returns:
        Dict with one card per selected goal and the manifestation script
    """
    cards = []
    for index, goal in enumerate(state.selected_goals):
        detail = state.goal_details.get(goal)
        cards.append(
            {
                "goal": goal,
                "image": state.vision_board.get(goal),
                "goal_statement": detail.what_to_achieve if detail else "",
                "limiting_belief": state.belief.fear,
                "affirmation": _at(state.derived.affirmations, index),
                "gratitude": _at(state.derived.gratitude, index),
            }
        )

    return {
        "cards": cards,
        "manifestation_script": state.derived.manifestation_script,
    }


def build_plan(state) -> dict:
    """Build the daily 30 minutes practice plan."""
    activities = [
        {
            "name": "Breathing",
            "minutes": 10,
            "description": (
                "Practice: Utilize the Wim Hof Breathing technique to enhance "
                "your focus and calm your mind."
            ),
        },
        {
            "name": "Silence",
            "minutes": 10,
            "description": (
                "Action: Set a silence timer for 10 minutes to allow for deep "
                "reflection and mindfulness."
            ),
        },
        {
            "name": "Ho'oponopono",
            "minutes": 2,
            "description": "Mantra:",
            "items": list(HOOPONOPONO_MANTRA),
        },
        {
            "name": "Gratitude",
            "minutes": 2,
            "description": ", ".join(state.derived.gratitude),
        },
        {
            "name": "Affirmations",
            "minutes": 2,
            "description": ", ".join(state.derived.affirmations),
        },
        {
            "name": "Read Your Life Script",
            "minutes": 2,
            "description": state.derived.manifestation_script,
        },
        {
            "name": "Visualize Your Goals",
            "minutes": 2,
            "description": "",
            "images": [
                state.vision_board[goal]
                for goal in state.selected_goals
                if goal in state.vision_board
            ],
        },
    ]

    return {
        "activities": activities,
        "total_minutes": sum(a["minutes"] for a in activities),
        "limiting_belief": state.belief.fear,
    }
