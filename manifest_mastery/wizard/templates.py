"""Template table for the generated affirmation, gratitude and script text."""

TEMPLATES = {
    "affirmation": "I am confident in my ability to {goal_lower}.",
    "gratitude": "I am grateful for the opportunity to {goal_lower}.",
    "manifestation_script": (
        "I am doing work that I love, and I am recognized for my talents.\n"
        "My career is growing, and I am open to new opportunities and success.\n"
        "I am committed to {goals}, and I feel excited knowing I am creating "
        "the career of my dreams.\n"
        "I am confident in my abilities, and I know that I am on the path to "
        "achieving my career goals."
    ),
}

HOOPONOPONO_MANTRA = [
    "I'm Sorry.",
    "Please forgive me.",
    "Thank you.",
    "I love you.",
]


def render_per_goal(name: str, goals: list[str], templates: dict = TEMPLATES) -> list[str]:
    """
    Render a per-goal template once for every goal.

    Args:
        name: Key into the template table
        goals: Selected goal names, in selection order
        templates: Template table to render from

    Returns:
        One sentence per goal, same order as goals
    """
    template = templates[name]
    return [template.format(goal=goal, goal_lower=goal.lower()) for goal in goals]


def render_joined(name: str, goals: list[str], templates: dict = TEMPLATES) -> str:
    """Render a template that takes the whole goal list joined with ', '."""
    return templates[name].format(goals=", ".join(goals))
