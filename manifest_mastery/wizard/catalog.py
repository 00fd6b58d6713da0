"""Fixed copy for the questionnaire: goals, section instructions and prompts."""

CAREER_GOALS = [
    "Get a promotion",
    "Switch careers",
    "Start a business",
    "Improve work-life balance",
    "Develop new skills",
    "Increase income",
    "Find a new job",
    "Expand professional network",
    "Achieve a specific career milestone",
    "Improve job satisfaction",
]

SECTION_INSTRUCTIONS = {
    "career_goals": (
        "This section helps you map out what you want to achieve in your career "
        "and the steps to get there."
    ),
    "limiting_beliefs": (
        "This section helps you build confidence to pursue new opportunities and "
        "overcome career obstacles by removing fears/doubts that are holding you "
        "back to achieve your goal."
    ),
    "affirmations_gratitude": (
        "This section helps you build a mindset of success by affirming your "
        "strengths and acknowledging the progress you've made, which keeps you "
        "motivated and focused on career growth."
    ),
    "manifestation_script": (
        "This personalized career script will serve as a powerful tool to guide "
        "your intentions and manifest your dream career."
    ),
    "vision_board": (
        "Use this section to build a visual representation that captures your "
        "career goals all in one place for you to practice. You can download and "
        "use it as your desktop or phone wallpaper for daily inspiration."
    ),
    "thirty_minute_plan": (
        "This section helps you to be aligned with your career manifestation goals."
    ),
}

# (question, placeholder) per GoalDetail answer field
GOAL_PROMPTS = {
    "what_to_achieve": (
        "What exactly do you want to achieve?",
        "Describe your goal in clear and simple terms.",
    ),
    "how_to_know": (
        "How will you know when you've achieved it?",
        "What specific result or outcome will show that you've reached your goal?",
    ),
    "is_realistic": (
        "Is this goal realistic for you right now?",
        "Do you have the time, resources, and ability to reach this goal?",
    ),
    "importance": (
        "Why is this goal important to you?",
        "What makes this goal meaningful and relevant to your current life or future plans?",
    ),
    "timeline": (
        "When do you want to achieve this goal?",
        "Set a target date or time frame for achieving your goal.",
    ),
}

BELIEF_PROMPTS = {
    "fear": (
        "What fear is holding me back?",
        "I fear ____________________.",
    ),
    "triggering_situation": (
        "What situation triggers this fear?",
        "I feel this fear when ____________________.",
    ),
    "advice_to_friend": (
        "What advice would I give to a friend?",
        "If my friend felt this way, I would say ____________________.",
    ),
    "small_step": (
        "What is one small step I can take today to confront this fear?",
        "Today, I will ____________________ to confront my fear.",
    ),
    "new_belief": (
        "What new belief will replace the fear?",
        "I will replace my fear with the belief that ____________________.",
    ),
}
