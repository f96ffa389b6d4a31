from .state import WizardState
from .steps import StepKey

WELCOME = (
    "Welcome aboard. I'll get you to value in minutes. "
    "Skips are safe; I'll fill gaps as you go."
)
SKIP_NOTE = "Skipping ahead. I'll fill gaps as we go."
SEEDED_NOTE = "Nice. I seeded your workspace. I'll keep enriching as data flows in."
DEEP_RESEARCH_NOTE = (
    "Found signals suggesting two priority artists this quarter. Added to suggestions."
)


def guidance(state: WizardState) -> str:
    """Co-pilot nudge for the current step, given what is still missing."""
    org, team, user = state.org, state.team, state.user

    missing_org = not (org.name and org.license and org.domain)
    missing_team = not (team.name and team.dept)
    missing_user = not (user.name and user.email and user.title)

    step = StepKey(state.step)

    if step is StepKey.ORG:
        if missing_org:
            return "Let's anchor your org. What's the organization name and license?"
        return "Looks good. Jump to Team when ready."
    if step is StepKey.TEAM:
        if missing_team:
            return "Who are you with? Team name and department is enough for now."
        return "Great. Next: your user profile."
    if step is StepKey.USER:
        if missing_user:
            return "Give me your name, email, and role so I can personalize everything."
        return "Dial in connectors next. You can skip and defer if needed."
    if step is StepKey.CONNECTORS:
        return "I preselected common connectors for your domain. Toggle what applies or defer."
    if step is StepKey.SEMANTIC:
        return (
            "Set naming conventions + a starter glossary. "
            "Keep it lightweight, this unlocks clean joins."
        )
    if step is StepKey.ARTISTS:
        return (
            "Add the artists you work with. I suggested a few; edit freely. "
            "I'll enrich from the music graph."
        )
    return (
        "You're set. Save & seed your workspace. "
        "I'll continue enriching in the background as you work."
    )
