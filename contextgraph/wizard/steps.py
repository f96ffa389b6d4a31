from enum import Enum
from typing import Tuple, Union

from .state import WizardState


class StepKey(str, Enum):
    ORG = "org"
    TEAM = "team"
    USER = "user"
    CONNECTORS = "connectors"
    SEMANTIC = "semantic"
    ARTISTS = "artists"
    REVIEW = "review"


STEP_ORDER: Tuple[StepKey, ...] = tuple(StepKey)


def next_step(step: Union[StepKey, str]) -> StepKey:
    i = STEP_ORDER.index(StepKey(step))
    return STEP_ORDER[min(len(STEP_ORDER) - 1, i + 1)]


def prev_step(step: Union[StepKey, str]) -> StepKey:
    i = STEP_ORDER.index(StepKey(step))
    return STEP_ORDER[max(0, i - 1)]


# ----------------------------------------------------------------------
# Progress
# ----------------------------------------------------------------------


def completion(state: WizardState) -> int:
    """Percentage of the ten core onboarding facts filled in."""
    checks = [
        bool(state.org.name), bool(state.org.license), bool(state.org.domain),
        bool(state.team.name), bool(state.team.dept),
        bool(state.user.name), bool(state.user.email), bool(state.user.title),
        len(state.glossary) > 0,
        len(state.artists) > 0,
    ]
    return round(100 * sum(checks) / len(checks))


def step_done(state: WizardState, step: Union[StepKey, str]) -> bool:
    step = StepKey(step)

    if step is StepKey.ORG:
        return bool(state.org.name and state.org.license and state.org.domain)
    if step is StepKey.TEAM:
        return bool(state.team.name and state.team.dept)
    if step is StepKey.USER:
        return bool(state.user.name and state.user.email and state.user.title)
    if step is StepKey.CONNECTORS:
        return bool(state.live_connectors()) or state.deferred_connect
    if step is StepKey.SEMANTIC:
        return state.naming.is_complete()
    if step is StepKey.ARTISTS:
        return len(state.artists) > 0

    return state.step == StepKey.REVIEW.value
