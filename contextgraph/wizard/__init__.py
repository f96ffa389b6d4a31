from .session import CopilotMessage, OnboardingSession
from .state import WizardState
from .steps import STEP_ORDER, StepKey

__all__ = ["CopilotMessage", "OnboardingSession", "STEP_ORDER", "StepKey", "WizardState"]
