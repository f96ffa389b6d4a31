import logging
from typing import Callable, Optional

from .config import EngineConfig
from .graph.clock import SessionClock
from .predict.roster import RosterStrategy
from .wizard.session import OnboardingSession

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Application-side logging setup; the library itself never calls this."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class ContextGraphApp:
    """
    Top-level facade for constructing an onboarding session.

    Assembly only: builds the config, clock and session, greets the
    user and logs the initial provenance signals. No global state is
    created; every session owns its own graph and evidence log.
    """

    @staticmethod
    def create(
        *,
        config: Optional[EngineConfig] = None,
        roster_strategy: Optional[RosterStrategy] = None,
        time_source: Optional[Callable[[], float]] = None,
        bootstrap: bool = True,
    ) -> OnboardingSession:
        """
        Parameters
        ----------
        config : EngineConfig, optional
            Ranking and heuristic tuning. Defaults to `EngineConfig()`.

        roster_strategy : RosterStrategy, optional
            Replacement for label-fragment artist seeding.

        time_source : callable, optional
            Seconds-since-epoch source; injected by tests.

        bootstrap : bool
            Record the pre-input provenance signals immediately.
        """
        session = OnboardingSession(
            config=config or EngineConfig(),
            roster_strategy=roster_strategy,
            clock=SessionClock(time_source),
        )

        if bootstrap:
            session.bootstrap()

        return session
