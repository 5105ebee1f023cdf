"""Per-navigation access guard.

Every view request is evaluated by a small finite-state machine:

    ENTRY -> HEALTH_CHECKED -> AUTH_CHECKED -> ALLOWED

with exactly one terminal decision per evaluation: PROCEED,
REDIRECT_TO_LOGIN or REDIRECT_TO_BACKEND_ERROR.

The transitions (``on_entry``, ``on_health_checked``, ``on_auth_checked``)
are pure functions returning a ``GuardStep``. ``NavigationGuard.evaluate``
drives them and performs the side-effecting calls: the bounded health probe
and the credential store lookup.

Rules:
    - Backend-error view: proceed immediately, no probe, chrome hidden.
    - Probe False, timed out or failed: redirect to the backend-error view.
    - Login view: proceed after the probe, no auth check, chrome hidden.
    - Otherwise: proceed with chrome only when authenticated, else
      redirect to login.
"""

from dataclasses import dataclass

from src.application.services.bounded_task import run_bounded
from src.application.services.console_session import ConsoleSession
from src.core.result import Failure, Success
from src.domain.enums import NavigationDecision, NavigationState, ViewTarget
from src.domain.protocols import HealthProbeProtocol, LoggerProtocol

LOGIN_PATH = "/login"
LOGOUT_PATH = "/logout"
BACKEND_ERROR_PATH = "/backend-error"
HOME_PATH = "/"

_REDIRECT_PATHS = {
    NavigationDecision.REDIRECT_TO_LOGIN: LOGIN_PATH,
    NavigationDecision.REDIRECT_TO_BACKEND_ERROR: BACKEND_ERROR_PATH,
}


@dataclass(frozen=True, slots=True)
class GuardStep:
    """Output of one pure transition.

    ``decision`` is None while the evaluation still has checks to run.
    """

    state: NavigationState
    decision: NavigationDecision | None = None
    show_authenticated_chrome: bool = False

    @property
    def is_terminal(self) -> bool:
        return self.decision is not None


@dataclass(frozen=True, slots=True)
class NavigationVerdict:
    """Terminal result of evaluating one navigation event.

    Attributes:
        decision: What the request handler must do.
        show_authenticated_chrome: Whether logout and navigation tabs render.
        redirect_to: Target path for redirect decisions, else None.
    """

    decision: NavigationDecision
    show_authenticated_chrome: bool
    redirect_to: str | None = None

    @classmethod
    def from_step(cls, step: GuardStep) -> "NavigationVerdict":
        if step.decision is None:
            raise ValueError(f"Guard step {step.state.value} is not terminal")
        return cls(
            decision=step.decision,
            show_authenticated_chrome=step.show_authenticated_chrome,
            redirect_to=_REDIRECT_PATHS.get(step.decision),
        )


def resolve_target(path: str) -> ViewTarget:
    """Categorise a request path for the guard."""
    normalized = path.rstrip("/") or HOME_PATH
    if normalized == BACKEND_ERROR_PATH:
        return ViewTarget.BACKEND_ERROR
    if normalized == LOGIN_PATH:
        return ViewTarget.LOGIN
    return ViewTarget.PROTECTED


def on_entry(target: ViewTarget) -> GuardStep:
    if target is ViewTarget.BACKEND_ERROR:
        return GuardStep(state=NavigationState.ALLOWED, decision=NavigationDecision.PROCEED)
    return GuardStep(state=NavigationState.ENTRY)


def on_health_checked(target: ViewTarget, available: bool) -> GuardStep:
    if not available:
        return GuardStep(
            state=NavigationState.HEALTH_CHECKED,
            decision=NavigationDecision.REDIRECT_TO_BACKEND_ERROR,
        )
    if target is ViewTarget.LOGIN:
        return GuardStep(state=NavigationState.ALLOWED, decision=NavigationDecision.PROCEED)
    return GuardStep(state=NavigationState.HEALTH_CHECKED)


def on_auth_checked(authenticated: bool) -> GuardStep:
    if not authenticated:
        return GuardStep(
            state=NavigationState.AUTH_CHECKED,
            decision=NavigationDecision.REDIRECT_TO_LOGIN,
        )
    return GuardStep(
        state=NavigationState.ALLOWED,
        decision=NavigationDecision.PROCEED,
        show_authenticated_chrome=True,
    )


class NavigationGuard:
    """Runs the guard state machine for one navigation event.

    Args:
        health_probe: Liveness probe, run under ``health_check_timeout``.
        health_check_timeout: Seconds to wait for the probe.
        logger: Structured logger.
    """

    def __init__(
        self,
        *,
        health_probe: HealthProbeProtocol,
        health_check_timeout: float,
        logger: LoggerProtocol,
    ) -> None:
        self._health_probe = health_probe
        self._health_check_timeout = health_check_timeout
        self._logger = logger

    async def evaluate(self, path: str, session: ConsoleSession) -> NavigationVerdict:
        """Evaluate a navigation to ``path`` for ``session``.

        Returns:
            NavigationVerdict: Always exactly one terminal verdict.
        """
        if not session.layout_initialized:
            session.layout_initialized = True
            self._logger.debug("layout_initialized", session_id=session.session_id[:8])

        target = resolve_target(path)
        step = on_entry(target)

        if not step.is_terminal:
            available = await self._probe()
            step = on_health_checked(target, available)

        if not step.is_terminal:
            step = on_auth_checked(session.credentials.is_authenticated())

        verdict = NavigationVerdict.from_step(step)
        if verdict.decision is not NavigationDecision.PROCEED:
            self._logger.info(
                "navigation_redirected",
                path=path,
                target=target.value,
                decision=verdict.decision.value,
            )
        return verdict

    async def _probe(self) -> bool:
        result = await run_bounded(
            self._health_probe.is_backend_available,
            timeout=self._health_check_timeout,
        )
        match result:
            case Success(value=available):
                return bool(available)
            case Failure(error=error):
                self._logger.warning(
                    "health_check_failed",
                    code=error.code.value,
                    message=error.message,
                )
                return False
