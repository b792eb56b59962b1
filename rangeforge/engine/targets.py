"""Expected SD target hit rates per method and session."""

from rangeforge.engine.models import ExpectedTargets
from rangeforge.engine.policy import get_method_policy

# Historical fill probabilities for the primary (1–2 SD), secondary
# (2–3 SD) and extension (4 SD) targets.  Only London is tabulated;
# other sessions fall back to it.
TARGET_PROBABILITIES: dict[str, dict[str, ExpectedTargets]] = {
    "cbdr": {"london": ExpectedTargets(primary=0.75, secondary=0.45, extension=0.25)},
    "asian": {"london": ExpectedTargets(primary=0.70, secondary=0.40, extension=0.20)},
    "flout": {"london": ExpectedTargets(primary=0.65, secondary=0.35, extension=0.15)},
}

DEFAULT_SESSION = "london"


def calculate_expected_targets(
    method: str,
    session: str = DEFAULT_SESSION,
) -> ExpectedTargets:
    """Return target probabilities for *method* traded in *session*.

    Raises:
        InvalidInput: If *method* is unknown.
    """
    get_method_policy(method)
    by_session = TARGET_PROBABILITIES[method]
    return by_session.get(session, by_session[DEFAULT_SESSION])
