"""Host capability probe results."""

from enum import Enum


class ProbeResult(str, Enum):
    """Outcome of a host capability probe."""
    TRUE = "probed-true"
    FALSE = "probed-false"
    UNAVAILABLE = "probe-unavailable"

    @property
    def enabled(self) -> bool:
        """Only a positive probe enables a feature; failures count as absent."""
        return self is ProbeResult.TRUE
