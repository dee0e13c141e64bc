"""Resolution result types."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from a3kit.core.exceptions import (
    MalformedPathError,
    NoCandidateFoundError,
    ResolutionError,
    UnsupportedModeError,
)
from a3kit.core.platform import OSClass


class ResolutionOutcome(Enum):
    """How a resolution ended."""

    RESOLVED = "resolved"
    NOT_FOUND = "not-found"
    UNSUPPORTED_MODE = "unsupported-mode"
    MALFORMED_PATH = "malformed-path"


_OUTCOME_ERRORS = {
    ResolutionOutcome.NOT_FOUND: NoCandidateFoundError,
    ResolutionOutcome.UNSUPPORTED_MODE: UnsupportedModeError,
    ResolutionOutcome.MALFORMED_PATH: MalformedPathError,
}


@dataclass(frozen=True)
class ResolutionResult:
    """
    Result of resolving the a³ tool path.

    tool_path is set if and only if outcome is RESOLVED. selected_build is
    -1 unless an installer package was selected and unpacked.
    """

    os_class: OSClass
    outcome: ResolutionOutcome
    tool_path: Optional[Path] = None
    selected_build: int = -1
    target: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        """True if a usable tool path was resolved."""
        return self.outcome is ResolutionOutcome.RESOLVED

    def require_tool_path(self) -> Path:
        """
        Return the tool path or raise the matching ResolutionError.

        Raises:
            NoCandidateFoundError: No installer package or launcher found
            UnsupportedModeError: Mode not available for the OS class
            MalformedPathError: Configured path could not be used
        """
        if self.ok:
            return self.tool_path
        error_cls = _OUTCOME_ERRORS.get(self.outcome, ResolutionError)
        raise error_cls(self.message or f"a³ tool path not resolved ({self.outcome.value})")

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "tool_path": str(self.tool_path) if self.tool_path else None,
            "selected_build": self.selected_build,
            "target": self.target,
            "os": self.os_class.value,
            "outcome": self.outcome.value,
            "message": self.message,
        }
