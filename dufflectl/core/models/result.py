"""
Result model — the operation contract.

Every duffle operation returns a Result. Callers branch on ``ok`` /
``failed``; the operation layer never raises for a missing binary,
a process that cannot start, or a non-zero exit.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field


class Result(BaseModel):
    """Outcome of a duffle operation.

    Success carries ``value`` (a list of strings, or None for operations
    that only report success). Failure carries one or more
    human-readable ``errors``. There is no partial-success state.
    """

    status: Literal["ok", "failed"] = "ok"
    value: Any = None
    errors: list[str] = Field(default_factory=list)

    command: str = ""   # rendered command line, if one ran

    @property
    def ok(self) -> bool:
        """Whether the operation succeeded."""
        return self.status == "ok"

    @property
    def failed(self) -> bool:
        """Whether the operation failed."""
        return self.status == "failed"

    @property
    def error(self) -> str:
        """All error messages joined into one line."""
        return "; ".join(self.errors)

    @classmethod
    def success(cls, value: Any = None, **kwargs: Any) -> Result:
        """Create a success result."""
        return cls(status="ok", value=value, **kwargs)

    @classmethod
    def failure(cls, *errors: str, **kwargs: Any) -> Result:
        """Create a failure result from one or more messages."""
        if not errors:
            errors = ("Unknown error",)
        return cls(status="failed", errors=list(errors), **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-friendly dict."""
        return self.model_dump(mode="json")
