"""Result models for startup hydration and persistence writes."""

from __future__ import annotations

from pydantic import BaseModel, Field

from settings_sync.domain.errors import HydrationError
from settings_sync.domain.models.enums import HydrationOutcome, PreferenceKey


class WriteOutcome(BaseModel):
    """Result of one best-effort persistence write.

    Writes never raise to their caller; failures are carried here instead.
    """

    key: PreferenceKey
    value: str
    ok: bool = True
    error: str | None = None


class KeyHydration(BaseModel):
    """How one preference was resolved during hydration."""

    key: PreferenceKey
    outcome: HydrationOutcome
    stored_value: str | None = Field(
        default=None,
        description="Raw value read from storage (None when absent or unreadable).",
    )
    applied_value: str = Field(..., description="Value applied to the store.")
    read_error: str | None = None
    write: WriteOutcome | None = Field(
        default=None,
        description="Write-back of the default, when one was issued.",
    )


class HydrationReport(BaseModel):
    """Aggregate outcome of a hydration run."""

    keys: list[KeyHydration] = Field(default_factory=list)

    def get(self, key: PreferenceKey) -> KeyHydration | None:
        for entry in self.keys:
            if entry.key == key:
                return entry
        return None

    @property
    def errors(self) -> list[str]:
        """Human-readable failure messages, one per failed read/write."""
        messages: list[str] = []
        for entry in self.keys:
            if entry.read_error:
                messages.append(f"read '{entry.key.value}': {entry.read_error}")
            if entry.outcome is HydrationOutcome.RECOVERED_INVALID:
                messages.append(
                    f"invalid stored value {entry.stored_value!r} for '{entry.key.value}'"
                )
            if entry.write is not None and not entry.write.ok:
                messages.append(f"write '{entry.key.value}': {entry.write.error}")
        return messages

    @property
    def ok(self) -> bool:
        return not self.errors

    def as_error(self) -> HydrationError | None:
        """Return a ``HydrationError`` summarising failures, or None."""
        errors = self.errors
        return HydrationError(errors) if errors else None
