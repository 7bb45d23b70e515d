"""Ranked account suggestion and the reasons behind a score."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NameMatch:
    """The whole signal appears in the account name."""

    signal: str

    def describe(self) -> str:
        return f"name matches {self.signal}"


@dataclass(frozen=True)
class SubtypeMatch:
    """The whole signal appears in the account subtype."""

    signal: str

    def describe(self) -> str:
        return f"subtype matches {self.signal}"


@dataclass(frozen=True)
class TokenOverlap:
    """Some of the signal's tokens appear in the account name."""

    count: int

    def describe(self) -> str:
        return f"partial match on {self.count} tokens"


@dataclass(frozen=True)
class NoMatch:
    """No signal contributed to the score."""

    def describe(self) -> str:
        return "default"


MatchReason = NameMatch | SubtypeMatch | TokenOverlap | NoMatch


@dataclass(frozen=True)
class Suggestion:
    """A ranked candidate account.

    Attributes:
        account_id: Identifier of the suggested account
        name: Account display name
        type: Account category
        score: Non-negative confidence score, higher is better
        reasons: Why the account scored what it did; None for anchor suggestions
    """

    account_id: str
    name: str
    type: str
    score: int
    reasons: tuple[MatchReason, ...] | None = None

    @property
    def reason(self) -> str | None:
        """Human-readable rendering of ``reasons``."""
        if self.reasons is None:
            return None
        return "; ".join(r.describe() for r in self.reasons)
