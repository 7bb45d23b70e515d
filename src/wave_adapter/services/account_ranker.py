"""Scoring of candidate ledger accounts.

Pure functions over an already-fetched account list: no I/O, no state.
Identical input always yields identical, identically ordered output; ties
keep the input order.
"""

import re

from wave_adapter.entities import (
    ANCHOR_TYPES,
    AccountSummary,
    AccountType,
    MatchReason,
    NameMatch,
    NoMatch,
    Suggestion,
    SubtypeMatch,
    TokenOverlap,
)

NAME_MATCH_SCORE = 3
SUBTYPE_MATCH_SCORE = 2

DEFAULT_TOP_K = 5
MIN_TOP_K = 1
MAX_TOP_K = 10

ANCHOR_KEYWORDS = ("bank", "cash", "checking", "savings", "card", "credit")

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> str:
    """Lower-case, collapse non-alphanumeric runs to one space, trim."""
    return _NON_ALNUM.sub(" ", text.lower()).strip()


def _score_signal(name: str, subtype: str, signal: str) -> tuple[int, MatchReason | None]:
    if signal in name:
        return NAME_MATCH_SCORE, NameMatch(signal)
    if subtype and signal in subtype:
        return SUBTYPE_MATCH_SCORE, SubtypeMatch(signal)
    overlap = sum(1 for token in signal.split(" ") if token and token in name)
    if overlap:
        return overlap, TokenOverlap(overlap)
    return 0, None


def rank_expense_accounts(
    accounts: list[AccountSummary],
    text: str | None = None,
    vendor: str | None = None,
    category_hint: str | None = None,
    top_k: int | None = DEFAULT_TOP_K,
) -> list[Suggestion]:
    """Rank EXPENSE accounts against free-text, vendor and category signals.

    Each signal contributes independently: +3 when the whole signal is in the
    account name, else +2 when it is in the subtype, else +1 per signal token
    found in the name.

    Args:
        accounts: Candidate accounts of any type; only EXPENSE ones are ranked
        text: Free-text description of the expense
        vendor: Vendor name
        category_hint: Caller's guess at the category
        top_k: Number of suggestions to return, clamped to [1, 10]

    Returns:
        At most ``top_k`` suggestions, highest score first
    """
    limit = DEFAULT_TOP_K if top_k is None else max(MIN_TOP_K, min(MAX_TOP_K, top_k))
    signals = [s for s in (normalize(raw) for raw in (text, vendor, category_hint) if raw) if s]

    scored: list[Suggestion] = []
    for account in accounts:
        if account.type != AccountType.EXPENSE:
            continue

        name = normalize(account.name)
        subtype = normalize(account.subtype) if account.subtype else ""
        score = 0
        reasons: list[MatchReason] = []
        for signal in signals:
            points, reason = _score_signal(name, subtype, signal)
            score += points
            if reason is not None:
                reasons.append(reason)

        scored.append(
            Suggestion(
                account_id=account.id,
                name=account.name,
                type=account.type,
                score=score,
                reasons=tuple(reasons) or (NoMatch(),),
            )
        )

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[:limit]


def suggest_anchor(accounts: list[AccountSummary]) -> list[Suggestion]:
    """Rank ASSET/LIABILITY accounts by banking keywords in their names.

    Each of ``ANCHOR_KEYWORDS`` found in the normalized name adds 1. All
    anchors are returned, highest score first.
    """
    scored = []
    for account in accounts:
        if account.type not in ANCHOR_TYPES:
            continue
        name = normalize(account.name)
        score = sum(1 for keyword in ANCHOR_KEYWORDS if keyword in name)
        scored.append(Suggestion(account_id=account.id, name=account.name, type=account.type, score=score))

    scored.sort(key=lambda s: s.score, reverse=True)
    return scored
