"""Top-N ranking of count entries."""

from typing import Hashable, Iterable, List, Mapping, Optional

from .counting import CountEntry

DEFAULT_TOP_N = 10


def _rank_key(entry: CountEntry):
    # Count descending, then label, then key for a total order.
    return (-entry.count, entry.label, str(entry.key))


def rank_entries(entries: Iterable[CountEntry], limit: Optional[int] = DEFAULT_TOP_N) -> List[CountEntry]:
    """
    Order entries by count, highest first, and keep the first `limit`.

    Ties are broken by label, then by key, so the result does not depend on
    the order the entries were counted in.

    Args:
        entries: Count entries to rank
        limit: Maximum number of entries to return; None keeps all

    Returns:
        Ranked list of entries
    """
    ranked = sorted(entries, key=_rank_key)
    if limit is None:
        return ranked
    return ranked[:max(limit, 0)]


def rank_counts(counts: Mapping[Hashable, int], limit: Optional[int] = DEFAULT_TOP_N) -> List[CountEntry]:
    """Rank a plain key -> count mapping, using each key as its own label."""
    entries = [CountEntry(key=key, label=str(key), count=count) for key, count in counts.items()]
    return rank_entries(entries, limit)
