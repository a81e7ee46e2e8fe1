"""
Reshaping of ranked and bucketed results into presentation records.

The functions in this module add no business rules: they map each input
item to exactly one output record and keep the order they are given.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Sequence

from ..aggregation import CountEntry, TimeSeriesPoint


@dataclass(frozen=True)
class SeriesPoint:
    """Bar or line chart datum."""
    name: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PieSlice:
    """Proportional (pie) chart datum."""
    name: str
    value: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class RankedPanel:
    """List rows plus bar and pie series for one ranked dimension."""
    rows: List[CountEntry]
    bar: List[SeriesPoint]
    pie: List[PieSlice]

    def is_empty(self) -> bool:
        return not self.rows

    def to_dict(self) -> Dict[str, Any]:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "bar": [point.to_dict() for point in self.bar],
            "pie": [slice_.to_dict() for slice_ in self.pie],
        }


def to_series(entries: Sequence[CountEntry]) -> List[SeriesPoint]:
    return [SeriesPoint(name=entry.label, count=entry.count) for entry in entries]


def to_pie(entries: Sequence[CountEntry]) -> List[PieSlice]:
    return [PieSlice(name=entry.label, value=entry.count) for entry in entries]


def trend_series(points: Sequence[TimeSeriesPoint]) -> List[SeriesPoint]:
    return [SeriesPoint(name=point.month_key, count=point.count) for point in points]


def ranked_panel(entries: Sequence[CountEntry]) -> RankedPanel:
    """Build the list, bar and pie shapes for already-ranked entries."""
    rows = list(entries)
    return RankedPanel(rows=rows, bar=to_series(rows), pie=to_pie(rows))
