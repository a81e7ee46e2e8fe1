"""Aggregation pipeline: extraction, counting, ranking and monthly trends."""

from .extraction import Selection, extract_selections
from .counting import CountEntry, GlobalCounts, TrackPerformance, count_global, count_scoped
from .ranking import DEFAULT_TOP_N, rank_counts, rank_entries
from .trends import TimeSeriesPoint, bucket_by_month, monthly_selections, monthly_track_selections

__all__ = [
    "Selection",
    "extract_selections",
    "CountEntry",
    "GlobalCounts",
    "TrackPerformance",
    "count_global",
    "count_scoped",
    "DEFAULT_TOP_N",
    "rank_counts",
    "rank_entries",
    "TimeSeriesPoint",
    "bucket_by_month",
    "monthly_selections",
    "monthly_track_selections",
]
