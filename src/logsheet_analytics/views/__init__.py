"""Presentation-ready view models."""

from .assembler import PieSlice, RankedPanel, SeriesPoint, ranked_panel, to_pie, to_series, trend_series
from .performance import AdminPerformanceView, ArtistPerformanceView

__all__ = [
    "PieSlice",
    "RankedPanel",
    "SeriesPoint",
    "ranked_panel",
    "to_pie",
    "to_series",
    "trend_series",
    "AdminPerformanceView",
    "ArtistPerformanceView",
]
