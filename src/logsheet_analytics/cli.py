import json
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from .config import Settings
from .logging import get_logger
from .pipeline import AdminPerformanceLoader, ArtistPerformanceLoader
from .records import coerce_id
from .sources import JsonSnapshotProvider, LoggingNotifier, SnapshotFetchError, load_catalog_stats
from .views import RankedPanel

app = typer.Typer(help="Log sheet performance analytics", no_args_is_help=True)


def safe_echo(message: str) -> None:
    """Echo message, replacing characters the console cannot encode."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        typer.echo(message.encode("ascii", errors="replace").decode("ascii"))


def _settings(top_n: Optional[int]) -> Settings:
    settings = Settings.from_env()
    if top_n is not None:
        settings = replace(settings, top_n=top_n)
    return settings


def _open_snapshot(snapshot: Path) -> JsonSnapshotProvider:
    logger = get_logger(__name__)
    provider = JsonSnapshotProvider(snapshot)
    try:
        provider.load_document()
    except SnapshotFetchError as exc:
        logger.error(f"Cannot use snapshot: {exc}")
        raise typer.Exit(code=1) from exc
    return provider


def _write_json(data: Dict[str, Any], out: Path) -> Path:
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)
    return out


def _echo_panel(title: str, panel: RankedPanel, empty_message: str) -> None:
    safe_echo(f"\n{title}")
    if panel.is_empty():
        safe_echo(f"   {empty_message}")
        return
    for position, row in enumerate(panel.rows, start=1):
        safe_echo(f"  {position:>2}. {row.label}: {row.count}")


@app.command()
def admin(
    snapshot: Path = typer.Argument(..., exists=True, readable=True, help="Path to the JSON snapshot"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the view model as JSON to this file"),
    top_n: Optional[int] = typer.Option(None, "--top-n", min=1, help="Number of ranked entries to keep"),
) -> None:
    """
    Show top songs, artists and companies across all log sheets.
    """
    logger = get_logger(__name__)
    provider = _open_snapshot(snapshot)

    logger.info(f"Building admin performance from {snapshot}")
    view = AdminPerformanceLoader(provider, notifier=LoggingNotifier(__name__), settings=_settings(top_n)).load()

    safe_echo(f"Performance (Admin): {view.total_selections} selections")
    _echo_panel("Top Songs", view.songs, "No log sheet activity found.")
    _echo_panel("Top Artists", view.artists, "No artist activity")
    _echo_panel("Top Companies", view.companies, "No company activity")

    safe_echo("\nHistorical Trends")
    if not view.trend:
        safe_echo("   No historical data available")
    for point in view.trend:
        safe_echo(f"   {point.name}: {point.count}")

    if out is not None:
        path = _write_json(view.to_dict(), out)
        logger.info(f"Wrote admin performance to {path}")


@app.command()
def artist(
    snapshot: Path = typer.Argument(..., exists=True, readable=True, help="Path to the JSON snapshot"),
    track_id: Optional[str] = typer.Option(None, "--track-id", help="Track to break down; defaults to the first track"),
    search: Optional[str] = typer.Option(None, "--search", help="Filter listed tracks by title, artist or album"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Write the view model as JSON to this file"),
) -> None:
    """
    Show per-company performance of one of your own tracks.
    """
    logger = get_logger(__name__)
    provider = _open_snapshot(snapshot)
    notifier = LoggingNotifier(__name__)

    loader = ArtistPerformanceLoader(
        provider,
        notifier=notifier,
        settings=Settings.from_env(),
        selected_track_id=coerce_id(track_id),
        query=search,
    )
    view = loader.load()
    stats = load_catalog_stats(provider, notifier)

    safe_echo(
        f"Catalog: {stats.total_uploads} uploads, {stats.approved_music} approved, "
        f"{stats.pending_music} pending, {stats.rejected_music} rejected"
    )
    if not view.track_totals:
        safe_echo("No tracks found in your catalog.")
        return

    safe_echo("\nTracks")
    for track in view.tracks:
        marker = "*" if track.id == view.selected_track_id else " "
        safe_echo(f" {marker} [{track.id}] {track.display_label()} ({view.track_totals.get(track.id, 0)})")

    safe_echo(f"\nSelected track {view.selected_track_id}: {view.selected_total} selections")
    _echo_panel("Usage by Company", view.companies, "No company usage for this track")

    safe_echo("\nUsage Over Time")
    if not view.trend:
        safe_echo("   No historical data for this track")
    for point in view.trend:
        safe_echo(f"   {point.name}: {point.count}")

    if out is not None:
        data = view.to_dict()
        data["stats"] = stats.to_dict()
        path = _write_json(data, out)
        logger.info(f"Wrote artist performance to {path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
