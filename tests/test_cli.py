import json

from typer.testing import CliRunner

from logsheet_analytics.cli import app

from tests.helpers.snapshot_factory import example_snapshot, write_snapshot

runner = CliRunner()


def _snapshot(tmp_path, **sections):
    document = {"logSheets": example_snapshot()}
    document.update(sections)
    return write_snapshot(tmp_path, document)


class TestCLIBasicFunctionality:
    def test_help_command_works(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "admin" in result.stdout
        assert "artist" in result.stdout

    def test_admin_help(self):
        result = runner.invoke(app, ["admin", "--help"])

        assert result.exit_code == 0
        assert "--out" in result.stdout
        assert "--top-n" in result.stdout

    def test_nonexistent_file_error(self):
        result = runner.invoke(app, ["admin", "nonexistent.json"])
        assert result.exit_code == 2

    def test_invalid_json_error(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{oops", encoding="utf-8")

        result = runner.invoke(app, ["admin", str(path)])

        assert result.exit_code == 1


class TestAdminCommand:
    def test_summary(self, tmp_path):
        result = runner.invoke(app, ["admin", str(_snapshot(tmp_path))])

        assert result.exit_code == 0
        assert "Performance (Admin): 4 selections" in result.stdout
        assert "1. Song 1: 3" in result.stdout
        assert "2024-01: 3" in result.stdout
        assert "2024-02: 1" in result.stdout

    def test_writes_json(self, tmp_path):
        out = tmp_path / "out" / "admin.json"

        result = runner.invoke(app, ["admin", str(_snapshot(tmp_path)), "--out", str(out), "--top-n", "1"])

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["songs"]["bar"] == [{"name": "Song 1", "count": 3}]
        assert data["trend"] == [{"name": "2024-01", "count": 3}, {"name": "2024-02", "count": 1}]

    def test_empty_snapshot(self, tmp_path):
        path = write_snapshot(tmp_path, {})

        result = runner.invoke(app, ["admin", str(path)])

        assert result.exit_code == 0
        assert "No log sheet activity found." in result.stdout
        assert "No historical data available" in result.stdout


class TestArtistCommand:
    def test_default_track(self, tmp_path):
        path = _snapshot(tmp_path, myTracks=[{"id": 1, "title": "Song 1"}, {"id": 2, "title": "Song 2"}])

        result = runner.invoke(app, ["artist", str(path)])

        assert result.exit_code == 0
        assert "Selected track 1: 3 selections" in result.stdout
        assert "Acme Radio: 2" in result.stdout

    def test_selected_track_and_json(self, tmp_path):
        path = _snapshot(
            tmp_path,
            myTracks=[{"id": 1, "title": "Song 1"}, {"id": 2, "title": "Song 2"}],
            stats={"totalUploads": 2, "approvedMusic": 2},
        )
        out = tmp_path / "artist.json"

        result = runner.invoke(app, ["artist", str(path), "--track-id", "2", "--out", str(out)])

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["selected_track_id"] == 2
        assert data["selected_total"] == 1
        assert data["stats"]["total_uploads"] == 2
        assert data["trend"] == [{"name": "2024-01", "count": 1}]

    def test_no_tracks(self, tmp_path):
        result = runner.invoke(app, ["artist", str(_snapshot(tmp_path))])

        assert result.exit_code == 0
        assert "No tracks found in your catalog." in result.stdout


class TestArtistOptions:
    def test_artist_has_no_top_n(self, tmp_path):
        result = runner.invoke(app, ["artist", "--help"])

        assert result.exit_code == 0
        assert "--track-id" in result.stdout
        assert "--top-n" not in result.stdout
