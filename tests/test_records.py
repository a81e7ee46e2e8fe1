"""Tests for record parsing and defaulting rules."""

from datetime import datetime, timezone

import pytest
from hypothesis import given, strategies as st

from logsheet_analytics.records import (
    CatalogStats,
    LogSheet,
    SelectionEntry,
    Track,
    coerce_id,
    parse_log_sheets,
    parse_timestamp,
    parse_tracks,
)


class TestCoerceId:
    def test_int_kept(self):
        assert coerce_id(7) == 7

    def test_digit_string_becomes_int(self):
        assert coerce_id("12") == 12
        assert coerce_id(" 12 ") == 12

    def test_other_string_kept(self):
        assert coerce_id("trk-9") == "trk-9"

    @pytest.mark.parametrize("value", [None, "", "   ", 0, "0", False, True, [], {}, 1.5])
    def test_missing_values(self, value):
        assert coerce_id(value) is None

    def test_integral_float(self):
        assert coerce_id(3.0) == 3

    @given(st.integers(min_value=1, max_value=10**9))
    def test_int_and_string_forms_agree(self, value):
        assert coerce_id(value) == coerce_id(str(value)) == value


class TestParseTimestamp:
    def test_iso_with_z(self):
        parsed = parse_timestamp("2024-01-15T10:00:00Z")
        assert parsed == datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc)

    def test_plain_date(self):
        assert parse_timestamp("2024-02-03") == datetime(2024, 2, 3)

    def test_epoch_milliseconds(self):
        parsed = parse_timestamp(1704067200000)
        assert (parsed.year, parsed.month, parsed.day) == (2024, 1, 1)

    def test_datetime_passthrough(self):
        value = datetime(2023, 12, 31, 23, 59)
        assert parse_timestamp(value) is value

    @pytest.mark.parametrize("value", [None, "", "not a date", True, object()])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


class TestSelectionEntry:
    def test_title_defaults_to_track_id(self):
        entry = SelectionEntry.from_dict({"id": 5})
        assert entry.resolved_title() == "Track 5"

    def test_title_used_when_present(self):
        entry = SelectionEntry.from_dict({"id": 5, "title": "Sunrise"})
        assert entry.resolved_title() == "Sunrise"

    def test_artist_prefers_user_email(self):
        entry = SelectionEntry.from_dict({"id": 1, "artist": "Mpho", "user": {"email": "mpho@example.com"}})
        assert entry.resolved_artist() == "mpho@example.com"

    def test_artist_falls_back_to_artist_field(self):
        entry = SelectionEntry.from_dict({"id": 1, "artist": "Mpho", "user": {}})
        assert entry.resolved_artist() == "Mpho"

    def test_artist_unknown(self):
        entry = SelectionEntry.from_dict({"id": 1, "artist": ""})
        assert entry.resolved_artist() == "Unknown Artist"
        assert entry.resolved_artist("n/a") == "n/a"

    def test_missing_id(self):
        assert not SelectionEntry.from_dict({"title": "No id"}).has_id()
        assert SelectionEntry.from_dict({"id": "4"}).has_id()

    def test_selection_entry_immutable(self):
        entry = SelectionEntry(id=1)
        with pytest.raises(AttributeError):
            entry.id = 2  # type: ignore


class TestLogSheet:
    def test_from_dict(self):
        sheet = LogSheet.from_dict({
            "id": 3,
            "company": {"companyName": "Acme Radio"},
            "createdDate": "2024-03-09T08:00:00",
            "selectedMusic": [{"id": 1}, {"id": 1}, {"title": "no id"}],
        })
        assert sheet.id == 3
        assert sheet.company_label() == "Acme Radio"
        assert sheet.month_key() == "2024-03"
        assert len(sheet.selected_music) == 3
        assert [entry.has_id() for entry in sheet.selected_music] == [True, True, False]

    def test_unknown_company(self):
        assert LogSheet.from_dict({"id": 1}).company_label() == "Unknown Company"
        assert LogSheet.from_dict({"id": 1, "company": {"companyName": ""}}).company_label() == "Unknown Company"
        assert LogSheet.from_dict({"id": 1, "company": None}).company_label("Other") == "Other"

    def test_missing_date_has_no_month(self):
        assert LogSheet.from_dict({"id": 1}).month_key() is None
        assert LogSheet.from_dict({"id": 1, "createdDate": "yesterday"}).month_key() is None

    def test_month_key_zero_padded(self):
        sheet = LogSheet(id=1, created_date=datetime(987, 4, 1))
        assert sheet.month_key() == "0987-04"

    def test_malformed_selection_entries(self):
        sheet = LogSheet.from_dict({"id": 1, "selectedMusic": ["oops", None, {"id": 2}]})
        assert [entry.id for entry in sheet.selected_music] == [None, None, 2]

    def test_selected_music_not_a_list(self):
        assert LogSheet.from_dict({"id": 1, "selectedMusic": "nope"}).selected_music == ()


class TestParseLists:
    def test_parse_log_sheets_skips_non_objects(self):
        sheets = parse_log_sheets([{"id": 1}, "junk", 42, {"id": 2}])
        assert [sheet.id for sheet in sheets] == [1, 2]

    @pytest.mark.parametrize("raw", [None, "text", {"id": 1}, 5])
    def test_parse_log_sheets_non_list(self, raw):
        assert parse_log_sheets(raw) == []

    def test_parse_tracks_requires_id(self):
        tracks = parse_tracks([
            {"id": 1, "title": "One", "artist": "Mpho", "albumName": "Debut", "status": {"statusName": "APPROVED"}},
            {"title": "No id"},
            {"id": "2", "title": "Two"},
        ])
        assert [track.id for track in tracks] == [1, 2]
        assert tracks[0].album_name == "Debut"
        assert tracks[0].status == "APPROVED"

    def test_track_display_label(self):
        assert Track(id=1, title="One", artist="Mpho").display_label() == "One - Mpho"
        assert Track(id=2).display_label() == "Track 2 - Unknown"


class TestCatalogStats:
    def test_defaults(self):
        assert CatalogStats().to_dict() == {
            "total_uploads": 0,
            "approved_music": 0,
            "pending_music": 0,
            "rejected_music": 0,
        }

    def test_from_dict_tolerates_bad_values(self):
        stats = CatalogStats.from_dict({"totalUploads": "4", "approvedMusic": None, "pendingMusic": "x", "rejectedMusic": -2})
        assert stats == CatalogStats(total_uploads=4)


class TestMalformedIds:
    @pytest.mark.parametrize("value", ["²", "١٢", "½"])
    def test_non_ascii_digits_kept_as_text(self, value):
        assert coerce_id(value) == value

    def test_bad_id_does_not_discard_other_sheets(self):
        sheets = parse_log_sheets([
            {"id": 1, "createdDate": "2024-01-15", "selectedMusic": [{"id": 1}, {"id": 1}, {"id": 2}]},
            {"id": "²", "createdDate": "2024-01-20", "selectedMusic": [{"id": "²"}]},
        ])
        assert [sheet.id for sheet in sheets] == [1, "²"]

    def test_unreadable_sheet_skipped(self, monkeypatch):
        original = LogSheet.from_dict

        def from_dict(data):
            if data.get("id") == 2:
                raise ValueError("unreadable")
            return original(data)

        monkeypatch.setattr(LogSheet, "from_dict", staticmethod(from_dict))

        sheets = parse_log_sheets([{"id": 1}, {"id": 2}, {"id": 3}])

        assert [sheet.id for sheet in sheets] == [1, 3]

    def test_unreadable_track_skipped(self, monkeypatch):
        original = Track.from_dict

        def from_dict(data):
            if data.get("id") == 2:
                raise TypeError("unreadable")
            return original(data)

        monkeypatch.setattr(Track, "from_dict", staticmethod(from_dict))

        assert [track.id for track in parse_tracks([{"id": 1}, {"id": 2}])] == [1]
