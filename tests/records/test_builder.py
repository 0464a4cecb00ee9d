"""Tests for team record building, updating and filtering."""
from datetime import date

import pytest
from pastebook.records.builder import build_record, filter_records, update_record
from pastebook.records.models import TeamFilters, TeamRecord

DAY = date(2024, 5, 1)

@pytest.fixture
def record(sample_team):
    return build_record(sample_team, strategy="Hazard stack into Volt Switch", today=DAY)

def test_build_record_from_paste(record, sample_team):
    assert record.team_name == "Ash"
    assert record.team_paste == sample_team
    assert record.key_pokemon == ["Pikachu", "Zard"]
    assert record.strategy == "Hazard stack into Volt Switch"
    assert record.last_updated == DAY
    assert len(record.record_id) == 12

def test_record_id_is_stable(sample_team):
    assert build_record(sample_team).record_id == build_record(sample_team).record_id

def test_explicit_values_win(sample_team):
    record = build_record(sample_team, team_name="Volt Turn", format="VGC", generation="Gen 8")
    assert record.team_name == "Volt Turn"
    assert record.format == "VGC"
    assert record.generation == "Gen 8"

def test_detected_metadata_fills_in():
    record = build_record("Gen 9 OU team:\nGarchomp @ Rocky Helmet")
    assert record.format == "OU (Overused)"
    assert record.generation == "Gen 9"

def test_default_name_and_no_key_pokemon():
    record = build_record("just some notes")
    assert record.team_name == "Untitled Team"
    assert record.key_pokemon is None
    assert record.strategy is None

@pytest.mark.parametrize("paste", ["", "   \n  "])
def test_blank_paste_rejected(paste):
    with pytest.raises(ValueError, match="Team paste is required"):
        build_record(paste)

def test_update_only_touches_given_fields(record):
    updated = update_record(record, today=date(2024, 6, 1), strategy="Rain")

    assert updated.strategy == "Rain"
    assert updated.team_name == record.team_name
    assert updated.key_pokemon == record.key_pokemon
    assert updated.last_updated == date(2024, 6, 1)
    # original untouched
    assert record.strategy == "Hazard stack into Volt Switch"

def test_update_clears_with_empty_string(record):
    updated = update_record(record, format="VGC")
    assert updated.format == "VGC"

    cleared = update_record(updated, format="", strategy="")
    assert cleared.format is None
    assert cleared.strategy is None

def test_update_paste_rederives_key_pokemon(record):
    updated = update_record(record, team_paste="Ditto\n- Transform")
    assert updated.key_pokemon == ["Ditto"]

    pinned = update_record(record, team_paste="Ditto", key_pokemon=["Mew"])
    assert pinned.key_pokemon == ["Mew"]

def test_update_rejects_unknown_fields(record):
    with pytest.raises(ValueError, match="Unknown record fields"):
        update_record(record, record_id="abc")

def test_update_rejects_blank_paste(record):
    with pytest.raises(ValueError):
        update_record(record, team_paste=" ")

def test_filters():
    records = [
        TeamRecord(record_id="a", team_paste="x", format="VGC", generation="Gen 9", strategy="Trick Room"),
        TeamRecord(record_id="b", team_paste="y", format="Ubers", generation="Gen 9"),
        TeamRecord(record_id="c", team_paste="z", format="VGC", generation="Gen 8", strategy="tailwind"),
    ]

    assert [r.record_id for r in filter_records(records, TeamFilters())] == ["a", "b", "c"]
    assert [r.record_id for r in filter_records(records, TeamFilters(format="VGC"))] == ["a", "c"]
    assert [r.record_id for r in filter_records(records, TeamFilters(generation="Gen 9"))] == ["a", "b"]
    assert [r.record_id for r in filter_records(records, TeamFilters(strategy="TAILWIND"))] == ["c"]
    assert filter_records(records, TeamFilters(format="VGC", generation="Gen 7")) == []

def test_filters_active():
    assert not TeamFilters().is_active()
    assert TeamFilters(strategy="rain").is_active()
