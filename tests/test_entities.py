"""Unit tests for domain entities and value objects."""

import pytest

from src.domain.entities import (
    InvalidPaceRange,
    MalformedRunRecord,
    PaceGroups,
    Run,
    parse_pace_range,
)
from src.domain.enums import AvailabilityLevel, PaceRange

VALID = {
    "sub_8": "consistently",
    "8_to_9": "frequently",
    "9_to_10": "sometimes",
    "10_plus": "rarely",
}


class TestPaceGroups:
    def test_from_mapping(self):
        groups = PaceGroups.from_mapping(VALID)
        assert groups.sub_8 == AvailabilityLevel.CONSISTENTLY
        assert groups.eight_to_nine == AvailabilityLevel.FREQUENTLY
        assert groups.nine_to_ten == AvailabilityLevel.SOMETIMES
        assert groups.ten_plus == AvailabilityLevel.RARELY

    def test_to_dict_matches_wire_shape(self):
        assert PaceGroups.from_mapping(VALID).to_dict() == VALID

    def test_level_for(self):
        groups = PaceGroups.from_mapping(VALID)
        assert groups.level_for(PaceRange.NINE_TO_TEN) == AvailabilityLevel.SOMETIMES
        assert groups.level_for("8_to_9") == AvailabilityLevel.FREQUENTLY

    def test_level_for_unknown_range(self):
        with pytest.raises(InvalidPaceRange):
            PaceGroups.from_mapping(VALID).level_for("under_7")

    def test_missing_key_rejected(self):
        data = {k: v for k, v in VALID.items() if k != "sub_8"}
        with pytest.raises(MalformedRunRecord, match="sub_8"):
            PaceGroups.from_mapping(data)

    def test_extra_key_rejected(self):
        with pytest.raises(MalformedRunRecord, match="sub_7"):
            PaceGroups.from_mapping({**VALID, "sub_7": "rarely"})

    def test_invalid_level_rejected(self):
        with pytest.raises(MalformedRunRecord, match="always"):
            PaceGroups.from_mapping({**VALID, "sub_8": "always"})

    def test_is_immutable(self):
        groups = PaceGroups.from_mapping(VALID)
        with pytest.raises(AttributeError):
            groups.sub_8 = AvailabilityLevel.RARELY


class TestParsePaceRange:
    def test_valid(self):
        assert parse_pace_range("10_plus") is PaceRange.TEN_PLUS
        assert parse_pace_range(PaceRange.SUB_8) is PaceRange.SUB_8

    def test_invalid_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_pace_range("sub_9")


class TestRun:
    def test_new_run_is_active(self):
        assert Run().is_active

    def test_deactivate_and_activate(self):
        run = Run()
        run.deactivate()
        assert not run.is_active
        run.activate()
        assert run.is_active
