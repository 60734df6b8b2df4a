"""Tests for response models and enumerations."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from aiowithings import (
    Activity,
    Device,
    DeviceModel,
    DeviceType,
    GetMeasBody,
    GetMeasResponse,
    Measure,
    MeasureCategory,
    MeasureGroup,
    MeasureType,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _group(**overrides: object) -> dict[str, object]:
    data: dict[str, object] = {
        "grpid": 12,
        "attrib": 0,
        "date": 0,
        "created": 0,
        "category": 1,
        "deviceid": "abc",
        "measures": [{"value": 72345, "type": 1, "unit": -3}],
        "comment": None,
    }
    data.update(overrides)
    return data


def test_unknown_codes_resolve_to_unknown() -> None:
    assert MeasureType(999) is MeasureType.UNKNOWN
    assert MeasureCategory(42) is MeasureCategory.UNKNOWN
    assert MeasureType(1) is MeasureType.WEIGHT
    assert MeasureCategory(2) is MeasureCategory.USER_OBJECTIVE


def test_non_integer_codes_still_fail() -> None:
    with pytest.raises(ValueError):
        MeasureType("weight")
    with pytest.raises(ValueError):
        MeasureCategory(None)


def test_measure_group_epoch_timestamps() -> None:
    group = MeasureGroup.model_validate(_group())
    assert group.date == EPOCH
    assert group.created == EPOCH
    assert group.date.tzinfo is not None


def test_measure_group_converts_seconds_not_milliseconds() -> None:
    group = MeasureGroup.model_validate(_group(date=1704067200, created=1704067260))
    assert group.date == datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert group.created == datetime(2024, 1, 1, 0, 1, tzinfo=timezone.utc)


def test_measure_group_passes_fields_through() -> None:
    group = MeasureGroup.model_validate(_group())
    assert group.group_id == 12
    assert group.attribute == 0
    assert group.category is MeasureCategory.REAL
    assert group.device_id == "abc"
    assert group.comment is None
    assert group.measures == (Measure(value=72345, type=MeasureType.WEIGHT, unit=-3),)


def test_unknown_category_and_type_decode_to_sentinel() -> None:
    group = MeasureGroup.model_validate(
        _group(category=77, measures=[{"value": 5, "type": 4242, "unit": 0}])
    )
    assert group.category is MeasureCategory.UNKNOWN
    assert group.measures[0].type is MeasureType.UNKNOWN


def test_measure_real_value() -> None:
    measure = Measure(value=72345, type=MeasureType.WEIGHT, unit=-3)
    assert measure.real_value == pytest.approx(72.345)
    assert Measure(value=5, unit=2).real_value == 500


def test_measure_legacy_fields_are_kept() -> None:
    measure = Measure.model_validate(
        {"value": 0, "type": 0, "unit": 0, "algo": 3, "fm": 131, "fw": 7}
    )
    assert (measure.algo, measure.fm, measure.fw) == (3, 131, 7)


def test_models_are_immutable() -> None:
    measure = Measure(value=1, type=MeasureType.WEIGHT, unit=0)
    with pytest.raises(ValidationError):
        measure.value = 2


def test_nested_records_are_immutable_and_hashable() -> None:
    body = GetMeasBody.model_validate({"measuregrps": [_group()]})
    group = body.measure_groups[0]
    assert isinstance(body.measure_groups, tuple)
    assert isinstance(group.measures, tuple)
    with pytest.raises(AttributeError):
        group.measures.append(Measure(value=1))  # type: ignore[attr-defined]
    assert hash(group) == hash(MeasureGroup.model_validate(_group()))
    assert hash(body) is not None


@pytest.mark.parametrize("value", [1704067200123.0, 1704067200.0, "1704067200", True])
def test_measure_group_rejects_non_integer_epoch(value: object) -> None:
    with pytest.raises(ValidationError):
        MeasureGroup.model_validate(_group(date=value))


@pytest.mark.parametrize("value", [10**20, -(10**20)])
def test_measure_group_rejects_out_of_range_epoch(value: int) -> None:
    with pytest.raises(ValidationError):
        MeasureGroup.model_validate(_group(created=value))


def test_device_known_values_map_to_enums() -> None:
    device = Device.model_validate(
        {
            "type": "Scale",
            "model": "Body Cardio",
            "battery": "high",
            "deviceid": "d1",
            "timezone": "Europe/Paris",
        }
    )
    assert device.type is DeviceType.SCALE
    assert device.model is DeviceModel.BODY_CARDIO


def test_device_unknown_values_pass_through() -> None:
    device = Device.model_validate(
        {"type": "Smart Mirror", "model": "Mirror 9", "deviceid": "d2"}
    )
    assert device.type == "Smart Mirror"
    assert device.model == "Mirror 9"
    assert not isinstance(device.type, DeviceType)


def test_meas_body_keeps_update_time_as_string() -> None:
    body = GetMeasBody.model_validate(
        {"updatetime": 1704067200, "timezone": "Europe/Paris", "measuregrps": []}
    )
    assert body.update_time == "1704067200"
    assert body.more is False
    assert body.offset == 0


def test_envelope_without_body() -> None:
    response = GetMeasResponse.model_validate_json(
        '{"status": 401, "error": "Invalid token"}'
    )
    assert response.status == 401
    assert response.body is None
    assert response.error == "Invalid token"
    assert not response.is_success


def test_activity_missing_aggregates_are_none() -> None:
    activity = Activity.model_validate(
        {"date": "2024-01-02", "timezone": "Europe/Paris", "steps": 8123}
    )
    assert activity.date == "2024-01-02"
    assert activity.steps == 8123
    assert activity.distance is None
    assert activity.hr_zone_3 is None
