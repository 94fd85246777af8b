"""
Tests for data models
"""

import dataclasses
import pytest

from pacetable.models.models import AthleteRecord


@pytest.mark.unit
def test_from_data_splits_extra_fields():
    record = AthleteRecord.from_data({"id": 3, "name": "Sifan Hassan", "country": "NED"}, "#F44336")

    assert record.id == 3
    assert record.color == "#F44336"
    assert record.is_loading is False
    assert record.visible is True
    assert record.records == []
    assert record.extra == {"name": "Sifan Hassan", "country": "NED"}


@pytest.mark.unit
def test_from_data_requires_id():
    with pytest.raises(KeyError):
        AthleteRecord.from_data({"name": "No Id"}, "#F44336")


@pytest.mark.unit
def test_records_are_frozen(sample_record):
    with pytest.raises(dataclasses.FrozenInstanceError):
        sample_record.visible = False


@pytest.mark.unit
def test_with_helpers_return_new_records(sample_record):
    loading = sample_record.with_loading(True)
    hidden = sample_record.with_visible(False)

    assert loading.is_loading is True
    assert hidden.visible is False
    assert sample_record.is_loading is False
    assert sample_record.visible is True
    assert loading.extra == sample_record.extra


@pytest.mark.unit
def test_with_records_clears_loading(sample_record):
    payload = [{"discipline": "10000m", "mark": "26:11.00"}]

    updated = sample_record.with_loading(True).with_records(payload)

    assert updated.records == payload
    assert updated.is_loading is False
    # The stored list is a copy of the payload
    payload.append({"discipline": "extra"})
    assert len(updated.records) == 1


@pytest.mark.unit
def test_field_access(sample_record):
    assert sample_record["name"] == "Joshua Cheptegei"
    assert sample_record.get("country") is None
    assert sample_record.get("country", "UGA") == "UGA"
    with pytest.raises(KeyError):
        sample_record["country"]


@pytest.mark.unit
def test_to_dict(sample_record):
    assert sample_record.to_dict() == {
        "id": 7,
        "name": "Joshua Cheptegei",
        "color": "#03A9F4",
        "isLoading": False,
        "visible": True,
        "records": [{"discipline": "5000m", "mark": "12:35.36"}]
    }


@pytest.mark.unit
def test_from_dict_restores_record(sample_record):
    restored = AthleteRecord.from_dict(sample_record.to_dict())

    assert restored == sample_record


@pytest.mark.unit
def test_from_dict_defaults():
    restored = AthleteRecord.from_dict({"id": "abc"})

    assert restored.color == ""
    assert restored.visible is True
    assert restored.is_loading is False
    assert restored.records == []
    assert restored.extra == {}


@pytest.mark.unit
def test_records_are_unhashable(sample_record):
    """Test records hold mutable containers, so they are keyed by id rather than hashed"""
    with pytest.raises(TypeError):
        hash(sample_record)

    by_id = {sample_record.id: sample_record}
    assert by_id[7] == sample_record
