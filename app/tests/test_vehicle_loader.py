import json

import pytest

from core.db import build_repository
from repositories.vehicle_loader import VehicleLoaderError, load_vehicles


def _record(vehicle_id, **overrides):
    record = {
        "id": vehicle_id, "brand": "Fiat", "model": "Uno", "registration": f"REG-{vehicle_id}",
        "year": 2012, "color": "red", "max_speed": 150, "fuel_type": "gas",
        "transmission": "manual", "passengers": 5, "height": 1.5, "width": 1.64, "weight": 950.0,
    }
    record.update(overrides)
    return record


def test_load_vehicles_reports_highest_id(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps([_record(3), _record(10), _record(4)]))

    data = load_vehicles(path)

    assert [v.id for v in data.data] == [3, 10, 4]
    assert data.last_id == 10
    assert data.data[0].attributes.registration == "REG-3"


def test_load_vehicles_empty_array(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text("[]")

    data = load_vehicles(path)

    assert data.data == []
    assert data.last_id == 0


def test_load_vehicles_missing_file(tmp_path):
    with pytest.raises(VehicleLoaderError):
        load_vehicles(tmp_path / "nope.json")


@pytest.mark.parametrize("content", ["{broken", json.dumps([{"id": 1, "brand": "Fiat"}])])
def test_load_vehicles_malformed_file(tmp_path, content):
    path = tmp_path / "vehicles.json"
    path.write_text(content)

    with pytest.raises(VehicleLoaderError):
        load_vehicles(path)


def test_build_repository_resumes_ids(tmp_path):
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps([_record(1), _record(5)]))

    repo = build_repository(path)

    assert len(repo) == 2
    assert repo.last_id == 5


def test_build_repository_without_file_starts_empty(tmp_path):
    repo = build_repository(tmp_path / "missing.json")

    assert len(repo) == 0
    assert repo.last_id == 0
