import pytest

from repositories.vehicle_repository import VehicleRepository
from repositories.exceptions import (
    RepositoryVehiclesNotFoundError,
    RepositoryVehicleNotFoundError,
    RepositoryVehicleIdAlreadyExistsError,
)


def test_find_all_empty_raises(repository):
    with pytest.raises(RepositoryVehiclesNotFoundError):
        repository.find_all()


def test_insert_assigns_sequential_ids(repository, make_vehicle):
    first = repository.insert(make_vehicle())
    second = repository.insert(make_vehicle())

    assert (first.id, second.id) == (1, 2)
    assert repository.last_id == 2
    assert len(repository) == 2


def test_ids_are_not_reused_after_delete(repository, make_vehicle):
    repository.insert(make_vehicle())
    repository.insert(make_vehicle())
    repository.delete(1)

    third = repository.insert(make_vehicle())

    assert third.id == 3
    assert [v.id for v in repository.find_all()] == [2, 3]


def test_counter_resumes_after_initial_last_id(make_vehicle):
    repo = VehicleRepository(db=[make_vehicle(vehicle_id=7)], last_id=7)

    assert repo.insert(make_vehicle()).id == 8


def test_insert_rejects_only_the_next_id(repository, make_vehicle):
    repository.insert(make_vehicle())

    with pytest.raises(RepositoryVehicleIdAlreadyExistsError):
        repository.insert(make_vehicle(vehicle_id=2))

    # Counter untouched by the failed insert
    assert repository.last_id == 1

    # An id already in use but not the next one is overwritten, not rejected
    assert repository.insert(make_vehicle(vehicle_id=1)).id == 2


def test_insert_many_inserts_in_order(repository, make_vehicle):
    inserted = repository.insert_many([make_vehicle(brand="A"), make_vehicle(brand="B")])

    assert [(v.id, v.attributes.brand) for v in inserted] == [(1, "A"), (2, "B")]


def test_insert_many_keeps_inserts_before_failure(repository, make_vehicle):
    batch = [make_vehicle(brand="A"), make_vehicle(brand="B", vehicle_id=2), make_vehicle(brand="C")]

    with pytest.raises(RepositoryVehicleIdAlreadyExistsError):
        repository.insert_many(batch)

    assert [v.attributes.brand for v in repository.find_all()] == ["A"]
    assert repository.last_id == 1


def test_find_all_returns_copies(repository, make_vehicle):
    repository.insert(make_vehicle(color="red"))

    snapshot = repository.find_all()
    snapshot[0].attributes.color = "green"
    snapshot.clear()

    assert repository.find_all()[0].attributes.color == "red"


def test_insert_does_not_alias_caller_object(repository, make_vehicle):
    vehicle = make_vehicle()
    stored = repository.insert(vehicle)

    vehicle.attributes.brand = "Changed"
    stored.attributes.brand = "Changed too"

    assert vehicle.id == 0
    assert repository.find_all()[0].attributes.brand == "Toyota"


def test_update_max_speed_by_id(repository, make_vehicle):
    repository.insert(make_vehicle(max_speed=100))

    updated = repository.update_max_speed_by_id(1, 220)

    assert updated.attributes.max_speed == 220
    assert repository.find_all()[0].attributes.max_speed == 220


def test_update_fuel_type_by_id(repository, make_vehicle):
    repository.insert(make_vehicle(fuel_type="gasoline"))

    updated = repository.update_fuel_type_by_id(1, "diesel")

    assert updated.attributes.fuel_type == "diesel"
    assert repository.find_all()[0].attributes.fuel_type == "diesel"


@pytest.mark.parametrize("method, value", [
    ("update_max_speed_by_id", 120),
    ("update_fuel_type_by_id", "gas"),
])
def test_update_missing_id_raises(repository, make_vehicle, method, value):
    repository.insert(make_vehicle())

    with pytest.raises(RepositoryVehicleNotFoundError):
        getattr(repository, method)(99, value)


def test_delete_preserves_order(repository, make_vehicle):
    repository.insert_many([make_vehicle(brand=b) for b in ("A", "B", "C", "D")])

    repository.delete(2)

    assert [v.attributes.brand for v in repository.find_all()] == ["A", "C", "D"]


def test_delete_missing_id_raises(repository):
    with pytest.raises(RepositoryVehicleNotFoundError):
        repository.delete(1)
