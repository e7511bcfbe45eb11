"""Tests for the SQLite repositories."""

from datetime import datetime, timedelta, timezone

import pytest

from ride_api.app.core.db import transaction
from ride_api.app.repositories import (
    car_repository,
    place_repository,
    reservation_repository,
    ride_repository,
)
from ride_api.app.repositories.base import to_db_value
from ride_api.app.schemas import Car, Place, Reservation, Ride


@pytest.fixture
def conn():
    with transaction() as connection:
        yield connection


class TestSave:
    def test_assigns_new_ids(self, conn):
        first = car_repository.save(conn, Car(brand="Audi"))
        second = car_repository.save(conn, Car(brand="BMW"))

        assert first.id is not None
        assert second.id is not None
        assert first.id != second.id

    def test_find_one_returns_saved_values(self, conn):
        car = Car(user_id=1, brand="Volkswagen", model="Golf", color="blue")

        saved = car_repository.save(conn, car)
        found = car_repository.find_one(conn, saved.id)

        assert found == saved
        assert found.model_dump(exclude={"id"}) == car.model_dump(exclude={"id"})

    def test_update_keeps_collection_size(self, conn):
        saved = car_repository.save(conn, Car(brand="Audi", color="red"))
        before = len(car_repository.find_all(conn))

        updated = car_repository.save(conn, saved.model_copy(update={"color": "green"}))

        assert updated.id == saved.id
        assert updated.color == "green"
        assert len(car_repository.find_all(conn)) == before

    def test_save_with_unknown_id_inserts_under_that_id(self, conn):
        saved = place_repository.save(conn, Place(id=42, city_name="Hamburg"))

        assert saved.id == 42
        assert place_repository.find_one(conn, 42).city_name == "Hamburg"


class TestFindAndDelete:
    def test_find_one_missing(self, conn):
        assert car_repository.find_one(conn, 12345) is None

    def test_delete_then_find(self, conn):
        saved = car_repository.save(conn, Car(brand="Audi"))
        before = len(car_repository.find_all(conn))

        car_repository.delete(conn, saved.id)

        assert car_repository.find_one(conn, saved.id) is None
        assert len(car_repository.find_all(conn)) == before - 1

    def test_delete_missing_is_not_an_error(self, conn):
        car_repository.delete(conn, 12345)

    def test_ids_beyond_integer_range_are_absent(self, conn):
        assert car_repository.find_one(conn, 2**63) is None
        assert car_repository.find_one(conn, -(2**63) - 1) is None
        car_repository.delete(conn, 2**63)

    def test_find_all_grows_by_one(self, conn):
        before = len(place_repository.find_all(conn))
        place_repository.save(conn, Place(city_name="Berlin"))
        assert len(place_repository.find_all(conn)) == before + 1


class TestSort:
    def test_sort_by_alias_desc(self, conn):
        for name in ("Bonn", "Aachen", "Celle"):
            place_repository.save(conn, Place(city_name=name))

        places = place_repository.find_all(conn, sort=[("cityName", "desc")])

        assert [p.city_name for p in places] == ["Celle", "Bonn", "Aachen"]

    def test_sort_by_attribute_name(self, conn):
        for name in ("Bonn", "Aachen"):
            place_repository.save(conn, Place(city_name=name))

        places = place_repository.find_all(conn, sort=[("city_name", "asc")])

        assert [p.city_name for p in places] == ["Aachen", "Bonn"]

    def test_sort_by_id_desc(self, conn):
        ids = [car_repository.save(conn, Car(brand=str(i))).id for i in range(3)]

        cars = car_repository.find_all(conn, sort=[("id", "desc")])

        assert [c.id for c in cars] == sorted(ids, reverse=True)

    def test_unknown_sort_field_is_ignored(self, conn):
        car_repository.save(conn, Car(brand="Audi"))

        cars = car_repository.find_all(conn, sort=[("id; DROP TABLE car", "asc")])

        assert len(cars) == 1


class TestReferences:
    def test_ride_resolves_places(self, conn):
        start = place_repository.save(conn, Place(city_name="Berlin"))
        end = place_repository.save(conn, Place(city_name="Leipzig"))

        ride = ride_repository.save(
            conn,
            Ride(driver_id=1, number_of_seats=3, start_place=Place(id=start.id), end_place=Place(id=end.id)),
        )

        assert ride.start_place == start
        assert ride.end_place == end

    def test_reservation_resolves_ride(self, conn):
        ride = ride_repository.save(conn, Ride(driver_id=1, number_of_seats=2))

        reservation = reservation_repository.save(
            conn, Reservation(passenger_id=5, confirmed=True, ride=Ride(id=ride.id))
        )

        assert reservation.ride == ride
        assert reservation.confirmed is True

    def test_find_by_ride(self, conn):
        ride = ride_repository.save(conn, Ride(driver_id=1))
        other = ride_repository.save(conn, Ride(driver_id=2))
        first = reservation_repository.save(conn, Reservation(passenger_id=1, ride=Ride(id=ride.id)))
        second = reservation_repository.save(conn, Reservation(passenger_id=2, ride=Ride(id=ride.id)))
        reservation_repository.save(conn, Reservation(passenger_id=3, ride=Ride(id=other.id)))

        found = reservation_repository.find_by_ride(conn, ride.id)

        assert [r.id for r in found] == [first.id, second.id]

    def test_datetimes_keep_their_offset(self, conn):
        start = datetime(2025, 9, 1, 9, 0, tzinfo=timezone.utc)

        ride = ride_repository.save(conn, Ride(start_date_time=start, deleted=False))

        assert ride.start_date_time == start
        assert ride.start_date_time.utcoffset() is not None
        assert ride.deleted is False


def test_to_db_value():
    moment = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
    assert to_db_value(moment) == "2024-01-15T10:30:00+00:00"
    shifted = datetime(2024, 1, 15, 12, 30, tzinfo=timezone(timedelta(hours=2)))
    assert to_db_value(shifted) == "2024-01-15T10:30:00+00:00"
    assert to_db_value(True) == 1
    assert to_db_value(False) == 0
    assert to_db_value(3) == 3
    assert to_db_value(None) is None
