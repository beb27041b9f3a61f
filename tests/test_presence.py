from datetime import date

import pytest

from schengen import (
    InvalidDateRangeError,
    InvalidTripError,
    Trip,
    UnknownCountryError,
    count_travel_days,
    presence_bounds,
    presence_days,
    sorted_presence,
)


def test_trip_parses_iso_strings_and_datetimes():
    trip = Trip(entry_date="2025-11-01", exit_date="2025-11-03T23:30:00Z", country="FR", id=7)
    assert trip.entry_date == date(2025, 11, 1)
    assert trip.exit_date == date(2025, 11, 3)
    assert trip.id == "7"
    assert trip.duration_days == 3


def test_aware_datetime_converted_to_utc_day():
    trip = Trip(entry_date="2025-11-02T01:00:00+05:00", exit_date="2025-11-02", country="FR")
    assert trip.entry_date == date(2025, 11, 1)


def test_trip_rejects_exit_before_entry():
    with pytest.raises(InvalidDateRangeError):
        Trip(entry_date="2025-11-10", exit_date="2025-11-09", country="FR")


@pytest.mark.parametrize("value", ["", "not-a-date", "2025-13-01", None])
def test_trip_rejects_bad_dates(value):
    with pytest.raises(InvalidDateRangeError) as exc:
        Trip(entry_date=value, exit_date="2025-11-09", country="FR")
    assert exc.value.field == "entry_date"


def test_trip_rejects_blank_country():
    with pytest.raises(InvalidTripError) as exc:
        Trip(entry_date="2025-11-01", exit_date="2025-11-01", country="  ")
    assert exc.value.field == "country"


def test_mapping_input_is_validated():
    days = presence_days([{"entry_date": "2025-11-01", "exit_date": "2025-11-02", "country": "france"}])
    assert days == {date(2025, 11, 1), date(2025, 11, 2)}

    with pytest.raises(InvalidTripError):
        presence_days([{"exit_date": "2025-11-01", "country": "FR"}])


def test_same_day_trip_counts_once(make_trip):
    assert len(presence_days([make_trip(date(2025, 11, 1))])) == 1


def test_inclusive_ten_day_trip(make_trip):
    assert len(presence_days([make_trip(date(2025, 11, 1), date(2025, 11, 10))])) == 10


def test_overlapping_trips_counted_once(make_trip):
    trips = [
        make_trip(date(2025, 11, 1), date(2025, 11, 10), "FR"),
        make_trip(date(2025, 11, 5), date(2025, 11, 15), "DE"),
        make_trip(date(2025, 11, 10), date(2025, 11, 10), "IT"),
    ]
    assert len(presence_days(trips)) == 15


def test_expansion_is_idempotent(make_trip):
    trips = [make_trip(date(2025, 11, 1), date(2025, 11, 10))]
    assert presence_days(trips) == presence_days(trips)
    assert presence_days(trips + trips) == presence_days(trips)


def test_excluded_countries_contribute_nothing(make_trip):
    trips = [
        make_trip(date(2025, 11, 1), date(2025, 11, 10), "IE"),
        make_trip(date(2025, 11, 1), date(2025, 11, 10), "GB"),
        make_trip(date(2025, 11, 1), date(2025, 11, 10), "CY"),
        make_trip(date(2025, 11, 1), date(2025, 11, 10), "US"),
    ]
    assert presence_days(trips) == frozenset()


def test_microstate_counts_in_full(make_trip):
    assert len(presence_days([make_trip(date(2025, 11, 1), date(2025, 11, 10), "MC")])) == 10


def test_unknown_country_raises(make_trip):
    with pytest.raises(UnknownCountryError):
        presence_days([make_trip(date(2025, 11, 1), date(2025, 11, 2), "Atlantis")])


def test_private_and_ghosted_trips_skipped(make_trip):
    trips = [
        make_trip(date(2025, 11, 1), date(2025, 11, 5), is_private=True),
        make_trip(date(2025, 11, 10), date(2025, 11, 12), ghosted=True),
        # skipped before the country is looked at
        make_trip(date(2025, 11, 20), date(2025, 11, 21), "Atlantis", is_private=True),
    ]
    assert presence_days(trips) == frozenset()


def test_days_before_compliance_start_never_count(make_trip, make_config):
    trips = [make_trip(date(2025, 10, 1), date(2025, 10, 20))]
    days = presence_days(trips, make_config(date(2025, 11, 1)))
    assert min(days) == date(2025, 10, 12)
    assert len(days) == 9

    earlier_floor = make_config(date(2025, 11, 1), compliance_start_date=date(2025, 1, 1))
    assert len(presence_days(trips, earlier_floor)) == 20


def test_trip_entirely_before_floor(make_trip, make_config):
    trips = [make_trip(date(2025, 9, 1), date(2025, 9, 30))]
    assert presence_days(trips, make_config(date(2025, 11, 1))) == frozenset()


def test_presence_helpers(make_trip):
    days = presence_days([make_trip(date(2025, 11, 3), date(2025, 11, 4)), make_trip(date(2025, 11, 1))])
    assert sorted_presence(days) == [date(2025, 11, 1), date(2025, 11, 3), date(2025, 11, 4)]
    assert presence_bounds(days) == (date(2025, 11, 1), date(2025, 11, 4))
    assert presence_bounds(frozenset()) is None


def test_count_travel_days():
    assert count_travel_days("2025-11-01", "2025-11-01") == 1
    assert count_travel_days(date(2025, 11, 1), date(2025, 11, 10)) == 10
    with pytest.raises(InvalidDateRangeError):
        count_travel_days("2025-11-10", "2025-11-01")
    with pytest.raises(InvalidDateRangeError):
        count_travel_days("garbage", "2025-11-01")


def test_open_ended_trip_runs_to_reference_date(make_config):
    trip = Trip(entry_date="2025-11-01", country="FR")
    assert trip.is_open_ended
    assert trip.duration_days is None

    days = presence_days([trip], make_config(date(2025, 11, 10)))
    assert min(days) == date(2025, 11, 1)
    assert max(days) == date(2025, 11, 10)
    assert len(days) == 10
    assert len(presence_days([trip], make_config(date(2025, 11, 20)))) == 20


def test_open_ended_trip_edges(make_config):
    later = Trip(entry_date="2025-12-01", exit_date=None, country="DE")
    assert presence_days([later], make_config(date(2025, 11, 20))) == frozenset()

    before_floor = Trip(entry_date="2025-10-01", country="DE")
    days = presence_days([before_floor], make_config(date(2025, 10, 15)))
    assert sorted(days) == [date(2025, 10, 12), date(2025, 10, 13), date(2025, 10, 14), date(2025, 10, 15)]

    with pytest.raises(InvalidTripError) as exc:
        presence_days([later])
    assert exc.value.field == "exit_date"
