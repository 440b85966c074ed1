from datetime import date, datetime, timedelta, timezone

from study_metrics.streak import current_streak, local_day, longest_streak

TODAY = date(2026, 2, 27)


def at(day: date, hour: int = 12, minute: int = 0) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute)


def days_ago(n: int) -> date:
    return TODAY - timedelta(days=n)


def test_empty_history_has_no_streak():
    assert current_streak([], today=TODAY) == 0


def test_single_record_today_is_one(make_record):
    records = [make_record(at(TODAY, 23, 59))]
    assert current_streak(records, today=TODAY) == 1


def test_single_record_yesterday_still_counts(make_record):
    records = [make_record(at(days_ago(1), 0, 5))]
    assert current_streak(records, today=TODAY) == 1


def test_gap_stops_the_count(make_record):
    records = [make_record(at(days_ago(n))) for n in (0, 1, 3)]
    assert current_streak(records, today=TODAY) == 2


def test_history_beyond_first_gap_is_ignored(make_record):
    records = [make_record(at(days_ago(n))) for n in (0, 2, 3, 4, 5, 6)]
    assert current_streak(records, today=TODAY) == 1


def test_streak_broken_after_two_missed_days(make_record):
    records = [make_record(at(days_ago(2)))]
    assert current_streak(records, today=TODAY) == 0


def test_same_day_records_count_once(make_record):
    records = [make_record(at(TODAY, hour)) for hour in (7, 13, 22)]
    assert current_streak(records, today=TODAY) == 1


def test_input_order_does_not_matter(make_record):
    records = [make_record(at(days_ago(n))) for n in (2, 0, 1)]
    assert current_streak(records, today=TODAY) == 3
    assert current_streak(list(reversed(records)), today=TODAY) == 3


def test_streak_ending_yesterday(make_record):
    records = [make_record(at(days_ago(n))) for n in (1, 2, 3)]
    assert current_streak(records, today=TODAY) == 3


def test_local_day_uses_given_zone():
    late_utc = datetime(2025, 1, 1, 23, 30, tzinfo=timezone.utc)
    assert local_day(late_utc, timezone(timedelta(hours=9))) == date(2025, 1, 2)
    assert local_day(late_utc, timezone(timedelta(hours=-5))) == date(2025, 1, 1)


def test_naive_timestamps_are_local_already():
    assert local_day(datetime(2025, 1, 1, 23, 30), timezone(timedelta(hours=9))) == date(2025, 1, 1)


def test_zone_shifts_streak_days(make_record):
    tokyo = timezone(timedelta(hours=9))
    records = [
        make_record("2025-01-01T10:00:00Z"),
        make_record("2025-01-01T16:00:00Z"),
    ]
    assert current_streak(records, today=date(2025, 1, 2), tz=timezone.utc) == 1
    assert current_streak(records, today=date(2025, 1, 2), tz=tokyo) == 2


def test_longest_streak(make_record):
    records = [make_record(at(days_ago(n))) for n in (0, 5, 6, 7, 8, 10, 11)]
    assert longest_streak(records) == 4
    assert longest_streak([]) == 0
