from datetime import datetime, timedelta, timezone

from tickerdrivers.utils.time import parse_iso, to_iso_ms, trailing_window


def test_to_iso_ms_matches_wire_format():
    dt = datetime(2022, 11, 18, 8, 54, 31, 46789, tzinfo=timezone.utc)
    assert to_iso_ms(dt) == "2022-11-18T08:54:31.046Z"


def test_to_iso_ms_converts_to_utc_and_accepts_naive():
    plus_two = timezone(timedelta(hours=2))
    assert to_iso_ms(datetime(2022, 1, 1, 2, 0, tzinfo=plus_two)) == "2022-01-01T00:00:00.000Z"
    assert to_iso_ms(datetime(2022, 1, 1)) == "2022-01-01T00:00:00.000Z"


def test_trailing_window_is_exact():
    now = datetime(2022, 11, 18, 8, 54, 31, 46999, tzinfo=timezone.utc)
    since, till = trailing_window(24, now=now)
    assert (since, till) == ("2022-11-17T08:54:31.046Z", "2022-11-18T08:54:31.046Z")
    assert parse_iso(till) - parse_iso(since) == timedelta(hours=24)
