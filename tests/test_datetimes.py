import pytest

from swipekit.datetimes import DateTime, TimeFormat

SAMPLE = "2013-04-19T01:05:20.250"


def test_from_string_round_trips_to_default_gmt_format():
    dt = DateTime.from_string(SAMPLE)
    assert dt.as_gmt_str() == SAMPLE.replace("T", " ")


def test_from_string_accepts_space_separator():
    assert DateTime.from_string(SAMPLE) == DateTime.from_string(SAMPLE.replace("T", " "))


def test_filename_and_compact_formats():
    dt = DateTime.from_string(SAMPLE)
    assert dt.as_gmt_str(TimeFormat.FILENAME) == "20130419_0105_20_250"
    assert dt.as_gmt_str(TimeFormat.COMPACT) == "130419 0105:20.250"


def test_local_str_keeps_milliseconds():
    dt = DateTime.from_string(SAMPLE)
    text = dt.as_local_str()
    assert text.endswith(".250")
    assert len(text) == len(SAMPLE)


def test_missing_milliseconds_gives_zero_usec():
    dt = DateTime.from_string("2013-04-19 01:05:20")
    assert dt.usec == 0
    assert dt.sec == DateTime.from_string(SAMPLE).sec


@pytest.mark.parametrize("bad", ["", "2013-04-19", "not a date at all!!", "2013-04-19T01:05:2x.250"])
def test_bad_strings_raise(bad):
    with pytest.raises(ValueError):
        DateTime.from_string(bad)


def test_bad_milliseconds_raise():
    with pytest.raises(ValueError):
        DateTime.from_string("2013-04-19T01:05:20.2x0")


@pytest.mark.parametrize("ms", [0, 1, 999, 12345, -1500, -7])
def test_from_ms_round_trip(ms):
    assert DateTime.from_ms(ms).as_ms() == ms


def test_is_set():
    assert not DateTime().is_set()
    assert DateTime.from_ms(5).is_set()
    assert DateTime.now().is_set()


def test_add_and_sub_are_inverse():
    a = DateTime.from_ms(123456)
    b = DateTime.from_ms(7890)
    assert (a + b).as_ms() == a.as_ms() + b.as_ms()
    assert ((a + b) - b) == a
    assert (a - b).as_ms() == a.as_ms() - b.as_ms()


def test_add_normalises_only_strictly_above_one_second():
    total = DateTime(0, 500_000) + DateTime(0, 500_000)
    assert total == DateTime(0, 1_000_000)
    carried = DateTime(0, 600_000) + DateTime(0, 500_000)
    assert carried.sec == 1
    assert carried.as_ms() == 1100


def test_diff_ms_matches_sub():
    a = DateTime.from_string(SAMPLE)
    b = DateTime.from_ms(2500)
    assert a.diff_ms(b) == (a - b).as_ms()
    assert b.diff_ms(b) == 0


def test_as_ts():
    dt = DateTime(3, 250)
    assert dt.as_ts() == (3, 250_000)