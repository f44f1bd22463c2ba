from swipekit.stats import Stat, StatCount, Stats, stat_count, stat_value


def _fake_clock():
    now = [0]
    return now, (lambda: now[0])


def test_stat_tracks_last_value_and_average():
    stat = Stat("x")
    assert stat.average() == -1
    stat.add_value(2)
    stat.add_value(4)
    assert stat.last_value == 4
    assert stat.count == 2
    assert stat.average() == 3.0


def test_stat_count_totals_and_rates():
    now, clock = _fake_clock()
    sc = StatCount("c", clock=clock)
    assert sc.average_total_per_second() == -1
    sc.add_value(5)
    sc.add_value(3)
    assert sc.count == 2
    now[0] = 1000
    assert sc.average_total_per_second() == sc.total
    assert sc.average_count_per_second() == sc.count


def test_stat_count_latest_rate_updates_after_half_second():
    now, clock = _fake_clock()
    sc = StatCount("c", clock=clock)
    sc.add_value(7)
    assert sc.latest_total_per_second() == -1
    now[0] = 1000
    assert sc.latest_total_per_second() == sc.total
    assert sc.latest_count_per_second() == sc.count


def test_stats_map_lower_cases_and_disambiguates():
    stats = Stats()
    first, second, third = Stat("Foo"), Stat("foo"), Stat("Bar")
    for s in (first, second, third):
        stats.add_stat(s)
    mapping = stats.stats_map()
    assert list(mapping) == ["bar", "foo", "foo "]
    assert mapping["foo"] is first
    assert mapping["foo "] is second
    assert stats.stat_by_key("FOO") is first


def test_stats_map_picks_up_later_additions():
    stats = Stats()
    stats.add_stat(Stat("one"))
    assert list(stats.stats_map()) == ["one"]
    later = Stat("Two")
    stats.add_stat(later)
    assert stats.stat_by_key("two") is later
    assert len(stats.stats_map()) == 2


def test_count_stats_lookup():
    stats = Stats()
    sc = StatCount("Packets")
    stats.add_count_stat(sc)
    assert stats.count_stat_by_key("PACKETS") is sc
    assert stats.count_stat_by_key("missing") is None
    assert list(stats.count_stats_map()) == ["packets"]


def test_instance_is_shared():
    shared = Stats.instance()
    stat = Stat("swipekit shared instance stat")
    shared.add_stat(stat)
    assert Stats.instance().stat_by_key("SWIPEKIT SHARED INSTANCE STAT") is stat


def test_stat_value_reuses_one_stat_per_message():
    first = stat_value("swipekit test value msg", 2)
    second = stat_value("swipekit test value msg", 4)
    assert first is second
    assert second.count == 2
    assert second.last_value == 4
    assert Stats.instance().stat_by_key("SWIPEKIT TEST VALUE MSG") is first


def test_stat_count_reuses_one_stat_per_message():
    first = stat_count("swipekit test count msg", 5)
    second = stat_count("swipekit test count msg")
    assert first is second
    assert second.count == 2
    assert Stats.instance().count_stat_by_key("swipekit test count msg") is first