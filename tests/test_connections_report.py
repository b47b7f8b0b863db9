import logging
import math

import pytest

from analysis.host_statistics import load_report
from contactsim.config.simulation_config import SimulationConfig
from contactsim.reports.connections_report import ConnectionsReport
from contactsim.reports.errors import DuplicateActiveConnectionError
from contactsim.simulation.context import SimulationContext

from conftest import advance


def _run_script(env, steps):
    """Run (time, action) steps inside a SimPy process."""
    def script(env):
        for t, action in steps:
            if t > env.now:
                yield env.timeout(t - env.now)
            action()

    env.process(script(env))
    env.run()


def test_end_to_end_scenario(env, hosts, report_factory):
    a, b, c, _ = hosts
    report = report_factory()

    _run_script(env, [
        (0, lambda: report.on_connect(a, b)),
        (10, lambda: report.on_connect(a, c)),
        (20, lambda: report.on_disconnect(b, a)),
        (50, lambda: report.on_disconnect(a, c)),
        (100, lambda: report.on_sample_tick(hosts)),
    ])
    samples = report.done()

    by_host = {s.host: s for s in samples}
    assert [s.host for s in samples] == [a, b, c]
    assert by_host[a].timestamp == 100.0
    assert by_host[a].connection_time_avg == pytest.approx(30.0)
    assert by_host[a].connection_time_std_dev == pytest.approx(7.0710678)
    assert by_host[b].connection_time_avg == pytest.approx(20.0)
    assert by_host[c].connection_time_avg == pytest.approx(40.0)
    assert by_host[a].counts.total == 2


def test_events_during_warmup_change_nothing(env, hosts, report_factory):
    a, b = hosts[0], hosts[1]
    report = report_factory(warmup_time=50.0)

    advance(env, 10)
    assert report.on_connect(a, b) is None
    advance(env, 20)
    report.on_sample_tick(hosts)
    advance(env, 30)
    assert report.on_disconnect(a, b) is None

    assert len(report.active_connections) == 0
    assert report.sample_window.current_cycle == 0
    assert list(report.sample_window.cycles())[0].connections == []


def test_disconnect_of_pair_connected_in_warmup_is_silent(env, hosts, report_factory):
    a, b = hosts[0], hosts[1]
    report = report_factory(warmup_time=50.0)

    advance(env, 10)
    report.on_connect(a, b)
    advance(env, 60)

    assert report.on_disconnect(a, b) is None
    assert report.done() == []


def test_duplicate_connect_aborts(env, hosts, report_factory):
    a, b = hosts[0], hosts[1]
    report = report_factory()
    report.on_connect(a, b)

    with pytest.raises(DuplicateActiveConnectionError):
        report.on_connect(b, a)


def test_explicit_event_times(hosts, report_factory):
    a, b = hosts[0], hosts[1]
    report = report_factory()

    report.on_connect(a, b, now=3.0)
    conn = report.on_disconnect(a, b, now=8.0)

    assert conn.duration() == 5.0


def test_sample_tick_with_explicit_time(hosts, report_factory):
    a, b = hosts[0], hosts[1]
    report = report_factory()
    report.on_connect(a, b, now=10.0)
    report.on_disconnect(a, b, now=30.0)

    report.on_sample_tick(hosts, 100.0)

    buckets = list(report.sample_window.cycles())
    assert report.sample_window.current_cycle == 1
    assert buckets[0].end_time == 100.0
    assert buckets[1].start_time == 100.0
    assert [s.timestamp for s in report.done()] == [100.0, 100.0]


def test_open_connection_at_finalization(env, hosts, report_factory):
    a, b, c, _ = hosts
    report = report_factory()

    _run_script(env, [
        (5, lambda: report.on_connect(a, b)),
        (15, lambda: report.on_disconnect(a, b)),
        (25, lambda: report.on_connect(a, c)),
        (40, lambda: None),
    ])
    samples = report.done()

    sample_a = samples[0]
    assert sample_a.timestamp == 40.0  # still-current cycle uses the final time
    assert sample_a.connection_time_avg == pytest.approx(10.0)
    assert sample_a.inter_contact_time_avg == pytest.approx(20.0)
    assert math.isnan(samples[2].connection_time_avg)  # c only has the open connection


def test_rows_per_window(env, hosts):
    a, b, c, _ = hosts
    config = SimulationConfig(warmup_time=0.0, nrof_sample_interval_cycles=2)
    report = ConnectionsReport(SimulationContext(env, 0.0), config)

    _run_script(env, [
        (10, lambda: report.on_connect(a, b)),
        (20, lambda: report.on_disconnect(a, b)),
        (100, lambda: report.on_sample_tick(hosts)),
        (110, lambda: report.on_connect(a, b)),
        (140, lambda: report.on_disconnect(a, b)),
        (200, lambda: report.on_sample_tick(hosts)),
        (210, lambda: report.on_connect(b, c)),
        (300, lambda: report.on_sample_tick(hosts)),
    ])
    samples = report.done()

    rows = [s.as_row() for s in samples]
    assert rows[0] == "200.0, n0, 20.0, 7.1, 100.0, 2, 0, 1"
    assert rows[1] == "200.0, n1, 20.0, 7.1, 100.0, 2, 0, 1"
    assert [s.host for s in samples[2:]] == [b, c]
    assert all(s.timestamp == 300.0 for s in samples[2:])


def test_done_writes_report_file(env, hosts, tmp_path):
    a, b = hosts[0], hosts[1]
    output = tmp_path / "reports" / "ConnectionsReport.txt"
    report = ConnectionsReport(SimulationContext(env, 0.0), SimulationConfig(warmup_time=0.0), output)

    _run_script(env, [
        (0, lambda: report.on_connect(a, b)),
        (30, lambda: report.on_disconnect(a, b)),
        (100, lambda: report.on_sample_tick(hosts)),
    ])
    report.done()

    lines = output.read_text().splitlines()
    assert lines == [
        "100.0, n0, 30.0, 0.0, 0.0, 1, 1, 0",
        "100.0, n1, 30.0, 0.0, 0.0, 1, 1, 0",
    ]

    df = load_report(str(output))
    assert list(df["host"]) == ["n0", "n1"]
    assert list(df["connection_time_avg"]) == [30.0, 30.0]


def test_disconnect_logs_connection_time(hosts, report_factory, caplog):
    a, b = hosts[0], hosts[1]
    report = report_factory()
    caplog.set_level(logging.DEBUG, logger="contactsim.reports.connections_report")

    report.on_connect(a, b, now=2.0)
    report.on_disconnect(a, b, now=7.0)

    assert "disconnect n0-n1 after 5.0s" in caplog.text
