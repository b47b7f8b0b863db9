import pytest

from contactsim.reports.active_connections import ActiveConnectionTable
from contactsim.reports.contacts import make_key
from contactsim.reports.errors import DuplicateActiveConnectionError


def test_open_stores_an_active_connection(hosts):
    a, b = hosts[0], hosts[1]
    table = ActiveConnectionTable()

    conn = table.open(a, b, 10.0)

    assert conn.is_active
    assert conn.start_time == 10.0
    assert make_key(a, b) in table
    assert table.get(b, a) is conn
    assert len(table) == 1


def test_second_open_of_same_pair_fails(hosts):
    a, b = hosts[0], hosts[1]
    table = ActiveConnectionTable()
    table.open(a, b, 10.0)

    with pytest.raises(DuplicateActiveConnectionError):
        table.open(a, b, 11.0)
    with pytest.raises(DuplicateActiveConnectionError, match="t=12.0"):
        table.open(b, a, 12.0)
    assert len(table) == 1


def test_close_removes_and_closes(hosts):
    a, b = hosts[0], hosts[1]
    table = ActiveConnectionTable()
    opened = table.open(a, b, 10.0)

    closed = table.close(b, a, 25.0)

    assert closed is opened
    assert closed.duration() == 15.0
    assert len(table) == 0
    assert table.get(a, b) is None


def test_close_of_unopened_pair_returns_none(hosts):
    table = ActiveConnectionTable()

    assert table.close(hosts[0], hosts[1], 5.0) is None
    assert len(table) == 0


def test_reconnect_creates_new_record(hosts):
    a, b = hosts[0], hosts[1]
    table = ActiveConnectionTable()
    first = table.open(a, b, 0.0)
    table.close(a, b, 5.0)

    second = table.open(a, b, 8.0)

    assert second is not first
    assert second.is_active
    assert first.duration() == 5.0


def test_pairs_are_independent(hosts):
    a, b, c = hosts[0], hosts[1], hosts[2]
    table = ActiveConnectionTable()
    table.open(a, b, 0.0)
    table.open(a, c, 1.0)
    table.open(b, c, 2.0)

    table.close(a, c, 3.0)

    assert sorted(str(conn.contact) for conn in table) == ["n0-n1", "n1-n2"]
