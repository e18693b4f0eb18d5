import logging
from types import SimpleNamespace

import pytest

from bsm_core import MappingEntry, MappingTable, build_table
from bsm_core import protocol as p

FAKE_ERRNO = SimpleNamespace(EPERM=1, ENOENT=44, EAGAIN=35, EWOULDBLOCK=35)


def test_missing_symbols_are_omitted(caplog):
    caplog.set_level(logging.DEBUG, logger="bsm_core.table")
    source = ((0, None), (1, "EPERM"), (2, "ENOENT"), (3, "ENOTHERE"))
    table = build_table(source, local=FAKE_ERRNO)
    assert table.entries == (MappingEntry(0, 0), MappingEntry(1, 1), MappingEntry(2, 44))
    assert table.to_local(3) is None
    assert table.to_bsm(44) == 2
    assert any("ENOTHERE" in r.getMessage() for r in caplog.records)
    assert any("Built BSM errno table: 3 entries, 1 omitted" in r.getMessage() for r in caplog.records)


def test_shared_local_code_first_entry_wins(caplog):
    caplog.set_level(logging.DEBUG, logger="bsm_core.table")
    source = ((0, None), (11, "EAGAIN"), (12, "EWOULDBLOCK"))
    table = build_table(source, local=FAKE_ERRNO)
    assert table.to_bsm(35) == 11
    assert table.to_local(12) == 35
    assert dict(table.collisions) == {35: (11, 12)}
    assert any(
        r.levelno == logging.DEBUG and "Local errno 35 shared by BSM codes [11, 12]" in r.getMessage()
        for r in caplog.records
    )


def test_unmapped_local_returns_unknown_sentinel():
    table = MappingTable([(0, 0), (2, 44)])
    assert table.to_bsm(-999999) == p.BSM_UNKNOWNERR
    assert len(table) == 2
    assert list(table) == [MappingEntry(0, 0), MappingEntry(2, 44)]


@pytest.mark.parametrize(
    "entries, match",
    [
        ([(0, 0), (5, 5), (3, 3)], "out of order"),
        ([(0, 0), (5, 5), (5, 6)], "out of order"),
        ([(0, 0), (256, 1)], "one byte"),
        ([(-1, 1), (0, 0)], "one byte"),
        ([(0, 0), (p.BSM_UNKNOWNERR, 9)], "Unknown-error sentinel"),
        ([(1, 1), (2, 2)], "Success sentinel"),
        ([(0, 7)], "Success sentinel"),
    ],
)
def test_malformed_tables_fail_fast(entries, match):
    with pytest.raises(ValueError, match=match):
        MappingTable(entries)


def test_default_source_builds_against_host():
    table = build_table()
    assert table.to_local(p.BSM_ESUCCESS) == 0
    assert len(table) > 60


@pytest.mark.parametrize("not_a_code", [True, False, 2.0, "2", None])
def test_lookups_take_only_real_ints(not_a_code):
    table = MappingTable([(0, 0), (1, 1), (2, 44)])
    assert table.to_local(not_a_code) is None
    assert table.to_bsm(not_a_code) == p.BSM_UNKNOWNERR
