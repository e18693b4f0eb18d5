"""Conversion between BSM and local error numbers.

Different operating systems number their errors differently, and some errors
exist on only one of them. BSM error numbers are a single byte on the wire,
so they carry no byte order.

Converting BSM -> local may fail, either because the byte is not a BSM error
this table knows or because the local platform has no equivalent. Converting
local -> BSM never fails; unmapped errors become BSM_UNKNOWNERR.
"""
from __future__ import annotations

import os
from functools import cache

from .protocol import BSM_ESUCCESS, BSM_UNKNOWNERR, FOREIGN_ERROR_STR
from .table import BSM_NAMES, MappingEntry, MappingTable, _is_code, build_table

__all__ = [
    "BSM_ESUCCESS",
    "BSM_UNKNOWNERR",
    "FOREIGN_ERROR_STR",
    "bsm_to_errno",
    "errno_to_bsm",
    "au_strerror",
    "bsm_name",
    "mapping_table",
    "local_collisions",
]


@cache
def _table() -> MappingTable:
    # Built on first lookup so the build is logged under the caller's
    # logging config; read-only afterwards.
    return build_table()


def bsm_to_errno(bsm_error: int) -> int | None:
    """Return the local errno for a BSM error, or None when there is none."""
    return _table().to_local(bsm_error)


def errno_to_bsm(error: int) -> int:
    """Return the BSM error for a local errno, BSM_UNKNOWNERR if unmapped."""
    return _table().to_bsm(error)


def au_strerror(bsm_error: int) -> str:
    """Describe a BSM error using the local strerror.

    BSM errors with no local counterpart get a fixed placeholder; a per-code
    description of foreign errors would need its own string table.
    """
    error = bsm_to_errno(bsm_error)
    if error is None:
        return FOREIGN_ERROR_STR
    return os.strerror(error)


def bsm_name(bsm_error: int) -> str | None:
    if not _is_code(bsm_error):
        return None
    return BSM_NAMES.get(bsm_error)


def mapping_table() -> tuple[MappingEntry, ...]:
    return _table().entries


def local_collisions() -> dict[int, tuple[int, ...]]:
    """Local errnos shared by several BSM codes, first code winning."""
    return dict(_table().collisions)
