"""BSM Core - Audit error-number mapping."""
from .errno_map import (
    BSM_ESUCCESS,
    BSM_UNKNOWNERR,
    FOREIGN_ERROR_STR,
    au_strerror,
    bsm_name,
    bsm_to_errno,
    errno_to_bsm,
    local_collisions,
    mapping_table,
)
from .table import MappingEntry, MappingTable, build_table

__all__ = [
    "BSM_ESUCCESS",
    "BSM_UNKNOWNERR",
    "FOREIGN_ERROR_STR",
    "au_strerror",
    "bsm_name",
    "bsm_to_errno",
    "errno_to_bsm",
    "local_collisions",
    "mapping_table",
    "MappingEntry",
    "MappingTable",
    "build_table",
]
