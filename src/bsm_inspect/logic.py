import errno
import json
import sys

from bsm_core import (
    au_strerror,
    bsm_name,
    bsm_to_errno,
    errno_to_bsm,
    local_collisions,
    mapping_table,
)
from bsm_core.protocol import BSM_UNKNOWNERR
from .const import STATUS

CANONICAL_JSON_KW = {"sort_keys": True, "separators": (",", ":"), "ensure_ascii": False}

def canonical_json(obj) -> str:
    return json.dumps(obj, **CANONICAL_JSON_KW)

def _local_name(error: int | None) -> str | None:
    if error is None:
        return None
    return errno.errorcode.get(error)

def describe_bsm(code: int) -> dict:
    local = bsm_to_errno(code)
    status = "UNMAPPED" if local is None else "MAPPED"
    return {
        "bsm": code,
        "name": bsm_name(code),
        "status": status,
        "message": STATUS[status],
        "local": local,
        "local_name": _local_name(local),
    }

def describe_local(error: int) -> dict:
    code = errno_to_bsm(error)
    # 0 maps to BSM_ESUCCESS, so only the sentinel itself signals a miss
    status = "UNKNOWN" if code == BSM_UNKNOWNERR else "MAPPED"
    return {
        "local": error,
        "local_name": _local_name(error),
        "status": status,
        "message": STATUS[status],
        "bsm": code,
        "name": bsm_name(code),
    }

def describe_strerror(code: int) -> dict:
    message = au_strerror(code)
    return {
        "bsm": code,
        "message": message,
        "foreign": bsm_to_errno(code) is None,
    }

def dump_table() -> dict:
    entries = [
        {
            "bsm": e.bsm_code,
            "name": bsm_name(e.bsm_code),
            "local": e.local_code,
            "local_name": _local_name(e.local_code),
        }
        for e in mapping_table()
    ]
    # JSON object keys must be strings
    collisions = {str(k): list(v) for k, v in local_collisions().items()}
    return {
        "platform": sys.platform,
        "entry_count": len(entries),
        "entries": entries,
        "collisions": collisions,
    }
