"""BSM <-> local errno mapping table.

The table source pairs every BSM constant with the name of the local errno
symbol it stands for. Which pairs make it into the built table depends on
what the host's ``errno`` module defines, so membership is settled
once, when the table is first built, and never changes afterwards.
"""
from __future__ import annotations

import errno
import logging
from types import MappingProxyType
from typing import Iterable, Iterator, NamedTuple

from . import protocol as p

logger = logging.getLogger(__name__)


class MappingEntry(NamedTuple):
    bsm_code: int
    local_code: int


# Keep in ascending order of the BSM constant. A symbol of None marks the
# success entry, which maps to local 0 on every platform.
TABLE_SOURCE: tuple[tuple[int, str | None], ...] = (
    (p.BSM_ESUCCESS, None),
    (p.BSM_EPERM, "EPERM"),
    (p.BSM_ENOENT, "ENOENT"),
    (p.BSM_ESRCH, "ESRCH"),
    (p.BSM_EINTR, "EINTR"),
    (p.BSM_EIO, "EIO"),
    (p.BSM_ENXIO, "ENXIO"),
    (p.BSM_E2BIG, "E2BIG"),
    (p.BSM_ENOEXEC, "ENOEXEC"),
    (p.BSM_EBADF, "EBADF"),
    (p.BSM_ECHILD, "ECHILD"),
    (p.BSM_EAGAIN, "EAGAIN"),
    (p.BSM_ENOMEM, "ENOMEM"),
    (p.BSM_EACCES, "EACCES"),
    (p.BSM_EFAULT, "EFAULT"),
    (p.BSM_ENOTBLK, "ENOTBLK"),
    (p.BSM_EBUSY, "EBUSY"),
    (p.BSM_EEXIST, "EEXIST"),
    (p.BSM_EXDEV, "EXDEV"),
    (p.BSM_ENODEV, "ENODEV"),
    (p.BSM_ENOTDIR, "ENOTDIR"),
    (p.BSM_EISDIR, "EISDIR"),
    (p.BSM_EINVAL, "EINVAL"),
    (p.BSM_ENFILE, "ENFILE"),
    (p.BSM_EMFILE, "EMFILE"),
    (p.BSM_ENOTTY, "ENOTTY"),
    (p.BSM_ETXTBSY, "ETXTBSY"),
    (p.BSM_EFBIG, "EFBIG"),
    (p.BSM_ENOSPC, "ENOSPC"),
    (p.BSM_ESPIPE, "ESPIPE"),
    (p.BSM_EROFS, "EROFS"),
    (p.BSM_EMLINK, "EMLINK"),
    (p.BSM_EPIPE, "EPIPE"),
    (p.BSM_EDOM, "EDOM"),
    (p.BSM_ERANGE, "ERANGE"),
    (p.BSM_ENOMSG, "ENOMSG"),
    (p.BSM_EIDRM, "EIDRM"),
    (p.BSM_ECHRNG, "ECHRNG"),
    (p.BSM_EL2NSYNC, "EL2NSYNC"),
    (p.BSM_EL3HLT, "EL3HLT"),
    (p.BSM_EL3RST, "EL3RST"),
    (p.BSM_ELNRNG, "ELNRNG"),
    (p.BSM_EUNATCH, "EUNATCH"),
    (p.BSM_ENOCSI, "ENOCSI"),
    (p.BSM_EL2HLT, "EL2HLT"),
    (p.BSM_EDEADLK, "EDEADLK"),
    (p.BSM_ENOLCK, "ENOLCK"),
    (p.BSM_ECANCELED, "ECANCELED"),
    (p.BSM_ENOTSUP, "ENOTSUP"),
    (p.BSM_EDQUOT, "EDQUOT"),
    (p.BSM_EBADE, "EBADE"),
    (p.BSM_EBADR, "EBADR"),
    (p.BSM_EXFULL, "EXFULL"),
    (p.BSM_ENOANO, "ENOANO"),
    (p.BSM_EBADRQC, "EBADRQC"),
    (p.BSM_EBADSLT, "EBADSLT"),
    (p.BSM_EDEADLOCK, "EDEADLOCK"),
    (p.BSM_EBFONT, "EBFONT"),
    (p.BSM_EOWNERDEAD, "EOWNERDEAD"),
    (p.BSM_ENOTRECOVERABLE, "ENOTRECOVERABLE"),
    (p.BSM_ENOSTR, "ENOSTR"),
    (p.BSM_ENODATA, "ENODATA"),
    (p.BSM_ETIME, "ETIME"),
    (p.BSM_ENOSR, "ENOSR"),
    (p.BSM_ENONET, "ENONET"),
    (p.BSM_ENOPKG, "ENOPKG"),
    (p.BSM_EREMOTE, "EREMOTE"),
    (p.BSM_ENOLINK, "ENOLINK"),
    (p.BSM_EADV, "EADV"),
    (p.BSM_ESRMNT, "ESRMNT"),
    (p.BSM_ECOMM, "ECOMM"),
    (p.BSM_EPROTO, "EPROTO"),
    (p.BSM_ELOCKUNMAPPED, "ELOCKUNMAPPED"),
    (p.BSM_ENOTACTIVE, "ENOTACTIVE"),
    (p.BSM_EMULTIHOP, "EMULTIHOP"),
    (p.BSM_EBADMSG, "EBADMSG"),
    (p.BSM_ENAMETOOLONG, "ENAMETOOLONG"),
    (p.BSM_EOVERFLOW, "EOVERFLOW"),
    (p.BSM_ENOTUNIQ, "ENOTUNIQ"),
    (p.BSM_EBADFD, "EBADFD"),
    (p.BSM_EREMCHG, "EREMCHG"),
    (p.BSM_ELIBACC, "ELIBACC"),
    (p.BSM_ELIBBAD, "ELIBBAD"),
    (p.BSM_ELIBSCN, "ELIBSCN"),
    (p.BSM_ELIBMAX, "ELIBMAX"),
    (p.BSM_ELIBEXEC, "ELIBEXEC"),
    (p.BSM_EILSEQ, "EILSEQ"),
    (p.BSM_ENOSYS, "ENOSYS"),
    (p.BSM_ELOOP, "ELOOP"),
    (p.BSM_ERESTART, "ERESTART"),
    (p.BSM_ESTRPIPE, "ESTRPIPE"),
    (p.BSM_ENOTEMPTY, "ENOTEMPTY"),
    (p.BSM_EUSERS, "EUSERS"),
    (p.BSM_ENOTSOCK, "ENOTSOCK"),
    (p.BSM_EDESTADDRREQ, "EDESTADDRREQ"),
    (p.BSM_EMSGSIZE, "EMSGSIZE"),
    (p.BSM_EPROTOTYPE, "EPROTOTYPE"),
    (p.BSM_ENOPROTOOPT, "ENOPROTOOPT"),
    (p.BSM_EPROTONOSUPPORT, "EPROTONOSUPPORT"),
    (p.BSM_ESOCKTNOSUPPORT, "ESOCKTNOSUPPORT"),
    (p.BSM_EOPNOTSUPP, "EOPNOTSUPP"),
    (p.BSM_EPFNOSUPPORT, "EPFNOSUPPORT"),
    (p.BSM_EAFNOSUPPORT, "EAFNOSUPPORT"),
    (p.BSM_EADDRINUSE, "EADDRINUSE"),
    (p.BSM_EADDRNOTAVAIL, "EADDRNOTAVAIL"),
    (p.BSM_ENETDOWN, "ENETDOWN"),
    (p.BSM_ENETUNREACH, "ENETUNREACH"),
    (p.BSM_ENETRESET, "ENETRESET"),
    (p.BSM_ECONNABORTED, "ECONNABORTED"),
    (p.BSM_ECONNRESET, "ECONNRESET"),
    (p.BSM_ENOBUFS, "ENOBUFS"),
    (p.BSM_EISCONN, "EISCONN"),
    (p.BSM_ENOTCONN, "ENOTCONN"),
    (p.BSM_ESHUTDOWN, "ESHUTDOWN"),
    (p.BSM_ETOOMANYREFS, "ETOOMANYREFS"),
    (p.BSM_ETIMEDOUT, "ETIMEDOUT"),
    (p.BSM_ECONNREFUSED, "ECONNREFUSED"),
    (p.BSM_EHOSTDOWN, "EHOSTDOWN"),
    (p.BSM_EHOSTUNREACH, "EHOSTUNREACH"),
    (p.BSM_EALREADY, "EALREADY"),
    (p.BSM_EINPROGRESS, "EINPROGRESS"),
    (p.BSM_ESTALE, "ESTALE"),
    (p.BSM_EPROCLIM, "EPROCLIM"),
    (p.BSM_EBADRPC, "EBADRPC"),
    (p.BSM_ERPCMISMATCH, "ERPCMISMATCH"),
    (p.BSM_EPROGUNAVAIL, "EPROGUNAVAIL"),
    (p.BSM_EPROGMISMATCH, "EPROGMISMATCH"),
    (p.BSM_EPROCUNAVAIL, "EPROCUNAVAIL"),
    (p.BSM_EFTYPE, "EFTYPE"),
    (p.BSM_EAUTH, "EAUTH"),
    (p.BSM_ENEEDAUTH, "ENEEDAUTH"),
    (p.BSM_ENOATTR, "ENOATTR"),
    (p.BSM_EDOOFUS, "EDOOFUS"),
    (p.BSM_EJUSTRETURN, "EJUSTRETURN"),
    (p.BSM_ENOIOCTL, "ENOIOCTL"),
    (p.BSM_EDIRIOCTL, "EDIRIOCTL"),
    (p.BSM_EPWROFF, "EPWROFF"),
    (p.BSM_EDEVERR, "EDEVERR"),
    (p.BSM_EBADEXEC, "EBADEXEC"),
    (p.BSM_EBADARCH, "EBADARCH"),
    (p.BSM_ESHLIBVERS, "ESHLIBVERS"),
    (p.BSM_EBADMACHO, "EBADMACHO"),
    (p.BSM_EPOLICY, "EPOLICY"),
    (p.BSM_EDOTDOT, "EDOTDOT"),
    (p.BSM_EUCLEAN, "EUCLEAN"),
    (p.BSM_ENOTNAM, "ENOTNAM"),
    (p.BSM_ENAVAIL, "ENAVAIL"),
    (p.BSM_EISNAM, "EISNAM"),
    (p.BSM_EREMOTEIO, "EREMOTEIO"),
    (p.BSM_ENOMEDIUM, "ENOMEDIUM"),
    (p.BSM_EMEDIUMTYPE, "EMEDIUMTYPE"),
    (p.BSM_ENOKEY, "ENOKEY"),
    (p.BSM_EKEYEXPIRED, "EKEYEXPIRED"),
    (p.BSM_EKEYREVOKED, "EKEYREVOKED"),
    (p.BSM_EKEYREJECTED, "EKEYREJECTED"),
)

# Symbolic names for the whole closed BSM set, mapped locally or not.
BSM_NAMES: MappingProxyType = MappingProxyType(
    {
        **{code: f"BSM_{sym}" for code, sym in TABLE_SOURCE if sym is not None},
        p.BSM_ESUCCESS: "BSM_ESUCCESS",
        p.BSM_UNKNOWNERR: "BSM_UNKNOWNERR",
    }
)


def _is_code(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class MappingTable:
    """Immutable BSM <-> local relation with first-match lookups.

    - Entries must be strictly ascending by BSM code and fit in one byte.
    - The success entry must be present and map to local 0.
    - The unknown sentinel must not appear.
    - Local codes may repeat (aliased errno symbols); the first entry wins
      when converting local -> BSM, exactly as a linear scan would.
    """

    __slots__ = ("_entries", "_by_bsm", "_by_local", "_collisions")

    def __init__(self, entries: Iterable[MappingEntry]):
        self._entries = tuple(MappingEntry(int(b), int(l)) for b, l in entries)

        by_bsm: dict[int, int] = {}
        by_local: dict[int, int] = {}
        shared: dict[int, list[int]] = {}
        prev = -1
        for bsm_code, local_code in self._entries:
            if not p.BSM_CODE_MIN <= bsm_code <= p.BSM_CODE_MAX:
                raise ValueError(f"FATAL: BSM code {bsm_code} does not fit in one byte")
            if bsm_code <= prev:
                raise ValueError(f"FATAL: BSM code {bsm_code} out of order after {prev}")
            if bsm_code == p.BSM_UNKNOWNERR:
                raise ValueError("FATAL: Unknown-error sentinel must not appear in the table")
            prev = bsm_code

            by_bsm[bsm_code] = local_code
            if local_code in by_local:
                shared.setdefault(local_code, [by_local[local_code]]).append(bsm_code)
            else:
                by_local[local_code] = bsm_code

        if by_bsm.get(p.BSM_ESUCCESS) != 0:
            raise ValueError("FATAL: Success sentinel must map to local 0")

        for local_code, codes in shared.items():
            logger.debug(
                "Local errno %d shared by BSM codes %s; %d wins for local->BSM",
                local_code, codes, codes[0],
            )

        self._by_bsm = MappingProxyType(by_bsm)
        self._by_local = MappingProxyType(by_local)
        self._collisions = MappingProxyType({k: tuple(v) for k, v in shared.items()})

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> tuple[MappingEntry, ...]:
        return self._entries

    @property
    def collisions(self) -> MappingProxyType:
        return self._collisions

    def to_local(self, bsm_error: int) -> int | None:
        # bool and float compare equal to int keys; only real ints are codes
        if not _is_code(bsm_error):
            return None
        return self._by_bsm.get(bsm_error)

    def to_bsm(self, error: int) -> int:
        if not _is_code(error):
            return p.BSM_UNKNOWNERR
        return self._by_local.get(error, p.BSM_UNKNOWNERR)


def build_table(source=TABLE_SOURCE, local=errno) -> MappingTable:
    """Resolve the table source against a local errno namespace.

    Pairs whose symbol the namespace does not define are left out.
    """
    entries: list[MappingEntry] = []
    omitted: list[str] = []
    for bsm_code, symbol in source:
        if symbol is None:
            entries.append(MappingEntry(bsm_code, 0))
            continue
        local_code = getattr(local, symbol, None)
        if local_code is None:
            omitted.append(symbol)
            continue
        entries.append(MappingEntry(bsm_code, local_code))

    if omitted:
        logger.debug("No local errno for %d BSM codes: %s", len(omitted), ", ".join(omitted))

    table = MappingTable(entries)
    logger.debug("Built BSM errno table: %d entries, %d omitted", len(table), len(omitted))
    return table
