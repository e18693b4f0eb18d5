"""BSM error-number constants.

Single source of truth for the on-wire error byte of the return token.
Values follow OpenBSM audit_errno.h. Keep this file stable: records written
on one host are decoded with these numbers on another.
"""

# Sentinels
BSM_ESUCCESS = 0
BSM_UNKNOWNERR = 250  # Returned when a local errno has no BSM equivalent

# The error byte is a single u_char on the wire
BSM_CODE_MIN = 0
BSM_CODE_MAX = 255

# Display string for BSM codes with no local counterpart
FOREIGN_ERROR_STR = "Foreign BSM error"

BSM_EPERM = 1
BSM_ENOENT = 2
BSM_ESRCH = 3
BSM_EINTR = 4
BSM_EIO = 5
BSM_ENXIO = 6
BSM_E2BIG = 7
BSM_ENOEXEC = 8
BSM_EBADF = 9
BSM_ECHILD = 10
BSM_EAGAIN = 11
BSM_ENOMEM = 12
BSM_EACCES = 13
BSM_EFAULT = 14
BSM_ENOTBLK = 15
BSM_EBUSY = 16
BSM_EEXIST = 17
BSM_EXDEV = 18
BSM_ENODEV = 19
BSM_ENOTDIR = 20
BSM_EISDIR = 21
BSM_EINVAL = 22
BSM_ENFILE = 23
BSM_EMFILE = 24
BSM_ENOTTY = 25
BSM_ETXTBSY = 26
BSM_EFBIG = 27
BSM_ENOSPC = 28
BSM_ESPIPE = 29
BSM_EROFS = 30
BSM_EMLINK = 31
BSM_EPIPE = 32
BSM_EDOM = 33
BSM_ERANGE = 34
BSM_ENOMSG = 35
BSM_EIDRM = 36
BSM_ECHRNG = 37  # Solaris/Linux
BSM_EL2NSYNC = 38  # Solaris/Linux
BSM_EL3HLT = 39  # Solaris/Linux
BSM_EL3RST = 40  # Solaris/Linux
BSM_ELNRNG = 41  # Solaris/Linux
BSM_EUNATCH = 42  # Solaris/Linux
BSM_ENOCSI = 43  # Solaris/Linux
BSM_EL2HLT = 44  # Solaris/Linux
BSM_EDEADLK = 45
BSM_ENOLCK = 46
BSM_ECANCELED = 47
BSM_ENOTSUP = 48
BSM_EDQUOT = 49
BSM_EBADE = 50  # Solaris/Linux
BSM_EBADR = 51  # Solaris/Linux
BSM_EXFULL = 52  # Solaris/Linux
BSM_ENOANO = 53  # Solaris/Linux
BSM_EBADRQC = 54  # Solaris/Linux
BSM_EBADSLT = 55  # Solaris/Linux
BSM_EDEADLOCK = 56  # Solaris
BSM_EBFONT = 57  # Solaris/Linux
BSM_EOWNERDEAD = 58  # Solaris/Linux
BSM_ENOTRECOVERABLE = 59  # Solaris/Linux
BSM_ENOSTR = 60  # Solaris/Darwin/Linux
BSM_ENODATA = 61  # Solaris/Darwin/Linux
BSM_ETIME = 62  # Solaris/Darwin/Linux
BSM_ENOSR = 63  # Solaris/Darwin/Linux
BSM_ENONET = 64  # Solaris/Linux
BSM_ENOPKG = 65  # Solaris/Linux
BSM_EREMOTE = 66
BSM_ENOLINK = 67
BSM_EADV = 68  # Solaris/Linux
BSM_ESRMNT = 69  # Solaris/Linux
BSM_ECOMM = 70  # Solaris/Linux
BSM_EPROTO = 71
BSM_ELOCKUNMAPPED = 72  # Solaris
BSM_ENOTACTIVE = 73  # Solaris
BSM_EMULTIHOP = 74
BSM_EBADMSG = 77
BSM_ENAMETOOLONG = 78
BSM_EOVERFLOW = 79
BSM_ENOTUNIQ = 80  # Solaris/Linux
BSM_EBADFD = 81  # Solaris/Linux
BSM_EREMCHG = 82  # Solaris/Linux
BSM_ELIBACC = 83  # Solaris/Linux
BSM_ELIBBAD = 84  # Solaris/Linux
BSM_ELIBSCN = 85  # Solaris/Linux
BSM_ELIBMAX = 86  # Solaris/Linux
BSM_ELIBEXEC = 87  # Solaris/Linux
BSM_EILSEQ = 88
BSM_ENOSYS = 89
BSM_ELOOP = 90
BSM_ERESTART = 91
BSM_ESTRPIPE = 92  # Solaris/Linux
BSM_ENOTEMPTY = 93
BSM_EUSERS = 94
BSM_ENOTSOCK = 95
BSM_EDESTADDRREQ = 96
BSM_EMSGSIZE = 97
BSM_EPROTOTYPE = 98
BSM_ENOPROTOOPT = 99
BSM_EPROTONOSUPPORT = 120
BSM_ESOCKTNOSUPPORT = 121
BSM_EOPNOTSUPP = 122
BSM_EPFNOSUPPORT = 123
BSM_EAFNOSUPPORT = 124
BSM_EADDRINUSE = 125
BSM_EADDRNOTAVAIL = 126
BSM_ENETDOWN = 127
BSM_ENETUNREACH = 128
BSM_ENETRESET = 129
BSM_ECONNABORTED = 130
BSM_ECONNRESET = 131
BSM_ENOBUFS = 132
BSM_EISCONN = 133
BSM_ENOTCONN = 134
BSM_ESHUTDOWN = 143
BSM_ETOOMANYREFS = 144
BSM_ETIMEDOUT = 145
BSM_ECONNREFUSED = 146
BSM_EHOSTDOWN = 147
BSM_EHOSTUNREACH = 148
BSM_EALREADY = 149
BSM_EINPROGRESS = 150
BSM_ESTALE = 151

# OpenBSM-specific range
BSM_EPROCLIM = 190  # FreeBSD/Darwin
BSM_EBADRPC = 191  # FreeBSD/Darwin
BSM_ERPCMISMATCH = 192  # FreeBSD/Darwin
BSM_EPROGUNAVAIL = 193  # FreeBSD/Darwin
BSM_EPROGMISMATCH = 194  # FreeBSD/Darwin
BSM_EPROCUNAVAIL = 195  # FreeBSD/Darwin
BSM_EFTYPE = 196  # FreeBSD/Darwin
BSM_EAUTH = 197  # FreeBSD/Darwin
BSM_ENEEDAUTH = 198  # FreeBSD/Darwin
BSM_ENOATTR = 199  # FreeBSD/Darwin
BSM_EDOOFUS = 200  # FreeBSD
BSM_EJUSTRETURN = 201  # FreeBSD kernel
BSM_ENOIOCTL = 202  # FreeBSD kernel
BSM_EDIRIOCTL = 203  # FreeBSD kernel
BSM_EPWROFF = 204  # Darwin
BSM_EDEVERR = 205  # Darwin
BSM_EBADEXEC = 206  # Darwin
BSM_EBADARCH = 207  # Darwin
BSM_ESHLIBVERS = 208  # Darwin
BSM_EBADMACHO = 209  # Darwin
BSM_EPOLICY = 210  # Darwin
BSM_EDOTDOT = 211  # Linux
BSM_EUCLEAN = 212  # Linux
BSM_ENOTNAM = 213  # Linux
BSM_ENAVAIL = 214  # Linux
BSM_EISNAM = 215  # Linux
BSM_EREMOTEIO = 216  # Linux
BSM_ENOMEDIUM = 217  # Linux
BSM_EMEDIUMTYPE = 218  # Linux
BSM_ENOKEY = 219  # Linux
BSM_EKEYEXPIRED = 220  # Linux
BSM_EKEYREVOKED = 221  # Linux
BSM_EKEYREJECTED = 222  # Linux
