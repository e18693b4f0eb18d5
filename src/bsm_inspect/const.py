STATUS = {
  "MAPPED": "Code has a counterpart on this platform",
  "UNMAPPED": "BSM code has no local errno on this platform",
  "UNKNOWN": "Local errno has no BSM code; encodes as BSM_UNKNOWNERR",
}

LOG_LEVEL_ENV = "BSM_ERRNO_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
