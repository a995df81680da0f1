from enum import IntEnum
from typing import ClassVar


class Severity(IntEnum):
    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    ERR = 3
    WARN = 4


class Defaults:
    LOGGER_NAME = "ipmitool"
    VERBOSITY = 0
    DIAGNOSTIC_LEVEL = 0
    CONFIG_FILE = "ipmilog.toml"


class Limits:
    MESSAGE_LENGTH = 1024
    HEXDUMP_ROW_WIDTH = 16


class EnvVars:
    DIAGNOSTIC_LEVEL = "IPMI_LOGLEVEL"
    DIAGNOSTIC_FILE = "IPMI_LOGFILE"
    ALL: ClassVar[tuple[str, ...]] = (DIAGNOSTIC_LEVEL, DIAGNOSTIC_FILE)


class LevelLabels:
    EMERGENCY = "EMERGENCY"
    ERROR = "ERROR"
    WARNING = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"


# Session threshold is NOTICE + verbosity
SESSION_LEVEL_BASE = Severity.NOTICE
