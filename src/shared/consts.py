from enum import Enum


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_TIMEZONE = "Europe/Amsterdam"

# Day the meters were first read out; nothing exists before it.
DEFAULT_FIRST_MEASUREMENT_DATE = "2014-03-03"

# Wire values are rounded to this many decimals when decoded.
DEFAULT_VALUE_PRECISION = 3
