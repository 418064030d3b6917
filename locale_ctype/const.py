"""Constants for the locale_ctype package."""

# Configuration keys
CONF_LIBRARY = "library"
CONF_CODEC_LOCALES = "codec_locales"
CONF_CHECK_BLANK_ERRORS = "check_blank_errors"
CONF_ASCII_CASING_FAST_PATH = "ascii_casing_fast_path"

# Environment variables read by config_from_env()
ENV_LIBRARY = "LOCALE_CTYPE_LIBRARY"
ENV_CODEC_LOCALES = "LOCALE_CTYPE_CODEC_LOCALES"
ENV_CHECK_BLANK_ERRORS = "LOCALE_CTYPE_CHECK_BLANK_ERRORS"
ENV_ASCII_CASING_FAST_PATH = "LOCALE_CTYPE_ASCII_CASING_FAST_PATH"

# Environment variables that select the active locale (in precedence order)
LOCALE_ENV_VARS: tuple[str, ...] = ("LC_ALL", "LC_CTYPE", "LANG")

# Default values
DEFAULT_CODEC_LOCALES: tuple[str, ...] = ("C.UTF-8", "en_US.UTF-8")
DEFAULT_CHECK_BLANK_ERRORS = True
DEFAULT_ASCII_CASING_FAST_PATH = False

# Empty name: newlocale() resolves the locale from the environment
ACTIVE_LOCALE_NAME = ""

# Longest UTF-8 encoding of a single scalar value
MAX_UTF8_LEN = 4

# Scratch space handed to wcrtomb(); MB_LEN_MAX on glibc is 16
MB_LEN_MAX = 16

# Generous upper bound for sizeof(mbstate_t) across libcs (glibc 8, macOS 128)
MBSTATE_SIZE = 128

ASCII_MAX = 0x7F

# POSIX "space" class in the C locale: HT, LF, VT, FF, CR, SP
ASCII_SPACE: frozenset[int] = frozenset({0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20})

# POSIX "blank" class in the C locale: HT, SP
ASCII_BLANK: frozenset[int] = frozenset({0x09, 0x20})

# Raw shim status codes
STATUS_OK = 0
STATUS_NO_CODEC_LOCALE = 0x1
STATUS_BAD_SEQUENCE = 0x2
DECODE_NO_CODEC_LOCALE = -0x1
DECODE_BAD_WIDE = -0x2
CLASSIFY_NO_LOCALE = -1

# Primitive names used in diagnostics and error messages
PRIMITIVE_ISWSPACE = "iswspace"
PRIMITIVE_ISWBLANK = "iswblank"
PRIMITIVE_TOWUPPER = "towupper"
PRIMITIVE_TOWLOWER = "towlower"
PRIMITIVE_UTF8TOWC = "utf8towc"
PRIMITIVE_WCTOUTF8 = "wctoutf8"
