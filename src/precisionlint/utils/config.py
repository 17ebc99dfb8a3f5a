"""
Configuration constants to replace magic characters and strings throughout precisionlint
"""

import os
import tempfile

# Literal grammar characters
GROUP_SEPARATOR = "_"
DECIMAL_POINT = "."
SIGN_CHARS = "+-"
EXPONENT_MARKERS = "eE"
WIDTH_SUFFIX_MARKER = "f"

# Parser configuration constants (cache under temp dir to avoid cluttering project root)
DEFAULT_PARSER_CACHE_FILE = os.path.join(tempfile.gettempdir(), "precisionlint_parser.cache")
DEFAULT_SOURCE_FILE = "main.rs"

# Lint identity and messages
EXCESSIVE_PRECISION_CODE = "excessive_precision"
EXCESSIVE_PRECISION_MESSAGE = "float has excessive precision"
EXCESSIVE_PRECISION_HELP = "consider changing the type or truncating it to: `{suggestion}`"
PARSE_ERROR_CODE = "E0001"

# Round-trip formatting (numpy Dragon4, exponent written without zero padding)
SCIENTIFIC_EXP_DIGITS = 1

# Color control
COLOR_ENV_VAR = "PRECISIONLINT_COLOR"
NO_COLOR_ENV_VAR = "NO_COLOR"

# Display and formatting constants
SPAN_STOP_CHARS = (" ", "\t", ";", ",", ")", "]", "}")

# File encoding constants
DEFAULT_FILE_ENCODING = "utf-8"
