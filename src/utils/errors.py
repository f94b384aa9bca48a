"""
User-facing errors raised around the codec (configuration and file access).

The codec itself raises plain `ValueError` for malformed input; those are
treated as bugs and are not wrapped here.
"""

NO_INPUT = "No input file specified. Use -f <path> or --file <path> to set."
NO_OUTPUT = "No output file specified. Use -o <path> or --output <path> to set."
NO_ACTION = "No action specified. Use -c to compress or -u to uncompress."
MULTIPLE_ACTIONS = "Multiple actions specified. Only one of -c or -u should be used."
MULTIPLE_INPUTS = (
    "Multiple input files specified. Only one of -f <path> or --file <path> should be used."
)
MULTIPLE_OUTPUTS = (
    "Multiple output files specified. Only one of -o <path> or --output <path> should be used."
)
INPUT_ERROR_FORMAT = (
    "Error opening input file '{}'. Check that the path is valid and the file exists."
)
OUTPUT_ERROR_FORMAT = "Error creating output file '{}'. Check that the path is valid."
PATH_EXPECTED_FORMAT = "<path> expected after '{}', got nothing."
UNKNOWN_OPTION_FORMAT = (
    "Unknown option '{}'. Valid options are:\n-f --file\n-o --output\n-c\n-u"
)


class HuffmanError(Exception):
    """Base class for errors reported to the user verbatim."""


class ConfigError(HuffmanError, ValueError):
    pass


class FileAccessError(HuffmanError, OSError):
    pass
