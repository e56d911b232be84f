# topmark:header:start
#
#   project      : FmtBits
#   file         : exit_codes.py
#   file_relpath : src/fmtbits/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes returned by the ``fmtbits`` command.

Values above 1 follow the BSD ``sysexits.h`` conventions so shell scripts can
tell usage mistakes from configuration problems.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the FmtBits CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure (e.g. a formatter could not be built).
        USAGE_ERROR (int): Invalid flags or arguments.
        CONFIG_ERROR (int): Missing, malformed or invalid configuration.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    CONFIG_ERROR = 78
