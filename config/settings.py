"""Project configuration settings.

Constants shared by the dispatcher and its bundled tools. Subcommand
lookup deliberately has no environment override; only logging does.
"""

import os

# Naming
PROGRAM_NAME = "binexport"
TOOL_PREFIX = PROGRAM_NAME + "-"  # sibling executables: binexport-<command>
VERSION = "12.0.0"
USAGE_MESSAGE = "Create/work with exported disassembly files."

# Any argument starting with one of these is a help request
HELP_PREFIXES = ("-help", "--help")
HELP_OPTION_NAMES = ["--help", "-help", "--helpfull", "--helpshort"]
VERSION_FLAG = "--version"

# Self-location
NAME_MAX = 255  # initial buffer size
MAX_BUFFER_ATTEMPTS = 32

# Logging
LOG_LEVEL = os.environ.get("BINEXPORT_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(levelname)s: %(message)s"

__all__ = [
	'PROGRAM_NAME','TOOL_PREFIX','VERSION','USAGE_MESSAGE','HELP_PREFIXES','HELP_OPTION_NAMES','VERSION_FLAG',
	'NAME_MAX','MAX_BUFFER_ATTEMPTS','LOG_LEVEL','LOG_FORMAT'
]
