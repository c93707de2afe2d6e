"""Configuration constants for binexport.

Exposes the values from `config.settings` at package level so callers can
write `from config import TOOL_PREFIX`. Keep the definitions in
settings.py; this module only re-exports them.
"""

from .settings import (
	PROGRAM_NAME, TOOL_PREFIX, VERSION, USAGE_MESSAGE, HELP_PREFIXES, HELP_OPTION_NAMES, VERSION_FLAG,
	NAME_MAX, MAX_BUFFER_ATTEMPTS, LOG_LEVEL, LOG_FORMAT
)

__all__ = [
	'PROGRAM_NAME', 'TOOL_PREFIX', 'VERSION', 'USAGE_MESSAGE', 'HELP_PREFIXES', 'HELP_OPTION_NAMES', 'VERSION_FLAG',
	'NAME_MAX', 'MAX_BUFFER_ATTEMPTS', 'LOG_LEVEL', 'LOG_FORMAT'
]
