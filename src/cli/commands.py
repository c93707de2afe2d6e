"""Global flag handling for the dispatcher, implemented with click.

The click command here never sees a subcommand's arguments; it is handed
only the flags in front of the command name (see src.lib.dispatch).
"""
from __future__ import annotations
import sys, logging, click
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional
from config.settings import (
	PROGRAM_NAME, TOOL_PREFIX, VERSION, USAGE_MESSAGE, HELP_OPTION_NAMES, VERSION_FLAG, LOG_LEVEL, LOG_FORMAT
)
from src.lib.dispatch import install_dir, list_commands

@dataclass
class UsageConfig:
	program_name: str = PROGRAM_NAME
	usage_message: str = USAGE_MESSAGE
	version: str = VERSION
	prefix: str = TOOL_PREFIX
	lookup_dir: Optional[Path] = None  # None: next to the running program

	@property
	def version_string(self) -> str:
		return f'{self.program_name} {self.version}'

@dataclass
class GlobalOptions:
	verbose: int = 0

def configure_logging(verbosity: int = 0):
	if verbosity >= 2: level = logging.DEBUG
	elif verbosity == 1: level = logging.INFO
	else: level = getattr(logging, LOG_LEVEL, logging.WARNING)
	root = logging.getLogger()
	if not root.handlers:
		logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
	root.setLevel(level)

class DispatcherCommand(click.Command):
	"""Top-level command whose help also lists the installed commands."""

	def __init__(self, *args, config: UsageConfig, **kwargs):
		super().__init__(*args, **kwargs)
		self.config = config

	def collect_usage_pieces(self, ctx):
		return super().collect_usage_pieces(ctx) + ['COMMAND', '[ARGS]...']

	def format_epilog(self, ctx, formatter):
		lookup_dir = self.config.lookup_dir if self.config.lookup_dir is not None else install_dir()
		commands = list_commands(lookup_dir, self.config.prefix)
		if commands:
			with formatter.section('Commands'):
				formatter.write_dl([(name, f'runs {self.config.prefix}{name}') for name in commands])
		super().format_epilog(ctx, formatter)

def build_cli(config: UsageConfig) -> click.Command:
	@click.command(
		name=config.program_name, cls=DispatcherCommand, config=config, help=config.usage_message,
		context_settings={'help_option_names': HELP_OPTION_NAMES},
	)
	@click.version_option(config.version, VERSION_FLAG, message=config.version_string)
	@click.option('-v', '--verbose', count=True, help='Log more detail (repeat for debug output).')
	def cli(verbose):
		configure_logging(verbose)
		return GlobalOptions(verbose=verbose)
	return cli

def parse_global_flags(args: List[str], config: UsageConfig) -> GlobalOptions:
	"""Parse the dispatcher's own flags; exits for --help, --version and usage errors."""
	cli = build_cli(config)
	try:
		rv = cli.main(args=list(args[1:]), prog_name=config.program_name, standalone_mode=False)
	except click.ClickException as e:
		e.show()
		sys.exit(e.exit_code)
	if not isinstance(rv, GlobalOptions):
		# --help / --version already printed
		sys.exit(rv or 0)
	return rv
