"""Program entry point (command dispatcher).

`binexport [flags] <command> [args...]` runs `binexport-<command> [args...]`
from the directory binexport is installed in and exits with its status.
"""
from __future__ import annotations
import sys, click
from typing import List, Optional
from src.cli.commands import UsageConfig, parse_global_flags
from src.lib.dispatch import DispatchError, dispatch

def main(argv: Optional[List[str]] = None) -> int:
	argv = list(sys.argv if argv is None else argv)
	config = UsageConfig()
	try:
		return dispatch(argv, lambda args: parse_global_flags(args, config), prefix=config.prefix, program_name=config.program_name)
	except DispatchError as e:
		click.echo(f'ERROR: {e}', err=True)
		return 1
	except KeyboardInterrupt:  # the child got the interrupt too
		return 130

if __name__ == '__main__':  # pragma: no cover
	sys.exit(main())
