"""Command dispatch: route `binexport <command> [args...]` to `binexport-<command>`.

Commands are looked up in the directory holding the running `binexport`
program (the working directory only if that cannot be found), never on PATH.
"""
from __future__ import annotations
import os, logging, subprocess
from pathlib import Path
from typing import Callable, List, Sequence
from config.settings import PROGRAM_NAME, TOOL_PREFIX, HELP_PREFIXES, VERSION_FLAG
from .locator import ResolutionError, current_executable_path

log = logging.getLogger(__name__)

class DispatchError(Exception): ...
class MissingCommandError(DispatchError): ...
class UnknownCommandError(DispatchError): ...
class SpawnError(DispatchError): ...

def is_help_flag(arg: str) -> bool:
	return arg.startswith(HELP_PREFIXES)

def is_control_flag(arg: str) -> bool:
	"""Flags the top-level parser answers by itself and then exits."""
	return is_help_flag(arg) or arg == VERSION_FLAG

def find_subcommand(argv: Sequence[str]) -> int:
	"""Return the index of the first non-flag argument, or len(argv) if none.

	Must run before any generic flag parsing, which would otherwise see (and
	possibly reject) the command's own arguments. A help request stops the
	scan so that `binexport --help foo` shows the top-level usage.
	"""
	for i in range(1, len(argv)):
		arg = argv[i]
		if is_help_flag(arg):
			break
		if not arg.startswith('-'):
			return i
	return len(argv)

def install_dir(locate: Callable[[], Path] = current_executable_path) -> Path:
	"""Directory of the running program; the working directory if unknown."""
	try:
		return locate().parent
	except ResolutionError as e:
		log.debug('falling back to relative command lookup: %s', e)
		return Path('.')

def _candidate_names(command: str, prefix: str) -> List[str]:
	names = [prefix + command]
	if os.name == 'nt':
		names.append(prefix + command + '.exe')
	return names

def resolve_command(command: str, lookup_dir: Path, prefix: str = TOOL_PREFIX, program_name: str = PROGRAM_NAME) -> Path:
	if command and os.sep not in command and not (os.altsep and os.altsep in command):
		for name in _candidate_names(command, prefix):
			command_exe = Path(lookup_dir).absolute() / name  # never a bare name: no PATH search
			if command_exe.is_file():
				return command_exe
	raise UnknownCommandError(f"'{command}' is not a {program_name} command. See '{program_name} --help'.")

def list_commands(lookup_dir: Path, prefix: str = TOOL_PREFIX) -> List[str]:
	"""Names of the commands installed next to the dispatcher."""
	try:
		entries = list(Path(lookup_dir).iterdir())
	except OSError:
		return []
	names = set()
	for entry in entries:
		if not entry.name.startswith(prefix) or not entry.is_file():
			continue
		name = entry.name[len(prefix):]
		if os.name == 'nt':
			if entry.suffix.lower() != '.exe':
				continue
			name = name[:-len('.exe')]
		if name:
			names.add(name)
	return sorted(names)

def build_child_args(command_exe: Path, argv: Sequence[str], command_index: int) -> List[str]:
	return [str(command_exe), *argv[command_index + 1:]]

def spawn_and_wait(args: Sequence[str]) -> int:
	"""Run args[0] with inherited stdio, wait for it and return its exit status.

	A child killed by signal N reports 128 + N, as shells do.
	"""
	try:
		completed = subprocess.run(list(args), check=False)
	except OSError as e:
		raise SpawnError(f"Failed to run '{args[0]}': {e.strerror or e}") from e
	if completed.returncode < 0:
		return 128 - completed.returncode
	return completed.returncode

def dispatch(
	argv: Sequence[str],
	parse_flags: Callable[[List[str]], object],
	locate: Callable[[], Path] = current_executable_path,
	spawn: Callable[[Sequence[str]], int] = spawn_and_wait,
	prefix: str = TOOL_PREFIX,
	program_name: str = PROGRAM_NAME,
) -> int:
	"""Run the command named in argv and return its exit status.

	`parse_flags` only ever receives the arguments before the command; it
	may exit the process for --help or --version.
	"""
	argv = list(argv)
	command_index = find_subcommand(argv)
	if command_index == len(argv):
		if any(is_control_flag(arg) for arg in argv[1:]):
			parse_flags(argv)
		raise MissingCommandError("No command given. Try '--help'.")

	parse_flags(argv[:command_index])

	command_exe = resolve_command(argv[command_index], install_dir(locate), prefix, program_name)
	log.info('found command: %s', command_exe)
	return spawn(build_child_args(command_exe, argv, command_index))
