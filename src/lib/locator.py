"""Self-location: find the path of the currently running program.

OS queries for the executable path all want a caller-supplied buffer of
unknown size. They are expressed as a `call(capacity) -> (value, length)`
and driven by `query_growing`, which retries with a 1.5x larger buffer
until the result fits.
"""
from __future__ import annotations
import ctypes, os, sys, logging
from pathlib import Path
from typing import Callable, Tuple
from config.settings import NAME_MAX, MAX_BUFFER_ATTEMPTS

log = logging.getLogger(__name__)

ERROR_INSUFFICIENT_BUFFER = 122  # winerror.h

class ResolutionError(Exception): ...

class BufferTooSmall(Exception):
	"""Raised by a buffer query to ask for a larger buffer."""

Query = Callable[[int], Tuple[str, int]]

def query_growing(call: Query, size: int = NAME_MAX, max_attempts: int = MAX_BUFFER_ATTEMPTS) -> str:
	"""Run `call` with a growing buffer until the result fits.

	A result fits when the reported length is strictly less than the
	capacity. `BufferTooSmall` or a full buffer grows the capacity; any
	other exception from `call` propagates unchanged.
	"""
	for _ in range(max_attempts):
		try:
			value, length = call(size)
		except BufferTooSmall:
			pass
		else:
			if length < size:
				return value[:length]
		size = max(size + 1, 3 * size // 2)
	raise ResolutionError(f'Failed to get module path: no fit after {max_attempts} attempts')

def _procfs_query() -> Query:
	libc = ctypes.CDLL(None, use_errno=True)
	readlink = libc.readlink
	readlink.argtypes = [ctypes.c_char_p, ctypes.c_char_p, ctypes.c_size_t]
	readlink.restype = ctypes.c_ssize_t

	def call(size: int) -> Tuple[str, int]:
		buf = ctypes.create_string_buffer(size)
		n = readlink(b'/proc/self/exe', buf, size)
		if n < 0:
			raise ResolutionError(f'Failed to get module path: {os.strerror(ctypes.get_errno())}')
		return os.fsdecode(buf.raw[:n]), n
	return call

def _win32_query() -> Query:
	kernel32 = ctypes.WinDLL('kernel32', use_last_error=True)  # type: ignore[attr-defined]
	get_module_filename = kernel32.GetModuleFileNameW
	get_module_filename.argtypes = [ctypes.c_void_p, ctypes.c_wchar_p, ctypes.c_uint32]
	get_module_filename.restype = ctypes.c_uint32

	def call(size: int) -> Tuple[str, int]:
		buf = ctypes.create_unicode_buffer(size)
		n = get_module_filename(None, buf, size)
		if n == 0:
			err = ctypes.get_last_error()  # type: ignore[attr-defined]
			if err != ERROR_INSUFFICIENT_BUFFER:
				raise ResolutionError(f'Failed to get module path: {ctypes.FormatError(err)}')  # type: ignore[attr-defined]
			raise BufferTooSmall()
		return buf.value, n
	return call

def _darwin_query() -> Query:
	libc = ctypes.CDLL(None)
	get_executable_path = libc._NSGetExecutablePath
	get_executable_path.argtypes = [ctypes.c_char_p, ctypes.POINTER(ctypes.c_uint32)]
	get_executable_path.restype = ctypes.c_int

	def call(size: int) -> Tuple[str, int]:
		buf = ctypes.create_string_buffer(size)
		bufsize = ctypes.c_uint32(size)
		if get_executable_path(buf, ctypes.byref(bufsize)) != 0:
			raise BufferTooSmall()
		return os.fsdecode(buf.value), len(buf.value)
	return call

def platform_query(platform: str | None = None) -> Query:
	platform = platform or sys.platform
	if platform == 'win32':
		return _win32_query()
	if platform == 'darwin':
		return _darwin_query()
	return _procfs_query()

def native_executable_path(size: int = NAME_MAX) -> Path:
	"""Path of the native binary of this process (the interpreter, unless frozen)."""
	try:
		call = platform_query()
	except (OSError, AttributeError) as e:
		raise ResolutionError(f'Failed to get module path: {e}') from e
	# _NSGetExecutablePath may return a path through symlinks
	return Path(os.path.realpath(query_growing(call, size)))

def script_path() -> Path:
	"""Resolved path of the launcher script (`sys.argv[0]`)."""
	argv0 = sys.argv[0] if sys.argv else ''
	if not argv0 or argv0 == '-c':
		raise ResolutionError('Failed to get module path: interpreter has no script')
	path = Path(argv0)
	if not path.exists() and os.name == 'nt':
		path = Path(argv0 + '.exe')  # pip launchers may drop the suffix
	if not path.exists():
		raise ResolutionError(f'Failed to get module path: {argv0} does not exist')
	return path.resolve()

def current_executable_path() -> Path:
	"""Absolute, symlink-free path of the running program.

	A frozen (bundled) program is its own native binary; an interpreted one
	is the console script that launched it.
	"""
	if getattr(sys, 'frozen', False):
		return native_executable_path()
	return script_path()
