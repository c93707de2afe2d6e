import logging, os, stat
from pathlib import Path
import pytest

POSIX_ONLY = pytest.mark.skipif(os.name == 'nt', reason='shell script tools need a POSIX shell')

def make_tool(directory: Path, name: str, script: str = 'exit 0') -> Path:
    """Write an executable shell script `directory/name`."""
    path = directory / name
    path.write_text('#!/bin/sh\n' + script + '\n')
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path

@pytest.fixture
def install_dir(tmp_path: Path) -> Path:
    """A fake install directory holding the `binexport` program itself."""
    bindir = tmp_path / 'bin'
    bindir.mkdir()
    (bindir / 'binexport').write_text('# dispatcher\n')
    return bindir

@pytest.fixture(autouse=True)
def _restore_root_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)
