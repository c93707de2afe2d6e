import sys
import pytest
from conftest import POSIX_ONLY, make_tool
from src.main import main

@pytest.fixture
def program(install_dir, monkeypatch):
	"""Pretend the running program is install_dir/binexport."""
	monkeypatch.setattr(sys, 'argv', [str(install_dir / 'binexport')])
	return install_dir


def test_main_no_command(program, capsys):
	assert main(['binexport']) == 1
	assert capsys.readouterr().err == "ERROR: No command given. Try '--help'.\n"


def test_main_unknown_command(program, capsys):
	assert main(['binexport', '-v', 'nosuch', 'arg']) == 1
	err = capsys.readouterr().err
	assert err.startswith("ERROR: 'nosuch' is not a binexport command.")
	assert len(err.strip().splitlines()) == 1


def test_main_help(program, capsys):
	make_tool(program, 'binexport-dummy')
	with pytest.raises(SystemExit) as exc:
		main(['binexport', '--help'])
	assert exc.value.code == 0
	out = capsys.readouterr().out
	assert 'Usage: binexport' in out
	assert 'dummy' in out


def test_main_version(program, capsys):
	with pytest.raises(SystemExit) as exc:
		main(['binexport', '--version'])
	assert exc.value.code == 0
	assert capsys.readouterr().out.startswith('binexport ')


@POSIX_ONLY
def test_main_runs_command(program, capfd):
	make_tool(program, 'binexport-greet', 'echo "hello $1"; exit 3')
	assert main(['binexport', 'greet', 'world']) == 3
	assert capfd.readouterr().out == 'hello world\n'


@POSIX_ONLY
def test_main_verbose_logs_found_command(program, caplog):
	tool = make_tool(program, 'binexport-ok')
	caplog.set_level('INFO')
	assert main(['binexport', '-v', 'ok']) == 0
	assert f'found command: {tool}' in caplog.text


def test_main_interrupted_while_waiting(program, monkeypatch, capsys):
	make_tool(program, 'binexport-slow')

	def interrupted(*args, **kwargs):
		raise KeyboardInterrupt

	monkeypatch.setattr('src.lib.dispatch.subprocess.run', interrupted)
	assert main(['binexport', 'slow']) == 130
	assert capsys.readouterr().err == ''
