"""Dummy command that does (mostly) nothing.

Installed as `binexport-dummy`, so `binexport dummy a b` reaches it.
"""
from __future__ import annotations
import click

COMMAND_ALIASES = ('nop',)
DESCRIPTION = 'Print a greeting and the positional arguments.'

@click.command()
@click.option('--subcommand_query', 'subcommand_query', default='', metavar='QUERY',
	help="internal, output information for the 'binexport' tool")
@click.argument('positional', nargs=-1)
def cli(subcommand_query, positional):
	"""Dummy command that does (mostly) nothing."""
	if subcommand_query == 'aliases':
		for alias in COMMAND_ALIASES:
			click.echo(alias)
		return
	if subcommand_query == 'description':
		click.echo(DESCRIPTION)
		return
	if subcommand_query:
		raise click.BadParameter(f"unknown query '{subcommand_query}'", param_hint='--subcommand_query')
	click.echo('Hello from Dummy')
	for arg in positional:
		click.echo(f'  posarg: {arg}')

def main():  # pragma: no cover - thin wrapper
	cli()

if __name__ == '__main__':  # pragma: no cover
	main()
