"""strongpass CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - Intentional lazy loading: commands imported after cli group definition

import click

from strongpass import __version__
from strongpass.utils.logging import set_log_level


@click.group()
@click.version_option(version=__version__, prog_name="strongpass")
@click.help_option("-h", "--help")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
def cli(verbose):
    """strongpass - heuristic password policy checks.

    \b
    QUICK START:
      strongpass check 'my password'    # Validate one password
      strongpass rules                  # List available rules
    """
    if verbose:
        set_log_level("DEBUG")


from strongpass.commands.check import check
from strongpass.commands.rules import rules_command

cli.add_command(check)
cli.add_command(rules_command)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
