"""List the built-in password rules."""

import click
from rich.table import Table

from strongpass.rules import STANDARD_RULES
from strongpass.ui import console, print_header


@click.command("rules")
def rules_command():
    """List built-in rules with their default parameters.

    Rules are shown in standard bundle order, which is also the order their
    messages appear in when several fire on the same password.
    """
    print_header("RULES")

    table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
    table.add_column("Rule", style="cmd")
    table.add_column("Defaults", style="dim")
    table.add_column("Description", style="white")

    for rule_class in STANDARD_RULES:
        rule = rule_class()
        defaults = ", ".join(f"{key}={value}" for key, value in rule.parameters().items())
        table.add_row(rule.name, defaults or "-", rule.description)

    console.print(table)
