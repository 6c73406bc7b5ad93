"""Validate passwords against the configured rule set."""

import json
import sys

import click
from rich.markup import escape

from strongpass.config_runtime import build_validator, load_runtime_config
from strongpass.rules import RULE_REGISTRY
from strongpass.ui import console, print_error, print_success, print_warning
from strongpass.utils.error_handler import handle_exceptions
from strongpass.utils.exit_codes import ExitCodes
from strongpass.utils.logging import logger
from strongpass.validator import ValidationResult


def _apply_overrides(cfg, rule_names, span_length, repetition_length, min_length, min_strength):
    """Layer command-line options over the loaded configuration."""
    rules = cfg["rules"]
    if rule_names:
        for name in RULE_REGISTRY:
            rules[name] = name in rule_names
    if span_length is not None:
        rules["span_length"] = span_length
    if repetition_length is not None:
        rules["repetition_length"] = repetition_length
    if min_length is not None:
        rules["min_length"] = min_length
    if min_strength is not None:
        cfg["policy"]["min_strength"] = min_strength
    return cfg


def _render(index: int, result: ValidationResult, min_strength: float) -> None:
    console.print(
        f"[bold]Password {index}[/bold]  strength: [info]{result.strength:.2f}[/info] bits",
        highlight=False,
    )
    for message in result.errors:
        print_error(escape(message))
    for message in result.warnings:
        print_warning(escape(message))
    if result.strength < min_strength:
        print_warning(f"Strength {result.strength:.2f} is below the required {min_strength:.2f} bits")
    if not result.has_errors and result.strength >= min_strength:
        print_success("No rule violations")


@click.command("check")
@click.argument("password", required=False)
@click.option(
    "--rule",
    "rule_names",
    multiple=True,
    type=click.Choice(list(RULE_REGISTRY)),
    help="Rule to enable (repeatable). Default: rules enabled in configuration",
)
@click.option("--span-length", type=click.IntRange(min=1), help="Window length for the easy span rule")
@click.option(
    "--repetition-length", type=click.IntRange(min=1), help="Unit length for the repetition rule"
)
@click.option("--min-length", type=click.IntRange(min=1), help="Minimum character count")
@click.option("--min-strength", type=float, help="Minimum acceptable strength in bits")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of formatted output")
@click.option("--project-path", default=".", help="Directory containing .strongpass/config.json")
@handle_exceptions
def check(password, rule_names, span_length, repetition_length, min_length, min_strength, as_json, project_path):
    """Check one or more passwords for common weaknesses.

    With a PASSWORD argument, checks that password. Without one, reads
    passwords from stdin, one per line.

    \b
    EXAMPLES:
      strongpass check 'correct horse battery staple'
      strongpass check --rule minimum_length --min-length 12 hunter2
      cat candidates.txt | strongpass check --json

    \b
    EXIT CODES:
      0 = Every password passed
      1 = At least one rule reported a violation
      2 = No violations, but a strength estimate was below --min-strength
      3 = Command could not run (for example, an internal error)
    """
    cfg = load_runtime_config(project_path)
    cfg = _apply_overrides(cfg, rule_names, span_length, repetition_length, min_length, min_strength)
    threshold = cfg["policy"]["min_strength"]
    validator = build_validator(cfg).freeze()

    if password is not None:
        passwords = [password]
    else:
        stdin = click.get_text_stream("stdin")
        passwords = [line.rstrip("\r\n") for line in stdin]

    logger.debug(
        "Checking {count} passwords with {rules} rules",
        count=len(passwords),
        rules=len(validator.rules),
    )

    results = [validator.validate(pw) for pw in passwords]

    if as_json:
        if password is not None:
            click.echo(json.dumps(results[0].to_dict()))
        else:
            for result in results:
                click.echo(json.dumps(result.to_dict()))
    else:
        for index, result in enumerate(results, start=1):
            _render(index, result, threshold)

    if any(result.has_errors for result in results):
        exit_code = ExitCodes.VALIDATION_FAILED
    elif any(result.strength < threshold for result in results):
        exit_code = ExitCodes.WEAK_PASSWORD
    else:
        exit_code = ExitCodes.SUCCESS

    if exit_code != ExitCodes.SUCCESS:
        logger.info(ExitCodes.get_description(exit_code))
    sys.exit(exit_code)
