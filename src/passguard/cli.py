"""Command-line interface for PassGuard.

This module provides commands for checking passwords against the
allowed character rule configured through settings or options.
"""

import json
from typing import NoReturn

import click
from pydantic import ValidationError

from passguard import __version__
from passguard.core.config import Settings, get_settings
from passguard.core.exceptions import InvalidConfigurationError
from passguard.core.logging import LoggingContext, configure_logging, get_logger
from passguard.domain.services import AllowedCharacterRule, MatchBehavior

# Exit codes
EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def _load_settings(ctx: click.Context) -> Settings:
    """Load settings and apply the group's log level override."""
    try:
        settings = get_settings()
    except ValidationError as e:
        click.echo(f"Error: invalid settings\n{e}", err=True)
        raise SystemExit(EXIT_CONFIG_ERROR)
    log_level = ctx.obj.get("log_level") if ctx.obj else None
    if log_level:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)
    return settings


@click.group()
@click.version_option(version=__version__, prog_name="PassGuard")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides settings)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """PassGuard - check passwords against an allowed character set.

    Rule defaults are read from PASSGUARD_* environment variables or a
    .env file; command options override them.
    """
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


@cli.command()
@click.argument("password", required=False)
@click.option(
    "--allowed",
    type=str,
    default=None,
    help="Allowed characters (overrides settings)",
)
@click.option(
    "--match-behavior",
    type=click.Choice([behavior.name.lower() for behavior in MatchBehavior]),
    default=None,
    help="Where a disallowed character must occur to be reported",
)
@click.option(
    "--report-first/--report-all",
    default=None,
    help="Stop at the first offending character or report all of them",
)
@click.option(
    "--enhanced/--no-enhanced",
    default=None,
    help="Use an error code specific to each offending character",
)
@click.pass_context
def check(
    ctx: click.Context,
    password: str | None,
    allowed: str | None,
    match_behavior: str | None,
    report_first: bool | None,
    enhanced: bool | None,
) -> None:
    """Check PASSWORD against the allowed character rule.

    Prints the rule result as JSON. Exits 0 when the password passes,
    1 when it contains disallowed characters and 2 when the rule
    configuration is invalid. Prompts for the password when omitted.
    """
    settings = _load_settings(ctx)
    logger = get_logger(__name__)

    with LoggingContext(command="check"):
        try:
            rule = AllowedCharacterRule(
                allowed if allowed is not None else settings.allowed_characters,
                match_behavior=match_behavior or settings.match_behavior,
                report_all_failures=(
                    settings.report_all_failures if report_first is None else not report_first
                ),
                enhanced_error_messages=(
                    settings.enhanced_error_messages if enhanced is None else enhanced
                ),
            )
        except InvalidConfigurationError as e:
            click.echo(f"Error: {e.message}", err=True)
            logger.error("Invalid rule configuration", error=e.message)
            raise SystemExit(EXIT_CONFIG_ERROR)

        if password is None:
            password = click.prompt("Password", hide_input=True)

        result = rule.validate(password)
        # Lone surrogates from undecodable argv bytes must stay escaped.
        click.echo(json.dumps(result.to_dict()))
        logger.debug(
            "Password checked",
            valid=result.valid,
            errors=len(result.details),
            match_behavior=rule.match_behavior.value,
        )

    raise SystemExit(EXIT_VALID if result.valid else EXIT_INVALID)


@cli.command()
@click.pass_context
def describe(ctx: click.Context) -> None:
    """Show the rule built from the current settings."""
    settings = _load_settings(ctx)
    logger = get_logger(__name__)

    try:
        rule = AllowedCharacterRule.from_settings(settings)
    except InvalidConfigurationError as e:
        click.echo(f"Error: {e.message}", err=True)
        logger.error("Invalid rule configuration", error=e.message)
        raise SystemExit(EXIT_CONFIG_ERROR)

    click.echo(repr(rule))


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `passguard` command is run
    or when using `python -m passguard`.
    """
    cli()
