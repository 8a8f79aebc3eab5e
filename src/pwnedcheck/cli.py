"""
PwnedCheck CLI - Main entry point for the command-line interface.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import logging
from pathlib import Path
from typing import Iterator

import click
from rich.console import Console
from rich.markup import escape

from pwnedcheck import __version__
from pwnedcheck.config import PwnedCheckConfig
from pwnedcheck.hibp.client import PwnedPasswordsClient
from pwnedcheck.hibp.models import Candidate, CandidateSource
from pwnedcheck.report import Statistics, report_result

console = Console()

CREDITS = (
    "PwnedCheck\n"
    "by Mohamed\n"
    "Real Work is done by Troy Hunt and the HIBP API and everyone else who contributed to it."
)


def read_candidates(path: Path) -> Iterator[Candidate]:
    """Yield non-blank, stripped lines of a file as candidates.

    Line numbers count every physical line, blank ones included.
    """
    with path.open("r", encoding="utf-8", errors="surrogateescape") as f:
        for line_number, line in enumerate(f, start=1):
            value = line.strip()
            if not value:
                continue
            yield Candidate(value=value, source=CandidateSource.FILE, position=line_number)


def run_checks(
    client: PwnedPasswordsClient,
    candidates,
    config: PwnedCheckConfig,
    stats: Statistics,
    total: int | None = None,
) -> None:
    """Check candidates one after another, reporting each result."""
    for candidate in candidates:
        if candidate.source == CandidateSource.ARGUMENT:
            console.print(f"\nChecking password {candidate.position} of {total}:")

        result = client.check_candidate(candidate, already_hashed=config.is_hashed)
        report_result(console, result, hide_password=config.hide_password)
        stats.record(result)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("passwords", nargs=-1)
@click.option(
    "--input-file", "-i",
    default="passwords.txt",
    show_default=True,
    type=click.Path(path_type=Path),
    help="Input file containing passwords to check",
)
@click.option("--hashed", is_flag=True, help="Indicate that the input file or provided password is already hashed")
@click.option("--hide", "hide_password", is_flag=True, help="Hide passwords in output")
@click.option("--stats", "show_stats", is_flag=True, help="Show statistics after completion")
@click.option("--credits", "-c", "show_credits", is_flag=True, help="Show credits")
@click.option("--api-url", envvar="PWNEDCHECK_API_URL", help="Pwned Passwords API base URL")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="pwnedcheck")
@click.pass_context
def main(
    ctx: click.Context,
    passwords: tuple[str, ...],
    input_file: Path,
    hashed: bool,
    hide_password: bool,
    show_stats: bool,
    show_credits: bool,
    api_url: str | None,
    verbose: bool,
) -> None:
    """PwnedCheck - check passwords against Have I Been Pwned.

    Uses k-anonymity - only the first 5 characters of each SHA-1 hash
    are sent to the API. Passwords given as arguments are checked first;
    otherwise each line of the input file is checked.

    Example:
        pwnedcheck hunter2 correcthorsebatterystaple
        pwnedcheck -i hashes.txt --hashed --hide --stats
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if show_credits:
        console.print(CREDITS)
        return

    config = PwnedCheckConfig.from_env()
    if api_url:
        config.api_url = api_url
    config.input_file = input_file
    config.is_hashed = hashed
    config.hide_password = hide_password
    config.show_stats = show_stats

    stats = Statistics()

    if passwords:
        candidates = [
            Candidate(value=p, source=CandidateSource.ARGUMENT, position=i)
            for i, p in enumerate(passwords, start=1)
        ]
        with PwnedPasswordsClient.from_config(config) as client:
            run_checks(client, candidates, config, stats, total=len(candidates))
    else:
        path = Path(config.input_file)
        if not path.exists() and config.uses_default_input:
            console.print("[yellow]Default passwords file not found[/yellow]\n")
            click.echo(ctx.get_help())
            return

        try:
            with PwnedPasswordsClient.from_config(config) as client:
                run_checks(client, read_candidates(path), config, stats)
        except OSError as e:
            console.print(f"[red]Error opening file: {escape(str(e))}[/red]")

    if config.show_stats:
        stats.print_summary(console)


if __name__ == "__main__":
    main()
