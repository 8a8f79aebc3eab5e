"""
Console reporting and run statistics.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import time
from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape

from pwnedcheck.hibp.models import CandidateSource, CheckResult, Verdict


@dataclass
class Statistics:
    """Counts of checked passwords for one run."""

    start_time: float = field(default_factory=time.monotonic)
    bad_passwords: int = 0
    good_passwords: int = 0
    unknown_passwords: int = 0
    total_checked: int = 0

    def record(self, result: CheckResult) -> None:
        if result.verdict == Verdict.EXPOSED:
            self.bad_passwords += 1
        elif result.verdict == Verdict.CLEAR:
            self.good_passwords += 1
        else:
            self.unknown_passwords += 1
        self.total_checked += 1

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.start_time

    def print_summary(self, console: Console) -> None:
        console.print(f"\nTotal runtime: {self.elapsed:.3f}s")
        console.print(f"Total passwords checked: {self.total_checked}")
        console.print(f"[red]Bad passwords found: {self.bad_passwords}[/red]")
        console.print(f"[green]Good passwords: {self.good_passwords}[/green]")
        if self.unknown_passwords:
            console.print(f"[yellow]Could not check: {self.unknown_passwords}[/yellow]")


def report_result(console: Console, result: CheckResult, hide_password: bool = False) -> None:
    """Print the outcome for one candidate.

    File candidates only report exposures; argument candidates always
    report a verdict.
    """
    candidate = result.candidate
    password_line = f"Password: {escape(candidate.display_value)}"

    if result.is_unknown:
        console.print(
            f"[yellow]Could not check {candidate.display_origin}: {escape(result.error or 'unknown error')}[/yellow]"
        )
        return

    if candidate.source == CandidateSource.FILE:
        if result.is_exposed:
            console.print(f"[red]BAD PASSWORD FOUND ON LINE: {candidate.position}[/red]")
            if not hide_password:
                console.print(password_line)
        return

    if result.is_exposed:
        console.print("[red]BAD PASSWORD FOUND[/red]")
    else:
        console.print("[green]Good password[/green]")
    if not hide_password:
        console.print(password_line)
