"""
Configuration for PwnedCheck.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from pwnedcheck import __version__

DEFAULT_INPUT_FILE = "passwords.txt"


@dataclass
class PwnedCheckConfig:
    """Runtime configuration, from environment variables and CLI flags."""

    # Range API
    api_url: str = "https://api.pwnedpasswords.com"
    user_agent: str = f"PwnedCheck/{__version__}"
    add_padding: bool = False

    # Input
    input_file: str | Path = DEFAULT_INPUT_FILE
    is_hashed: bool = False

    # Output
    hide_password: bool = False
    show_stats: bool = False

    @classmethod
    def from_env(cls) -> "PwnedCheckConfig":
        """Load configuration from environment variables."""
        return cls(
            api_url=os.environ.get("PWNEDCHECK_API_URL", cls.api_url),
            user_agent=os.environ.get("PWNEDCHECK_USER_AGENT", cls.user_agent),
            add_padding=os.environ.get("PWNEDCHECK_ADD_PADDING", "").lower() in ("true", "yes", "1"),
        )

    @property
    def uses_default_input(self) -> bool:
        """Check if the input file was left at its default."""
        return str(self.input_file) == DEFAULT_INPUT_FILE
