"""
config.py - Runtime settings for the Connect Four interfaces

Board dimensions are fixed in connect4.utils. The values here only affect
how a session is set up: player names, who opens the next game after a win,
logging, and where the browser interface listens. Defaults can be changed
through CONNECT4_* environment variables and command-line arguments
override both.
"""

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from connect4.debug import debug

ENV_PREFIX = "CONNECT4_"

TRUE_STRINGS = {"1", "true", "yes", "on"}
FALSE_STRINGS = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


@dataclass(frozen=True)
class Settings:
    """Session settings shared by the CLI and the web interface."""
    player_one_name: str = "Player One"
    player_two_name: str = "Player Two"
    winner_starts_next: bool = True
    debug_level: str = "warning"
    log_file: Optional[str] = None
    host: str = "127.0.0.1"
    port: int = 5000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> 'Settings':
        """
        Build settings from CONNECT4_* environment variables.

        Recognised variables: CONNECT4_PLAYER_ONE, CONNECT4_PLAYER_TWO,
        CONNECT4_WINNER_STARTS_NEXT, CONNECT4_DEBUG_LEVEL, CONNECT4_LOG_FILE,
        CONNECT4_HOST and CONNECT4_PORT.

        Raises:
            ValueError: if a boolean or integer variable cannot be parsed
        """
        environ = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str) -> Optional[str]:
            value = environ.get(ENV_PREFIX + name)
            return value if value not in (None, "") else None

        winner_starts = get("WINNER_STARTS_NEXT")
        port = get("PORT")

        return cls(
            player_one_name=get("PLAYER_ONE") or defaults.player_one_name,
            player_two_name=get("PLAYER_TWO") or defaults.player_two_name,
            winner_starts_next=(parse_bool(winner_starts) if winner_starts is not None
                                else defaults.winner_starts_next),
            debug_level=get("DEBUG_LEVEL") or defaults.debug_level,
            log_file=get("LOG_FILE") or defaults.log_file,
            host=get("HOST") or defaults.host,
            port=int(port) if port is not None else defaults.port,
        )

    def override(self, **changes) -> 'Settings':
        """Return a copy with every non-None keyword applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def apply_logging(self) -> None:
        """Push the logging settings into the shared debug manager."""
        debug.set_from_string(self.debug_level)
        if self.log_file:
            debug.configure(log_file=self.log_file)
