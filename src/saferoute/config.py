"""SafeURL configuration.

SafeURLConfig is a frozen dataclass — immutable after creation, shared
safely between instances.
"""

import os
from dataclasses import dataclass

from saferoute.logger import LogLevel

# Environment variable gating log output, like NODE_ENV for browser builds
ENV_VAR = "SAFEROUTE_ENV"


@dataclass(frozen=True, slots=True)
class SafeURLConfig:
    """Logging defaults applied to every ``SafeURL``. Immutable after creation.

    Override what you need::

        config = SafeURLConfig(log_level="warn")
        url = SafeURL("/users/:id", base_url="https://example.com", config=config)
    """

    log_scope: str = "Safe URL"
    log_level: LogLevel = "all"
    logging_enabled: bool = True

    @classmethod
    def from_env(cls) -> "SafeURLConfig":
        """Build the default config from ``SAFEROUTE_ENV``.

        Logging stays on when the variable is unset, empty or
        ``development``; any other environment silences it.
        """
        env = os.environ.get(ENV_VAR, "").strip().lower()
        return cls(logging_enabled=env in ("", "development"))
