import os
from dataclasses import dataclass


DEFAULT_IBTOOL = "ibtool"
DEFAULT_FETCH_TIMEOUT = 30.0
DEFAULT_PLATFORM = "ios"


@dataclass
class Settings:
    ibtool: str = DEFAULT_IBTOOL
    fetch_timeout: float = DEFAULT_FETCH_TIMEOUT
    platform: str = DEFAULT_PLATFORM

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment.

        Call `load_dotenv()` first if values should be picked up from a local
        .env file.
        """
        timeout = os.environ.get("LAUNCHSCREEN_FETCH_TIMEOUT")
        try:
            fetch_timeout = float(timeout) if timeout else DEFAULT_FETCH_TIMEOUT
        except ValueError:
            print(f"⚠️  Ignoring invalid LAUNCHSCREEN_FETCH_TIMEOUT={timeout!r}")
            fetch_timeout = DEFAULT_FETCH_TIMEOUT

        return cls(
            ibtool=os.environ.get("LAUNCHSCREEN_IBTOOL") or DEFAULT_IBTOOL,
            fetch_timeout=fetch_timeout,
            platform=os.environ.get("LAUNCHSCREEN_PLATFORM") or DEFAULT_PLATFORM,
        )
