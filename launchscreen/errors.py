from typing import Optional, Sequence


class LaunchScreenError(Exception):
    """Base class for failures raised while configuring the launch screen."""


class ConfigParseError(LaunchScreenError, ValueError):
    """A manifest value could not be parsed (e.g. a malformed hex color)."""


class FormatError(LaunchScreenError):
    """
    A document or image payload could not be decoded.

    `source` names the file path or URL the payload came from, when known.
    """

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class NetworkError(LaunchScreenError):
    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to download {url}: {reason}")


class ToolError(LaunchScreenError):
    """
    An external tool exited with a non-zero status.

    The full command line, exit code and captured stderr are kept so the
    caller can report them.
    """

    def __init__(self, command: Sequence[str], returncode: int, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        message = f"`{' '.join(self.command)}` exited with status {returncode}"
        if stderr:
            message += f": {stderr.strip()}"
        super().__init__(message)
