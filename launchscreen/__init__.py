"""
Launch screen package for native iOS app builds.

Modules:
- core: pipeline orchestration
- render: background color and content mode resolution
- document: xib parsing and identifier-based mutation
- assets: background image planning and fetching
- workspace: build contexts and workspace layout
- tools: filesystem helpers and the ibtool compiler
"""

from .core import LaunchScreenPipeline, LaunchScreenResult, configure_launch_screen
from .workspace import ServiceContext, UserContext

__all__ = [
    "LaunchScreenPipeline",
    "LaunchScreenResult",
    "ServiceContext",
    "UserContext",
    "configure_launch_screen",
]
