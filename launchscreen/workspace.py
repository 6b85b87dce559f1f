"""
Build contexts and the iOS workspace layout they imply.

A build is either a developer's own project (`UserContext`) or a build
service workspace that takes its templates from a shared source tree
(`ServiceContext`).
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Union


LAUNCH_SCREEN_XIB = "LaunchScreen.xib"
LAUNCH_SCREEN_NIB = "LaunchScreen.nib"


@dataclass(frozen=True)
class UserContext:
    project_dir: Path
    project_name: str

    @property
    def type(self) -> Literal["user"]:
        return "user"


@dataclass(frozen=True)
class ServiceContext:
    workspace_dir: Path
    # Root of the source checkout that holds the shared view template.
    source_path: Path
    project_name: str = "ExpoKitApp"

    @property
    def type(self) -> Literal["service"]:
        return "service"


BuildContext = Union[UserContext, ServiceContext]


@dataclass(frozen=True)
class WorkspacePaths:
    ios_dir: Path
    project_dir: Path
    supporting_dir: Path

    @property
    def launch_screen_template(self) -> Path:
        return self.supporting_dir / LAUNCH_SCREEN_XIB

    @property
    def compiled_launch_screen(self) -> Path:
        return self.supporting_dir / "Base.lproj" / LAUNCH_SCREEN_NIB


def get_workspace_paths(context: BuildContext) -> WorkspacePaths:
    if isinstance(context, UserContext):
        ios_dir = context.project_dir / "ios"
    else:
        ios_dir = context.workspace_dir
    project_dir = ios_dir / context.project_name
    return WorkspacePaths(
        ios_dir=ios_dir,
        project_dir=project_dir,
        supporting_dir=project_dir / "Supporting",
    )


def shared_template_path(context: ServiceContext) -> Path:
    """Launch screen xib of the shared view template, next to `source_path`."""
    template_root = context.source_path / ".." / "exponent-view-template" / "ios"
    return template_root / "exponent-view-template" / "Supporting" / LAUNCH_SCREEN_XIB
