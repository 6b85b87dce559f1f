import argparse
import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from launchscreen.assets import ImageFetcher
from launchscreen.config import Settings
from launchscreen.core import LaunchScreenPipeline
from launchscreen.errors import LaunchScreenError
from launchscreen.manifest import load_manifest
from launchscreen.tools import IbtoolCompiler
from launchscreen.workspace import ServiceContext, UserContext


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Configure the iOS launch screen for an app build from its manifest."
    )
    parser.add_argument(
        "--manifest",
        type=Path,
        required=True,
        help="Path to the app manifest JSON file.",
    )
    parser.add_argument(
        "--context",
        choices=["user", "service"],
        default="user",
        help="Build context: a developer's own project or a build service workspace.",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=Path("."),
        help="Project root (user) or iOS workspace directory (service).",
    )
    parser.add_argument(
        "--project-name",
        default=None,
        help="Name of the Xcode project directory.",
    )
    parser.add_argument(
        "--source-path",
        type=Path,
        default=None,
        help="Source tree holding the shared view template (service builds only).",
    )
    parser.add_argument(
        "--intermediates-dir",
        type=Path,
        default=None,
        help="Scratch directory for intermediate files.",
    )
    return parser.parse_args(argv)


def build_context(args: argparse.Namespace):
    if args.context == "user":
        if not args.project_name:
            raise SystemExit("Error: --project-name is required for user builds")
        return UserContext(project_dir=args.project_dir, project_name=args.project_name)

    if args.source_path is None:
        raise SystemExit("Error: --source-path is required for service builds")
    if args.project_name:
        return ServiceContext(
            workspace_dir=args.project_dir,
            source_path=args.source_path,
            project_name=args.project_name,
        )
    return ServiceContext(workspace_dir=args.project_dir, source_path=args.source_path)


def main(argv=None) -> int:
    # Pick up LAUNCHSCREEN_* settings from a local .env file if present.
    load_dotenv()
    settings = Settings.from_env()

    args = parse_args(argv)
    context = build_context(args)
    intermediates_dir = args.intermediates_dir or args.project_dir / "build" / "intermediates"

    pipeline = LaunchScreenPipeline(
        context,
        intermediates_dir,
        fetcher=ImageFetcher(timeout=settings.fetch_timeout),
        compiler=IbtoolCompiler(ibtool=settings.ibtool),
        platform=settings.platform,
    )

    try:
        manifest = load_manifest(args.manifest)
        result = asyncio.run(pipeline.run(manifest))
    except (LaunchScreenError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    print(result.artifact_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
