from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .assets import ImageFetcher, ImageOutput, provision_background_images
from .document import (
    apply_background_color,
    apply_content_mode,
    parse_document,
    serialize_document,
)
from .manifest import Manifest, manifest_uses_splash_api
from .render import resolve_background_color, resolve_resize_mode
from .tools import IbtoolCompiler, copy_file, ensure_directory, transform_file_contents
from .workspace import (
    LAUNCH_SCREEN_XIB,
    BuildContext,
    UserContext,
    get_workspace_paths,
    shared_template_path,
)


DEFAULT_BACKGROUND_COLOR = "#FFFFFF"

# Node ids fixed by the LaunchScreen.xib template.
BACKGROUND_VIEW_ID = "OfY-5Y-tS4"
BACKGROUND_IMAGE_VIEW_ID = "Bsh-cT-K4l"


@dataclass
class LaunchScreenResult:
    artifact_path: Path
    customized: bool
    images: List[ImageOutput] = field(default_factory=list)


class LaunchScreenPipeline:
    """
    Configures the iOS launch screen for one build:
    - copy the LaunchScreen.xib template into the intermediates directory
    - if the manifest uses the splash API:
        * set background color and image content mode in the xib
        * save the background image(s) into the Supporting directory
    - copy the xib into Supporting (user builds) or compile it to a nib
      (service builds)
    """

    def __init__(
        self,
        context: BuildContext,
        intermediates_dir: Path,
        fetcher: Optional[ImageFetcher] = None,
        compiler: Optional[IbtoolCompiler] = None,
        platform: str = "ios",
    ) -> None:
        self.context = context
        self.intermediates_dir = intermediates_dir
        self.fetcher = fetcher or ImageFetcher()
        self.compiler = compiler or IbtoolCompiler()
        self.platform = platform
        self.paths = get_workspace_paths(context)

    @property
    def intermediate_template(self) -> Path:
        return self.intermediates_dir / LAUNCH_SCREEN_XIB

    async def run(self, manifest: Manifest) -> LaunchScreenResult:
        print("🚀 Configuring iOS Launch Screen...")

        ensure_directory(self.intermediates_dir)
        await copy_file(self._template_source(), self.intermediate_template)

        customized = manifest_uses_splash_api(manifest, self.platform)
        images: List[ImageOutput] = []
        if customized:
            await transform_file_contents(
                self.intermediate_template,
                lambda data: self._customize_document(manifest, data),
            )
            images = await provision_background_images(
                manifest,
                self.paths.supporting_dir,
                self.fetcher,
                platform=self.platform,
            )

        artifact_path = await self._finalize()
        print(f"✅ Launch screen written to {artifact_path}")
        return LaunchScreenResult(artifact_path=artifact_path, customized=customized, images=images)

    def _template_source(self) -> Path:
        if isinstance(self.context, UserContext):
            return self.paths.launch_screen_template
        # TODO: read the template from the service workspace itself once it
        # ships its own copy, instead of the shared source tree.
        return shared_template_path(self.context)

    def _customize_document(self, manifest: Manifest, data: bytes) -> bytes:
        tree = parse_document(data, source=str(self.intermediate_template))

        rgb = resolve_background_color(manifest, DEFAULT_BACKGROUND_COLOR, self.platform)
        apply_background_color(tree, rgb, BACKGROUND_VIEW_ID)

        mode = resolve_resize_mode(manifest, self.platform)
        apply_content_mode(tree, mode, BACKGROUND_IMAGE_VIEW_ID)

        return serialize_document(tree)

    async def _finalize(self) -> Path:
        if isinstance(self.context, UserContext):
            output_path = self.paths.launch_screen_template
            await copy_file(self.intermediate_template, output_path)
        else:
            output_path = self.paths.compiled_launch_screen
            await self.compiler.compile(self.intermediate_template, output_path)
        return output_path


async def configure_launch_screen(
    context: BuildContext,
    manifest: Manifest,
    intermediates_dir: Path,
    **kwargs,
) -> LaunchScreenResult:
    """Convenience wrapper: build a pipeline and run it once."""
    return await LaunchScreenPipeline(context, intermediates_dir, **kwargs).run(manifest)
