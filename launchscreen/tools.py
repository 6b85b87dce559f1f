"""
Filesystem and native tool helpers used by the launch screen pipeline.
"""

import asyncio
import shutil
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_IBTOOL
from .errors import ToolError


def ensure_directory(path: Path) -> None:
    # Raises FileExistsError if a regular file is in the way.
    path.mkdir(parents=True, exist_ok=True)


async def copy_file(src: Path, dst: Path) -> None:
    await asyncio.to_thread(shutil.copyfile, src, dst)


async def transform_file_contents(path: Path, transform) -> None:
    """Read `path`, pass its bytes through `transform`, and write the result back."""
    data = await asyncio.to_thread(path.read_bytes)
    await asyncio.to_thread(path.write_bytes, transform(data))


@dataclass
class IbtoolCompiler:
    """
    Compiles xib files to nib with Xcode's `ibtool`.

    Only available on macOS with Xcode installed; a missing binary surfaces
    as a ToolError like any other failed invocation.
    """

    ibtool: str = DEFAULT_IBTOOL

    async def compile(self, src: Path, dest: Path) -> None:
        command = [self.ibtool, "--compile", str(dest), str(src)]
        print(f"🔨 Compiling {src.name} -> {dest}")
        ensure_directory(dest.parent)

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ToolError(command, 127, f"{self.ibtool} not found") from e

        _, stderr = await process.communicate()
        if process.returncode != 0:
            raise ToolError(command, process.returncode, stderr.decode("utf-8", "replace"))
