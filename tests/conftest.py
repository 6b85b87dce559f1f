"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • launch_screen_xib  bytes of a minimal LaunchScreen.xib template
  • png_bytes          a small PNG image
  • user_workspace     a user project with the template in Supporting/
  • service_workspace  a service workspace plus shared template tree
  • fake_fetcher, fake_compiler, make_fetcher  collaborators that record their calls
"""

from __future__ import annotations

import io
import os
import sys
from pathlib import Path

import pytest
from PIL import Image

# Ensure the project root is on the path so `launchscreen` imports resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from launchscreen.workspace import (  # noqa: E402
    ServiceContext,
    UserContext,
    get_workspace_paths,
    shared_template_path,
)


LAUNCH_SCREEN_XIB = b"""<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<document type="com.apple.InterfaceBuilder3.CocoaTouch.XIB" version="3.0" toolsVersion="12121" targetRuntime="iOS.CocoaTouch" propertyAccessControl="none" useAutolayout="YES" launchScreen="YES" colorMatched="YES">
    <objects>
        <placeholder placeholderIdentifier="IBFilesOwner" id="-1" userLabel="File's Owner"/>
        <view contentMode="scaleToFill" id="OfY-5Y-tS4">
            <rect key="frame" x="0.0" y="0.0" width="375" height="667"/>
            <autoresizingMask key="autoresizingMask" widthSizable="YES" heightSizable="YES"/>
            <subviews>
                <imageView userInteractionEnabled="NO" contentMode="scaleAspectFit" image="launch_background_image.png" id="Bsh-cT-K4l">
                    <rect key="frame" x="0.0" y="0.0" width="375" height="667"/>
                    <color key="backgroundColor" red="0.5" green="0.5" blue="0.5" alpha="1" colorSpace="custom" customColorSpace="sRGB"/>
                </imageView>
            </subviews>
            <color key="tintColor" red="0.0" green="0.0" blue="0.0" alpha="1" colorSpace="custom" customColorSpace="sRGB"/>
            <color key="backgroundColor" red="1" green="1" blue="1" alpha="1" colorSpace="custom" customColorSpace="sRGB"/>
        </view>
    </objects>
    <resources>
        <image name="launch_background_image.png" width="1242" height="2436"/>
    </resources>
</document>
"""


class FakeFetcher:
    """Writes `payload` to every destination and records (base_dir, url, dest)."""

    def __init__(self, payload: bytes = b"image", fail_on=()):
        self.payload = payload
        self.fail_on = set(fail_on)
        self.calls = []

    async def fetch_and_save(self, base_dir, url, dest):
        self.calls.append((base_dir, url, dest))
        if url in self.fail_on:
            raise RuntimeError(f"boom: {url}")
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(self.payload)


class FakeCompiler:
    """Copies the source xib to the destination and records the call."""

    def __init__(self):
        self.calls = []

    async def compile(self, src, dest):
        self.calls.append((src, dest))
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(src.read_bytes())


@pytest.fixture
def launch_screen_xib() -> bytes:
    return LAUNCH_SCREEN_XIB


@pytest.fixture
def png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 8), color=(17, 34, 51)).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def user_workspace(tmp_path: Path, launch_screen_xib: bytes):
    context = UserContext(project_dir=tmp_path / "app", project_name="MyApp")
    paths = get_workspace_paths(context)
    paths.supporting_dir.mkdir(parents=True)
    paths.launch_screen_template.write_bytes(launch_screen_xib)
    return context, paths


@pytest.fixture
def service_workspace(tmp_path: Path, launch_screen_xib: bytes):
    context = ServiceContext(
        workspace_dir=tmp_path / "workspace" / "ios",
        source_path=tmp_path / "src" / "expo",
    )
    paths = get_workspace_paths(context)
    paths.supporting_dir.mkdir(parents=True)
    template = shared_template_path(context)
    template.parent.mkdir(parents=True)
    template.write_bytes(launch_screen_xib)
    return context, paths


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()


@pytest.fixture
def fake_compiler():
    return FakeCompiler()


@pytest.fixture
def make_fetcher():
    return FakeFetcher
