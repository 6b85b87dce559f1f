import json
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import FormatError


Manifest = Dict[str, Any]


def load_manifest(path: Path) -> Manifest:
    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise FormatError(f"Manifest is not valid JSON: {e}", source=str(path)) from e

    if not isinstance(data, dict):
        raise FormatError("Manifest must be a JSON object", source=str(path))
    return data


def _raw_splash(container: Any) -> Optional[Dict[str, Any]]:
    if not isinstance(container, dict):
        return None
    splash = container.get("splash")
    return splash if isinstance(splash, dict) else None


def _splash_section(container: Any) -> Dict[str, Any]:
    return _raw_splash(container) or {}


def platform_splash(manifest: Optional[Manifest], platform: str) -> Dict[str, Any]:
    """Return `manifest[platform]["splash"]`, or an empty dict."""
    if not manifest:
        return {}
    return _splash_section(manifest.get(platform))


def shared_splash(manifest: Optional[Manifest]) -> Dict[str, Any]:
    """Return the top-level `manifest["splash"]`, or an empty dict."""
    return _splash_section(manifest)


def get_splash_value(manifest: Optional[Manifest], key: str, platform: str) -> Optional[Any]:
    """
    Look up a splash field, preferring the platform-scoped section and falling
    back to the shared one. Empty values count as unset.
    """
    value = platform_splash(manifest, platform).get(key)
    if value:
        return value
    value = shared_splash(manifest).get(key)
    return value or None


def manifest_uses_splash_api(manifest: Optional[Manifest], platform: str) -> bool:
    """A `splash` object, even an empty one, at either level opts in."""
    if _raw_splash(manifest) is not None:
        return True
    return bool(manifest) and _raw_splash(manifest.get(platform)) is not None
