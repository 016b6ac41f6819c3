"""Scenes package — scene-description client used by renderers."""

from scenes.client import SceneClient, SceneDescription, fallback_scene

__all__ = [
    "SceneClient",
    "SceneDescription",
    "fallback_scene",
]
