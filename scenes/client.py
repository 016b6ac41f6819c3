"""Scene-description fetch for renderers, with a deterministic fallback."""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from canon.index import CanonIndex
from config.exceptions import SceneFetchError, ScripturaError
from models.enums import Theme

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_THEME_COLORS = {
    Theme.CREATION: "#223355",
    Theme.WILDERNESS: "#dcb159",
    Theme.KINGDOM: "#7a5c2e",
    Theme.WISDOM: "#4a6b5d",
    Theme.PROPHECY: "#8b2e2e",
    Theme.GOSPEL: "#ffddaa",
    Theme.CHURCH: "#44aaff",
    Theme.REVELATION: "#5b2a86",
}
_FALLBACK_COLOR = "#202025"


@dataclass(frozen=True)
class SceneDescription:
    summary: str
    color: Optional[str] = None
    geometry: Optional[str] = None
    audio_url: Optional[str] = None
    video_url: Optional[str] = None
    is_fallback: bool = False


def fallback_scene(book: str, chapter: int, theme: Optional[Theme] = None) -> SceneDescription:
    """Clearly-labeled default payload used whenever the fetch fails."""
    return SceneDescription(
        summary=f"Scene unavailable: {book} {chapter}",
        color=_THEME_COLORS.get(theme, _FALLBACK_COLOR),
        is_fallback=True,
    )


def _parse_scene(data) -> SceneDescription:
    if not isinstance(data, dict):
        raise SceneFetchError("Scene payload is not an object", {"type": type(data).__name__})
    summary = data.get("summary")
    if not isinstance(summary, str) or not summary.strip():
        raise SceneFetchError("Scene payload has no summary")

    def _opt(key: str) -> Optional[str]:
        value = data.get(key)
        return value if isinstance(value, str) and value else None

    return SceneDescription(
        summary=summary.strip(),
        color=_opt("color"),
        geometry=_opt("geometry"),
        audio_url=_opt("audio_url") or _opt("audioUrl"),
        video_url=_opt("video_url") or _opt("videoUrl"),
    )


class SceneClient:
    """Fetches scene descriptions for (book, chapter) pairs.

    Every failure (network, HTTP status, bad JSON, missing summary) is logged
    and replaced by ``fallback_scene``; ``fetch`` never raises for them.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        canon: Optional[CanonIndex] = None,
        session: Optional[requests.Session] = None,
    ):
        self.endpoint = endpoint
        self.timeout = timeout
        self.canon = canon or CanonIndex()
        self.session = session or requests.Session()

    def _theme_for(self, book: str) -> Optional[Theme]:
        try:
            return self.canon.get_book(book).theme
        except ScripturaError:
            return None

    def _request(self, book: str, chapter: int) -> SceneDescription:
        try:
            response = self.session.get(
                self.endpoint,
                params={"book": book, "chapter": chapter},
                timeout=self.timeout,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise SceneFetchError("Scene request failed", {"book": book, "chapter": chapter, "error": e}) from e
        except ValueError as e:
            raise SceneFetchError("Scene response is not JSON", {"book": book, "chapter": chapter}) from e
        return _parse_scene(data)

    def fetch(self, book: str, chapter: int) -> SceneDescription:
        """Return the scene for ``book`` (canon display name) and 1-based ``chapter``."""
        # Validates the pair; invalid input is a caller error, not a fetch failure
        self.canon.unit_id(book, chapter)

        if not self.endpoint:
            logger.debug("No scene endpoint configured, using fallback for %s %d", book, chapter)
            return fallback_scene(book, chapter, self._theme_for(book))

        try:
            scene = self._request(book, chapter)
        except SceneFetchError as e:
            logger.warning("Scene fetch failed, using fallback: %s", e)
            return fallback_scene(book, chapter, self._theme_for(book))

        logger.info("Fetched scene for %s %d", book, chapter)
        return scene
