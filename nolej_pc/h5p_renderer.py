"""
H5P player adapter.

Activities are played by the H5P server; the page only embeds them, either
with an iframe or by inlining the markup served by the player.
"""
import requests
import structlog
from markupsafe import Markup, escape

from nolej_pc.constants import H5P_MODE_IFRAME, H5P_MODE_INLINE

logger = structlog.get_logger('h5p')


class H5PRenderer:
    def __init__(self, base_url: str, mode: str = H5P_MODE_IFRAME, timeout: int = 10, fallback: str = "Activity not found!"):
        self.base_url = (base_url or "").rstrip("/")
        self.mode = mode
        self.timeout = timeout
        self.fallback = fallback

    @classmethod
    def from_settings(cls, settings, fallback="Activity not found!"):
        h5p = settings.get("h5p", {})
        return cls(
            base_url=h5p.get("base_url", ""),
            mode=h5p.get("mode", H5P_MODE_IFRAME),
            timeout=h5p.get("timeout", 10),
            fallback=fallback,
        )

    def get_play_url(self, content_id: int) -> str:
        return f"{self.base_url}/play/{int(content_id)}"

    def get_html(self, content_id: int) -> str:
        if self.mode == H5P_MODE_INLINE:
            return self._fetch_html(content_id)

        return Markup(
            '<div class="h5p-activity" data-content-id="{id}">'
            '<iframe src="{src}" class="h5p-iframe" width="100%" height="600" '
            'frameborder="0" allowfullscreen="allowfullscreen"></iframe></div>'
        ).format(id=int(content_id), src=self.get_play_url(content_id))

    def _fetch_html(self, content_id: int) -> str:
        url = f"{self.base_url}/html/{int(content_id)}"
        try:
            response = requests.get(url, timeout=self.timeout)
            response.raise_for_status()
            return Markup(response.text)
        except requests.RequestException as e:
            logger.error(f"Failed to fetch H5P content {content_id} from {url}: {e}")
            return Markup("<p>{}</p>").format(escape(self.fallback))
