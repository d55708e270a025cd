import json
from typing import Any, List, Optional
import httpx
import pytest

VIDEO_ID = "dQw4w9WgXcQ"
VIDEO_URL = f"https://www.youtube.com/watch?v={VIDEO_ID}"
API_KEY = "XYZ123"
CAPTION_MARKUP = '<p t="0" d="1500">Hello &#39;world&#39;</p><p t="1500" d="2000">Bye</p>'

def caption_url(lang: str) -> str:
    return f"https://www.youtube.com/api/timedtext?v={VIDEO_ID}&lang={lang}"

def player_payload(languages=("en", "fr"), reason: Optional[str] = None) -> dict:
    payload: dict = {
        "playabilityStatus": {"status": "OK"},
        "captions": {
            "playerCaptionsTracklistRenderer": {
                "captionTracks": [
                    {"baseUrl": caption_url(lang), "languageCode": lang, "name": {"simpleText": lang.upper()}}
                    for lang in languages
                ]
            }
        },
    }
    if reason is not None:
        payload["playabilityStatus"] = {"status": "LOGIN_REQUIRED", "reason": reason}
    return payload

class FakeYouTube:
    """Stands in for youtube.com behind an ``httpx.MockTransport``."""

    def __init__(self):
        self.page = f'<html><script>ytcfg.set({{"INNERTUBE_API_KEY":"{API_KEY}","X":"y"}})</script></html>'
        self.page_status = 200
        self.player: Any = player_payload()
        self.player_status = 200
        self.captions = CAPTION_MARKUP
        self.caption_status = 200
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/youtubei/v1/player":
            if isinstance(self.player, (dict, list)):
                return httpx.Response(self.player_status, json=self.player)
            return httpx.Response(self.player_status, text=str(self.player))
        if request.url.path == "/api/timedtext":
            return httpx.Response(self.caption_status, text=self.captions)
        return httpx.Response(self.page_status, text=self.page)

    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]

    def player_body(self) -> dict:
        request = next(r for r in self.requests if r.url.path == "/youtubei/v1/player")
        return json.loads(request.content)

@pytest.fixture
def fake_youtube() -> FakeYouTube:
    return FakeYouTube()

@pytest.fixture
def transport(fake_youtube) -> httpx.MockTransport:
    return httpx.MockTransport(fake_youtube)
