import re
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional, Union
import httpx
from yt_transcript.core.source import TranscriptSource
from yt_transcript.models.options import RequestOptions
from yt_transcript.models.player import CaptionTrack, PlayerResponse, innertube_payload
from yt_transcript.models.transcript import TranscriptSegment
from yt_transcript.errors import (
    ACCEPTED_URL_FORMATS,
    BlockedByHost,
    InvalidUrl,
    LanguageNotAvailable,
    MissingApiKey,
    NoCaptionsAvailable,
    TranscriptFetchFailed,
)
from yt_transcript.utils.captions import render
from yt_transcript.utils.logger import logger
from yt_transcript.config import settings

VIDEO_ID_PATTERNS = [
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/v/([^&\n?#]+)"),
]
API_KEY_RE = re.compile(r'"INNERTUBE_API_KEY":"(.*?)"')

class YouTubeProvider(TranscriptSource):
    """Transcript source backed by the Innertube player API.

    Holds no state: every call builds (or borrows) its own HTTP client, so one
    provider can serve any number of concurrent requests.
    """

    def extract_video_id(self, url: str) -> str:
        for pattern in VIDEO_ID_PATTERNS:
            m = pattern.search(url)
            if m:
                return m.group(1)
        logger.warning(f"Could not extract video ID from URL: {url}")
        raise InvalidUrl(url, ACCEPTED_URL_FORMATS)

    async def fetch_page(self, client: httpx.AsyncClient, url: str) -> str:
        logger.debug(f"Fetching video page {url}")
        resp = await client.get(url)
        resp.raise_for_status()
        return resp.text

    def extract_api_key(self, html: str, url: str = "") -> str:
        m = API_KEY_RE.search(html)
        if not m:
            logger.warning("INNERTUBE_API_KEY not found in page; layout may have changed.")
            raise MissingApiKey(url)
        return m.group(1)

    async def fetch_caption_tracks(self, client: httpx.AsyncClient, video_id: str, api_key: str) -> List[CaptionTrack]:
        logger.debug(f"Requesting caption tracks for {video_id}")
        resp = await client.post(
            settings.INNERTUBE_PLAYER_URL,
            params={"key": api_key},
            json=innertube_payload(video_id, settings.INNERTUBE_CLIENT_NAME, settings.INNERTUBE_CLIENT_VERSION),
        )
        try:
            payload: Any = resp.json()
        except ValueError:
            payload = None
        player = PlayerResponse.from_payload(payload)

        reason = player.blocked_reason
        if reason and "bot" in reason:
            logger.warning(f"Blocked by YouTube for {video_id}: {reason}")
            raise BlockedByHost(video_id, reason)

        if resp.status_code != 200:
            logger.warning(f"Player API returned HTTP {resp.status_code} for {video_id}")
            raise TranscriptFetchFailed(resp.status_code, resp.reason_phrase, str(resp.url))

        tracks = player.caption_tracks
        if not tracks:
            logger.warning(f"No caption tracks for {video_id}")
            raise NoCaptionsAvailable(video_id)
        return tracks

    def select_track(self, tracks: List[CaptionTrack], language: str) -> CaptionTrack:
        matches = [t for t in tracks if t.language_code == language]
        if not matches:
            available = [t.language_code for t in tracks]
            logger.warning(f"No '{language}' transcript; available: {available}")
            raise LanguageNotAvailable(language, available)
        return matches[0]

    async def fetch_caption_payload(self, client: httpx.AsyncClient, track: CaptionTrack) -> str:
        logger.debug(f"Downloading '{track.language_code}' captions")
        resp = await client.get(track.base_url)
        if resp.status_code != 200:
            logger.warning(f"Caption download returned HTTP {resp.status_code}")
            raise TranscriptFetchFailed(resp.status_code, resp.reason_phrase, track.base_url)
        return resp.text

    @asynccontextmanager
    async def _session(self, options: RequestOptions, client: Optional[httpx.AsyncClient]) -> AsyncIterator[httpx.AsyncClient]:
        # A caller-owned client is already configured and stays open.
        if client is not None:
            yield client
            return
        async with httpx.AsyncClient(**options.transport_options()) as own_client:
            yield own_client

    async def _negotiate(self, client: httpx.AsyncClient, url: str, video_id: str) -> List[CaptionTrack]:
        html = await self.fetch_page(client, url)
        api_key = self.extract_api_key(html, url)
        return await self.fetch_caption_tracks(client, video_id, api_key)

    async def list_caption_tracks(
        self,
        url: str,
        options: Optional[RequestOptions] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> List[CaptionTrack]:
        options = options or RequestOptions()
        video_id = self.extract_video_id(url)
        async with self._session(options, client) as http:
            return await self._negotiate(http, url, video_id)

    async def fetch_transcript(
        self,
        url: str,
        options: Optional[RequestOptions] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> Union[List[TranscriptSegment], str]:
        options = options or RequestOptions()
        # Validate before any client is opened.
        video_id = self.extract_video_id(url)
        async with self._session(options, client) as http:
            tracks = await self._negotiate(http, url, video_id)
            track = self.select_track(tracks, options.transcript_language)
            markup = await self.fetch_caption_payload(http, track)
        logger.info(f"Fetched '{track.language_code}' transcript ({len(markup)} characters)")
        return render(markup, options.output_format)

async def fetch_transcript(
    url: str,
    options: Optional[RequestOptions] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    **overrides: Any,
) -> Union[List[TranscriptSegment], str]:
    """Fetch the transcript of a YouTube video.

    ``overrides`` are ``RequestOptions`` fields, e.g.
    ``await fetch_transcript(url, transcript_language="fr", output_format="text")``.
    """
    return await YouTubeProvider().fetch_transcript(url, RequestOptions.merge(options, **overrides), client=client)

async def list_caption_tracks(
    url: str,
    options: Optional[RequestOptions] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    **overrides: Any,
) -> List[CaptionTrack]:
    return await YouTubeProvider().list_caption_tracks(url, RequestOptions.merge(options, **overrides), client=client)
