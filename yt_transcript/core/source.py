from abc import ABC, abstractmethod
from typing import List, Optional, Union
from yt_transcript.models.options import RequestOptions
from yt_transcript.models.player import CaptionTrack
from yt_transcript.models.transcript import TranscriptSegment

class TranscriptSource(ABC):
    @abstractmethod
    def extract_video_id(self, url: str) -> str:
        """Extract the platform video ID from a URL."""
        pass

    @abstractmethod
    async def list_caption_tracks(self, url: str, options: Optional[RequestOptions] = None) -> List[CaptionTrack]:
        """List the caption tracks offered for a video."""
        pass

    @abstractmethod
    async def fetch_transcript(self, url: str, options: Optional[RequestOptions] = None) -> Union[List[TranscriptSegment], str]:
        """Fetch a video transcript in the requested output format."""
        pass
