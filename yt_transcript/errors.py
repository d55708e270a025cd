"""Exceptions raised by the transcript pipeline.

Every error carries the values needed to build a user-facing message, so callers
can report them without re-deriving anything from the input.
"""

from typing import List, Optional, Sequence

ACCEPTED_URL_FORMATS = [
    "https://www.youtube.com/watch?v=VIDEO_ID",
    "https://youtu.be/VIDEO_ID",
    "https://www.youtube.com/embed/VIDEO_ID",
    "https://www.youtube.com/v/VIDEO_ID",
]


class TranscriptError(Exception):
    """Base class for transcript pipeline failures."""


class InvalidUrl(TranscriptError):
    def __init__(self, url: str, accepted_formats: Optional[Sequence[str]] = None):
        self.url = url
        self.accepted_formats: List[str] = list(accepted_formats or ACCEPTED_URL_FORMATS)
        formats = "\n".join(f"- {fmt}" for fmt in self.accepted_formats)
        super().__init__(f"Invalid YouTube URL: {url}\nAccepted formats:\n{formats}")


class MissingApiKey(TranscriptError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Could not extract YouTube API key from the page: {url}")


class BlockedByHost(TranscriptError):
    def __init__(self, video_id: str, reason: str):
        self.video_id = video_id
        self.reason = reason
        super().__init__(
            "Request blocked by YouTube.\n"
            "Please try again later or use a proxy server."
        )


class TranscriptFetchFailed(TranscriptError):
    def __init__(self, status_code: int, status_text: Optional[str] = None, url: Optional[str] = None):
        self.status_code = status_code
        self.status_text = status_text or "Unknown error"
        self.url = url
        super().__init__(f"Failed to fetch transcript: HTTP {status_code} - {self.status_text}")


class NoCaptionsAvailable(TranscriptError):
    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"No captions available for this video: {video_id}")


class LanguageNotAvailable(TranscriptError):
    def __init__(self, language: str, available: Optional[Sequence[str]] = None):
        self.language = language
        self.available: List[str] = list(available or [])
        message = f"Transcript not available for language code: {language}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class InvalidOutputFormat(TranscriptError):
    def __init__(self, output_format: object, supported: Sequence[str] = ()):
        self.output_format = output_format
        self.supported = list(supported)
        super().__init__(f"Invalid output format: {output_format}")
