from yt_transcript.providers.youtube import YouTubeProvider, fetch_transcript, list_caption_tracks
from yt_transcript.models.options import OutputFormat, RequestOptions
from yt_transcript.models.player import CaptionTrack
from yt_transcript.models.transcript import TranscriptSegment
from yt_transcript.errors import (
    BlockedByHost,
    InvalidOutputFormat,
    InvalidUrl,
    LanguageNotAvailable,
    MissingApiKey,
    NoCaptionsAvailable,
    TranscriptError,
    TranscriptFetchFailed,
)

__version__ = "0.1.0"
__all__ = [
    "YouTubeProvider",
    "fetch_transcript",
    "list_caption_tracks",
    "OutputFormat",
    "RequestOptions",
    "CaptionTrack",
    "TranscriptSegment",
    "TranscriptError",
    "InvalidUrl",
    "MissingApiKey",
    "BlockedByHost",
    "TranscriptFetchFailed",
    "NoCaptionsAvailable",
    "LanguageNotAvailable",
    "InvalidOutputFormat",
]
