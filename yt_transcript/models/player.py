"""Partial model of the Innertube player response.

Only the fields the pipeline reads are declared, and every level is optional:
the API omits whole branches (``captions`` for videos without subtitles,
``playabilityStatus.reason`` for playable videos) rather than sending nulls.
A level of the wrong shape is treated as absent, and a malformed caption track
is dropped without discarding its well-formed siblings.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from yt_transcript.utils.logger import logger

class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

def _object_or_none(value: Any) -> Any:
    return value if isinstance(value, dict) else None

def _str_or_none(value: Any) -> Any:
    return value if isinstance(value, str) else None

class CaptionTrack(_ApiModel):
    base_url: str = Field(alias="baseUrl")
    language_code: str = Field(alias="languageCode")
    name: Optional[str] = None
    kind: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _flatten_name(cls, value: Any) -> Any:
        # {"simpleText": "English"} or {"runs": [{"text": "English"}]}
        if isinstance(value, dict):
            if isinstance(value.get("simpleText"), str):
                return value["simpleText"]
            runs = value.get("runs")
            if not isinstance(runs, list):
                return None
            return "".join(run["text"] for run in runs if isinstance(run, dict) and isinstance(run.get("text"), str))
        return _str_or_none(value)

    @field_validator("kind", mode="before")
    @classmethod
    def _kind_text(cls, value: Any) -> Any:
        return _str_or_none(value)

class PlayabilityStatus(_ApiModel):
    status: Optional[str] = None
    reason: Optional[str] = None

    @field_validator("status", "reason", mode="before")
    @classmethod
    def _text_only(cls, value: Any) -> Any:
        return _str_or_none(value)

class CaptionTracklistRenderer(_ApiModel):
    caption_tracks: Optional[List[CaptionTrack]] = Field(default=None, alias="captionTracks")

    @field_validator("caption_tracks", mode="before")
    @classmethod
    def _valid_tracks(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return None
        tracks = []
        for item in value:
            try:
                tracks.append(CaptionTrack.model_validate(item))
            except ValidationError as e:
                logger.debug(f"Skipping malformed caption track: {e.error_count()} error(s)")
        return tracks

class Captions(_ApiModel):
    tracklist: Optional[CaptionTracklistRenderer] = Field(default=None, alias="playerCaptionsTracklistRenderer")

    @field_validator("tracklist", mode="before")
    @classmethod
    def _tracklist_object(cls, value: Any) -> Any:
        return _object_or_none(value)

class PlayerResponse(_ApiModel):
    playability_status: Optional[PlayabilityStatus] = Field(default=None, alias="playabilityStatus")
    captions: Optional[Captions] = None

    @field_validator("playability_status", "captions", mode="before")
    @classmethod
    def _level_object(cls, value: Any) -> Any:
        return _object_or_none(value)

    @classmethod
    def from_payload(cls, payload: Any) -> "PlayerResponse":
        if not isinstance(payload, dict):
            return cls()
        return cls.model_validate(payload)

    @property
    def blocked_reason(self) -> Optional[str]:
        if self.playability_status is None:
            return None
        return self.playability_status.reason

    @property
    def caption_tracks(self) -> List[CaptionTrack]:
        if self.captions is None or self.captions.tracklist is None:
            return []
        return self.captions.tracklist.caption_tracks or []

def innertube_payload(video_id: str, client_name: str, client_version: str) -> Dict[str, Any]:
    return {
        "context": {"client": {"clientName": client_name, "clientVersion": client_version}},
        "videoId": video_id,
    }
