from enum import Enum
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field
from yt_transcript.config import settings

class OutputFormat(str, Enum):
    JSON = "json"
    TEXT = "text"
    XML = "xml"

class RequestOptions(BaseModel):
    """Per-call options.

    ``transcript_language`` and ``output_format`` drive the pipeline. Everything
    else (``headers``, ``proxy``, ``timeout`` and any extra keyword) is handed
    untouched to the ``httpx.AsyncClient`` that serves the call.
    """

    model_config = ConfigDict(extra="allow")

    transcript_language: str = Field(default_factory=lambda: settings.TRANSCRIPT_LANG)
    # Left as a plain string: unknown formats are rejected at dispatch time.
    output_format: str = Field(default_factory=lambda: settings.OUTPUT_FORMAT)

    headers: Optional[Dict[str, str]] = None
    proxy: Optional[str] = None
    timeout: Any = None

    @classmethod
    def merge(cls, options: Optional["RequestOptions"] = None, **overrides: Any) -> "RequestOptions":
        if options is None:
            return cls(**overrides)
        if not overrides:
            return options
        data = {name: getattr(options, name) for name in options.model_fields_set if name in cls.model_fields}
        data.update(options.model_extra or {})
        data.update(overrides)
        return cls(**data)

    def transport_options(self) -> Dict[str, Any]:
        passthrough: Dict[str, Any] = {"follow_redirects": True}
        for name in ("headers", "proxy", "timeout"):
            if name in self.model_fields_set:
                passthrough[name] = getattr(self, name)
        passthrough.update(self.model_extra or {})
        return passthrough
