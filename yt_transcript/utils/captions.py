import re
from typing import List, Union
from yt_transcript.errors import InvalidOutputFormat
from yt_transcript.models.options import OutputFormat
from yt_transcript.models.transcript import TranscriptSegment

# Caption bodies are not well-formed XML, so they are scanned rather than parsed.
SEGMENT_RE = re.compile(r'<p t="(\d+)" d="(\d+)">([\s\S]*?)</p>')

def parse_segments(markup: str) -> List[TranscriptSegment]:
    segments = []
    for m in SEGMENT_RE.finditer(markup):
        start, duration, text = m.groups()
        segments.append(TranscriptSegment(
            start=int(start, 10),
            duration=int(duration, 10),
            text=text.replace("&#39;", "'").strip()
        ))
    return segments

def join_text(segments: List[TranscriptSegment]) -> str:
    return " ".join(seg.text for seg in segments)

def render(markup: str, output_format: str) -> Union[List[TranscriptSegment], str]:
    """Convert a caption body into the requested representation.

    ``json`` gives the parsed segments, ``text`` their texts joined by single
    spaces and ``xml`` the body exactly as received.
    """
    if output_format == OutputFormat.XML:
        return markup
    if output_format == OutputFormat.JSON:
        return parse_segments(markup)
    if output_format == OutputFormat.TEXT:
        return join_text(parse_segments(markup))
    raise InvalidOutputFormat(output_format, [f.value for f in OutputFormat])
