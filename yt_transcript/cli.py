import argparse
import asyncio
import sys
from typing import Dict, List, Optional
import httpx
from pydantic import TypeAdapter
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from yt_transcript.config import settings
from yt_transcript.errors import TranscriptError
from yt_transcript.models.options import OutputFormat, RequestOptions
from yt_transcript.models.player import CaptionTrack
from yt_transcript.models.transcript import TranscriptSegment
from yt_transcript.providers.youtube import YouTubeProvider

console = Console()

def parse_headers(values: Optional[List[str]]) -> Dict[str, str]:
    headers = {}
    for value in values or []:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise argparse.ArgumentTypeError(f"Header must look like 'Name: value', got {value!r}")
        headers[name.strip()] = content.strip()
    return headers

def build_options(args: argparse.Namespace) -> RequestOptions:
    fields = {
        "transcript_language": args.lang,
        "output_format": args.format,
    }
    # Only forward transport settings the user actually gave.
    if args.header:
        fields["headers"] = parse_headers(args.header)
    if args.proxy:
        fields["proxy"] = args.proxy
    if args.timeout is not None:
        fields["timeout"] = args.timeout
    return RequestOptions(**fields)

def render_tracks(tracks: List[CaptionTrack]):
    table = Table(title="Caption Tracks", show_header=True, header_style="bold magenta")
    table.add_column("Language", style="cyan")
    table.add_column("Name", style="white")
    table.add_column("Kind", style="dim")
    for track in tracks:
        table.add_row(track.language_code, track.name or "", track.kind or "manual")
    console.print(table)

def render_transcript(result, output_format: str):
    if output_format == OutputFormat.JSON.value:
        data = TypeAdapter(List[TranscriptSegment]).dump_json(result, indent=2)
        console.print_json(data.decode("utf-8"))
    else:
        # Raw output for piping; no rich markup processing.
        print(result)

async def run(args: argparse.Namespace) -> None:
    provider = YouTubeProvider()
    options = build_options(args)
    if args.list_languages:
        tracks = await provider.list_caption_tracks(args.url, options)
        render_tracks(tracks)
        return
    result = await provider.fetch_transcript(args.url, options)
    render_transcript(result, options.output_format)

def main():
    parser = argparse.ArgumentParser(description="Fetch the transcript of a YouTube video")
    parser.add_argument("url", nargs="?", help="YouTube video URL")
    parser.add_argument("--url", dest="url_opt", metavar="URL", help="YouTube video URL (alternative to the positional argument)")
    parser.add_argument("--lang", default=settings.TRANSCRIPT_LANG, help="Caption language code (default: %(default)s)")
    parser.add_argument("--format", default=settings.OUTPUT_FORMAT, help="Output format: json, text or xml (default: %(default)s)")
    parser.add_argument("--proxy", help="Proxy URL for all requests")
    parser.add_argument("--timeout", type=float, help="Transport timeout in seconds")
    parser.add_argument("--header", action="append", metavar="'NAME: VALUE'", help="Extra request header (repeatable)")
    parser.add_argument("--list-languages", action="store_true", help="List available caption tracks and exit")

    args = parser.parse_args()
    args.url = args.url or args.url_opt

    if not args.url:
        parser.print_help()
        console.print("[red]Missing URL.[/red] Provide positional URL or --url.")
        sys.exit(2)

    args.url = args.url.strip().strip('`').strip('"').strip("'").strip()

    try:
        asyncio.run(run(args))
    except (TranscriptError, httpx.HTTPError, argparse.ArgumentTypeError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(1)

if __name__ == "__main__":
    main()
