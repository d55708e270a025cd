import yt_transcript
from yt_transcript.config import Settings
from yt_transcript.core.source import TranscriptSource
from yt_transcript.models.options import RequestOptions

def test_imports():
    assert callable(yt_transcript.fetch_transcript)
    assert issubclass(yt_transcript.YouTubeProvider, TranscriptSource)
    assert issubclass(yt_transcript.LanguageNotAvailable, yt_transcript.TranscriptError)

def test_settings_defaults():
    s = Settings(_env_file=None)
    assert s.INNERTUBE_PLAYER_URL == "https://www.youtube.com/youtubei/v1/player"
    assert s.INNERTUBE_CLIENT_NAME == "ANDROID"
    assert s.INNERTUBE_CLIENT_VERSION == "20.10.38"

def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TRANSCRIPT_LANG", "fr")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.TRANSCRIPT_LANG == "fr"
    assert s.LOG_LEVEL == "DEBUG"

def test_options_forward_only_given_transport_fields():
    opts = RequestOptions(transcript_language="fr", headers={"User-Agent": "test"}, verify=False)
    assert opts.transport_options() == {
        "follow_redirects": True,
        "headers": {"User-Agent": "test"},
        "verify": False,
    }

def test_options_caller_can_disable_redirects():
    opts = RequestOptions(follow_redirects=False, timeout=5.0)
    assert opts.transport_options() == {"follow_redirects": False, "timeout": 5.0}

def test_options_merge_keeps_existing_fields():
    base = RequestOptions(proxy="http://proxy.local:8080", cookies={"CONSENT": "YES+"})
    merged = RequestOptions.merge(base, output_format="text")
    assert merged.output_format == "text"
    assert merged.transcript_language == "en"
    assert merged.transport_options()["proxy"] == "http://proxy.local:8080"
    assert merged.transport_options()["cookies"] == {"CONSENT": "YES+"}
    assert RequestOptions.merge(base) is base
