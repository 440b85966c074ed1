import tempfile
from datetime import date
from pathlib import Path

from study_metrics.adapters.json_adapter import parse
from study_metrics.config import Settings
from ui_demo_streamlit.app import _parse_uploaded, build_dashboard

DEMO = Path(__file__).resolve().parents[1] / "examples" / "sample_stats.json"


class UploadedFile:
    def __init__(self, name: str, content: bytes):
        self.name = name
        self._content = content

    def getbuffer(self):
        return memoryview(self._content)


def test_build_dashboard_on_demo_dataset():
    rows = parse(str(DEMO))
    result = build_dashboard(rows, Settings(_env_file=None, TIMEZONE="", CHART_WINDOW_DAYS=14), today=date(2025, 3, 6))

    metrics = result["metrics"]
    assert len(rows) == 9
    assert metrics.skipped_records == 1
    assert result["summary"]["skipped_records"] == 1
    assert metrics.xp == 560
    assert metrics.level == 5
    assert result["longest_streak"] >= 3
    assert result["xp_to_next_level"] == 731 - 560
    assert result["export"].startswith("Date,Subject,Minutes,Score/Count,Category\n")
    assert '"not-a-date","History",20,5,task' in result["export"]
    assert result["subject_chart"][0] == {"subject": "Calculus", "minutes": 105}


def test_uploaded_file_is_removed_after_parsing(tmp_path, monkeypatch):
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    uploaded = UploadedFile("stats.json", DEMO.read_bytes())

    rows = _parse_uploaded(uploaded)

    assert len(rows) == 9
    assert list(tmp_path.iterdir()) == []
