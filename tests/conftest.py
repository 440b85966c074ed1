from datetime import datetime

import pytest

from study_metrics.normalize import normalize_record


@pytest.fixture
def make_record():
    def _make(when, subject="Math", minutes=0, accuracy=None, category=None):
        date_text = when.isoformat() if isinstance(when, datetime) else when
        item = {"date": date_text, "subject": subject, "minutes": minutes, "accuracy": accuracy, "category": category}
        return normalize_record(item, 1)

    return _make
