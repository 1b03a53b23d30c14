import os
import sys
import tempfile
from pathlib import Path

import pytest

# Point the store at a throwaway database and media root before app imports.
_TMP = Path(tempfile.mkdtemp(prefix="photoboard-tests-"))
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TMP / 'photos.db'}")
os.environ.setdefault("MEDIA_ROOT", str(_TMP / "uploads"))
os.environ.setdefault("ENVIRONMENT", "test")

# Add src to sys.path
sys.path.append(os.path.join(os.path.dirname(__file__), "../src"))

from photoboard.common.models import PhotoRecord


def make_record(photo_id, **kwargs) -> PhotoRecord:
    kwargs.setdefault("filename", f"{photo_id}.jpg")
    return PhotoRecord(id=photo_id, **kwargs)


@pytest.fixture
def records():
    return [make_record(i) for i in range(1, 10)]
