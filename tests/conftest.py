import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from haiku_detector.app.services.reply_service import HaikuReplyService


STRICT_HAIKU = "the cat sat on mats\na dog ran to the red barn\nthen the sun went down"
FLAT_HAIKU = STRICT_HAIKU.replace("\n", " ")


@pytest.fixture
def strict_haiku() -> str:
    return STRICT_HAIKU


@pytest.fixture
def flat_haiku() -> str:
    return FLAT_HAIKU


@pytest.fixture
def reply_service() -> HaikuReplyService:
    """Reply service using the default annotation and the real analyzer."""

    return HaikuReplyService()
