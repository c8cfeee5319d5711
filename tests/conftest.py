from pathlib import Path

import pytest

from classifier_engine.adapters.text_adapter import parse

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def classifier_record():
    return parse(str(DATA_DIR / "record.txt"))
