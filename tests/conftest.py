import pytest

from unicode_ranges.classify.tables import block_classifier, script_classifier
from unicode_ranges.codec import to_code_units


@pytest.fixture
def mixed_text():
    return "Hello wörld, Ελληνικά, русский, 世界 \U0001F600 \U00010000!"


@pytest.fixture
def mixed_units(mixed_text):
    return to_code_units(mixed_text)


@pytest.fixture
def blocks():
    return block_classifier()


@pytest.fixture
def scripts():
    return script_classifier()
