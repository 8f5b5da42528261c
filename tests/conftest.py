import pytest

from tests.helpers import RecordingOpener, RecordingSource


@pytest.fixture
def source():
    return RecordingSource()


@pytest.fixture
def opener():
    return RecordingOpener()
