"""
LiveLocale Test Fixtures

Shared fixtures and helpers.
"""

import os
import pytest
from pathlib import Path
import tempfile
import shutil

from livelocale.i18n.registry import CultureRegistry, reset_culture_registry
from livelocale.utils.constants import CULTURE_ENV_VAR

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def temp_dir():
    """
    Temporary directory for tests.
    """
    dir_path = Path(tempfile.mkdtemp())
    yield dir_path
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def default_registry(monkeypatch):
    """
    Pin the process-wide registry to en-US and drop its subscribers.
    """
    monkeypatch.setenv(CULTURE_ENV_VAR, "en-US")
    reset_culture_registry()
    yield
    reset_culture_registry()


@pytest.fixture
def registry():
    """
    Isolated registry starting at en-US.
    """
    return CultureRegistry("en-US")


@pytest.fixture
def greetings():
    """
    Greeting templates in three languages.
    """
    return {
        "en": "Hello",
        "fr": "Bonjour",
        "de": "Hallo",
    }


@pytest.fixture
def recorder():
    """
    Callable that records every call's arguments.
    """
    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args[0] if len(args) == 1 else args)

        @property
        def count(self):
            return len(self.calls)

    return Recorder()
