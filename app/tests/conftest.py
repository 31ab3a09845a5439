import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection
# regardless of how pytest is invoked.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.services.providers import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the settings singleton so env changes in a test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
