from collections.abc import Iterator

import pytest

from planarrgb import SettingsManager


@pytest.fixture(autouse=True)
def reset_settings() -> Iterator[None]:
    SettingsManager.reset()
    yield
    SettingsManager.reset()
