import pytest

from splitbill.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("SPLITBILL_LOG_LEVEL", "SPLITBILL_LOG_JSON", "SPLITBILL_UNASSIGNED_ITEMS"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
