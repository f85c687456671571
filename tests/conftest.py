"""Root test configuration: isolate each test from the user's config and environment"""

import pytest


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Run from a clean tmp directory with no MHCMS_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ("APP_NAME", "LOG_LEVEL", "OBJECT_LANGUAGES", "INDENT", "MAX_DEPTH"):
        monkeypatch.delenv(f"MHCMS_{name}", raising=False)
