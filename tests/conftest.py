import logging
import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'bladetags'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


from bladetags.core.compiler import tags as _tags
from bladetags.data import read_yaml


@pytest.fixture(autouse=True)
def _isolate_bladetags(monkeypatch: pytest.MonkeyPatch):
    """Clear BLADETAGS_* overrides, caches and CLI logging state around each test."""
    # Tests must be deterministic regardless of developer environment.
    for key in [k for k in os.environ if k.startswith("BLADETAGS_")]:
        monkeypatch.delenv(key)
    _tags._compile.cache_clear()
    read_yaml.cache_clear()
    yield
    package_logger = logging.getLogger("bladetags")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
