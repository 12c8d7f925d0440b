import os
import sys
from pathlib import Path
import pytest

# Ensure repository root is importable
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Default test environment
os.environ.setdefault("DEBUG_MODE", "false")
os.environ.setdefault("LOG_LEVEL", "debug")

from sasato_res.core.debug_mode import set_debug_mode  # noqa: E402


@pytest.fixture(autouse=True)
def safe_debug_mode():
    # every test starts with diagnostics masked
    set_debug_mode(False)
    yield
    set_debug_mode(False)
