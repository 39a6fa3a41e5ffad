import sys
from pathlib import Path
import pytest


# Ensure the repo root is on PYTHONPATH so `import monument` works without install
_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


@pytest.fixture
def graph():
    from monument.graph import NavGraph

    return NavGraph()


@pytest.fixture
def world():
    from monument.world import MonumentWorld

    return MonumentWorld()

