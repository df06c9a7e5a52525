import sys
from pathlib import Path

import pytest

# Ensure local package is imported before any installed version
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from matweave.matweave import Config  # noqa: E402


@pytest.fixture(autouse=True)
def restore_config():
    cfg = Config()
    prev_seed = cfg.random_seed
    prev_stream = cfg._seed_stream
    prev_jit = cfg.use_jit
    prev_strategy = cfg.dot_strategy
    yield
    cfg._random_seed = prev_seed
    cfg._seed_stream = prev_stream
    cfg.set_use_jit(prev_jit)
    cfg.set_dot_strategy(prev_strategy)
