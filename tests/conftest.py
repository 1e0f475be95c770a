"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and isolates every test from the process-wide context registry, the
user's global config file, and the real clipboard.
"""

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local codecopy package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of codecopy modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("codecopy"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def _isolate_globals(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    from codecopy.config import loader
    from codecopy.context import reset_registry

    home = tmp_path_factory.mktemp("home")
    monkeypatch.setattr(loader, "GLOBAL_CONFIG_PATH", home / "config.yaml")
    for key in [k for k in os.environ if k.startswith("CODECOPY__")]:
        monkeypatch.delenv(key)
    reset_registry()
    yield
    reset_registry()
