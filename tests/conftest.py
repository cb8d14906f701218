import logging
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests.

    The CLI installs its own handler on the ``linkaudit`` logger; restore the
    previous state afterwards so other tests see default propagation.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level
    package_logger = logging.getLogger("linkaudit")
    package_handlers = package_logger.handlers[:]
    package_level = package_logger.level
    package_propagate = package_logger.propagate

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)
    package_logger.handlers.clear()
    package_logger.handlers.extend(package_handlers)
    package_logger.setLevel(package_level)
    package_logger.propagate = package_propagate


@pytest.fixture
def site_tree(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Return a helper writing ``{relative_path: text}`` files under a fresh root."""

    def _make(files: dict[str, str], name: str = "site") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, text in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make
