import sys
from pathlib import Path

import pytest

# Add project root to PYTHONPATH for imports to work
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.logger import logger


@pytest.fixture
def properties_file(tmp_path):
    """Write a mapping file and return its path."""

    def _write(text: str, name: str = "injector.properties") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def log_messages():
    """Collect WARNING and above loguru records as 'LEVEL | message' strings."""
    messages = []
    handler_id = logger.add(
        lambda message: messages.append(message.rstrip("\n")),
        format="{level} | {message}",
        level="WARNING",
    )
    yield messages
    logger.remove(handler_id)
