"""Shared test fixtures for Hello Lambda."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_config_cache():
    from core.config import _reset_config

    _reset_config()
    yield
    _reset_config()
