"""Shared test fixtures and configuration."""

import os
import sys
from pathlib import Path

# Add pipeline_linter/ to Python path so `from pipelint.xxx` imports work
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "pipeline_linter"))

import pytest

os.environ["PIPELINT_DEV_MODE"] = "true"

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR
