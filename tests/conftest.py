"""Shared pytest fixtures for the release retainer tests."""

from pathlib import Path
from typing import List

import pytest

from release_retainer.loader import load_customer_model
from release_retainer.models import CustomerModel

FIXTURES_DIR = Path(__file__).parent / "fixtures"
CUSTOMER_DATA_DIR = FIXTURES_DIR / "customer_data"


class CapturingLog:
    """Retention sink that records every message."""

    def __init__(self):
        self.infos: List[str] = []
        self.errors: List[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def capture_log() -> CapturingLog:
    """Create a capturing diagnostic sink."""
    return CapturingLog()


@pytest.fixture
def customer_model() -> CustomerModel:
    """Load the reference customer data.

    Reloaded for every test so in-place corruption does not leak.
    """
    return load_customer_model(CUSTOMER_DATA_DIR)
