"""Shared test fixtures for Mixed Units."""

import json

import pytest

from mixedunits.models.entries import NormalizedEntry
from mixedunits.models.enums import DetectedKind
from mixedunits.normalization.normalizer import MoneyNormalizer


@pytest.fixture
def normalizer() -> MoneyNormalizer:
    return MoneyNormalizer()


@pytest.fixture
def mixed_input() -> str:
    return json.dumps(
        {
            "rent": "1250.50",
            "coffee": 450,
            "refund": -0.99,
            "salary": "523400",
        },
        indent=2,
    )


@pytest.fixture
def sample_entries() -> list[NormalizedEntry]:
    return [
        NormalizedEntry(
            key="example_1",
            detected_kind=DetectedKind.DECIMAL,
            units=45,
            formatted="$0.45",
        ),
        NormalizedEntry(
            key="example_3",
            detected_kind=DetectedKind.SMALLEST_UNIT,
            units=34343,
            formatted="$343.43",
        ),
    ]
