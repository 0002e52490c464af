# -*- coding: utf-8 -*-
"""Pytest configuration and fixtures.

This module provides a fresh transformation context per test and a few
well-known reference positions shared across test modules.
"""

from __future__ import annotations

import logging

import pytest

from geodatum_lib.context import TransformContext
from geodatum_lib.enums import Datum
from geodatum_lib.enums import ErrorCode
from geodatum_lib.models import GeoCoord

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


# =============================================================================
# Reference Positions
# =============================================================================

#: Shanghai, People's Square (WGS84)
SHANGHAI = GeoCoord(latitude=31.230416, longitude=121.473701)

#: Central London, near Trafalgar Square (WGS84)
LONDON = GeoCoord(latitude=51.5074, longitude=-0.1278)

#: Sydney Opera House (WGS84)
SYDNEY = GeoCoord(latitude=-33.8568, longitude=151.2153)

#: Tokyo Station (WGS84)
TOKYO_STATION = GeoCoord(latitude=35.681236, longitude=139.767125)

#: Ordnance Survey worked example point (OSGB36), Annex C of the OS guide
OS_EXAMPLE = GeoCoord(
    latitude=52.0 + 39.0 / 60.0 + 27.2531 / 3600.0,
    longitude=1.0 + 43.0 / 60.0 + 4.5177 / 3600.0,
    datum=Datum.ORDNANCE_SURVEY_1936,
)


# =============================================================================
# Context Fixtures
# =============================================================================


class RecordingObserver:
    """Error observer that keeps every reported ``(code, message)`` pair."""

    def __init__(self) -> None:
        self.calls: list[tuple[ErrorCode, str]] = []

    def __call__(self, code: ErrorCode, message: str) -> None:
        self.calls.append((code, message))

    @property
    def codes(self) -> list[ErrorCode]:
        return [code for code, _ in self.calls]


@pytest.fixture
def observer() -> RecordingObserver:
    """Return a fresh recording observer."""
    return RecordingObserver()


@pytest.fixture
def ctx(observer: RecordingObserver):
    """Return a WGS84 context with the default parameter sets."""
    with TransformContext(observer=observer) as context:
        yield context


@pytest.fixture
def bare_ctx():
    """Return a WGS84 context without any datum parameters."""
    with TransformContext(seed_defaults=False) as context:
        yield context
