"""Tests for the detection profile catalog and lookup tables."""

import pytest

from jalchaksh.detection.catalog import (
    BASE_SIZES,
    CATALOG,
    DETECTION_METHODS,
    PROFILES_BY_TYPE,
    base_size,
    detection_method,
    get_profile,
    priority_color,
    priority_for,
    threat_icon,
)
from jalchaksh.models import Depth, Priority, Size, ThreatType


def test_catalog_order():
    assert [p.type for p in CATALOG] == [
        ThreatType.SUBMARINE,
        ThreatType.MINE,
        ThreatType.TORPEDO,
        ThreatType.DIVER,
        ThreatType.DRONE,
        ThreatType.DEBRIS,
    ]


def test_submarine_profile_constants():
    sub = PROFILES_BY_TYPE[ThreatType.SUBMARINE]
    assert sub.priority == Priority.CRITICAL
    assert sub.base_confidence == 0.85
    assert sub.min_size == Size(0.15, 0.08)
    assert sub.max_size == Size(0.4, 0.2)
    assert sub.aspect_ratio_range == (2.5, 6.0)
    assert sub.preferred_depth == Depth.DEEP
    assert sub.characteristics == ("elongated", "metallic", "large", "horizontal")


def test_torpedo_profile_constants():
    torpedo = PROFILES_BY_TYPE[ThreatType.TORPEDO]
    assert torpedo.priority == Priority.CRITICAL
    assert torpedo.base_confidence == 0.82
    assert torpedo.aspect_ratio_range == (3.0, 8.0)
    assert torpedo.preferred_depth == Depth.ANY
    assert "fast-moving" in torpedo.characteristics


@pytest.mark.parametrize("profile", CATALOG, ids=lambda p: str(p.type))
def test_profile_bounds_are_consistent(profile):
    assert 0 < profile.min_size.width <= profile.max_size.width < 1
    assert 0 < profile.min_size.height <= profile.max_size.height < 1
    lo, hi = profile.aspect_ratio_range
    assert 0 < lo < hi


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        PROFILES_BY_TYPE["kraken"] = CATALOG[0]  # type: ignore[index]
    with pytest.raises(AttributeError):
        CATALOG[0].base_confidence = 1.0  # type: ignore[misc]


def test_tables_cover_every_type():
    assert set(BASE_SIZES) == set(ThreatType)
    assert set(DETECTION_METHODS) == set(ThreatType)
    assert set(PROFILES_BY_TYPE) == set(ThreatType)


def test_lookups_fall_back_to_defaults():
    assert base_size("fish") == 0.05
    assert detection_method("fish") == "Visual pattern recognition"
    assert priority_for("fish") == Priority.LOW
    assert get_profile("fish") is None
    assert priority_color("INFO") == "#eab308"


def test_lookups_accept_plain_strings():
    assert base_size("submarine") == 0.15
    assert detection_method("torpedo") == "Motion tracking + Shape analysis"
    assert priority_for("mine") == Priority.HIGH
    assert priority_color(Priority.CRITICAL) == "#ef4444"


def test_torpedo_uses_default_icon():
    assert threat_icon("submarine") == "🚢"
    assert threat_icon("torpedo") == "⚠️"
