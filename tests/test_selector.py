"""Tests for detection type selection."""

import numpy as np
import pytest
from conftest import ScriptedRandom, make_stats

from jalchaksh.detection.catalog import CATALOG
from jalchaksh.detection.selector import candidate_probabilities, select_threat_type
from jalchaksh.errors import EmptyCatalog
from jalchaksh.models import Depth, ThreatType


@pytest.fixture
def deep_metallic():
    return make_stats(depth=Depth.DEEP, has_metallic_objects=True, water_clarity=0.5)


def test_deep_metallic_probabilities(deep_metallic):
    candidates = candidate_probabilities(deep_metallic)
    assert [t for t, _ in candidates] == [
        ThreatType.SUBMARINE,
        ThreatType.TORPEDO,
        ThreatType.MINE,
        ThreatType.DEBRIS,
        ThreatType.DRONE,
        ThreatType.DIVER,
    ]
    probs = dict(candidates)
    assert probs[ThreatType.SUBMARINE] == pytest.approx(1.4)
    assert probs[ThreatType.TORPEDO] == pytest.approx(1.0)
    assert probs[ThreatType.MINE] == pytest.approx(0.7)
    assert probs[ThreatType.DEBRIS] == pytest.approx(0.6)
    assert probs[ThreatType.DRONE] == pytest.approx(0.3)
    assert probs[ThreatType.DIVER] == pytest.approx(0.0)


def test_shallow_clear_moving_probabilities():
    stats = make_stats(depth=Depth.SHALLOW, water_clarity=0.8, has_movement=True)
    probs = dict(candidate_probabilities(stats))
    assert probs[ThreatType.SUBMARINE] == pytest.approx(0.5)
    assert probs[ThreatType.MINE] == pytest.approx(0.5)
    assert probs[ThreatType.TORPEDO] == pytest.approx(1.1)
    assert probs[ThreatType.DIVER] == pytest.approx(1.1)
    assert probs[ThreatType.DRONE] == pytest.approx(1.0)
    assert probs[ThreatType.DEBRIS] == pytest.approx(0.8)


def test_ties_keep_catalog_order():
    # Medium depth, nothing else: submarine, diver and drone all sit at 0.3.
    candidates = candidate_probabilities(make_stats())
    order = [t for t, _ in candidates]
    assert order.index(ThreatType.SUBMARINE) < order.index(ThreatType.DIVER)
    assert order.index(ThreatType.DIVER) < order.index(ThreatType.DRONE)
    assert order[0] == ThreatType.MINE


def test_first_accepted_candidate_wins(deep_metallic):
    rng = ScriptedRandom([0.0])
    assert select_threat_type(deep_metallic, rng) == ThreatType.SUBMARINE
    assert rng.calls == 1


def test_rejections_move_down_the_scan(deep_metallic):
    # mine (0.7) rejects 0.75, debris (0.6) accepts 0.55.
    rng = ScriptedRandom([0.75, 0.55])
    chosen = select_threat_type(
        deep_metallic, rng, already_chosen={ThreatType.SUBMARINE, ThreatType.TORPEDO}
    )
    assert chosen == ThreatType.DEBRIS
    assert rng.calls == 2


def test_no_candidate_accepted(deep_metallic):
    rng = ScriptedRandom([0.99] * 4)
    chosen = select_threat_type(
        deep_metallic, rng, already_chosen={ThreatType.SUBMARINE, ThreatType.TORPEDO}
    )
    assert chosen is None
    assert rng.calls == 4


def test_chosen_submarine_is_not_repeated(deep_metallic):
    rng = np.random.default_rng(7)
    for _ in range(200):
        chosen = select_threat_type(deep_metallic, rng, already_chosen={ThreatType.SUBMARINE})
        assert chosen != ThreatType.SUBMARINE


def test_torpedo_still_allowed_after_submarine(deep_metallic):
    # torpedo heads the scan at probability 1.0 once submarine is excluded.
    rng = ScriptedRandom([0.0])
    chosen = select_threat_type(deep_metallic, rng, already_chosen={ThreatType.SUBMARINE})
    assert chosen == ThreatType.TORPEDO
    assert rng.calls == 1


def test_chosen_torpedo_is_not_repeated(deep_metallic):
    candidates = dict(candidate_probabilities(deep_metallic, already_chosen={ThreatType.TORPEDO}))
    assert ThreatType.TORPEDO not in candidates
    assert ThreatType.SUBMARINE in candidates


def test_other_types_may_repeat():
    stats = make_stats(has_metallic_objects=True)
    candidates = dict(candidate_probabilities(stats, already_chosen={ThreatType.MINE}))
    assert ThreatType.MINE in candidates
    assert select_threat_type(
        stats, ScriptedRandom([0.0]), already_chosen={ThreatType.MINE}
    ) == ThreatType.MINE


def test_custom_catalog_subset():
    subset = [p for p in CATALOG if p.type == ThreatType.DEBRIS]
    assert select_threat_type(make_stats(), ScriptedRandom([0.0]), catalog=subset) == (
        ThreatType.DEBRIS
    )


def test_empty_catalog():
    with pytest.raises(EmptyCatalog):
        select_threat_type(make_stats(), ScriptedRandom([]), catalog=())
