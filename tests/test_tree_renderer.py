import math
import random
from dataclasses import replace

import pytest

from arbor.canvas import RecordingCanvas
from arbor.color import HIGHLIGHT, SHADOW
from arbor.exceptions import RenderError
from arbor.genetics import GenomeLineage, SegmentProfile
from arbor.math_utils import Vector2
from arbor.tree_renderer import TreeRenderer, count_branches, fan_bias, gravity_bend


def make_profile(**overrides) -> SegmentProfile:
    values = dict(
        length=23.0,
        size=4.0,
        size_step_scale=0.99,
        turn_step=0.01,
        gravity=0.0,
        branch_count=2,
        branch_angle=0.7,
        red=0.9,
        green=0.8,
        blue=0.7,
        red_step_scale=0.995,
        green_step_scale=0.993,
        blue_step_scale=0.991,
    )
    values.update(overrides)
    return SegmentProfile(**values)


@pytest.mark.parametrize("length", [0.5, 5.0, 23.0, 51.66, 120.0])
def test_leaf_emits_ceil_length_over_step_triples(lineage, canvas, length: float) -> None:
    renderer = TreeRenderer(lineage, canvas)
    renderer.draw(0, Vector2(0, 0), math.pi / 2, make_profile(length=length))

    steps = math.ceil(length / 5.0)
    assert len(canvas) == 3 * steps
    assert renderer.branches_drawn == 1


def test_zero_length_branch_emits_nothing(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    renderer.draw(0, Vector2(0, 0), 0.0, make_profile(length=0.0))
    assert len(canvas) == 0


def test_triple_layout(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(length=5.0)
    renderer.walk_branch(Vector2(10, 20), 0.0, profile)

    highlight, shadow, body = canvas.commands
    assert highlight.center == Vector2(11, 21)
    assert highlight.color == HIGHLIGHT
    assert shadow.center == Vector2(9, 19)
    assert shadow.color == SHADOW
    assert body.center == Vector2(10, 20)
    assert body.color == profile.color
    assert highlight.radius == shadow.radius == body.radius == profile.size


def test_size_and_color_decay_geometrically(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(length=50.0, size_step_scale=1.008)
    tip = renderer.walk_branch(Vector2(0, 0), 1.0, profile)

    bodies = canvas.commands[2::3]
    assert len(bodies) == 10
    size, red, green, blue = profile.size, profile.red, profile.green, profile.blue
    for k, body in enumerate(bodies):
        assert body.radius == size
        assert body.color.r == red
        assert body.color.g == green
        assert body.color.b == blue
        assert body.radius == pytest.approx(profile.size * profile.size_step_scale**k)
        size *= profile.size_step_scale
        red *= profile.red_step_scale
        green *= profile.green_step_scale
        blue *= profile.blue_step_scale

    assert tip.profile.size == size
    assert (tip.profile.red, tip.profile.green, tip.profile.blue) == (red, green, blue)
    assert tip.profile.size == pytest.approx(profile.size * 1.008**10)
    assert tip.profile.length == profile.length


def test_walk_without_gravity_or_turn_is_straight(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(length=20.0, turn_step=0.0, gravity=0.0)
    tip = renderer.walk_branch(Vector2(0, 0), math.pi / 2, profile)

    assert tip.heading == math.pi / 2
    assert tip.position.x == pytest.approx(0.0)
    assert tip.position.y == pytest.approx(20.0)


def test_walk_does_not_mutate_anchor(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    anchor = Vector2(3, 4)
    renderer.walk_branch(anchor, 0.3, make_profile())
    assert anchor == Vector2(3, 4)


def test_gravity_droops_sideways_headings() -> None:
    # Pointing right: heading decreases toward -pi/2
    assert gravity_bend(0.02, 10.0, 20.0, 0.0) == pytest.approx(-0.01)
    # Pointing left: heading increases toward 3*pi/2
    assert gravity_bend(0.02, 10.0, 20.0, math.pi) == pytest.approx(0.01)
    # Vertical headings are not pulled sideways
    assert gravity_bend(0.02, 10.0, 20.0, math.pi / 2) == pytest.approx(0.0)
    # Nothing at the start of a branch
    assert gravity_bend(0.02, 0.0, 20.0, 0.0) == 0.0


def test_gravity_leaves_an_upright_trunk_straight(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(length=120.0, turn_step=0.0, gravity=0.02)
    tip = renderer.walk_branch(Vector2(0, 0), math.pi / 2, profile)

    assert tip.heading == pytest.approx(math.pi / 2)
    assert tip.position.x == pytest.approx(0.0, abs=1e-9)
    assert tip.position.y == pytest.approx(120.0)


def test_gravity_bends_a_horizontal_branch_down(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(length=60.0, turn_step=0.0, gravity=0.02)
    tip = renderer.walk_branch(Vector2(0, 0), 0.0, profile)

    assert tip.heading < 0.0
    assert tip.position.y < 0.0


def test_fan_bias_policy() -> None:
    assert fan_bias(2, 0.8) == pytest.approx(-0.4)
    assert fan_bias(3, 0.8) == pytest.approx(-0.8)


@pytest.mark.parametrize("branch_count", [2, 3])
def test_children_share_anchor_and_profile(lineage, canvas, monkeypatch, branch_count) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(branch_count=branch_count, branch_angle=0.6)
    calls = []

    def record(generation_index, position, heading, child_profile):
        calls.append((generation_index, position, heading, child_profile))

    monkeypatch.setattr(renderer, "draw", record)
    TreeRenderer.draw(renderer, 3, Vector2(100, 0), math.pi / 2, profile)

    tip = TreeRenderer(lineage, RecordingCanvas()).walk_branch(Vector2(100, 0), math.pi / 2, profile)
    expected_child = lineage[2].get_profile(tip.profile)
    bias = fan_bias(branch_count, 0.6)

    assert len(calls) == branch_count
    for i, (generation_index, position, heading, child_profile) in enumerate(calls):
        assert generation_index == 2
        assert position == tip.position
        assert child_profile == expected_child
        assert heading == tip.heading + bias + i * 0.6


def test_child_profile_blends_with_decayed_values(lineage, canvas, monkeypatch) -> None:
    renderer = TreeRenderer(lineage, canvas)
    profile = make_profile(length=100.0, size_step_scale=0.99)
    child_genome = lineage[0]
    child_genome.size_from_ancestor = 1.0
    child_genome.color_from_ancestor = 1.0
    seen = []
    monkeypatch.setattr(renderer, "draw", lambda g, pos, heading, p: seen.append(p))

    TreeRenderer.draw(renderer, 1, Vector2(0, 0), 0.0, profile)
    tip = TreeRenderer(lineage, RecordingCanvas()).walk_branch(Vector2(0, 0), 0.0, profile)

    assert len(seen) == profile.branch_count
    assert seen[0].size == tip.profile.size
    assert seen[0].red == tip.profile.red
    assert seen[0].size == pytest.approx(profile.size * 0.99**20)
    assert seen[0].size < profile.size
    assert seen[0].red < profile.red


def test_leaf_makes_no_recursive_calls(lineage, canvas, monkeypatch) -> None:
    renderer = TreeRenderer(lineage, canvas)
    calls = []
    monkeypatch.setattr(renderer, "draw", lambda *args: calls.append(args))

    TreeRenderer.draw(renderer, 0, Vector2(0, 0), 0.0, make_profile())
    assert calls == []


def test_full_tree_branch_count_matches_lineage(lineage, canvas) -> None:
    renderer = TreeRenderer(lineage, canvas)
    renderer.draw_tree(Vector2(650, 200), math.pi / 2)

    assert renderer.branches_drawn == count_branches(lineage)


def test_draw_is_deterministic_between_regenerations(seeded_rng) -> None:
    lineage = GenomeLineage(seeded_rng, generation_count=4)
    first, second = RecordingCanvas(), RecordingCanvas()

    TreeRenderer(lineage, first).draw_tree(Vector2(0, 0), math.pi / 2)
    TreeRenderer(lineage, second).draw_tree(Vector2(0, 0), math.pi / 2)

    assert first.commands == second.commands


def test_draw_never_touches_the_rng(canvas) -> None:
    rng = random.Random(5)
    lineage = GenomeLineage(rng, generation_count=3)
    state = rng.getstate()

    TreeRenderer(lineage, canvas).draw_tree(Vector2(0, 0), math.pi / 2)
    assert rng.getstate() == state


@pytest.mark.parametrize("generation_index", [-1, 8])
def test_rejects_out_of_range_generation(lineage, canvas, generation_index: int) -> None:
    renderer = TreeRenderer(lineage, canvas)
    with pytest.raises(RenderError):
        renderer.draw(generation_index, Vector2(0, 0), 0.0, make_profile())


def test_rejects_non_positive_step(lineage, canvas) -> None:
    with pytest.raises(RenderError, match="Step length"):
        TreeRenderer(lineage, canvas, step=0.0)


def test_profile_is_not_mutated(lineage, canvas) -> None:
    profile = make_profile()
    snapshot = replace(profile)
    TreeRenderer(lineage, canvas).draw(2, Vector2(0, 0), 0.0, profile)
    assert profile == snapshot
