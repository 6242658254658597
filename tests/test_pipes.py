import random

import pytest

from ashbird.data_models import Pipe
from ashbird.pipes import PipeGenerator


@pytest.fixture
def generator():
    return PipeGenerator(width=400, ground_y=520, rng=random.Random(7))


def test_gap_bounds_leave_solid_margin(generator):
    assert generator.gap_bounds() == (80, 520 - 125 - 80)


@pytest.mark.parametrize("seed", [0, 1, 42, 2024])
def test_gap_heights_stay_in_bounds(seed):
    generator = PipeGenerator(width=400, ground_y=520, rng=random.Random(seed))
    low, high = generator.gap_bounds()
    generator.spawn_first_pipe()
    for _ in range(300):
        generator.spawn_if_due()
        generator.scroll(30)
        generator.remove_offscreen()
        for pipe in generator.pipes:
            assert low <= pipe.top_height <= high


def test_same_seed_same_pipes():
    a = PipeGenerator(width=400, ground_y=520, rng=random.Random(99))
    b = PipeGenerator(width=400, ground_y=520, rng=random.Random(99))
    for gen in (a, b):
        gen.spawn_first_pipe()
        for _ in range(3):
            gen.scroll(20)
            gen.spawn_if_due()
    assert a.pipes == b.pipes


def test_too_short_screen_uses_lower_bound():
    generator = PipeGenerator(width=400, ground_y=200, rng=random.Random(3))
    pipe = generator._spawn_pipe(400)
    assert pipe.top_height == 80


def test_first_pipe_spawns_closer(generator):
    pipe = generator.spawn_first_pipe()
    assert pipe.x == pytest.approx(260)
    assert generator.pipes == [pipe]


def test_spawns_when_empty(generator):
    generator.spawn_if_due()
    assert [p.x for p in generator.pipes] == [400]


def test_spawn_waits_for_spacing(generator):
    generator.spawn_if_due()
    generator.pipes[-1].x = 200
    generator.spawn_if_due()
    assert len(generator.pipes) == 1
    generator.pipes[-1].x = 199.9
    generator.spawn_if_due()
    assert len(generator.pipes) == 2
    assert generator.pipes[-1].x == 400


def test_scroll_moves_every_pipe(generator):
    generator.pipes.extend([Pipe(x=100, top_height=100), Pipe(x=300, top_height=100)])
    generator.scroll(2.0)
    assert [p.x for p in generator.pipes] == pytest.approx([93.6, 293.6])


def test_collect_passed_flags_each_pipe_once(generator):
    generator.pipes.extend([Pipe(x=-1, top_height=100), Pipe(x=100, top_height=100)])
    assert generator.collect_passed(80) == [generator.pipes[0]]
    assert generator.pipes[0].passed
    assert generator.collect_passed(80) == []


def test_passed_flag_is_never_cleared(generator):
    pipe = Pipe(x=-1, top_height=100)
    generator.pipes.append(pipe)
    generator.collect_passed(80)
    pipe.x = 500
    generator.collect_passed(80)
    assert pipe.passed


def test_remove_offscreen_keeps_order(generator):
    keep_a = Pipe(x=-79, top_height=100)
    keep_b = Pipe(x=150, top_height=120)
    generator.pipes.extend([Pipe(x=-81, top_height=90), keep_a, keep_b])
    pipes_list = generator.pipes
    generator.remove_offscreen()
    assert generator.pipes == [keep_a, keep_b]
    assert generator.pipes is pipes_list
