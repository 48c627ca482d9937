# tests/montyhall/simulation/test_trial_runner.py
"""
pytest-bdd test runner for play_game
"""
import numpy as np
import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from src.montyhall.game.types import Outcome, Strategy
from src.montyhall.simulation.trial_runner import play_game

scenarios('trial_runner.feature')


@pytest.fixture
def test_context(request):
    """A per-scenario context dict with scenario name pre-attached."""
    ctx = {}
    scenario = getattr(request.node.function, "__scenario__", None)
    if scenario:
        ctx["scenario_name"] = scenario.name
    else:
        ctx["scenario_name"] = request.node.name
    return ctx


@given('a seeded random source')
def step_seeded_random_source(test_context, rng):
    test_context['rng'] = rng


@when(parsers.parse('I play a single game as trial {trial:d}'))
def step_play_single(test_context, trial):
    test_context['records'] = play_game(test_context['rng'], trial=trial)


@when(parsers.parse('I play {count:d} single games'))
def step_play_many(test_context, count):
    rng = test_context['rng']
    test_context['games'] = [play_game(rng, trial=i) for i in range(count)]


@when(parsers.parse('I play {count:d} single games twice with seed {seed:d}'))
def step_play_twice(test_context, count, seed):
    runs = []
    for _ in range(2):
        rng = np.random.default_rng(seed)
        runs.append([play_game(rng, trial=i) for i in range(count)])
    test_context['runs'] = runs


@then(parsers.parse('I should get {count:d} records'))
def step_record_count(test_context, count):
    assert len(test_context['records']) == count


@then(parsers.parse('the first record should be for strategy {strategy}'))
def step_first_strategy(test_context, strategy):
    assert test_context['records'][0].strategy is Strategy(strategy)


@then(parsers.parse('the second record should be for strategy {strategy}'))
def step_second_strategy(test_context, strategy):
    assert test_context['records'][1].strategy is Strategy(strategy)


@then(parsers.parse('both records should belong to trial {trial:d}'))
def step_same_trial(test_context, trial):
    assert all(record.trial == trial for record in test_context['records'])


@then('exactly one of stay and switch should win each game')
def step_one_winner(test_context):
    # the two final picks partition the unopened doors, one of which hides the car
    for stay, switch in test_context['games']:
        outcomes = {stay.outcome, switch.outcome}
        assert outcomes == {Outcome.WIN, Outcome.LOSE}


@then('both runs should produce the same records')
def step_runs_identical(test_context):
    first, second = test_context['runs']
    assert first == second
