# tests/montyhall/game/test_game_setup.py
"""
pytest-bdd test runner for game setup and the contestant's first pick
Real generators with fixed seeds, no mocks
"""
import logging

import numpy as np
import pytest
from pytest_bdd import scenarios, given, when, then, parsers

from src.montyhall.game.errors import MalformedStateError
from src.montyhall.game.game_setup import create_game, select_door
from src.montyhall.game.types import DOORS, DoorLabel, GameSetup

scenarios('game_setup.feature')

# Set up debug logging for tests
logging.basicConfig(level=logging.DEBUG, format='%(name)s - %(levelname)s - %(message)s')


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


# =============================================================================
# GIVEN steps - Setup
# =============================================================================

@given('a seeded random source')
def step_seeded_random_source(test_context, rng):
    test_context['rng'] = rng


# =============================================================================
# WHEN steps - Actions
# =============================================================================

@when(parsers.parse('I create {count:d} games'))
def step_create_games(test_context, count):
    rng = test_context['rng']
    test_context['games'] = [create_game(rng) for _ in range(count)]


@when(parsers.parse('the contestant picks {count:d} doors'))
def step_contestant_picks(test_context, count):
    rng = test_context['rng']
    test_context['picks'] = [select_door(rng) for _ in range(count)]


@when(parsers.parse('I create {count:d} games twice with seed {seed:d}'))
def step_create_games_twice(test_context, count, seed):
    runs = []
    for _ in range(2):
        rng = np.random.default_rng(seed)
        runs.append([create_game(rng) for _ in range(count)])
    test_context['runs'] = runs


@when(parsers.parse('I build a game with layout "{layout}"'))
def step_build_game(test_context, layout):
    try:
        test_context['game'] = GameSetup.from_names(layout.split())
        test_context['error'] = None
    except Exception as e:
        test_context['game'] = None
        test_context['error'] = e


# =============================================================================
# THEN steps - Assertions
# =============================================================================

@then(parsers.parse('every game should have {count:d} doors'))
def step_every_game_has_doors(test_context, count):
    for game in test_context['games']:
        assert len(game.labels) == count


@then(parsers.parse('every game should hide exactly {count:d} car'))
def step_every_game_one_car(test_context, count):
    for game in test_context['games']:
        assert game.labels.count(DoorLabel.CAR) == count
        assert game.labels.count(DoorLabel.GOAT) == len(DOORS) - count


@then(parsers.parse('the car should be behind each door in about 1/3 of games with a tolerance of {tolerance:f}'))
def step_car_uniform(test_context, tolerance):
    games = test_context['games']
    for door in DOORS:
        share = sum(1 for game in games if game.car_door == door) / len(games)
        assert abs(share - 1 / 3) < tolerance, f"Door {door} hid the car in {share:.3f} of games"


@then('every pick should be one of the doors 1, 2, 3')
def step_picks_in_range(test_context):
    for pick in test_context['picks']:
        assert isinstance(pick, int)
        assert pick in DOORS


@then(parsers.parse('each door should be picked in about 1/3 of cases with a tolerance of {tolerance:f}'))
def step_picks_uniform(test_context, tolerance):
    picks = test_context['picks']
    for door in DOORS:
        share = picks.count(door) / len(picks)
        assert abs(share - 1 / 3) < tolerance, f"Door {door} picked in {share:.3f} of cases"


@then('both runs should produce the same layouts')
def step_runs_identical(test_context):
    first, second = test_context['runs']
    assert first == second


@then('a MalformedStateError should be raised')
def step_malformed_raised(test_context):
    assert isinstance(test_context['error'], MalformedStateError), \
        f"Expected MalformedStateError, got {test_context['error']!r}"


@then('no error should be raised')
def step_no_error(test_context):
    assert test_context['error'] is None, f"Unexpected error: {test_context['error']}"


@then(parsers.parse('door {door:d} should hide a {label}'))
def step_door_hides(test_context, door, label):
    assert test_context['game'].label_at(door) is DoorLabel(label)


@then(parsers.parse('the car door should be {door:d}'))
def step_car_door(test_context, door):
    assert test_context['game'].car_door == door
