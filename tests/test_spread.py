"""Unit tests for the FireSpread transition rule."""

import random

import pytest
from mesa import Model

from forest_fire.cell import CellState
from forest_fire.forest import Forest
from forest_fire.random_source import RandomSource
from forest_fire.spread import FireSpread, NEIGHBOUR_OFFSETS


def set_state(forest, x, y, state):
    cell = forest.cell(x, y)
    cell.state = state
    cell.next_state = state


@pytest.fixture
def forest():
    """5x5 forest burning at the top neighbour of the centre cell."""
    return Forest(Model(), 5, 5, (2, 1))


class TestNextState:
    """Test cases for the per-cell rule."""

    def test_neighbour_order(self):
        """Test that neighbours are checked top, left, right, bottom."""
        assert NEIGHBOUR_OFFSETS == ((0, -1), (-1, 0), (1, 0), (0, 1))

    def test_burning_burns_out_without_draw(self, forest, scripted_random):
        """Test that a burning cell is Burnt next tick with no RNG involved."""
        rng = scripted_random([])
        spread = FireSpread(rng, 100)
        assert spread.next_state(forest, 2, 1) == CellState.Burnt
        assert rng.calls == []

    def test_burnt_stays_burnt(self, forest, scripted_random):
        """Test that Burnt is terminal even next to a fire."""
        set_state(forest, 1, 1, CellState.Burnt)
        rng = scripted_random([])
        assert FireSpread(rng, 100).next_state(forest, 1, 1) == CellState.Burnt
        assert rng.calls == []

    def test_no_spontaneous_ignition(self, forest, scripted_random):
        """Test that a cell without burning neighbours stays Unburned and draws nothing."""
        rng = scripted_random([])
        assert FireSpread(rng, 100).next_state(forest, 3, 3) == CellState.Unburned
        assert rng.calls == []

    def test_border_never_ignites_interior(self, scripted_random):
        """Test that Burnt border neighbours are not a source of fire."""
        forest = Forest(Model(), 3, 3, (1, 1))
        set_state(forest, 1, 1, CellState.Unburned)
        rng = scripted_random([])
        assert FireSpread(rng, 100).next_state(forest, 1, 1) == CellState.Unburned

    def test_ignites_on_winning_draw(self, forest, scripted_random):
        """Test that a winning draw from a burning neighbour ignites the cell."""
        rng = scripted_random([10])
        assert FireSpread(rng, 50).next_state(forest, 2, 2) == CellState.Burning
        assert rng.calls == [(0, 100)]

    def test_stays_unburned_on_losing_draw(self, forest, scripted_random):
        """Test that a lost draw leaves the cell Unburned."""
        rng = scripted_random([50])
        assert FireSpread(rng, 50).next_state(forest, 2, 2) == CellState.Unburned

    def test_first_winner_short_circuits(self, forest, scripted_random):
        """Test that checking stops after the first neighbour that ignites the cell."""
        set_state(forest, 1, 2, CellState.Burning)
        set_state(forest, 2, 3, CellState.Burning)
        rng = scripted_random([0])
        assert FireSpread(rng, 50).next_state(forest, 2, 2) == CellState.Burning
        assert len(rng.calls) == 1

    def test_losing_neighbour_does_not_block_others(self, forest, scripted_random):
        """Test that every burning neighbour gets its own draw until one wins."""
        set_state(forest, 1, 2, CellState.Burning)
        set_state(forest, 2, 3, CellState.Burning)
        # top loses, left loses, right is not burning, bottom wins
        rng = scripted_random([99, 99, 0])
        assert FireSpread(rng, 50).next_state(forest, 2, 2) == CellState.Burning
        assert len(rng.calls) == 3

    def test_all_neighbours_lose(self, forest, scripted_random):
        """Test that losing every draw keeps the cell Unburned."""
        set_state(forest, 1, 2, CellState.Burning)
        set_state(forest, 3, 2, CellState.Burning)
        set_state(forest, 2, 3, CellState.Burning)
        rng = scripted_random([70, 80, 90, 60])
        assert FireSpread(rng, 50).next_state(forest, 2, 2) == CellState.Unburned
        assert rng.values == []

    def test_diagonals_ignored(self, scripted_random):
        """Test that only orthogonal neighbours can spread fire."""
        forest = Forest(Model(), 5, 5, (1, 1))
        rng = scripted_random([])
        assert FireSpread(rng, 100).next_state(forest, 2, 2) == CellState.Unburned


class TestStageNextStates:
    """Test cases for phase one of a tick."""

    def test_staging_reads_only_committed_states(self, forest):
        """Test that cells ignited this tick do not spread further in the same tick."""
        FireSpread(RandomSource(random.Random(0)), 100).stage_next_states(forest)

        # Nothing visible until commit
        assert forest.get(2, 1) == CellState.Burning
        assert forest.get(2, 2) == CellState.Unburned
        assert forest.cell(2, 2).next_state == CellState.Burning
        assert forest.cell(2, 3).next_state == CellState.Unburned

    def test_draws_follow_traversal_order(self, scripted_random):
        """Test that draws happen x outer, y inner, one per burning neighbour seen."""
        forest = Forest(Model(), 5, 5, (2, 2))
        rng = scripted_random([0, 0, 0, 0])
        FireSpread(rng, 100).stage_next_states(forest)
        forest.commit()
        assert rng.values == []
        burning = [(x, y) for x, y in forest.interior_coords() if forest.get(x, y) == CellState.Burning]
        assert burning == [(1, 2), (2, 1), (2, 3), (3, 2)]
