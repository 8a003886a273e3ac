"""Unit tests for TreeCell class."""

import pytest
from mesa import Model

from forest_fire.cell import TreeCell, CellState


class TestTreeCell:
    """Test cases for TreeCell class."""

    @pytest.fixture
    def model(self):
        """Create a bare mesa model to register cells with."""
        return Model()

    def test_cell_creation(self, model):
        """Test creating a tree cell."""
        cell = TreeCell(model, CellState.Unburned)
        assert cell.state == CellState.Unburned
        assert cell.next_state == CellState.Unburned
        assert cell.border is False

    def test_border_cell_is_burnt(self, model):
        """Test that border cells start Burnt whatever state is passed."""
        cell = TreeCell(model, CellState.Burning, border=True)
        assert cell.state == CellState.Burnt
        assert cell.next_state == CellState.Burnt

    def test_burnable_unburned_cell(self, model):
        """Test that interior unburned cells are burnable."""
        assert TreeCell(model, CellState.Unburned).is_burnable() is True

    @pytest.mark.parametrize("state", [CellState.Burning, CellState.Burnt])
    def test_not_burnable_when_on_fire_or_burnt(self, model, state):
        """Test that burning and burnt cells cannot catch fire."""
        assert TreeCell(model, state).is_burnable() is False

    def test_advance_applies_next_state(self, model):
        """Test that advance makes the staged state current."""
        cell = TreeCell(model, CellState.Unburned)
        cell.next_state = CellState.Burning
        assert cell.state == CellState.Unburned
        cell.advance()
        assert cell.state == CellState.Burning

    def test_border_cell_ignores_advance(self, model):
        """Test that a border cell never leaves the Burnt state."""
        cell = TreeCell(model, CellState.Unburned, border=True)
        cell.next_state = CellState.Burning
        cell.advance()
        assert cell.state == CellState.Burnt


class TestCellState:
    """Test cases for CellState enum."""

    def test_cell_state_values(self):
        """Test cell state values."""
        assert CellState.Unburned.value == 0
        assert CellState.Burning.value == 1
        assert CellState.Burnt.value == 2

    def test_states_compare_by_value(self):
        """Test that states are looked up by value, not identity of a shared object."""
        assert CellState(1) == CellState.Burning
