"""
Tests for archive grid drag-to-reorder
"""
import pytest

from cmyk_studio.services.grid_reorder import (
    ArchiveItem, GridReorderController, STATE_DRAG_OVER, STATE_DRAGGING, relocate,
)


@pytest.fixture
def grid():
    return GridReorderController()


def drag(grid, items, from_index, *entered):
    grid.drag_start(from_index)
    for index in entered:
        grid.drag_enter(index)
    return grid.drop(items)


class TestRelocate:

    def test_forward(self):
        assert relocate(['A', 'B', 'C', 'D'], 0, 2) == ['B', 'C', 'A', 'D']

    def test_backward(self):
        assert relocate(['A', 'B', 'C', 'D'], 3, 1) == ['A', 'D', 'B', 'C']

    def test_input_untouched(self):
        items = ['A', 'B']
        relocate(items, 0, 1)
        assert items == ['A', 'B']


class TestDrop:

    def test_drop_relocates(self, grid):
        assert drag(grid, ['A', 'B', 'C', 'D'], 0, 2) == ['B', 'C', 'A', 'D']

    def test_last_entered_card_wins(self, grid):
        assert drag(grid, ['A', 'B', 'C', 'D'], 0, 1, 3, 2) == ['B', 'C', 'A', 'D']

    def test_is_a_permutation(self, grid):
        items = ['A', 'B', 'C', 'D', 'E']
        result = drag(grid, items, 4, 0)
        assert sorted(result) == sorted(items)
        assert result == ['E', 'A', 'B', 'C', 'D']

    def test_same_index_is_noop(self, grid):
        assert drag(grid, ['A', 'B'], 1, 1) == ['A', 'B']

    def test_no_target_is_noop(self, grid):
        assert drag(grid, ['A', 'B'], 0) == ['A', 'B']

    def test_drop_without_start_is_noop(self, grid):
        grid.drag_enter(1)
        assert grid.drop(['A', 'B']) == ['A', 'B']

    def test_out_of_range_is_noop(self, grid):
        assert drag(grid, ['A', 'B'], 0, 5) == ['A', 'B']

    def test_state_reset_after_drop(self, grid):
        drag(grid, ['A', 'B'], 0, 1)
        assert grid.state.from_index is None
        assert grid.state.to_index is None

    def test_archive_items(self, grid):
        items = [ArchiveItem(str(i), f'https://cdn.example/{i}.png', f'Portrait {i}') for i in range(3)]
        result = drag(grid, items, 2, 0)
        assert [item.id for item in result] == ['2', '0', '1']


class TestCardState:

    def test_highlights_during_gesture(self, grid):
        grid.drag_start(0)
        grid.drag_enter(2)
        assert grid.item_state(0) == STATE_DRAGGING
        assert grid.item_state(2) == STATE_DRAG_OVER
        assert grid.item_state(1) is None

    def test_position_label_is_one_based(self):
        assert GridReorderController.position_label(0) == 'Position: 1'
        assert GridReorderController.position_label(9) == 'Position: 10'
