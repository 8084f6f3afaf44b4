"""
Tests for the bordered playfield: borders, overlay collision and line clearing.
"""

import numpy as np

from tetrus.game import Playfield


def make_field():
    return Playfield(12, 19)


class TestBorders:
    def test_border_cells_set(self):
        field = make_field()
        assert np.all(field.cells[18, :] == 1)
        assert np.all(field.cells[:, 0] == 1)
        assert np.all(field.cells[:, 11] == 1)

    def test_interior_empty(self):
        field = make_field()
        assert np.all(field.cells[:18, 1:11] == 0)

    def test_reset_restores_borders(self):
        field = make_field()
        field.cells[:] = 0
        field.cells[5, 5] = 1
        field.reset()
        assert field.cells[5, 5] == 0
        assert field.cells[18, 5] == 1
        assert field.cells[0, 0] == 1


class TestCanPlace:
    def test_empty_interior(self):
        field = make_field()
        assert field.can_place([(1, 0), (10, 17)])

    def test_border_collision(self):
        field = make_field()
        assert not field.can_place([(0, 5)])
        assert not field.can_place([(11, 5)])
        assert not field.can_place([(5, 18)])

    def test_settled_collision(self):
        field = make_field()
        field.cells[10, 4] = 1
        assert not field.can_place([(4, 10)])
        assert field.can_place([(5, 10)])

    def test_out_of_array_is_invalid(self):
        field = make_field()
        assert not field.can_place([(-1, 3)])
        assert not field.can_place([(3, 19)])

    def test_overlay_does_not_mutate(self):
        field = make_field()
        board = field.overlay([(3, 3), (3, 3)])
        assert board[3, 3] == 2
        assert field.cells[3, 3] == 0


class TestLineClear:
    def test_single_row_shifts_down(self):
        field = make_field()
        field.cells[17, 1:11] = 1
        field.cells[16, 2] = 1
        field.cells[0, 7] = 1

        assert field.clear_full_lines() == 1

        assert field.cells[17, 2] == 1
        assert field.cells[17, 1:11].sum() == 1
        assert field.cells[1, 7] == 1
        assert np.all(field.cells[0, 1:11] == 0)

    def test_two_separate_rows(self):
        field = make_field()
        field.cells[17, 1:11] = 1
        field.cells[15, 1:11] = 1
        field.cells[16, 3] = 1
        field.cells[14, 9] = 1

        assert field.clear_full_lines() == 2

        assert field.full_rows() == []
        assert field.cells[17, 3] == 1
        assert field.cells[16, 9] == 1
        assert field.cells[1:18, 1:11].sum() == 2

    def test_borders_untouched(self):
        field = make_field()
        field.cells[10, 1:11] = 1
        field.clear_full_lines()
        assert np.all(field.cells[:, 0] == 1)
        assert np.all(field.cells[:, 11] == 1)
        assert np.all(field.cells[18, :] == 1)

    def test_top_row_full(self):
        field = make_field()
        field.cells[0, 1:11] = 1
        assert field.clear_full_lines() == 1
        assert np.all(field.cells[0, 1:11] == 0)

    def test_floor_never_counts(self):
        field = make_field()
        assert field.full_rows() == []
        assert field.clear_full_lines() == 0
