import unittest

from labyrinth import Direction, Grid, InvalidDimensions


class GridTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = Grid(3, 4)

    def test_new_grid_has_every_wall_and_no_visits(self) -> None:
        self.assertEqual(len(self.grid), 12)
        for cell in self.grid:
            self.assertEqual(cell.walls, [True, True, True, True])
            self.assertFalse(cell.visited)
            self.assertFalse(cell.solve_visited)
        self.assertEqual(self.grid.removed_wall_count(), 0)

    def test_cells_iterate_in_row_major_order(self) -> None:
        positions = [cell.position for cell in self.grid]
        self.assertEqual(positions, [(r, c) for r in range(3) for c in range(4)])

    def test_zero_dimensions_are_rejected(self) -> None:
        for rows, cols in ((0, 5), (5, 0), (0, 0), (-1, 3)):
            with self.assertRaises(InvalidDimensions):
                Grid(rows, cols)
        with self.assertRaises(ValueError):
            Grid(0, 1)

    def test_neighbor_lookup_respects_bounds(self) -> None:
        corner = self.grid.cell(0, 0)
        self.assertIsNone(self.grid.neighbor(corner, Direction.UP))
        self.assertIsNone(self.grid.neighbor(corner, Direction.LEFT))
        self.assertIs(self.grid.neighbor(corner, Direction.RIGHT), self.grid.cell(0, 1))
        self.assertIs(self.grid.neighbor(corner, Direction.DOWN), self.grid.cell(1, 0))

        far = self.grid.cell(2, 3)
        self.assertIsNone(self.grid.neighbor(far, Direction.DOWN))
        self.assertIsNone(self.grid.neighbor(far, Direction.RIGHT))

    def test_neighbors_follow_direction_order(self) -> None:
        middle = self.grid.cell(1, 1)
        directions = [direction for direction, _ in self.grid.neighbors(middle)]
        self.assertEqual(
            directions, [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]
        )

    def test_cell_lookup_outside_grid_raises(self) -> None:
        with self.assertRaises(IndexError):
            self.grid.cell(3, 0)
        with self.assertRaises(IndexError):
            self.grid.cell(0, -1)

    def test_remove_wall_opens_both_sides(self) -> None:
        a = self.grid.cell(1, 1)
        b = self.grid.cell(1, 2)
        self.grid.remove_wall(a, b)
        self.assertFalse(a.walls[Direction.RIGHT])
        self.assertFalse(b.walls[Direction.LEFT])
        self.assertFalse(self.grid.has_wall(b, a))
        self.assertEqual(self.grid.connected_neighbors(a), [b])
        self.assertEqual(self.grid.removed_wall_count(), 1)

    def test_remove_wall_between_distant_cells_fails(self) -> None:
        with self.assertRaises(ValueError):
            self.grid.remove_wall(self.grid.cell(0, 0), self.grid.cell(1, 1))

    def test_wall_mask_is_read_only_snapshot(self) -> None:
        self.grid.remove_wall(self.grid.cell(0, 0), self.grid.cell(1, 0))
        mask = self.grid.wall_mask()
        self.assertEqual(mask.shape, (3, 4, 4))
        self.assertFalse(mask[0, 0, Direction.DOWN])
        self.assertFalse(mask[1, 0, Direction.UP])
        self.assertTrue(mask[0, 0, Direction.RIGHT])
        with self.assertRaises(ValueError):
            mask[0, 0, 0] = False

    def test_reset_walls_restores_fresh_state(self) -> None:
        a = self.grid.cell(2, 2)
        a.visited = True
        a.solve_visited = True
        self.grid.remove_wall(a, self.grid.cell(2, 3))
        self.grid.reset_walls()
        self.assertEqual(self.grid.removed_wall_count(), 0)
        self.assertEqual(self.grid.visited_count(), 0)
        self.assertFalse(a.solve_visited)

    def test_direction_opposites(self) -> None:
        self.assertIs(Direction.UP.opposite, Direction.DOWN)
        self.assertIs(Direction.RIGHT.opposite, Direction.LEFT)
        self.assertIs(Direction.DOWN.opposite, Direction.UP)
        self.assertIs(Direction.LEFT.opposite, Direction.RIGHT)


if __name__ == "__main__":
    unittest.main()
