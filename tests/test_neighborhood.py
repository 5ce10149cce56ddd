import unittest
import numpy as np
import os

import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from upscale_errors import InvalidArgument
from neighborhood import Channel, extract_neighborhood, gather_neighborhoods

class TestExtractNeighborhood(unittest.TestCase):

    def setUp(self):
        # 4 rows x 5 columns x 3 channels, every sample distinct: 100*c + 10*y + x
        ys, xs = np.mgrid[0:4, 0:5]
        self.source = np.stack([100 * c + 10 * ys + xs for c in range(3)], axis=-1).astype(np.uint8)

    def test_interior_window(self):
        """Destination (4, 4) at scale 2 maps to source (2, 2); window spans x 1..4, y 1..3 (clamped)."""
        grid = extract_neighborhood(self.source, 2, 4, 4, Channel.GREEN)
        self.assertEqual(grid.shape, (4, 4))
        self.assertEqual(grid.dtype, np.float64)
        self.assertEqual(grid[1][1], self.source[2, 2, 1])
        xs = [1, 2, 3, 4]
        ys = [1, 2, 3, 3]
        for a in range(4):
            for b in range(4):
                self.assertEqual(grid[a][b], self.source[ys[b], xs[a], 1])

    def test_first_index_runs_along_x(self):
        grid = extract_neighborhood(self.source, 1, 2, 1, Channel.RED)
        # Stepping the first index moves one column (+1), the second one row (+10).
        self.assertEqual(grid[2][1] - grid[1][1], 1)
        self.assertEqual(grid[1][2] - grid[1][1], 10)

    def test_top_left_clamps_to_edge(self):
        grid = extract_neighborhood(self.source, 3, 1, 2, Channel.RED)
        np.testing.assert_array_equal(grid[0], grid[1])
        np.testing.assert_array_equal(grid[:, 0], grid[:, 1])
        self.assertEqual(grid[1][1], self.source[0, 0, 0])

    def test_bottom_right_clamps_to_edge(self):
        grid = extract_neighborhood(self.source, 2, 9, 7, Channel.BLUE)
        self.assertEqual(grid[1][1], self.source[3, 4, 2])
        np.testing.assert_array_equal(grid[2], grid[1])
        np.testing.assert_array_equal(grid[3], grid[1])
        np.testing.assert_array_equal(grid[:, 2], grid[:, 1])

    def test_int_channel_index(self):
        np.testing.assert_array_equal(extract_neighborhood(self.source, 2, 3, 3, 2),
                                      extract_neighborhood(self.source, 2, 3, 3, Channel.BLUE))

    def test_missing_channel(self):
        with self.assertRaises(InvalidArgument):
            extract_neighborhood(self.source, 2, 3, 3, Channel.ALPHA)

    def test_gather_matches_extract(self):
        dest_xs = np.arange(10)
        dest_ys = np.arange(8)
        block = gather_neighborhoods(self.source, 2, dest_xs, dest_ys)
        self.assertEqual(block.shape, (8, 10, 3, 4, 4))
        for dy in dest_ys:
            for dx in dest_xs:
                for c in range(3):
                    np.testing.assert_array_equal(block[dy, dx, c],
                                                  extract_neighborhood(self.source, 2, dx, dy, c))


class TestChannel(unittest.TestCase):

    def test_values_are_indices(self):
        self.assertEqual([int(c) for c in Channel], [0, 1, 2, 3])

    def test_from_name(self):
        self.assertIs(Channel.from_name("r"), Channel.RED)
        self.assertIs(Channel.from_name("G"), Channel.GREEN)
        self.assertIs(Channel.from_name("blue"), Channel.BLUE)
        self.assertIs(Channel.from_name(" Alpha "), Channel.ALPHA)

    def test_from_name_unknown(self):
        with self.assertRaises(InvalidArgument):
            Channel.from_name("x")

if __name__ == '__main__':
    unittest.main()
