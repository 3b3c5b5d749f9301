import unittest

from game import Snake, SnakeEmptyError


class TestSnake(unittest.TestCase):
    def test_given_empty_snake_when_reading_head_or_tail_then_precondition_error(self):
        s = Snake()
        self.assertEqual(len(s), 0)
        with self.assertRaises(SnakeEmptyError):
            s.head()
        with self.assertRaises(SnakeEmptyError):
            s.remove_tail()
        # Still an IndexError for callers that only care about that
        self.assertTrue(issubclass(SnakeEmptyError, IndexError))

    def test_given_added_heads_when_querying_then_head_is_latest_and_tail_is_oldest(self):
        s = Snake()
        s.add_head((5, 5))
        s.add_head((6, 5))
        s.add_head((7, 5))
        self.assertEqual(s.head(), (7, 5))
        self.assertEqual(s.segments(), ((7, 5), (6, 5), (5, 5)))
        self.assertEqual(s.remove_tail(), (5, 5))
        self.assertEqual(s.head(), (7, 5))
        self.assertEqual(len(s), 2)

    def test_given_interleaved_ops_when_checking_occupancy_then_matches_segments(self):
        s = Snake([(1, 1)])
        s.add_head((1, 2))
        self.assertTrue(s.occupies((1, 1)))
        self.assertTrue(s.occupies((1, 2)))
        self.assertFalse(s.occupies((2, 2)))

        s.remove_tail()
        self.assertFalse(s.occupies((1, 1)))
        s.add_head((2, 2))
        self.assertTrue(s.occupies((2, 2)))
        self.assertEqual(s.head(), (2, 2))
        self.assertEqual(list(s), [(2, 2), (1, 2)])

    def test_given_single_segment_when_removing_tail_then_head_is_gone_too(self):
        s = Snake()
        s.add_head((3, 3))
        self.assertEqual(s.remove_tail(), (3, 3))
        with self.assertRaises(SnakeEmptyError):
            s.head()

    def test_given_sliding_window_when_moving_many_times_then_length_stays_constant(self):
        s = Snake([(1, 1), (1, 2), (1, 3)])  # head first
        for x in range(2, 9):
            s.remove_tail()
            s.add_head((x, 1))
            self.assertEqual(len(s), 3)
            self.assertEqual(s.head(), (x, 1))
        self.assertEqual(s.segments(), ((8, 1), (7, 1), (6, 1)))


if __name__ == '__main__':
    unittest.main(verbosity=2)
