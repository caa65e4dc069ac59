import random
import unittest

from cube_model import SOLVED_STATE
from cube_rotate import apply_moves
from moves import Move
from scramble import SCRAMBLE_POOL, generate_scramble, scramble_cube


class TestScramble(unittest.TestCase):

    def test_length_and_pool(self):
        moves = generate_scramble(25, rng=random.Random(1))
        self.assertEqual(len(moves), 25)
        pool = {Move.from_token(m) for m in SCRAMBLE_POOL}
        self.assertTrue(all(m in pool for m in moves))

    def test_no_consecutive_same_axis(self):
        rng = random.Random(42)
        for _ in range(50):
            moves = generate_scramble(30, rng=rng)
            for a, b in zip(moves, moves[1:]):
                self.assertNotEqual(a.axis, b.axis)

    def test_deterministic_with_seed(self):
        self.assertEqual(
            generate_scramble(10, rng=random.Random(5)),
            generate_scramble(10, rng=random.Random(5)),
        )

    def test_scramble_cube(self):
        state, moves = scramble_cube(length=20, rng=random.Random(3))
        self.assertEqual(state, apply_moves(SOLVED_STATE, moves))
        self.assertEqual(sorted(state.color_counts().values()), [9] * 6)

    def test_single_axis_pool_rejected(self):
        with self.assertRaises(ValueError):
            generate_scramble(5, pool=['U', "D'"])
        self.assertEqual(len(generate_scramble(1, pool=['U'])), 1)

    def test_empty_scramble(self):
        state, moves = scramble_cube(length=0)
        self.assertEqual(moves, [])
        self.assertEqual(state, SOLVED_STATE)


if __name__ == '__main__':
    unittest.main()
