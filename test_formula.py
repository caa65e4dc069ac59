import unittest

from cube_model import SOLVED_STATE
from cube_rotate import apply_moves
from formula import format_formula, invert_formula, parse_formula, run_formula
from moves import InvalidMove, Move


class TestFormula(unittest.TestCase):

    def test_parse_basic(self):
        self.assertEqual(
            parse_formula("R U R' U'"),
            [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME],
        )

    def test_parse_doubles_and_rotations(self):
        self.assertEqual(
            parse_formula("F2 M' x2 y z'"),
            [Move.F2, Move.M_PRIME, Move.X2, Move.Y, Move.Z_PRIME],
        )

    def test_unknown_tokens_are_skipped(self):
        self.assertEqual(parse_formula("sune: R U R' (note) U R U2 R'"), parse_formula("R U R' U R U2 R'"))
        self.assertEqual(parse_formula(""), [])
        self.assertEqual(parse_formula("   \n\t "), [])
        self.assertEqual(parse_formula("X r Uw"), [])

    def test_strict_mode(self):
        with self.assertRaises(InvalidMove) as ctx:
            parse_formula("R U foo", strict=True)
        self.assertEqual(ctx.exception.token, 'foo')

    def test_invert_formula(self):
        moves = parse_formula("R U2 F' x")
        inverse = invert_formula(moves)
        self.assertEqual(format_formula(inverse), "x' F U2 R'")
        state = apply_moves(SOLVED_STATE, moves)
        self.assertEqual(apply_moves(state, inverse), SOLVED_STATE)

    def test_run_formula(self):
        state = run_formula(SOLVED_STATE, "R U R' U' " * 6)
        self.assertTrue(state.same_colors(SOLVED_STATE))
        self.assertEqual(run_formula(SOLVED_STATE, "F R note U R' U' F'"), run_formula(SOLVED_STATE, "F R U R' U' F'"))


class TestMoveEnum(unittest.TestCase):

    def test_vocabulary_size(self):
        self.assertEqual(len(Move), 36)

    def test_properties(self):
        self.assertEqual(Move.R_PRIME.letter, 'R')
        self.assertEqual(Move.R_PRIME.turns, -1)
        self.assertEqual(Move.R2.turns, 2)
        self.assertEqual(Move.R2.inverse, Move.R2)
        self.assertEqual(Move.X.inverse, Move.X_PRIME)
        self.assertEqual(Move.E_PRIME.base, Move.E)
        self.assertEqual(Move.M.axis, Move.L.axis)
        self.assertNotEqual(Move.M.axis, Move.U.axis)
        self.assertTrue(Move.Y2.is_rotation)
        self.assertTrue(Move.S.is_slice)
        self.assertEqual(str(Move.Z_PRIME), "z'")

    def test_from_token(self):
        self.assertIs(Move.from_token("B'"), Move.B_PRIME)
        with self.assertRaises(InvalidMove):
            Move.from_token("B3")


if __name__ == '__main__':
    unittest.main()
