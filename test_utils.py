# 文件名: test_utils.py

import unittest
import torch

from cube_model import SOLVED_STATE
from cube_rotate import apply_moves
from formula import parse_formula
import utils


class TestUtils(unittest.TestCase):

    def test_convert_state_to_tensor(self):
        tensor_54 = utils.convert_state_to_tensor(SOLVED_STATE)
        self.assertEqual(tensor_54.shape, (54,))
        self.assertEqual(tensor_54.dtype, torch.long)
        # 默认 COLOR_CHARS = R G B Y O W
        self.assertTrue((tensor_54[:9] == 3).all())    # U: 'Y'
        self.assertTrue((tensor_54[9:18] == 2).all())  # L: 'B'
        self.assertTrue((tensor_54[18:27] == 0).all()) # F: 'R'
        self.assertTrue((tensor_54[27:36] == 1).all()) # R: 'G'
        self.assertTrue((tensor_54[36:45] == 4).all()) # B: 'O'
        self.assertTrue((tensor_54[45:] == 5).all())   # D: 'W'

        # 测试遇到未知颜色时抛异常
        with self.assertRaises(ValueError):
            bad_state = [['X'] * 9] + [['R'] * 9] * 5
            _ = utils.convert_state_to_tensor(bad_state)

    def test_tensor_round_trip_keeps_rotation(self):
        state = apply_moves(SOLVED_STATE, parse_formula("F S' B2 x"))
        colors = utils.convert_state_to_tensor(state)
        rotations = utils.convert_rotation_to_tensor(state)
        self.assertTrue(((rotations >= 0) & (rotations <= 3)).all())
        self.assertEqual(utils.convert_tensor_to_state(colors, rotations), state)

    def test_convert_tensor_to_state_bad_length(self):
        with self.assertRaises(AssertionError):
            _ = utils.convert_tensor_to_state(torch.tensor([0, 1, 2]))

    def test_move_str_to_idx(self):
        self.assertEqual(utils.move_str_to_idx('U'), 0)
        self.assertEqual(utils.move_str_to_idx("U'"), 1)
        self.assertEqual(utils.move_str_to_idx("z2"), 35)
        self.assertEqual(utils.move_str_to_idx("XYZ"), utils.NO_MOVE_TOKEN)

    def test_move_idx_to_str(self):
        self.assertEqual(utils.move_idx_to_str(0), 'U')
        self.assertEqual(utils.move_idx_to_str(5), 'D2')
        with self.assertRaises(KeyError):
            _ = utils.move_idx_to_str(999)


if __name__ == '__main__':
    unittest.main()
