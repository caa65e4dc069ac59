import os
import tempfile
import unittest

from omegaconf import OmegaConf

import cube_play
from config import initial_state, load_config
from cube_model import SOLVED_STATE


class TestConfig(unittest.TestCase):

    def test_defaults_without_file(self):
        config = load_config(path=None)
        self.assertEqual(config.scramble.length, 25)
        self.assertEqual(len(config.scramble.pool), 18)
        self.assertEqual(config.player.interval, 0.25)
        self.assertEqual(initial_state(config), SOLVED_STATE)

    def test_file_and_overrides(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'config.yaml')
            with open(path, 'w') as f:
                f.write("scramble:\n  length: 10\ncube:\n  colors:\n    U: W\n    D: Y\n")
            config = load_config(path, overrides=OmegaConf.from_dotlist(["player.interval=0"]))
        self.assertEqual(config.scramble.length, 10)
        self.assertEqual(config.player.interval, 0)
        state = initial_state(config)
        self.assertEqual(state.sticker('U', 0, 0).color, 'W')
        self.assertEqual(state.sticker('D', 0, 0).color, 'Y')

    def test_invalid_values(self):
        with self.assertRaises(ValueError):
            load_config(None, overrides={'scramble': {'length': -1}})
        config = load_config(None, overrides={'cube': {'colors': {'U': 'W'}}})
        with self.assertRaises(ValueError):
            initial_state(config)  # W 与 D 面重复


class TestCubePlay(unittest.TestCase):

    def test_formula_run(self):
        cube = cube_play.main(["config=none.yaml", "formula=R U R' U'", "repeat=6", "interval=0"])
        self.assertTrue(cube.same_colors(SOLVED_STATE))

    def test_shuffle_and_piece(self):
        cube = cube_play.main(["config=none.yaml", "shuffle=true", "seed=1", "piece=F_0_2"])
        self.assertEqual(sorted(cube.color_counts().values()), [9] * 6)

    def test_config_overrides_from_command_line(self):
        # scramble.length=0 让打乱为空，只有覆盖项生效时才成立
        cube = cube_play.main(["config=none.yaml", "shuffle=true", "seed=1", "scramble.length=0"])
        self.assertEqual(cube, SOLVED_STATE)

        cube = cube_play.main(["config=none.yaml", "cube.colors.U=W", "cube.colors.D=Y"])
        self.assertEqual(cube.sticker('U', 1, 1).color, 'W')
        self.assertEqual(cube.sticker('D', 1, 1).color, 'Y')

        cube = cube_play.main(["config=none.yaml", "player.interval=0", "formula=R U R' U'", "repeat=6"])
        self.assertTrue(cube.is_solved())

    def test_split_cli(self):
        options, overrides = cube_play.split_cli(
            OmegaConf.from_dotlist(["formula=R U", "seed=3", "scramble.length=5"])
        )
        self.assertEqual(options, {'formula': 'R U', 'seed': 3})
        self.assertEqual(OmegaConf.to_container(overrides), {'scramble': {'length': 5}})


if __name__ == '__main__':
    unittest.main()
