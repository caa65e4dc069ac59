"""
命令行入口，参数用 OmegaConf 的 key=value 形式传入，例如：

    python cube_play.py formula="R U R' U'" repeat=6 interval=0
    python cube_play.py shuffle=true seed=42 show_rotation=true
    python cube_play.py piece=F_0_2
"""

import random

from omegaconf import OmegaConf

from config import initial_state, load_config
from formula import format_formula, parse_formula
from pieces import piece_containing, piece_kind, piece_name, piece_stickers
from player import FormulaPlayer
from projection import render_cross
from scramble import scramble_cube


# 只属于命令行的参数，其余 key=value 作为配置覆盖项
CLI_OPTIONS = ['config', 'formula', 'repeat', 'shuffle', 'seed', 'piece', 'show_rotation', 'interval']


def split_cli(cli):
    """把命令行参数拆成 (命令行选项 dict, 配置覆盖 DictConfig)"""
    options = {}
    for key in CLI_OPTIONS:
        if key in cli:
            options[key] = cli.pop(key)
    return options, cli


def main(argv=None):
    options, overrides = split_cli(OmegaConf.from_cli(argv))
    config = load_config(options.get('config', 'config.yaml'), overrides=overrides)

    cube = initial_state(config)

    if options.get('shuffle', False):
        rng = random.Random(options.get('seed', None))
        cube, moves = scramble_cube(
            cube,
            length=config.scramble.length,
            pool=list(config.scramble.pool),
            rng=rng,
        )
        print(f"打乱: {format_formula(moves)}")

    formula = options.get('formula', None)
    if formula:
        moves = parse_formula(str(formula))
        repeat = int(options.get('repeat', 1))
        print(f"公式: {format_formula(moves)} x {repeat}")
        interval = float(options.get('interval', config.player.interval))
        colors = OmegaConf.to_container(config.cube.colors, resolve=True)
        player = FormulaPlayer(cube, interval=interval, face_colors=colors)
        player.register_callback(lambda state: print(f"  {player.history[-1]}"))
        player.play(moves * repeat)
        cube = player.state

    sticker = options.get('piece', None)
    if sticker:
        index = piece_containing(str(sticker))
        print(f"{sticker} 属于 {piece_kind(index)} {piece_name(index)}: {piece_stickers(index)}")

    print(render_cross(cube, show_rotation=bool(options.get('show_rotation', False))))
    print(f"复原: {cube.is_solved()}")
    return cube


if __name__ == '__main__':
    main()
