import random

from cube_model import SOLVED_STATE
from cube_rotate import apply_moves
from moves import Move

# 默认打乱池：面转与中层转的顺/逆时针，共 18 种
SCRAMBLE_POOL = [
    'U', "U'", 'D', "D'", 'L', "L'",
    'R', "R'", 'F', "F'", 'B', "B'",
    'M', "M'", 'E', "E'", 'S', "S'",
]


def generate_scramble(length=25, pool=None, rng=None):
    """
    随机生成长度为 length 的打乱序列。
    相邻两步不会落在同一物理轴上（U/D/E、L/R/M、F/B/S）。
    """
    if rng is None:
        rng = random
    if pool is None:
        pool = SCRAMBLE_POOL
    pool = [m if isinstance(m, Move) else Move.from_token(m) for m in pool]
    if length > 1 and len({m.axis for m in pool}) < 2:
        raise ValueError("打乱池至少需要覆盖两个轴")

    moves = []
    for _ in range(length):
        candidates = pool
        if moves:
            candidates = [m for m in pool if m.axis != moves[-1].axis]
        moves.append(rng.choice(candidates))
    return moves


def scramble_cube(state=None, length=25, pool=None, rng=None):
    """随机打乱一个魔方，返回 (新状态, 打乱序列)"""
    if state is None:
        state = SOLVED_STATE
    moves = generate_scramble(length, pool, rng)
    return apply_moves(state, moves), moves
