from collections import namedtuple
from functools import reduce

from cube_model import (
    SOLVED_STATE,
    STICKER_IDS,
    CubeState,
    Sticker,
    sticker_index,
)
from moves import Move

# 面自身顺时针旋转：new[r][c] = old[2-c][r]，按面内下标 0..8 给出来源
CW_FACE_MAP = [(2 - c) * 3 + r for r in range(3) for c in range(3)]
# 逆时针：new[r][c] = old[c][2-r]
CCW_FACE_MAP = [c * 3 + (2 - r) for r in range(3) for c in range(3)]


def _cells(face, cells):
    return [sticker_index(face, r, c) for r, c in cells]


def _row(face, r):
    return _cells(face, [(r, i) for i in range(3)])


def _row_rev(face, r):
    return _cells(face, [(r, 2 - i) for i in range(3)])


def _col(face, c):
    return _cells(face, [(i, c) for i in range(3)])


def _col_rev(face, c):
    return _cells(face, [(2 - i, c) for i in range(3)])


# plate: 随层一起转动的面（中层为 None）
# cycle: 四条贴纸带 [s0, s1, s2, s3]，顺时针时 s0 <- s1 <- s2 <- s3 <- s0
# delta: 顺时针时贴纸在带之间移动时 rotation 的增量
LayerTurn = namedtuple('LayerTurn', ['plate', 'cycle', 'delta'])

LAYER_TURNS = {
    'U': LayerTurn('U', [_row('F', 0), _row('R', 0), _row('B', 0), _row('L', 0)], 0),
    'D': LayerTurn('D', [_row('F', 2), _row('L', 2), _row('B', 2), _row('R', 2)], 0),
    'L': LayerTurn('L', [_col('U', 0), _col_rev('B', 2), _col('D', 0), _col('F', 0)], 0),
    'R': LayerTurn('R', [_col('U', 2), _col('F', 2), _col('D', 2), _col_rev('B', 0)], 0),
    'F': LayerTurn('F', [_row('U', 2), _col_rev('L', 2), _row_rev('D', 0), _col('R', 0)], 90),
    'B': LayerTurn('B', [_row('U', 0), _col('R', 2), _row_rev('D', 2), _col_rev('L', 0)], -90),
    'M': LayerTurn(None, [_col('U', 1), _col_rev('B', 1), _col('D', 1), _col('F', 1)], 0),
    'E': LayerTurn(None, [_row('F', 1), _row('L', 1), _row('B', 1), _row('R', 1)], 0),
    'S': LayerTurn(None, [_row('U', 1), _col_rev('L', 1), _row_rev('D', 1), _col('R', 1)], 90),
}

# 整体转动 = 三个平行层的组合
ROTATION_COMPOSITIONS = {
    'z': [Move.U, Move.E_PRIME, Move.D_PRIME],
    'y': [Move.R, Move.M_PRIME, Move.L_PRIME],
    'x': [Move.F, Move.S, Move.B_PRIME],
}


def build_table(turn, clockwise):
    """
    将一个 LayerTurn 编译为 (来源下标, rotation 增量) 两个长度为 54 的列表。
    逆时针版本由同一个 cycle 反向得到。
    """
    source = list(range(54))
    delta = [0] * 54
    sign = 1 if clockwise else -1

    if turn.plate is not None:
        start = sticker_index(turn.plate, 0, 0)
        face_map = CW_FACE_MAP if clockwise else CCW_FACE_MAP
        for k, old_k in enumerate(face_map):
            source[start + k] = start + old_k
            delta[start + k] = 90 * sign

    cycle = turn.cycle if clockwise else turn.cycle[::-1]
    for j, dest in enumerate(cycle):
        src = cycle[(j + 1) % 4]
        for i in range(3):
            source[dest[i]] = src[i]
            delta[dest[i]] = turn.delta * sign
    return source, delta


MOVE_TABLES = {}
for _letter, _turn in LAYER_TURNS.items():
    MOVE_TABLES[Move.of(_letter, 1)] = build_table(_turn, clockwise=True)
    MOVE_TABLES[Move.of(_letter, -1)] = build_table(_turn, clockwise=False)


def _permute(state, table):
    source, delta = table
    old = state.stickers
    new_stickers = []
    for k, (s, d) in enumerate(zip(source, delta)):
        if s == k and d == 0:
            new_stickers.append(old[k])
        else:
            new_stickers.append(
                Sticker(STICKER_IDS[k], old[s].color, (old[s].rotation + d) % 360)
            )
    return CubeState(new_stickers)


def apply_move(state: CubeState, move: Move) -> CubeState:
    """
    对魔方状态执行一次转动，返回新的状态（不修改原始 state）。

    180° 转动等于连续两次 90° 转动；整体转动 x/y/z 等于三个平行层转动的组合。
    """
    if move.turns == 2:
        return apply_move(apply_move(state, move.base), move.base)
    if move.is_rotation:
        parts = ROTATION_COMPOSITIONS[move.letter]
        if move.turns == -1:
            parts = [m.inverse for m in parts]
        return apply_moves(state, parts)
    return _permute(state, MOVE_TABLES[move])


def apply_moves(state: CubeState, moves) -> CubeState:
    return reduce(apply_move, moves, state)


def move_cube(state_cube, move):
    """
    按字符串记号转动，例如 'U', "U'", 'U2', 'x'。
    记号非法时抛出 InvalidMove。
    """
    if not isinstance(move, Move):
        move = Move.from_token(move)
    return apply_move(state_cube, move)


if __name__ == '__main__':
    cube = SOLVED_STATE
    sexy = [Move.R, Move.U, Move.R_PRIME, Move.U_PRIME]
    for i in range(6):
        cube = apply_moves(cube, sexy)
        print(f"第 {i + 1} 次 R U R' U': 复原={cube.is_solved()}")
    for face, rows in zip('ULFRBD', cube.to_6x9()):
        print(f"Face {face}: {rows}")
