"""
块（piece）索引：把 54 个贴纸 id 划分为 26 个刚性块。

6 个中心块（1 个贴纸）、12 个棱块（2 个）、8 个角块（3 个）。
划分只取决于魔方拓扑，与当前颜色无关，模块加载时计算一次。
"""

from typing import FrozenSet, List, Tuple

from cube_model import FACE_ORDER, STICKER_IDS, index_to_position

PIECE_KINDS = {1: 'center', 2: 'edge', 3: 'corner'}

# 命名时的面顺序，例如角块 'UFR'
_NAME_ORDER = ['U', 'D', 'F', 'B', 'R', 'L']


def sticker_coordinate(face, row, col) -> Tuple[int, int, int]:
    """
    贴纸所在小块的三维坐标 (x, y, z)，各分量取 -1/0/1。
    x 向右 (R)，y 向上 (U)，z 向前 (F)。
    """
    if face == 'U':
        return col - 1, 1, row - 1
    if face == 'D':
        return col - 1, -1, 1 - row
    if face == 'F':
        return col - 1, 1 - row, 1
    if face == 'B':
        return 1 - col, 1 - row, -1
    if face == 'R':
        return 1, 1 - row, 1 - col
    if face == 'L':
        return -1, 1 - row, col - 1
    raise KeyError(face)


def _build_pieces() -> List[FrozenSet[str]]:
    groups = {}
    for index, sid in enumerate(STICKER_IDS):
        coord = sticker_coordinate(*index_to_position(index))
        groups.setdefault(coord, []).append(sid)
    # 中心、棱、角依次排列；同类按第一个贴纸的下标排序
    ordered = sorted(
        groups.values(),
        key=lambda ids: (len(ids), STICKER_IDS.index(ids[0])),
    )
    return [frozenset(ids) for ids in ordered]


PIECES = tuple(_build_pieces())
_PIECE_OF = {sid: i for i, piece in enumerate(PIECES) for sid in piece}


def pieces() -> Tuple[FrozenSet[str], ...]:
    return PIECES


def find_piece_index(sticker_id) -> int:
    """线性扫描 26 个块，返回包含该贴纸的块下标；不存在时返回 -1"""
    for i, piece in enumerate(PIECES):
        if sticker_id in piece:
            return i
    return -1


def piece_containing(sticker_id) -> int:
    """返回包含该贴纸的块下标；非法 id 抛出 KeyError"""
    try:
        return _PIECE_OF[sticker_id]
    except KeyError:
        raise KeyError(f"未知贴纸 id: {sticker_id}") from None


def piece_kind(piece_index) -> str:
    return PIECE_KINDS[len(PIECES[piece_index])]


def _name_of(piece) -> str:
    faces = {sid[0] for sid in piece}
    return ''.join(f for f in _NAME_ORDER if f in faces)


PIECE_NAMES = tuple(_name_of(piece) for piece in PIECES)


def piece_name(piece_index) -> str:
    """按所在面命名，例如 'U'、'UF'、'UFR'"""
    return PIECE_NAMES[piece_index]


def piece_stickers(piece_index) -> List[str]:
    """块内贴纸 id，按 FACE_ORDER 排序"""
    return sorted(PIECES[piece_index], key=lambda sid: FACE_ORDER.index(sid[0]))


def highlight(sticker_id) -> FrozenSet[str]:
    """与给定贴纸同属一块的全部贴纸 id，用于高亮整块"""
    return PIECES[piece_containing(sticker_id)]
