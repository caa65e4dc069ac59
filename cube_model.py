from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

# 颜色符号，与面名无关
COLOR_CHARS = ['R', 'G', 'B', 'Y', 'O', 'W']

# 6x9 的面顺序，扁平下标 = FACE_OFFSET[face] + 3 * row + col
FACE_ORDER = ['U', 'L', 'F', 'R', 'B', 'D']
FACE_OFFSET = {face: i * 9 for i, face in enumerate(FACE_ORDER)}

# 复原状态下每个面的颜色
INITIAL_FACE_COLORS = {
    'U': 'Y',
    'D': 'W',
    'L': 'B',
    'R': 'G',
    'F': 'R',
    'B': 'O',
}


def sticker_id(face, row, col):
    """例如 sticker_id('F', 0, 2) -> 'F_0_2'"""
    return f"{face}_{row}_{col}"


def sticker_index(face, row, col):
    return FACE_OFFSET[face] + 3 * row + col


def index_to_position(index):
    """扁平下标 -> (face, row, col)"""
    face = FACE_ORDER[index // 9]
    row, col = divmod(index % 9, 3)
    return face, row, col


# 54 个贴纸 id，按扁平下标排列
STICKER_IDS = tuple(
    sticker_id(face, r, c) for face in FACE_ORDER for r in range(3) for c in range(3)
)
ID_TO_INDEX = {sid: i for i, sid in enumerate(STICKER_IDS)}


@dataclass(frozen=True)
class Sticker:
    """单个贴纸：id 固定在位置上，color 与 rotation 随转动移动。"""

    id: str
    color: str
    rotation: int = 0


class CubeState:
    """
    魔方状态的不可变快照。

    内部是 54 个 Sticker 组成的元组，按 FACE_ORDER 的 6x9 顺序排列。
    任何转动都会生成一个新的 CubeState，旧快照保持有效。
    """

    __slots__ = ('_stickers',)

    def __init__(self, stickers: Sequence[Sticker]):
        stickers = tuple(stickers)
        if len(stickers) != 54:
            raise ValueError(f"CubeState 需要 54 个贴纸，实际为 {len(stickers)}")
        self._stickers = stickers

    @classmethod
    def solved(cls, face_colors: Dict[str, str] = None) -> "CubeState":
        """按给定（或默认）的面颜色构造复原态。"""
        if face_colors is None:
            face_colors = INITIAL_FACE_COLORS
        face_colors = dict(face_colors)
        if sorted(face_colors) != sorted(FACE_ORDER):
            raise ValueError(f"需要 6 个面的颜色: {sorted(face_colors)}")
        if len(set(face_colors.values())) != 6:
            raise ValueError(f"6 个面的颜色必须互不相同: {face_colors}")
        return cls(
            Sticker(sid, face_colors[sid[0]], 0) for sid in STICKER_IDS
        )

    @classmethod
    def from_6x9(cls, state_6x9) -> "CubeState":
        """
        state_6x9: 6 行，每行 9 个颜色字符，行顺序为 [U, L, F, R, B, D]。
        rotation 全部为 0。
        """
        if len(state_6x9) != 6 or any(len(row) != 9 for row in state_6x9):
            raise ValueError("输入必须是 6x9 的颜色布局")
        flat = [color for row in state_6x9 for color in row]
        for color in flat:
            if color not in COLOR_CHARS:
                raise ValueError(f"未知颜色: {color}")
        return cls(Sticker(sid, color, 0) for sid, color in zip(STICKER_IDS, flat))

    @property
    def stickers(self) -> Tuple[Sticker, ...]:
        return self._stickers

    def __getitem__(self, face) -> Tuple[Tuple[Sticker, ...], ...]:
        """state['F'] -> 3x3 的贴纸网格"""
        start = FACE_OFFSET[face]
        return tuple(tuple(self._stickers[start + 3 * r:start + 3 * r + 3]) for r in range(3))

    def sticker(self, face, row, col) -> Sticker:
        return self._stickers[sticker_index(face, row, col)]

    def by_id(self, sid) -> Sticker:
        return self._stickers[ID_TO_INDEX[sid]]

    def faces(self) -> Dict[str, Tuple[Tuple[Sticker, ...], ...]]:
        return {face: self[face] for face in FACE_ORDER}

    def to_6x9(self) -> List[List[str]]:
        """导出为 6x9 颜色布局（去掉 rotation）"""
        return [
            [s.color for s in self._stickers[FACE_OFFSET[face]:FACE_OFFSET[face] + 9]]
            for face in FACE_ORDER
        ]

    def colors(self) -> Tuple[str, ...]:
        return tuple(s.color for s in self._stickers)

    def rotations(self) -> Tuple[int, ...]:
        return tuple(s.rotation for s in self._stickers)

    def color_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for s in self._stickers:
            counts[s.color] = counts.get(s.color, 0) + 1
        return counts

    def is_solved(self) -> bool:
        """每个面颜色一致即视为复原（不考虑 rotation）"""
        return all(len(set(row)) == 1 for row in self.to_6x9())

    def same_colors(self, other: "CubeState") -> bool:
        return self.colors() == other.colors()

    def __eq__(self, other):
        if not isinstance(other, CubeState):
            return NotImplemented
        return self._stickers == other._stickers

    def __hash__(self):
        return hash(self._stickers)

    def __repr__(self):
        rows = ' '.join(''.join(row) for row in self.to_6x9())
        return f"CubeState({rows})"


SOLVED_STATE = CubeState.solved()
