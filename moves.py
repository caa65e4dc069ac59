from enum import Enum


class InvalidMove(ValueError):
    """无法识别的转动记号"""

    def __init__(self, token):
        super().__init__("Invalid move: " + repr(token))
        self.token = token


# 面转 / 中层转 / 整体转动的字母
FACE_LETTERS = ['U', 'D', 'L', 'R', 'F', 'B']
SLICE_LETTERS = ['M', 'E', 'S']
ROTATION_LETTERS = ['x', 'y', 'z']

# 每个字母所在的物理轴；整体转动取其组合层所在的轴
LETTER_AXIS = {
    'U': 'y', 'D': 'y', 'E': 'y', 'z': 'y',
    'L': 'x', 'R': 'x', 'M': 'x', 'y': 'x',
    'F': 'z', 'B': 'z', 'S': 'z', 'x': 'z',
}


class Move(Enum):
    """36 种转动：12 个字母 x (顺时针, 逆时针, 180°)"""

    U = "U"
    U_PRIME = "U'"
    U2 = "U2"
    D = "D"
    D_PRIME = "D'"
    D2 = "D2"
    L = "L"
    L_PRIME = "L'"
    L2 = "L2"
    R = "R"
    R_PRIME = "R'"
    R2 = "R2"
    F = "F"
    F_PRIME = "F'"
    F2 = "F2"
    B = "B"
    B_PRIME = "B'"
    B2 = "B2"
    M = "M"
    M_PRIME = "M'"
    M2 = "M2"
    E = "E"
    E_PRIME = "E'"
    E2 = "E2"
    S = "S"
    S_PRIME = "S'"
    S2 = "S2"
    X = "x"
    X_PRIME = "x'"
    X2 = "x2"
    Y = "y"
    Y_PRIME = "y'"
    Y2 = "y2"
    Z = "z"
    Z_PRIME = "z'"
    Z2 = "z2"

    @classmethod
    def from_token(cls, token):
        """严格转换，例如 "R'" -> Move.R_PRIME；无法识别时抛出 InvalidMove"""
        try:
            return cls(token)
        except ValueError:
            raise InvalidMove(token) from None

    @classmethod
    def of(cls, letter, turns=1):
        suffix = {1: '', -1: "'", 2: '2'}[turns]
        return cls.from_token(letter + suffix)

    @property
    def letter(self):
        return self.value[0]

    @property
    def turns(self):
        """1 = 顺时针 90°，-1 = 逆时针 90°，2 = 180°"""
        if self.value.endswith("'"):
            return -1
        if self.value.endswith('2'):
            return 2
        return 1

    @property
    def base(self):
        return Move(self.letter)

    @property
    def inverse(self):
        if self.turns == 2:
            return self
        return Move.of(self.letter, -self.turns)

    @property
    def axis(self):
        return LETTER_AXIS[self.letter]

    @property
    def is_rotation(self):
        return self.letter in ROTATION_LETTERS

    @property
    def is_slice(self):
        return self.letter in SLICE_LETTERS

    def __str__(self):
        return self.value


FACE_MOVES = [m for m in Move if m.letter in FACE_LETTERS]
SLICE_MOVES = [m for m in Move if m.is_slice]
ROTATION_MOVES = [m for m in Move if m.is_rotation]

# 全部 36 种合法转动的记号
MOVES_POOL = [m.value for m in Move]
