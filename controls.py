from moves import Move

# 键盘字母 -> 转动字母；Shift 表示逆时针
KEY_TO_LETTER = {
    'U': 'U', 'D': 'D', 'L': 'L', 'R': 'R', 'F': 'F', 'B': 'B',
    'M': 'M', 'E': 'E', 'S': 'S',
    'X': 'x', 'Y': 'y', 'Z': 'z',
}

# 按钮网格，每行对应一个轴：整体转动、左层、中层、右层
CONTROL_AXES = [
    {'cube': 'z', 'left': 'D', 'middle': 'E', 'right': 'U'},
    {'cube': 'x', 'left': 'B', 'middle': 'S', 'right': 'F'},
    {'cube': 'y', 'left': 'L', 'middle': 'M', 'right': 'R'},
]
COLUMNS = ['cube', 'left', 'middle', 'right']


def key_to_move(key, shift=False):
    """键盘按键 -> Move；不认识的按键返回 None"""
    letter = KEY_TO_LETTER.get(key.upper()) if key else None
    if letter is None:
        return None
    return Move.of(letter, -1 if shift else 1)


def button_move(letter, clockwise=True, double_click=False):
    """按钮点击 -> Move；双击得到 180° 转动"""
    if double_click:
        return Move.of(letter, 2)
    return Move.of(letter, 1 if clockwise else -1)


def button_grid():
    """
    返回两组按钮行：先顺时针，后逆时针。
    每行是 [Move, Move, Move, Move]，顺序同 COLUMNS。
    """
    clockwise = [[button_move(axis[col]) for col in COLUMNS] for axis in CONTROL_AXES]
    counter = [[button_move(axis[col], clockwise=False) for col in COLUMNS] for axis in CONTROL_AXES]
    return clockwise + counter
