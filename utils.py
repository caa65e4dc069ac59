# utils.py
import torch

from cube_model import COLOR_CHARS, STICKER_IDS, CubeState, Sticker
from moves import MOVES_POOL

MOVE_TO_IDX = {m: i for i, m in enumerate(MOVES_POOL)}
IDX_TO_MOVE = {i: m for m, i in MOVE_TO_IDX.items()}

# 未知动作统一映射到这个下标
NO_MOVE_TOKEN = len(MOVES_POOL)


def convert_state_to_tensor(state, color_to_id=None):
    """
    state: CubeState 或 6x9 颜色布局
    color_to_id: dict, 把 'R','G','B','Y','O','W' 映射到 0..5
    返回: 形如 (54,) 的 LongTensor，顺序为 [U, L, F, R, B, D]
    """
    if color_to_id is None:
        color_to_id = {c: i for i, c in enumerate(COLOR_CHARS)}
    if isinstance(state, CubeState):
        state = state.to_6x9()

    flat = []
    for face_row in state:
        for color_char in face_row:
            if color_char not in color_to_id:
                raise ValueError(f"未知颜色: {color_char}")
            flat.append(color_to_id[color_char])
    return torch.tensor(flat, dtype=torch.long)


def convert_rotation_to_tensor(state):
    """每个贴纸的 rotation 换算为 0..3 的四分之一圈数，形如 (54,)"""
    return torch.tensor([r // 90 for r in state.rotations()], dtype=torch.long)


def convert_tensor_to_state(tensor_54, rotation_54=None, id_to_color=None):
    """
    将 (54,) 的颜色张量（以及可选的 rotation 张量）还原为 CubeState。
    """
    if id_to_color is None:
        id_to_color = {i: c for i, c in enumerate(COLOR_CHARS)}
    tensor_54 = tensor_54.view(-1)
    assert tensor_54.size(0) == 54, "输入张量必须长度为 54"
    if rotation_54 is None:
        rotations = [0] * 54
    else:
        rotations = [int(q) * 90 % 360 for q in rotation_54.view(-1).tolist()]

    stickers = []
    for sid, color_id, rotation in zip(STICKER_IDS, tensor_54.tolist(), rotations):
        stickers.append(Sticker(sid, id_to_color[color_id], rotation))
    return CubeState(stickers)


def move_str_to_idx(move_str):
    """把动作字符串 (如 'R','R2',"R'") -> 0..35 的整数标签"""
    if move_str not in MOVE_TO_IDX:
        return NO_MOVE_TOKEN
    return MOVE_TO_IDX[move_str]


def move_idx_to_str(move_idx):
    """把 0..35 -> 'U',"U'",'U2',...；越界时抛 KeyError"""
    return IDX_TO_MOVE[move_idx]
