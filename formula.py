from typing import List

from cube_rotate import apply_moves
from moves import InvalidMove, Move


def parse_formula(formula: str, strict=False) -> List[Move]:
    """
    把空白分隔的公式字符串解析为 Move 列表，例如 "R U R' U'"。

    默认跳过无法识别的记号，允许在公式里夹杂备注；
    strict=True 时遇到第一个非法记号就抛出 InvalidMove。
    """
    moves = []
    for token in formula.split():
        try:
            moves.append(Move.from_token(token))
        except InvalidMove:
            if strict:
                raise
    return moves


def inverse_move(move: Move) -> Move:
    return move.inverse


def invert_formula(moves) -> List[Move]:
    """逆公式：先反转顺序，再对每一步取逆"""
    return [inverse_move(m) for m in reversed(list(moves))]


def format_formula(moves) -> str:
    return ' '.join(str(m) for m in moves)


def run_formula(state, formula: str):
    """宽松解析后依次执行，返回新的状态"""
    return apply_moves(state, parse_formula(formula))
