"""
魔方状态的二维投影（仅用于展示，不参与转动计算）。

- render_cross: 文本展开图（十字形）
- graph_layout: 2D 圆环图中 54 个节点的坐标，由三组同心圆两两相交得到
"""

import math
from collections import namedtuple
from functools import lru_cache

from cube_model import FACE_OFFSET, FACE_ORDER

GraphNode = namedtuple('GraphNode', ['id', 'cx', 'cy'])
GraphCircle = namedtuple('GraphCircle', ['cx', 'cy', 'r', 'face'])
GraphLayout = namedtuple('GraphLayout', ['nodes', 'circles', 'sticker_map'])

# 圆心坐标与半径是调好的常量，不要改动
GRAPH_CENTERS = {
    'U': (200.0, 145.0),
    'F': (145.0, 255.0),
    'R': (255.0, 255.0),
}
GRAPH_RADII = [100.0, 120.0, 140.0]

# 每个面内节点的排序键：(行, 列)，由对应的两组圆下标决定
_FACE_SORT_KEYS = {
    'U': lambda n: (n['f'], n['r']),
    'D': lambda n: (2 - n['f'], n['r']),
    'F': lambda n: (n['u'], n['r']),
    'B': lambda n: (n['u'], 2 - n['r']),
    'R': lambda n: (n['u'], 2 - n['f']),
    'L': lambda n: (n['u'], n['f']),
}


def _dist_sq(p1, p2):
    return (p1[0] - p2[0]) ** 2 + (p1[1] - p2[1]) ** 2


def circle_intersections(p1, r1, p2, r2):
    """两圆交点；不相交（或同心）时返回空列表"""
    d_sq = _dist_sq(p1, p2)
    if d_sq == 0:
        return []
    d = math.sqrt(d_sq)
    if d > r1 + r2 or d < abs(r1 - r2):
        return []

    a = (r1 * r1 - r2 * r2 + d_sq) / (2 * d)
    h = math.sqrt(max(0.0, r1 * r1 - a * a))
    x2 = p1[0] + a * (p2[0] - p1[0]) / d
    y2 = p1[1] + a * (p2[1] - p1[1]) / d
    return [
        (x2 + h * (p2[1] - p1[1]) / d, y2 - h * (p2[0] - p1[0]) / d),
        (x2 - h * (p2[1] - p1[1]) / d, y2 + h * (p2[0] - p1[0]) / d),
    ]


def _split_pairs(groups, first, second, near_face, far_face, near_center):
    """first/second 两组圆相交，靠近 near_center 的交点归 near_face，另一个归 far_face"""
    for i in range(3):
        for j in range(3):
            points = circle_intersections(
                GRAPH_CENTERS[first], GRAPH_RADII[i],
                GRAPH_CENTERS[second], GRAPH_RADII[j],
            )
            if len(points) != 2:
                continue
            info = {'u': -1, 'f': -1, 'r': -1}
            info[first.lower()] = i
            info[second.lower()] = j
            near, far = points
            if _dist_sq(far, near_center) < _dist_sq(near, near_center):
                near, far = far, near
            groups[near_face].append(dict(info, pos=near))
            groups[far_face].append(dict(info, pos=far))


@lru_cache(maxsize=1)
def graph_layout() -> GraphLayout:
    """计算一次后缓存；sticker_map[node_id] 为贴纸的扁平下标"""
    circles = [
        GraphCircle(center[0], center[1], r, face)
        for face, center in GRAPH_CENTERS.items()
        for r in GRAPH_RADII
    ]

    groups = {face: [] for face in FACE_ORDER}
    _split_pairs(groups, 'U', 'R', 'F', 'B', GRAPH_CENTERS['F'])
    _split_pairs(groups, 'U', 'F', 'R', 'L', GRAPH_CENTERS['R'])
    _split_pairs(groups, 'F', 'R', 'U', 'D', GRAPH_CENTERS['U'])

    nodes = []
    sticker_map = []
    for face in FACE_ORDER:
        ordered = sorted(groups[face], key=_FACE_SORT_KEYS[face])
        for i, node in enumerate(ordered[:9]):
            nodes.append(GraphNode(len(nodes), node['pos'][0], node['pos'][1]))
            sticker_map.append(FACE_OFFSET[face] + i)
    return GraphLayout(tuple(nodes), tuple(circles), tuple(sticker_map))


def render_cross(state, show_rotation=False) -> str:
    """
    文本展开图：

          U
        L F R B
          D

    show_rotation=True 时每个贴纸后附带方向箭头。
    """
    arrows = {0: '^', 90: '>', 180: 'v', 270: '<'}

    def cell(sticker):
        if show_rotation:
            return sticker.color + arrows[sticker.rotation]
        return sticker.color

    def face_rows(face):
        return [' '.join(cell(s) for s in row) for row in state[face]]

    width = len(face_rows('F')[0])
    pad = ' ' * (width + 1)
    lines = [pad + row for row in face_rows('U')]
    middle = [face_rows(face) for face in ['L', 'F', 'R', 'B']]
    for r in range(3):
        lines.append(' '.join(rows[r] for rows in middle))
    lines.extend(pad + row for row in face_rows('D'))
    return '\n'.join(lines)
