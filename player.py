"""按固定间隔播放公式，所有转动串行提交到同一个当前状态。"""

import threading
from typing import Callable, Dict, List, Optional, Set

from cube_model import SOLVED_STATE, CubeState
from cube_rotate import apply_move
from formula import parse_formula
from moves import Move


class FormulaPlayer:
    """
    持有"当前"状态，并串行提交每一次转动。

    公式按固定间隔逐步执行，第 k+1 步只在第 k 步提交之后开始；
    cancel() 只会停止尚未执行的步骤，不会出现半步转动。
    """

    def __init__(
        self,
        state: Optional[CubeState] = None,
        interval: float = 0.25,
        face_colors: Optional[Dict[str, str]] = None,
    ) -> None:
        # reset() 总是回到复原态，与构造时传入的 state 无关
        self._solved = CubeState.solved(face_colors) if face_colors is not None else SOLVED_STATE
        self._state = state if state is not None else self._solved
        self.interval = interval
        self._lock = threading.Lock()
        self._callbacks: Set[Callable[[CubeState], None]] = set()
        self._history: List[Move] = []
        self._run_id = 0
        self._stop = threading.Event()
        self._busy = False
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> CubeState:
        return self._state

    @property
    def history(self) -> List[Move]:
        return list(self._history)

    @property
    def is_busy(self) -> bool:
        """是否正在播放公式"""
        return self._busy

    def register_callback(self, callback: Callable[[CubeState], None]) -> Callable[[], None]:
        """注册状态变化回调，返回取消注册的函数"""

        def unsubscribe() -> None:
            self._callbacks.discard(callback)

        self._callbacks.add(callback)
        return unsubscribe

    def _notify(self, state: CubeState) -> None:
        for callback in list(self._callbacks):
            callback(state)

    def _commit(self, move: Move, run_id=None) -> bool:
        with self._lock:
            if run_id is None:
                # 用户转动：播放期间一律拒绝
                if self._busy:
                    return False
            elif run_id != self._run_id:
                return False
            self._state = apply_move(self._state, move)
            self._history.append(move)
            state = self._state
        self._notify(state)
        return True

    def apply(self, move) -> bool:
        """用户直接转动；公式播放期间忽略并返回 False"""
        if not isinstance(move, Move):
            move = Move.from_token(move)
        return self._commit(move)

    def _begin(self):
        with self._lock:
            if self._busy:
                raise RuntimeError("已有公式正在播放")
            self._run_id += 1
            self._stop = threading.Event()
            self._busy = True
            return self._run_id, self._stop

    def _run(self, run_id, stop, moves, interval) -> int:
        applied = 0
        try:
            for i, move in enumerate(moves):
                if i > 0 and interval > 0 and stop.wait(interval):
                    break
                if stop.is_set() or not self._commit(move, run_id):
                    break
                applied += 1
        finally:
            with self._lock:
                if run_id == self._run_id:
                    self._busy = False
        return applied

    def play(self, moves, interval: Optional[float] = None) -> int:
        """
        同步播放一串转动，返回实际提交的步数。
        被 cancel()/reset() 打断时提前返回。
        """
        if interval is None:
            interval = self.interval
        run_id, stop = self._begin()
        return self._run(run_id, stop, list(moves), interval)

    def play_formula(self, formula: str, interval: Optional[float] = None) -> int:
        moves = parse_formula(formula)
        if not moves:
            return 0
        return self.play(moves, interval)

    def start(self, moves, interval: Optional[float] = None) -> threading.Thread:
        """在后台线程中播放；busy 在返回前就已置位"""
        if interval is None:
            interval = self.interval
        run_id, stop = self._begin()
        self._thread = threading.Thread(
            target=self._run,
            args=(run_id, stop, list(moves), interval),
            daemon=True,
        )
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def cancel(self) -> None:
        """停止剩余步骤；已提交的转动保留"""
        with self._lock:
            self._run_id += 1
            self._stop.set()
            self._busy = False

    def reset(self) -> None:
        """取消播放并回到复原态"""
        self.cancel()
        with self._lock:
            self._state = self._solved
            self._history = []
            state = self._state
        self._notify(state)
