import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from board import Board
from config import CFG
from logs import get_logger

logger = get_logger("tour")

KNIGHT_MOVES = [
    (2, 1), (1, 2), (-1, 2), (-2, 1),
    (-2, -1), (-1, -2), (1, -2), (2, -1)
] # 八种跳法 (dx, dy)


def possibly_solvable(rows, cols): # 已知无解的棋盘形状，排除表而非证明
    if rows < 1 or cols < 1:
        return False
    short, long = sorted((rows, cols))
    if short == 1:
        return long == 1
    if short in (2, 4) or long in (2, 4):
        return False
    if short == 3 and long in (6, 8):
        return False
    return True


def origin_admissible(rows, cols, x, y):
    # 格子总数为奇数时路线必须从多数颜色出发，也在多数颜色结束
    if (rows * cols) % 2 == 1:
        return (x + y) % 2 == 0
    return True


@dataclass(frozen=True)
class Candidate:
    x: int
    y: int
    continuations: int


def count_continuations(board: Board, x, y):
    prior = board.rank_at(x, y)
    board.set_rank(x, y, -1) # 临时占位，避免目标格把自己算作后续
    ways = 0
    for dx, dy in KNIGHT_MOVES:
        if board.is_free(x + dx, y + dy):
            ways += 1
    board.set_rank(x, y, prior if isinstance(prior, int) else None)
    return ways


def next_moves(board: Board, x, y) -> List[Candidate]: # Warnsdorff贪心策略，优先选择后续可走路线最少的节点
    moves = []
    for dx, dy in KNIGHT_MOVES:
        nx, ny = x + dx, y + dy
        if board.is_free(nx, ny):
            moves.append(Candidate(nx, ny, count_continuations(board, nx, ny)))
    # sorted 是稳定排序；回退后按同一下标重放必须得到同一个候选
    return sorted(moves, key=lambda c: (c.continuations, c.x, c.y))


class TourStatus(Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
    TIMEOUT = "timeout"


@dataclass
class SearchContext:
    board: Board
    current_pos: Tuple[int, int]
    choice: List[int] # choice[d] 为深度 d 上次尝试的候选下标
    depth: int = 1 # 已赋值的格子数，下一个要赋的 rank
    steps: int = 0
    backjumps: int = 0
    max_backjumps: int = 0
    timeout_sec: float = 0.0
    start_time: float = field(default_factory=time.perf_counter)

    @classmethod
    def start(cls, rows, cols, origin, max_backjumps=0, timeout_sec=0.0):
        board = Board(rows, cols)
        board.set_rank(origin[0], origin[1], 0)
        return cls(board=board, current_pos=origin, choice=[0] * (rows * cols),
                   max_backjumps=max_backjumps, timeout_sec=timeout_sec)

    @property
    def total(self):
        return self.board.rows * self.board.cols

    def elapsed_time(self):
        return time.perf_counter() - self.start_time

    def is_exceeded(self):
        if self.max_backjumps > 0 and self.backjumps > self.max_backjumps:
            return True
        if self.timeout_sec > 0 and self.elapsed_time() > self.timeout_sec:
            return True
        return False


class TourSolver:
    def go_ahead(self, context: SearchContext, move: Candidate):
        context.current_pos = (move.x, move.y)
        context.board.set_rank(move.x, move.y, context.depth)
        context.depth += 1
        context.steps += 1

    def go_back(self, context: SearchContext):
        d = context.depth
        if d <= 1: # 起点的候选已用尽，搜索穷尽
            return False
        x, y = context.current_pos
        context.board.set_rank(x, y, None)
        context.choice[d] = 0
        context.depth = d - 1
        context.choice[d - 1] += 1 # 下次跳过失败的分支
        context.current_pos = self.find_previous(context.board, x, y, d - 2)
        context.backjumps += 1
        return True

    def find_previous(self, board: Board, x, y, rank):
        for dx, dy in KNIGHT_MOVES:
            if board.rank_at(x + dx, y + dy) == rank:
                return (x + dx, y + dy)
        raise RuntimeError(f"no neighbour of ({x}, {y}) holds rank {rank}")

    def solve(self, context: SearchContext) -> TourStatus:
        while context.depth < context.total:
            if context.is_exceeded():
                return TourStatus.TIMEOUT
            moves = next_moves(context.board, *context.current_pos)
            idx = context.choice[context.depth]
            if idx < len(moves):
                self.go_ahead(context, moves[idx])
            elif not self.go_back(context):
                return TourStatus.UNSOLVABLE
        return TourStatus.SOLVED


@dataclass
class TourMetrics:
    computation_time_ms: float = 0.0
    steps: int = 0
    backjumps: int = 0


@dataclass
class TourResult:
    status: TourStatus
    rows: int
    cols: int
    origin: Tuple[int, int]
    ranks: Optional[List[List[int]]] = None
    path: List[Tuple[int, int]] = field(default_factory=list)
    metrics: TourMetrics = field(default_factory=TourMetrics)

    @property
    def solved(self):
        return self.status is TourStatus.SOLVED


def solve_tour(rows, cols, origin, max_backjumps=None, timeout_sec=None) -> TourResult:
    if max_backjumps is None:
        max_backjumps = CFG.MAX_BACKJUMPS
    if timeout_sec is None:
        timeout_sec = CFG.TIMEOUT_SEC

    x, y = origin
    if not possibly_solvable(rows, cols) or not origin_admissible(rows, cols, x, y):
        logger.info("%dx%d from (%d, %d) rejected before search", rows, cols, x, y)
        return TourResult(TourStatus.UNSOLVABLE, rows, cols, origin)

    context = SearchContext.start(rows, cols, origin, max_backjumps, timeout_sec)
    status = TourSolver().solve(context)
    metrics = TourMetrics(
        computation_time_ms=context.elapsed_time() * 1000,
        steps=context.steps,
        backjumps=context.backjumps,
    )

    if status is TourStatus.SOLVED:
        logger.info("%dx%d from (%d, %d) solved: steps=%d backjumps=%d %.1fms",
                    rows, cols, x, y, metrics.steps, metrics.backjumps, metrics.computation_time_ms)
        return TourResult(status, rows, cols, origin, ranks=context.board.to_rows(),
                          path=context.board.path(), metrics=metrics)

    logger.warning("%dx%d from (%d, %d) %s: steps=%d backjumps=%d %.1fms",
                   rows, cols, x, y, status.value, metrics.steps, metrics.backjumps,
                   metrics.computation_time_ms)
    return TourResult(status, rows, cols, origin, metrics=metrics)
