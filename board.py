from enum import Enum
from typing import List, Optional, Tuple, Union


class Cell(Enum):
    UNVISITED = "unvisited"
    OFF_BOARD = "off-board"


Rank = Union[int, Cell]


class Board:
    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.ranks: List[List[Optional[int]]] = [[None] * cols for _ in range(rows)] # ranks[y][x], y=0 为最上一行

    def within_board_check(self, x, y):
        return 0 <= x < self.cols and 0 <= y < self.rows

    def rank_at(self, x, y) -> Rank:
        if not self.within_board_check(x, y):
            return Cell.OFF_BOARD
        rank = self.ranks[y][x]
        return Cell.UNVISITED if rank is None else rank

    def set_rank(self, x, y, value: Optional[int]): # value 为 None 表示清除
        if not self.within_board_check(x, y):
            raise IndexError(f"({x}, {y}) is off a {self.rows}x{self.cols} board")
        self.ranks[y][x] = value

    def is_free(self, x, y):
        return self.rank_at(x, y) is Cell.UNVISITED

    def visited_count(self):
        return sum(1 for row in self.ranks for rank in row if rank is not None)

    def to_rows(self) -> List[List[Optional[int]]]:
        return [row.copy() for row in self.ranks]

    def path(self) -> List[Tuple[int, int]]: # 按访问顺序排列的格子
        cells = [
            (rank, (x, y))
            for y, row in enumerate(self.ranks)
            for x, rank in enumerate(row)
            if rank is not None
        ]
        return [cell for _, cell in sorted(cells)]
