import argparse
import sys
from collections import deque
from typing import Dict, List, Optional, Tuple

from notation import ConfigurationError

STEPS = {"L": (-1, 0), "R": (1, 0), "D": (0, -1), "U": (0, 1)} # 顺序即 BFS 邻居顺序
STEP_NAMES = {delta: name for name, delta in STEPS.items()}


class Maze:
    def __init__(self, path: str):
        moves = path.rstrip()
        bad = sorted(set(moves) - set(STEPS))
        if bad:
            raise ConfigurationError(f"path may only contain L, R, U, D, got {''.join(bad)!r}")

        x, y = 0, 0
        self.cells: Dict[Tuple[int, int], int] = {(x, y): 0} # 走过的格子 -> 编号
        for mov in moves:
            dx, dy = STEPS[mov]
            x, y = x + dx, y + dy
            self.cells.setdefault((x, y), len(self.cells))
        self.origin = (0, 0)
        self.destination = (x, y)

    def adj(self, cell):
        x, y = cell
        for dx, dy in STEPS.values():
            nxt = (x + dx, y + dy)
            if nxt in self.cells:
                yield nxt

    def bfs(self, start) -> Dict[Tuple[int, int], Optional[Tuple[int, int]]]:
        previous = {start: None}
        queue = deque([start])
        while queue:
            cell = queue.popleft()
            for nxt in self.adj(cell):
                if nxt not in previous:
                    previous[nxt] = cell
                    queue.append(nxt)
        return previous


def shortest_path(path: str) -> str:
    maze = Maze(path)
    previous = maze.bfs(maze.origin)
    steps: List[str] = []
    cell = maze.destination
    while previous[cell] is not None:
        prev = previous[cell]
        steps.append(STEP_NAMES[(cell[0] - prev[0], cell[1] - prev[1])])
        cell = prev
    return "".join(reversed(steps))


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="maze-walker",
        description="Shorten a recorded L/R/U/D walk to a shortest path over the visited cells.",
    )
    parser.add_argument("path")
    args = parser.parse_args(argv)
    try:
        print(shortest_path(args.path))
    except ConfigurationError as e:
        parser.error(str(e))
    return 0


if __name__ == "__main__":
    sys.exit(main())
