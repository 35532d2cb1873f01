def assert_knight_tour(ranks, origin):
    rows, cols = len(ranks), len(ranks[0])
    flat = sorted(rank for row in ranks for rank in row)
    assert flat == list(range(rows * cols))

    x0, y0 = origin
    assert ranks[y0][x0] == 0

    cells = {ranks[y][x]: (x, y) for y in range(rows) for x in range(cols)}
    for rank in range(rows * cols - 1):
        (ax, ay), (bx, by) = cells[rank], cells[rank + 1]
        assert sorted((abs(ax - bx), abs(ay - by))) == [1, 2], f"rank {rank} -> {rank + 1}"
