import pytest

from board import Board
from helpers import assert_knight_tour
from tour import (
    Candidate,
    SearchContext,
    TourSolver,
    TourStatus,
    count_continuations,
    next_moves,
    solve_tour,
)


def test_corner_candidates_tie_break_on_coordinates():
    board = Board(8, 8)
    board.set_rank(0, 0, 0)
    assert next_moves(board, 0, 0) == [Candidate(1, 2, 5), Candidate(2, 1, 5)]


def test_visited_and_off_board_targets_are_not_candidates():
    board = Board(5, 5)
    board.set_rank(2, 2, 0)
    board.set_rank(4, 3, 1)
    targets = {(c.x, c.y) for c in next_moves(board, 2, 2)}
    assert (4, 3) not in targets
    assert len(targets) == 7


def test_candidates_sorted_by_continuations():
    board = Board(8, 8)
    board.set_rank(3, 3, 0)
    moves = next_moves(board, 3, 3)
    keys = [(c.continuations, c.x, c.y) for c in moves]
    assert keys == sorted(keys)
    assert len(moves) == 8


def test_count_continuations_restores_the_target():
    board = Board(5, 5)
    board.set_rank(0, 0, 0)
    before = board.to_rows()
    assert count_continuations(board, 1, 2) == 5
    assert board.to_rows() == before


def test_ranking_is_reproducible():
    board = Board(6, 6)
    board.set_rank(2, 3, 0)
    board.set_rank(0, 2, 1)
    assert next_moves(board, 0, 2) == next_moves(board, 0, 2)


def test_go_back_restores_previous_cell_and_advances_choice():
    context = SearchContext.start(5, 5, (0, 0))
    solver = TourSolver()
    first = next_moves(context.board, 0, 0)[0]
    solver.go_ahead(context, first)
    second = next_moves(context.board, first.x, first.y)[0]
    solver.go_ahead(context, second)
    assert context.depth == 3

    assert solver.go_back(context)
    assert context.depth == 2
    assert context.current_pos == (first.x, first.y)
    assert context.choice[2] == 1
    assert context.choice[3] == 0
    assert context.board.is_free(second.x, second.y)
    assert context.backjumps == 1


def test_go_back_from_origin_reports_exhaustion():
    context = SearchContext.start(3, 3, (0, 0))
    assert not TourSolver().go_back(context)


def test_single_cell_board_needs_no_search():
    result = solve_tour(1, 1, (0, 0))
    assert result.solved
    assert result.ranks == [[0]]
    assert result.metrics.steps == 0


@pytest.mark.parametrize("rows, cols, origin", [
    (5, 5, (0, 4)),
    (5, 6, (0, 4)),
    (6, 6, (0, 5)),
    (8, 8, (0, 7)),
])
def test_tours_cover_the_board(rows, cols, origin):
    result = solve_tour(rows, cols, origin, max_backjumps=0, timeout_sec=0)
    assert result.status is TourStatus.SOLVED
    assert_knight_tour(result.ranks, origin)
    assert result.path[0] == origin
    assert len(result.path) == rows * cols


def test_same_input_same_tour():
    first = solve_tour(6, 6, (0, 5))
    second = solve_tour(6, 6, (0, 5))
    assert first.ranks == second.ranks


@pytest.mark.parametrize("rows, cols", [(3, 4), (2, 8), (1, 5), (4, 4)])
def test_excluded_shapes_are_unsolvable_without_search(rows, cols):
    result = solve_tour(rows, cols, (0, rows - 1))
    assert result.status is TourStatus.UNSOLVABLE
    assert result.ranks is None
    assert result.metrics.steps == 0


def test_minority_colour_origin_is_unsolvable():
    result = solve_tour(5, 5, (1, 4))
    assert result.status is TourStatus.UNSOLVABLE
    assert result.metrics.steps == 0


@pytest.mark.parametrize("rows, cols", [(3, 3), (3, 5)])
def test_exhausted_search_is_unsolvable(rows, cols):
    result = solve_tour(rows, cols, (0, rows - 1), max_backjumps=0, timeout_sec=0)
    assert result.status is TourStatus.UNSOLVABLE
    assert result.metrics.backjumps > 0
    assert result.ranks is None


def test_backjump_budget_reports_timeout():
    result = solve_tour(3, 5, (0, 2), max_backjumps=1, timeout_sec=0)
    assert result.status is TourStatus.TIMEOUT
    assert not result.solved
    assert result.metrics.backjumps == 2
