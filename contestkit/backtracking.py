"""Backtracking searches: sudoku and the n-queens puzzle."""

_SIZE = 9
_BOX = 3
_EMPTY = "."
_DIGITS = "123456789"


def _box(row: int, col: int) -> int:
    return (row // _BOX) * _BOX + col // _BOX


def solve_sudoku(board: list[list[str]]) -> bool:
    """Fill the ``"."`` cells of a 9x9 board in place.

    Returns whether a solution was found; if not, the board is left unchanged.
    """
    if len(board) != _SIZE or any(len(row) != _SIZE for row in board):
        raise ValueError(f"board must be {_SIZE}x{_SIZE}")
    rows: list[set[str]] = [set() for _ in range(_SIZE)]
    cols: list[set[str]] = [set() for _ in range(_SIZE)]
    boxes: list[set[str]] = [set() for _ in range(_SIZE)]
    empties: list[tuple[int, int]] = []
    for r, row in enumerate(board):
        for c, value in enumerate(row):
            if value == _EMPTY:
                empties.append((r, c))
            elif value in _DIGITS and len(value) == 1:
                rows[r].add(value)
                cols[c].add(value)
                boxes[_box(r, c)].add(value)
            else:
                raise ValueError(f"invalid cell {value!r} at ({r}, {c})")

    def place(k: int) -> bool:
        if k == len(empties):
            return True
        r, c = empties[k]
        b = _box(r, c)
        for digit in _DIGITS:
            if digit in rows[r] or digit in cols[c] or digit in boxes[b]:
                continue
            board[r][c] = digit
            rows[r].add(digit)
            cols[c].add(digit)
            boxes[b].add(digit)
            if place(k + 1):
                return True
            rows[r].discard(digit)
            cols[c].discard(digit)
            boxes[b].discard(digit)
        board[r][c] = _EMPTY
        return False

    return place(0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of ``"Q"`` and ``"."``.

    Queens are placed column by column, trying rows from the top.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    solutions: list[list[str]] = []
    placement: list[int] = []
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_antidiagonals: set[int] = set()

    def place(col: int) -> None:
        if col == n:
            solutions.append(
                ["".join("Q" if placement[c] == r else "." for c in range(n)) for r in range(n)]
            )
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_antidiagonals:
                continue
            placement.append(row)
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_antidiagonals.add(row + col)
            place(col + 1)
            placement.pop()
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_antidiagonals.discard(row + col)

    place(0)
    return solutions