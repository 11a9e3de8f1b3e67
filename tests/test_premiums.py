from collections import Counter

from scrabcore.core.board import BOARD_SIZE, Board, premium_kind
from scrabcore.core.types import PremiumKind


def _rotate90(r: int, c: int) -> tuple[int, int]:
    return c, BOARD_SIZE - 1 - r


def test_premium_counts():
    counts = Counter(cell.premium for cell in Board.empty())
    assert counts[PremiumKind.TRIPLE_WORD] == 8
    assert counts[PremiumKind.DOUBLE_WORD] == 16
    assert counts[PremiumKind.TRIPLE_LETTER] == 12
    assert counts[PremiumKind.DOUBLE_LETTER] == 24
    assert counts[PremiumKind.CENTER] == 1
    assert counts[PremiumKind.NORMAL] == 225 - (8 + 16 + 12 + 24 + 1)


def test_layout_symmetric_under_rotation():
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            kind = premium_kind(r, c)
            r90, c90 = _rotate90(r, c)
            r180, c180 = _rotate90(r90, c90)
            r270, c270 = _rotate90(r180, c180)
            assert premium_kind(r90, c90) == kind, (r, c)
            assert premium_kind(r180, c180) == kind, (r, c)
            assert premium_kind(r270, c270) == kind, (r, c)


def test_center_is_unique():
    centers = [cell.position for cell in Board.empty() if cell.is_center]
    assert [(p.row, p.col) for p in centers] == [(7, 7)]


def test_dw_spotchecks():
    checks = [(1, 1), (2, 2), (3, 3), (4, 4), (10, 10), (11, 11), (12, 12), (13, 13),
              (1, 13), (2, 12), (3, 11), (4, 10), (10, 4), (11, 3), (12, 2), (13, 1)]
    for r, c in checks:
        assert premium_kind(r, c) is PremiumKind.DOUBLE_WORD


def test_corner_and_edge_spotchecks():
    assert premium_kind(0, 0) is PremiumKind.TRIPLE_WORD
    assert premium_kind(7, 14) is PremiumKind.TRIPLE_WORD
    assert premium_kind(0, 3) is PremiumKind.DOUBLE_LETTER
    assert premium_kind(5, 5) is PremiumKind.TRIPLE_LETTER
    assert premium_kind(0, 1) is PremiumKind.NORMAL
