"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from hotseat.core.enums import Color, PieceType
from hotseat.core.piece import Piece
from hotseat.core.types import ALL_SQUARES, Square, square_name

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square grid, indexed by ``(row, col)``.

    Item assignment exists for setting positions up. Once a board is handed
    to the game layer it is treated as a snapshot: moves produce a fresh
    board through :meth:`with_move`.
    """

    __slots__ = ("_rows",)

    def __init__(self) -> None:
        self._rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        row, col = sq
        return self._rows[row][col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        row, col = sq
        self._rows[row][col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def __iter__(self) -> Iterator[tuple[Square, Piece]]:
        """Occupied squares with their pieces, in row-major order."""
        for sq in ALL_SQUARES:
            piece = self[sq]
            if piece is not None:
                yield sq, piece

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """Squares occupied by *color*, in row-major order."""
        return [sq for sq, piece in self if piece.color == color]

    def piece_count(self) -> int:
        return sum(1 for _ in self)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._rows = [row.copy() for row in self._rows]
        return b

    def clear(self) -> None:
        self._rows = [[None] * 8 for _ in range(8)]

    def with_move(self, from_sq: Square, to_sq: Square) -> Board:
        """Return a new board with the piece on *from_sq* moved to *to_sq*.

        Whatever stood on *to_sq* is captured. The receiver is not modified.
        """
        piece = self[from_sq]
        if piece is None:
            raise ValueError(f"No piece on {square_name(from_sq)}")
        b = self.copy()
        b[to_sq] = piece
        b[from_sq] = None
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, pt in enumerate(_BACK_RANK):
            b[0, col] = Piece(Color.BLACK, pt)
            b[1, col] = Piece(Color.BLACK, PieceType.PAWN)
            b[6, col] = Piece(Color.WHITE, PieceType.PAWN)
            b[7, col] = Piece(Color.WHITE, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __repr__(self) -> str:
        rows: list[str] = []
        for row_idx, row in enumerate(self._rows):
            cells = [str(p) if p else "." for p in row]
            rows.append(f"{8 - row_idx} {' '.join(cells)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
