# Mancala chain-sowing engine (board-based API)
# Board shape:
#   sides[0] = the player whose turn is being simulated ("me")
#   sides[1] = the opponent ("them")
# Flat 13-slot ring used while sowing:
#   0..5  -> my bins A..F
#   6     -> my store
#   7..12 -> their bins, physical index = flat - 7
# so flat i and flat 12 - i are bins facing each other across the board.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from mancala_search.io.settings import MAX_PICKUPS

NUM_BINS = 6
NUM_SLOTS = 13

# ---------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------

class InvalidBinError(ValueError):
    pass

class IllegalMoveError(ValueError):
    pass

class SowingLimitExceeded(RuntimeError):
    """A single move kept chaining past MAX_PICKUPS pickups."""

# ---------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------

class Bin(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5

    @classmethod
    def from_ordinal(cls, ordinal: int) -> "Bin":
        if not 0 <= ordinal < NUM_BINS:
            raise InvalidBinError(f"bin ordinal out of range: {ordinal}")
        return cls(ordinal)

    @classmethod
    def from_letter(cls, letter: str) -> "Bin":
        try:
            return cls[letter.upper()]
        except KeyError:
            raise InvalidBinError(f"unknown bin: {letter!r}") from None

ALL_BINS: Tuple[Bin, ...] = tuple(Bin)

class MoveOutcome(Enum):
    CONTINUE_TURN = "continue_turn"   # last stone landed in my store
    END_TURN = "end_turn"

class FlatIndexKind(Enum):
    MY_BIN = "my_bin"
    MY_STORE = "my_store"
    THEIR_BIN = "their_bin"

# ---------------------------------------------------------------------
# Circular index
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class FlatIndex:
    value: int

    def __post_init__(self):
        if not 0 <= self.value < NUM_SLOTS:
            raise IndexError(f"flat index out of range: {self.value}")

    @classmethod
    def of(cls, bin_: Bin) -> "FlatIndex":
        return cls(int(bin_))

    def step(self) -> "FlatIndex":
        return FlatIndex((self.value + 1) % NUM_SLOTS)

    def opposite(self) -> "FlatIndex":
        return FlatIndex(NUM_SLOTS - 1 - self.value)

    def kind(self) -> Tuple[FlatIndexKind, int]:
        """Classify the slot; the int is the physical bin index (or 0 for the store)."""
        v = self.value
        if 0 <= v < NUM_BINS:
            return FlatIndexKind.MY_BIN, v
        if v == NUM_BINS:
            return FlatIndexKind.MY_STORE, 0
        return FlatIndexKind.THEIR_BIN, v - NUM_BINS - 1

# ---------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------

@dataclass
class BoardSide:
    bins: List[int] = field(default_factory=lambda: [0] * NUM_BINS)
    store: int = 0

    def copy(self) -> "BoardSide":
        return BoardSide(bins=self.bins[:], store=self.store)

@dataclass
class Board:
    sides: List[BoardSide] = field(default_factory=lambda: [BoardSide(), BoardSide()])

    def copy(self) -> "Board":
        return Board(sides=[side.copy() for side in self.sides])

    # flat-index access: every read/write while sowing goes through here
    def __getitem__(self, index: FlatIndex) -> int:
        kind, idx = index.kind()
        if kind is FlatIndexKind.MY_BIN:
            return self.sides[0].bins[idx]
        if kind is FlatIndexKind.MY_STORE:
            return self.sides[0].store
        return self.sides[1].bins[idx]

    def __setitem__(self, index: FlatIndex, amount: int) -> None:
        kind, idx = index.kind()
        if kind is FlatIndexKind.MY_BIN:
            self.sides[0].bins[idx] = amount
        elif kind is FlatIndexKind.MY_STORE:
            self.sides[0].store = amount
        else:
            self.sides[1].bins[idx] = amount

    def take(self, index: FlatIndex) -> int:
        """Empty the slot and return what was in it."""
        amount = self[index]
        self[index] = 0
        return amount

    def total_stones(self) -> int:
        return sum(sum(side.bins) + side.store for side in self.sides)

    def legal_bins(self) -> List[Bin]:
        return [b for b in ALL_BINS if self.sides[0].bins[b] > 0]

def new_board(start_stones: int) -> Board:
    return Board(sides=[BoardSide(bins=[start_stones] * NUM_BINS),
                        BoardSide(bins=[start_stones] * NUM_BINS)])

# ---------------------------------------------------------------------
# Move simulator
# ---------------------------------------------------------------------

def _sow(board: Board, source: FlatIndex, max_pickups: int) -> MoveOutcome:
    pos = source
    pickups = 0
    while True:
        pickups += 1
        if pickups > max_pickups:
            raise SowingLimitExceeded(
                f"move did not settle after {max_pickups} pickups (last source {pos.value})")

        in_hand = board.take(pos)
        while in_hand > 0:
            pos = pos.step()
            board[pos] += 1
            in_hand -= 1

        kind, _ = pos.kind()
        if kind is FlatIndexKind.MY_STORE:
            return MoveOutcome.CONTINUE_TURN
        if board[pos] > 1:
            # landed on an occupied bin (either side): pick it up and keep sowing
            continue
        if kind is FlatIndexKind.MY_BIN:
            board.sides[0].store += board.take(pos.opposite())
        return MoveOutcome.END_TURN

def make_move(board: Board, bin_: Bin, max_pickups: int = MAX_PICKUPS) -> Optional[MoveOutcome]:
    """
    Play `bin_` for sides[0], mutating `board` in place.
    Returns None (and leaves the board alone) when the bin is empty.
    """
    source = FlatIndex.of(bin_)
    if board[source] == 0:
        return None
    return _sow(board, source, max_pickups)

def replay(board: Board, path: Sequence[Bin]) -> Tuple[Board, Optional[MoveOutcome]]:
    """
    Apply `path` to a copy of `board`; every move but the last must grant a bonus turn.
    Returns the resulting board and the outcome of the last move (None for an empty path).
    """
    b = board.copy()
    outcome: Optional[MoveOutcome] = None
    for i, bin_ in enumerate(path):
        if outcome is MoveOutcome.END_TURN:
            raise IllegalMoveError(f"turn already ended before move {i} ({bin_.name})")
        outcome = make_move(b, bin_)
        if outcome is None:
            raise IllegalMoveError(f"bin {bin_.name} is empty at move {i}")
    return b, outcome
