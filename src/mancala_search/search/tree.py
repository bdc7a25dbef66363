# Exhaustive single-turn game tree (no pruning, no caching)
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple, Union

from mancala_search.engine.core import ALL_BINS, Bin, Board, MoveOutcome, make_move

logger = logging.getLogger(__name__)

# ------------------------- nodes -------------------------

@dataclass(frozen=True)
class Terminal:
    """The turn is over; `board` is final for this branch."""
    board: Board

@dataclass(frozen=True)
class Branching:
    """Decision point; children[b] is None when bin b was empty."""
    children: Tuple[Optional["SearchTree"], ...]

SearchTree = Union[Terminal, Branching]

# ------------------------- builder -------------------------

def build_tree(board: Board) -> SearchTree:
    """
    Try every bin from `board` (which is never mutated). Bonus moves recurse,
    turn-ending moves become Terminal leaves.

    A starting board with no legal bin is a single Terminal. Deeper down, a
    bonus move that leaves no legal bin is an all-empty Branching and so
    contributes no leaf.
    """
    if not board.legal_bins():
        return Terminal(board.copy())
    return _expand(board)

def _expand(board: Board) -> Branching:
    children: List[Optional[SearchTree]] = []
    for bin_ in ALL_BINS:
        b = board.copy()
        outcome = make_move(b, bin_)
        if outcome is None:
            children.append(None)
        elif outcome is MoveOutcome.CONTINUE_TURN:
            children.append(_expand(b))
        else:
            children.append(Terminal(b))
    return Branching(tuple(children))

# ------------------------- traversal -------------------------

def iter_terminals(tree: SearchTree) -> Iterator[Tuple[Tuple[Bin, ...], Board]]:
    """Yield (path, board) for every leaf, depth-first, bins in A..F order."""
    stack: List[Tuple[SearchTree, Tuple[Bin, ...]]] = [(tree, ())]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Terminal):
            yield path, node.board
            continue
        # reversed so that A is popped first
        for bin_ in reversed(ALL_BINS):
            child = node.children[bin_]
            if child is not None:
                stack.append((child, path + (bin_,)))

def count_nodes(tree: SearchTree) -> Tuple[int, int]:
    """(branching nodes, terminal nodes)"""
    branching, terminal = 0, 0
    stack: List[SearchTree] = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Terminal):
            terminal += 1
        else:
            branching += 1
            stack.extend(child for child in node.children if child is not None)
    logger.debug("tree has %d branching and %d terminal nodes", branching, terminal)
    return branching, terminal
