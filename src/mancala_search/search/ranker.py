# Path ranking over a fully built search tree
from __future__ import annotations
import logging
from typing import List, NamedTuple, Sequence, Tuple

from mancala_search.engine.core import Bin, new_board
from mancala_search.search.tree import SearchTree, build_tree, count_nodes, iter_terminals

logger = logging.getLogger(__name__)

class RankedPath(NamedTuple):
    score: int
    path: Tuple[Bin, ...]

def rank_key(entry: RankedPath) -> Tuple[int, int]:
    # higher scores first, then shorter paths
    return (-entry.score, len(entry.path))

def find_max_paths(tree: SearchTree) -> List[RankedPath]:
    """
    Every leaf as (store of sides[0], bins chosen from the root), best first.
    Entries with equal score and length keep depth-first A..F order.
    """
    out = [RankedPath(board.sides[0].store, path) for path, board in iter_terminals(tree)]
    out.sort(key=rank_key)
    return out

def search(start_stones: int) -> List[RankedPath]:
    """Build the tree for a uniform starting board and rank every way the turn can end."""
    tree = build_tree(new_board(start_stones))
    if logger.isEnabledFor(logging.DEBUG):
        count_nodes(tree)
    ranked = find_max_paths(tree)
    logger.info("start_stones=%d: %d terminal paths, best score %s",
                start_stones, len(ranked), ranked[0].score if ranked else None)
    return ranked

# ------------------------- presentation helpers -------------------------

def format_path(path: Sequence[Bin]) -> str:
    return "".join(b.name for b in path)

def format_result(entry: RankedPath) -> str:
    return f"{entry.score} via {format_path(entry.path)}"
