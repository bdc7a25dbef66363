# src/mancala_search/utils/features.py
from typing import Dict, Sequence

import numpy as np

from mancala_search.engine.core import Board

def encode_board(board: Board) -> np.ndarray:
    """
    Flat (14,) int vector: my bins, my store, their bins, their store.
    Same slot order as the sowing ring for indices 0..12.
    """
    me, them = board.sides
    return np.array(me.bins + [me.store] + them.bins + [them.store], dtype=np.int64)

def score_histogram(results: Sequence) -> Dict[int, int]:
    """
    Number of terminal paths per score, for any sequence of (score, path) pairs.
    Only scores that actually occur are reported.
    """
    if not results:
        return {}
    scores = np.fromiter((r[0] for r in results), dtype=np.int64, count=len(results))
    counts = np.bincount(scores)
    return {int(s): int(counts[s]) for s in np.flatnonzero(counts)}
