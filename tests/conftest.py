# tests/conftest.py
import sys, pathlib
import pytest

# Add ./src to sys.path so `import mancala_search...` works in tests
ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC  = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

@pytest.fixture(scope="session")
def app():
    from mancala_search.api.app import create_app
    app = create_app()
    app.config.update(TESTING=True)
    return app

@pytest.fixture(scope="session")
def client(app):
    return app.test_client()

# The full 4-stone tree is the expensive part of the suite; build it once.
@pytest.fixture(scope="session")
def tree4():
    from mancala_search.engine.core import new_board
    from mancala_search.search.tree import build_tree
    return build_tree(new_board(4))

@pytest.fixture(scope="session")
def ranked4(tree4):
    from mancala_search.search.ranker import find_max_paths
    return find_max_paths(tree4)

@pytest.fixture
def make_board():
    from mancala_search.engine.core import Board, BoardSide

    def _make(mine, theirs=(0,) * 6, my_store=0, their_store=0):
        return Board(sides=[BoardSide(bins=list(mine), store=my_store),
                            BoardSide(bins=list(theirs), store=their_store)])
    return _make
