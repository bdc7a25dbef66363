# src/mancala_search/api/routes.py
import logging

from flask_smorest import Blueprint, abort
from marshmallow import Schema, fields, validate, EXCLUDE, post_load

from mancala_search.engine.core import Board, BoardSide, Bin, InvalidBinError, make_move
from mancala_search.io.settings import current_settings, MAX_START_STONES, START_STONES, TOP_N
from mancala_search.search.ranker import format_path, search
from mancala_search.utils.features import encode_board, score_histogram

logger = logging.getLogger(__name__)

bp = Blueprint("mancala", __name__, url_prefix="/api")

# ---------- Schemas ----------
class BoardSideSchema(Schema):
    class Meta: unknown = EXCLUDE
    bins  = fields.List(fields.Integer(validate=validate.Range(min=0)), required=True,
                        validate=validate.Length(equal=6))
    store = fields.Integer(load_default=0, validate=validate.Range(min=0))

class BoardSchema(Schema):
    class Meta: unknown = EXCLUDE
    sides = fields.List(fields.Nested(BoardSideSchema), required=True,
                        validate=validate.Length(equal=2))

    @post_load
    def to_board(self, data, **kwargs):
        return Board(sides=[BoardSide(bins=list(s["bins"]), store=s["store"]) for s in data["sides"]])

class SearchReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    start_stones = fields.Integer(load_default=START_STONES,
                                  validate=validate.Range(min=0, max=MAX_START_STONES))
    limit        = fields.Integer(load_default=TOP_N, validate=validate.Range(min=1))

class RankedPathSchema(Schema):
    score = fields.Integer()
    path  = fields.String()

class SearchRespSchema(Schema):
    start_stones = fields.Integer()
    total        = fields.Integer()
    results      = fields.List(fields.Nested(RankedPathSchema))
    histogram    = fields.Dict(keys=fields.String(), values=fields.Integer())

class MoveReqSchema(Schema):
    class Meta: unknown = EXCLUDE
    board = fields.Nested(BoardSchema, required=True)
    bin   = fields.String(required=True)

class MoveRespSchema(Schema):
    bin        = fields.String()
    outcome    = fields.String()
    next_board = fields.Nested(BoardSchema)
    encoded    = fields.List(fields.Integer())
# -----------------------------

@bp.route("/health")
@bp.response(200, Schema.from_dict({"status": fields.String(), "settings": fields.Dict()})())
def health():
    return {"status": "ok", "settings": current_settings()}

@bp.route("/search", methods=["POST"])
@bp.arguments(SearchReqSchema)
@bp.response(200, SearchRespSchema)
def run_search(req):
    ranked = search(req["start_stones"])
    return {
        "start_stones": req["start_stones"],
        "total": len(ranked),
        "results": [{"score": r.score, "path": format_path(r.path)} for r in ranked[:req["limit"]]],
        "histogram": {str(k): v for k, v in score_histogram(ranked).items()},
    }

@bp.route("/move", methods=["POST"])
@bp.arguments(MoveReqSchema)
@bp.response(200, MoveRespSchema)
def move(req):
    try:
        bin_ = Bin.from_letter(req["bin"])
    except InvalidBinError as e:
        abort(400, message=str(e))
    board = req["board"]
    outcome = make_move(board, bin_)
    if outcome is None:
        abort(400, message=f"Illegal move: bin {bin_.name} is empty. Legal: "
                           f"{[b.name for b in board.legal_bins()]}")
    logger.debug("move %s -> %s", bin_.name, outcome.value)
    return {"bin": bin_.name, "outcome": outcome.value, "next_board": board,
            "encoded": encode_board(board).tolist()}
