import os
from flask import Blueprint, request, jsonify, Response

from acidentiton.log import get_logger
from acidentiton.kernel.pattern import generate_pattern
from acidentiton.kernel.svg import render_svg
from acidentiton.kernel.identity import make_seed, profile_colors

bp = Blueprint("api", __name__, url_prefix="/")
logger = get_logger(__name__)

DEFAULT_SIZE = 64
MAX_SIZE = int(os.getenv("ACIDENTITON_MAX_SIZE", "1024"))


def _bad_request(e):
    logger.warning("rejected %s %s: %s", request.method, request.path, e)
    return jsonify({"ok": False, "error": str(e)}), 400

# ---------- health / version ----------
@bp.route("/health")
def health():
    return jsonify({"ok": True})

@bp.route("/version")
def version():
    return jsonify({"name": "Acidentiton", "api": 1})

# ---------- pattern ----------
@bp.route("/api/pattern", methods=["GET"])
def pattern_get():
    if "seed" not in request.args:
        return _bad_request(ValueError("missing seed"))
    return jsonify(generate_pattern(request.args["seed"]).to_dict())

@bp.route("/api/pattern", methods=["POST"])
def pattern_post():
    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        return _bad_request(TypeError("body must be a JSON object"))
    try:
        return jsonify(generate_pattern(data.get("seed")).to_dict())
    except TypeError as e:
        return _bad_request(e)

# ---------- svg ----------
@bp.route("/api/avatar.svg", methods=["GET"])
def avatar_svg():
    if "seed" not in request.args:
        return _bad_request(ValueError("missing seed"))
    try:
        size = int(request.args.get("size", DEFAULT_SIZE))
        if size > MAX_SIZE:
            raise ValueError(f"size above {MAX_SIZE}")
        svg = render_svg(generate_pattern(request.args["seed"]), size=size)
    except ValueError as e:
        return _bad_request(e)
    return Response(svg, mimetype="image/svg+xml")

# ---------- seed minting ----------
@bp.route("/api/seed", methods=["POST"])
def mint_seed():
    data = request.get_json(force=True, silent=True) or {}
    if not isinstance(data, dict):
        return _bad_request(TypeError("body must be a JSON object"))
    try:
        seed = make_seed(data.get("username"))
    except (TypeError, ValueError) as e:
        return _bad_request(e)
    return jsonify({"seed": seed, "colors": profile_colors(seed)})
