from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify, request

from less_theme.compiler import CompilationError
from less_theme.variables.parser import SIGIL

theme_bp = Blueprint("theme", __name__)


def _replacement_from_query() -> dict[str, str]:
    """Query parameters name theme variables with or without the leading @."""
    replacement: dict[str, str] = {}
    for name, value in request.args.items():
        if not value:
            continue
        key = name if name.startswith(SIGIL) else SIGIL + name
        replacement[key] = value
    return replacement


@theme_bp.route("/theme.less")
def theme():
    """Return the generated theme, with query parameters as overrides."""
    config = current_app.extensions["theme_config"]
    generator = current_app.extensions["theme_generator"]
    replacement = _replacement_from_query()
    if replacement:
        config = config.with_replacement(replacement)
    try:
        css = generator.generate(config)
    except CompilationError as exc:
        return jsonify({"error": str(exc), "diagnostic": exc.diagnostic}), 422
    return Response(css, mimetype="text/less")
