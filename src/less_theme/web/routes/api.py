from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from less_theme.variables import random_color

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    return response


@api_bp.route("/variables")
def variables():
    """Return the variable map and the resolved theme variables."""
    config = current_app.extensions["theme_config"]
    generator = current_app.extensions["theme_generator"]
    _source, variable_map, color_variables = generator.resolve_variables(config)
    theme_variables = generator.resolve_theme_variables(config, variable_map, color_variables)
    return jsonify({
        "themeVariables": theme_variables,
        "variables": variable_map,
    })


@api_bp.route("/colors/random")
def random():
    """Return a random hex color, handy for trying out overrides."""
    return jsonify({"color": random_color()})
