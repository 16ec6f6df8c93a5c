from __future__ import annotations

from flask import Flask

from less_theme.config import ThemeConfig
from less_theme.theme import ThemeGenerator


def create_app(
    theme_config: ThemeConfig,
    generator: ThemeGenerator | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(config or {})

    # Store the theme config and generator on app for access in routes
    app.extensions["theme_config"] = theme_config
    app.extensions["theme_generator"] = generator or ThemeGenerator()

    from less_theme.web.routes.theme import theme_bp
    from less_theme.web.routes.api import api_bp

    app.register_blueprint(theme_bp)
    app.register_blueprint(api_bp, url_prefix="/api")

    return app
