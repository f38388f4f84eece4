"""Entry point for the project manager."""

from flask import Flask, redirect, url_for

from config import Config
from logging_config import configure_logging
from projects import blueprints
from projects.provider import load_projects
from projects.store import ProjectStore


def create_app(overrides=None):
    """Build the Flask app and seed the project store from the configured source."""
    app = Flask(__name__)
    app.config.from_object(Config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app.config['LOG_LEVEL'])

    store = ProjectStore()
    source = app.config['PROJECT_DATA_SOURCE']
    store.load(lambda: load_projects(source))
    app.extensions['projects'] = {'store': store}

    # Register each blueprint module with the app
    for bp in blueprints:
        app.register_blueprint(bp)

    @app.route('/')
    def index():
        """Redirect to the project list."""
        return redirect(url_for('project.index'))

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config['DEBUG'])
