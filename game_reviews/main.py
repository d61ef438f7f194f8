"""
Game Reviews - GraphQL Service
Main entry point for Flask application
"""

import os
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from prometheus_client import make_wsgi_app
from strawberry.flask.views import GraphQLView
from werkzeug.middleware.dispatcher import DispatcherMiddleware

from .config.settings import config
from .config.logger import setup_logger, get_logger
from .graphql import schema, ResolversContext
from .repositories import RecordStore

SERVICE_NAME = 'game-reviews'
SERVICE_VERSION = '1.0.0'

# Get configuration
ENV = os.getenv('FLASK_ENV', 'production')
app_config = config.get(ENV, config['default'])


class GameReviewsGraphQLView(GraphQLView):
    """GraphQL view handing the service context to every resolver"""

    def __init__(self, context: ResolversContext, **kwargs):
        super().__init__(**kwargs)
        self.context = context

    def get_context(self, request, response) -> ResolversContext:
        return self.context


def create_app(config_class=None, store: Optional[RecordStore] = None):
    """
    Application factory

    Args:
        config_class: Configuration class to use
        store: RecordStore to serve, a freshly seeded one if omitted

    Returns:
        Flask application instance
    """

    if config_class is None:
        config_class = app_config

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Setup logging
    logger = setup_logger(config_class)
    logger.info(f"Creating Flask app in {config_class.FLASK_ENV} mode")

    # Setup CORS
    CORS(app, origins=config_class.CORS_ORIGINS)

    # Add Prometheus metrics endpoint
    if config_class.PROMETHEUS_ENABLED:
        app.wsgi_app = DispatcherMiddleware(app.wsgi_app, {
            '/metrics': make_wsgi_app()
        })

    if store is None:
        store = RecordStore.with_seed_data(id_strategy=config_class.GAME_ID_STRATEGY)
    context = ResolversContext.from_store(store)
    app.extensions['game_reviews'] = context

    register_graphql(app, context)
    register_error_handlers(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint"""
        return jsonify({
            'status': 'healthy',
            'service': SERVICE_NAME,
            'version': SERVICE_VERSION,
            'environment': config_class.FLASK_ENV,
            'records': store.stats()
        }), 200

    return app


def register_graphql(app: Flask, context: ResolversContext):
    """
    Register the GraphQL endpoint

    Args:
        app: Flask application instance
        context: Resolver context shared by all requests
    """

    logger = get_logger()
    path = app.config['GRAPHQL_PATH']
    ide = app.config['GRAPHQL_IDE']

    app.add_url_rule(
        path,
        view_func=GameReviewsGraphQLView.as_view(
            'graphql_view',
            schema=schema,
            graphql_ide=ide,
            context=context
        )
    )
    logger.info(f"✓ GraphQL registered at {path}" + (f" with {ide} explorer" if ide else ""))


def register_error_handlers(app: Flask):
    """
    Register error handlers

    Args:
        app: Flask application instance
    """

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({
            'error': 'Bad Request',
            'message': str(error)
        }), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'error': 'Not Found',
            'message': 'Resource not found'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'error': 'Method Not Allowed',
            'message': str(error)
        }), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger = get_logger()
        logger.error(f"Internal server error: {str(error)}")
        return jsonify({
            'error': 'Internal Server Error',
            'message': 'An unexpected error occurred'
        }), 500


def main():
    app = create_app()

    # Get server config
    host = app.config['SERVER_HOST']
    port = app.config['SERVER_PORT']
    debug = app.config['DEBUG']

    logger = get_logger()
    logger.info(f"🚀 Server ready at http://{host}:{port}{app.config['GRAPHQL_PATH']}")

    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
