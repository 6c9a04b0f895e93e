"""
Faleproxy - Relay Server
Main entry point for the Flask-based page relay.
"""

import argparse
import logging
import os
from typing import Any, Dict, List, Optional

from flask import Flask

from faleproxy.controllers.proxy_controller import ProxyController
from faleproxy.dom.backend import DEFAULT_SKIP_TAGS, SoupBackend
from faleproxy.dom.document_transformer import DEFAULT_SENTINEL, DocumentTransformer
from faleproxy.managers.config_manager import config_manager
from faleproxy.model import WordRule
from faleproxy.server.routers.page_router import page_router
from faleproxy.server.routers.proxy_api_router import proxy_api_router
from faleproxy.services.page_fetch_service import PageFetchService
from faleproxy.utils.configure_logging import configure_logger

logger = logging.getLogger(__name__)


def build_transformer(transform_config: Dict[str, Any]) -> DocumentTransformer:
    """Builds the DocumentTransformer described by the 'transform' settings block."""
    rule = WordRule(
        target=transform_config.get('target_word', 'yale'),
        replacement=transform_config.get('replacement_word', 'fale'),
    )
    backend = SoupBackend(
        parser=transform_config.get('parser', 'html.parser'),
        skip_tags=transform_config.get('skip_tags') or DEFAULT_SKIP_TAGS,
    )
    # An explicit null in settings.json disables the sentinel guard
    sentinel = transform_config.get('sentinel', DEFAULT_SENTINEL)
    return DocumentTransformer(rule, backend=backend, sentinel=sentinel)


def create_app(config: Optional[Dict[str, Any]] = None,
               controller: Optional[ProxyController] = None) -> Flask:
    """
    Application factory to initialize the Flask instance with required controllers.
    """
    config = config if config is not None else config_manager.get_all()
    flask_app = Flask(__name__)

    # 1. Initialize the controller unless one is injected
    if controller is None:
        transformer = build_transformer(config.get('transform', {}))
        fetch_service = PageFetchService(config.get('fetch', {}))
        controller = ProxyController(fetch_service, transformer)

    # 2. Inject Controller into App Config for Blueprint access
    flask_app.config['PROXY_CONTROLLER'] = controller

    # 3. Register Blueprints
    flask_app.register_blueprint(proxy_api_router)
    flask_app.register_blueprint(page_router)

    return flask_app


def apply_overrides(args: argparse.Namespace) -> None:
    """
    Layers the PORT environment variable and then the CLI flags on top of
    settings.json, in that order of precedence.
    """
    env_port = os.environ.get('PORT')
    if env_port:
        config_manager.set_nested('server.port', env_port)

    if args.port is not None:
        config_manager.set_nested('server.port', args.port)
    if args.host is not None:
        config_manager.set_nested('server.host', args.host)
    if args.debug is not None:
        config_manager.set_nested('server.debug', args.debug)


def main(argv: Optional[List[str]] = None):
    """
    Main execution block to parse arguments and start the server.
    """
    parser = argparse.ArgumentParser(description="Faleproxy Relay Server")
    parser.add_argument("--port", type=int, default=None,
                        help="Port to bind the server to (overrides PORT and settings.json)")
    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host interface to bind to (use 0.0.0.0 for Docker/External access)"
    )
    parser.add_argument("--debug", action=argparse.BooleanOptionalAction, default=None,
                        help="Run Flask in debug mode (--no-debug overrides settings.json)")
    args = parser.parse_args(argv)

    apply_overrides(args)

    configure_logger(
        general_level=config_manager.get_nested('debug.level', 'INFO'),
        module_specific_levels=config_manager.get_nested('debug.module_levels', {}),
        silenced_loggers=config_manager.get_nested('debug.silenced_loggers', {}),
    )

    app = create_app()

    host = config_manager.get_nested('server.host', '0.0.0.0')
    port = int(config_manager.get_nested('server.port', 3001))
    debug = bool(config_manager.get_nested('server.debug', False))

    logger.info("Faleproxy server running at http://localhost:%d", port)

    # use_reloader=False prevents double-initialization of the config singleton
    app.run(
        debug=debug,
        host=host,
        port=port,
        use_reloader=False
    )


if __name__ == '__main__':
    main()
