"""
Nolej Page Component - Application factory
"""
import os
import sys
import argparse
import logging

from flask import Flask
import structlog

from nolej_pc.constants import CONFIG_DIR, PLUGIN_VERSION
from nolej_pc.db import db, init_db
from nolej_pc.exceptions import register_exception_handlers
from nolej_pc.h5p_renderer import H5PRenderer
from nolej_pc.i18n import I18n
from nolej_pc.page_component_gui import MSG_ACTIVITY_NOT_FOUND
from nolej_pc.plugin_system import PluginManager, NolejPageComponentPlugin
from nolej_pc.routes.page import page_bp
from nolej_pc.routes.page_component import page_component_bp
from nolej_pc.settings import load_settings, merge_settings, set_plugin_active
from nolej_pc.utils import ColoredFormatter, FilterRemoveDateFromWerkzeugLogs, get_or_create_secret_key

logger = structlog.get_logger('main')


def configure_logging(level=logging.INFO):
    formatter = ColoredFormatter(
        '[%(asctime)s.%(msecs)03d] %(levelname)s (%(module)s) %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=level,
        handlers=[handler]
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer() if os.environ.get('LOG_FORMAT') == 'json' else structlog.dev.ConsoleRenderer()
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Apply filter to hide date from http access logs
    logging.getLogger('werkzeug').addFilter(FilterRemoveDateFromWerkzeugLogs())


def create_app(settings=None):
    """Application factory

    Args:
        settings: settings dict merged over the defaults; read from the YAML
            configuration file when omitted.
    """
    settings = merge_settings(settings) if settings is not None else load_settings()

    app = Flask(__name__)
    app.config["SQLALCHEMY_DATABASE_URI"] = settings["database"]["uri"]
    app.config["SECRET_KEY"] = settings.get("secret_key") or get_or_create_secret_key(CONFIG_DIR)
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config["NOLEJ_PC_SETTINGS"] = settings

    db.init_app(app)

    app.i18n = I18n(app, default_locale=settings["i18n"]["default_locale"])

    register_exception_handlers(app)

    app.register_blueprint(page_bp)
    app.register_blueprint(page_component_bp)

    app.h5p_renderer = H5PRenderer.from_settings(settings, fallback=MSG_ACTIVITY_NOT_FOUND)

    app.plugin_manager = PluginManager(app)
    app.plugin_manager.register(NolejPageComponentPlugin(app, active=settings["plugin"]["active"]))

    init_db(app)

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Nolej page component server")
    toggle = parser.add_mutually_exclusive_group()
    toggle.add_argument("--activate", action="store_true", help="Activate the plugin and exit")
    toggle.add_argument("--deactivate", action="store_true", help="Deactivate the plugin and exit")
    parser.add_argument("--config", default=None, help="Settings file (default: $NOLEJ_PC_CONFIG)")

    args = parser.parse_args(argv)

    configure_logging()
    if args.activate or args.deactivate:
        set_plugin_active(args.activate, config_file=args.config)
        logger.info(f"Plugin {'activated' if args.activate else 'deactivated'}")
        return

    app = create_app(load_settings(config_file=args.config) if args.config else None)
    logger.info(f'Nolej Page Component v{PLUGIN_VERSION}')
    logger.info('Starting server on port 8080...')
    app.run(host="0.0.0.0", port=int(os.environ.get("PORT", 8080)), debug=False, use_reloader=False)
    logger.info('Shutting down server...')


if __name__ == '__main__':
    main()
