"""
Nolej Page Component - Custom Exceptions and Exception Handlers
"""
import structlog
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = structlog.get_logger('exceptions')


class NolejPageComponentException(Exception):
    """Base exception for the page component"""
    def __init__(self, message: str, code: str = "NOLEJ_PC_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self):
        return {
            'error': True,
            'code': self.code,
            'message': self.message
        }


class UnknownCommandException(NolejPageComponentException):
    """Command not handled by the receiving controller"""
    def __init__(self, cmd: str):
        self.cmd = cmd
        super().__init__(f"Unknown command: '{cmd}'", code="UNKNOWN_COMMAND")
        logger.error(f"Unknown command: {cmd!r}")


class PluginNotActiveException(NolejPageComponentException):
    """Commands refused while the plugin is inactive"""
    def __init__(self, message: str = "Plugin not active."):
        super().__init__(message, code="PLUGIN_NOT_ACTIVE")
        logger.warning(message)


class ObjectNotFoundException(NolejPageComponentException):
    """Requested repository object or page does not exist"""
    def __init__(self, message: str):
        super().__init__(message, code="NOT_FOUND")
        logger.warning(f"Not found: {message}")


def register_exception_handlers(app):
    """Register exception handlers with Flask app"""

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        return jsonify({
            'error': True,
            'code': e.name.upper().replace(' ', '_'),
            'message': e.description
        }), e.code

    @app.errorhandler(NolejPageComponentException)
    def handle_page_component_exception(e):
        return jsonify(e.to_dict()), 400

    @app.errorhandler(PluginNotActiveException)
    def handle_plugin_not_active(e):
        return jsonify(e.to_dict()), 403

    @app.errorhandler(ObjectNotFoundException)
    def handle_not_found(e):
        return jsonify(e.to_dict()), 404

    @app.errorhandler(Exception)
    def handle_generic_exception(e):
        """Handle all other exceptions"""
        logger.error(f"Unhandled exception: {e}", exc_info=True)
        return jsonify({
            'error': True,
            'code': 'INTERNAL_ERROR',
            'message': 'An unexpected error occurred'
        }), 500
