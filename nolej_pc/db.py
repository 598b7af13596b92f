from flask_sqlalchemy import SQLAlchemy
import logging

# Retrieve main logger
logger = logging.getLogger("main")

db = SQLAlchemy()


def init_db(app):
    """Create missing tables.

    The Nolej tables are owned by the Nolej repository plugin; creating them
    here only matters for standalone and test databases.
    """
    # Register models on the metadata
    import nolej_pc.models  # noqa: F401

    with app.app_context():
        db.create_all()
        logger.info(f"Database ready: {app.config['SQLALCHEMY_DATABASE_URI']}")
