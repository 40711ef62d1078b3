"""
DevConnector core library.

This package provides the shared pieces behind the profile API:
database management, models, repositories, the GitHub client and logging.

Usage:
    # Database
    from devconnector.db import db, get_db
    from devconnector.models import User, Profile
    from devconnector.repositories import ProfileRepository, UserRepository

    # Config
    from devconnector.config import get_settings, Settings

    # Logging
    from devconnector.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Lazy imports to avoid circular dependencies
# Users should import directly from submodules:
#   from devconnector.db import db
#   from devconnector.config import get_settings
#   from devconnector.logging import get_logger
