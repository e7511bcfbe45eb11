"""
Alert headers attached to mutating responses.

Clients read these headers to display notifications without parsing
the response body.  The header names are prefixed with the configured
application name, e.g. ``X-rideApp-alert``.
"""

import logging
from typing import Dict

from .config import settings

logger = logging.getLogger(__name__)


def create_alert(message: str, param: str) -> Dict[str, str]:
    app_name = settings.application_name
    return {
        f"X-{app_name}-alert": message,
        f"X-{app_name}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.application_name}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.application_name}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{settings.application_name}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str, default_message: str) -> Dict[str, str]:
    """Build the headers describing a rejected request.

    ``default_message`` is only logged; clients translate ``error_key``.
    """
    logger.error("Entity processing failed, %s", default_message)
    app_name = settings.application_name
    return {
        f"X-{app_name}-error": f"error.{error_key}",
        f"X-{app_name}-params": entity_name,
    }
