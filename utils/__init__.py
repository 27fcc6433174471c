"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import rate_limited
from .data import load_data, get_project, get_global_meta
from .notifications import (
    send_contact_emails,
    send_owner_notification,
    notify_owner_of_submission
)
from .security import (
    get_client_ip,
    check_rate_limit,
    reset_rate_limits
)
from .helpers import (
    nl2br,
    truncate_text
)
from .validation import ContactSubmission, validate_contact_payload

__all__ = [
    # Decorators
    'rate_limited',

    # Data
    'load_data',
    'get_project',
    'get_global_meta',

    # Notifications
    'send_contact_emails',
    'send_owner_notification',
    'notify_owner_of_submission',

    # Security
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits',

    # Helpers
    'nl2br',
    'truncate_text',

    # Validation
    'ContactSubmission',
    'validate_contact_payload'
]
