"""
Sentry Error Tracking

Exception capture with build context for debugging notification failures.
"""

from .sentry import (
    init_sentry,
    set_build_context,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    'init_sentry',
    'set_build_context',
    'add_breadcrumb',
    'capture_exception',
]
