"""
Security Module - Client IP resolution and rate limiting
"""

import time
import threading
from flask import request, current_app


# Rate Limiting
RATE_LIMIT_REQUESTS = {}  # {ip: [(timestamp, endpoint), ...]}
_rate_limit_lock = threading.Lock()


def get_client_ip():
    """
    Get the client IP address

    Forwarded headers are only honoured through ProxyFix, which create_app
    installs when PROXY_FIX_X_FOR names the number of trusted proxies.
    """
    return request.remote_addr or 'unknown'


def check_rate_limit(endpoint='contact'):
    """Check if IP is within rate limit"""
    client_ip = get_client_ip()
    current_time = time.time()
    max_requests = current_app.config.get('RATE_LIMIT_MAX_REQUESTS', 5)
    window = current_app.config.get('RATE_LIMIT_WINDOW', 60)

    with _rate_limit_lock:
        # Clean old requests outside the window, dropping clients with none left
        for ip in list(RATE_LIMIT_REQUESTS):
            recent = [(ts, ep) for ts, ep in RATE_LIMIT_REQUESTS[ip] if current_time - ts < window]
            if recent:
                RATE_LIMIT_REQUESTS[ip] = recent
            else:
                del RATE_LIMIT_REQUESTS[ip]

        recorded = RATE_LIMIT_REQUESTS.get(client_ip, [])

        # Check if limit exceeded
        endpoint_requests = [ep for ts, ep in recorded if ep == endpoint]
        if len(endpoint_requests) >= max_requests:
            current_app.logger.warning(f"Rate limit exceeded for {client_ip} on {endpoint}")
            return False

        # Add current request
        RATE_LIMIT_REQUESTS.setdefault(client_ip, []).append((current_time, endpoint))
        return True


def reset_rate_limits():
    """Forget all recorded requests"""
    with _rate_limit_lock:
        RATE_LIMIT_REQUESTS.clear()


__all__ = [
    'get_client_ip',
    'check_rate_limit',
    'reset_rate_limits'
]
