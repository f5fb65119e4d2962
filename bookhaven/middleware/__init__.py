"""HTTP middleware: timeout, request size limit, request ID, security headers.

Applied in main app; order matters (last added = outermost).
"""

from bookhaven.middleware.request_id import RequestIDMiddleware
from bookhaven.middleware.request_size_limit import RequestSizeLimitMiddleware
from bookhaven.middleware.security_headers import SecurityHeadersMiddleware
from bookhaven.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
