"""HTTP middleware: timeout, request size limit, request ID, correlation ID, security headers, admin gate.

Applied in main app; order matters (last added = outermost).
"""

from modelcdn.middleware.admin_gate import AdminGateMiddleware
from modelcdn.middleware.correlation_id import CorrelationIDMiddleware
from modelcdn.middleware.request_id import RequestIDMiddleware
from modelcdn.middleware.request_size_limit import RequestSizeLimitMiddleware
from modelcdn.middleware.security_headers import SecurityHeadersMiddleware
from modelcdn.middleware.timeout import TimeoutMiddleware

__all__ = [
    "AdminGateMiddleware",
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
