"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Limit strings live here only.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

LOGIN_LIMIT = "10/minute"
UPLOAD_LIMIT = "30/minute"
DELETE_LIMIT = "60/minute"

limit_login = limiter.limit(LOGIN_LIMIT)
limit_upload = limiter.limit(UPLOAD_LIMIT)
limit_delete = limiter.limit(DELETE_LIMIT)
