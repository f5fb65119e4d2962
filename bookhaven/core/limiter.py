"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. main switches it off when
settings.rate_limit_enabled is False.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

WRITE_ENDPOINT_LIMIT = "120/minute"
# Public forms (newsletter, event sign-up) are the cheapest target for abuse.
PUBLIC_FORM_LIMIT = "20/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
limit_public_forms = limiter.limit(PUBLIC_FORM_LIMIT)
