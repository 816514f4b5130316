# Security module
from hotelpms.security.auth import (
    AuthUser, create_access_token, decode_token,
    get_current_user, get_optional_user, get_current_hotel
)

__all__ = [
    'AuthUser', 'create_access_token', 'decode_token',
    'get_current_user', 'get_optional_user', 'get_current_hotel'
]
