"""
Rate limiting configuration for the API
"""
from slowapi import Limiter
from fastapi import Request


def get_client_ip(request: Request) -> str:
    """
    Extract client IP from request, checking for proxy headers first
    """
    # Check common proxy headers
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # X-Forwarded-For can contain multiple IPs, take the first
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    # Fall back to direct connection
    if request.client:
        return request.client.host

    return "unknown"


# Create limiter instance
limiter = Limiter(key_func=get_client_ip)

# Strict rate limiting for authentication endpoints
AUTH_RATE_LIMIT = "5/minute"  # 5 requests per minute for sign-in/sign-up

# Very strict for password-related operations
PASSWORD_RATE_LIMIT = "3/minute"  # Only 3 attempts per minute
