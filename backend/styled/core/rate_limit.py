"""
Shared slowapi limiter for the AI-backed endpoints.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from styled.config import settings

limiter = Limiter(key_func=get_remote_address)

# Applied to every endpoint that calls the generative model
AI_RATE_LIMIT = settings.AI_RATE_LIMIT
