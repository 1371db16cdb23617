"""
CONFIGURATION - Environment-based settings management

This file loads configuration from environment variables with sensible defaults.
It handles:
1. Generation gateway credentials, endpoint and model
2. Request timeout for the gateway
3. API rate limiting

All settings can be overridden via environment variables or .env file.
The analyzer, optimizer and template engines need none of them.
"""

import os
from dotenv import load_dotenv
from promptsmith.utils import Constants

# Load environment variables from .env file if it exists
load_dotenv()

# STEP 1: Generation gateway (optional, only used by /generate)
AI_GATEWAY_BASE_URL = os.getenv("AI_GATEWAY_BASE_URL", Constants.DEFAULT_GATEWAY_BASE_URL)
AI_GATEWAY_MODEL = os.getenv("AI_GATEWAY_MODEL", Constants.DEFAULT_GATEWAY_MODEL)
GENERATION_TIMEOUT = float(os.getenv("GENERATION_TIMEOUT", str(Constants.DEFAULT_TIMEOUT)))

# STEP 2: Rate limiting settings
RATE_LIMIT_REQUESTS = int(os.getenv("RATE_LIMIT_REQUESTS", str(Constants.DEFAULT_RATE_LIMIT)))
RATE_LIMIT_WINDOW = int(os.getenv("RATE_LIMIT_WINDOW", str(Constants.RATE_LIMIT_WINDOW)))

# STEP 3: Input limits for the HTTP schemas
MAX_PROMPT_LENGTH = int(os.getenv("MAX_PROMPT_LENGTH", str(Constants.MAX_PROMPT_LENGTH)))

def get_gateway_api_key() -> str:
    """
    Read the gateway bearer key at call time.

    Read lazily so the service starts (and stays usable offline) without one.
    """
    return os.getenv("AI_GATEWAY_API_KEY") or os.getenv("LOVABLE_API_KEY", "")
