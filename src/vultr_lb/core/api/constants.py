"""Configuration constants for the Vultr API client."""

import os

VULTR_API_BASE_URL = os.environ.get("VULTR_API_BASE_URL", "https://api.vultr.com/v2")

# HTTP client configuration
DEFAULT_REQUEST_TIMEOUT = float(os.environ.get("VULTR_REQUEST_TIMEOUT", "60"))  # seconds

# Collection root; the version prefix lives in the base URL
LOAD_BALANCERS_PATH = "/load-balancers"
FORWARDING_RULES_SEGMENT = "forwarding-rules"
