import os
from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

# Rendering backend base address; empty means same-origin
BACKEND_API_URL = os.getenv("ASCII_API_URL", "")

# Where client-side controllers reach the gateway
GATEWAY_URL = os.getenv("ASCII_GATEWAY_URL", "http://localhost:8080")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8080))

# Transport bound for outbound calls, in seconds. No retries.
REQUEST_TIMEOUT = float(os.getenv("ASCII_REQUEST_TIMEOUT", 30))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
