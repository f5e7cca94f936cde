import logging
import signal

from ascii_studio import config
from ascii_studio.gateway import create_app

# Configure detailed logging
logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)
logger = logging.getLogger(__name__)

app = create_app()


# --- Signal Handling ---
def shutdown(signum, frame):
    logger.info("Shutting down gateway...")
    raise SystemExit(0)


signal.signal(signal.SIGTERM, shutdown)

# --- Main Entry Point ---
if __name__ == "__main__":
    if not config.BACKEND_API_URL:
        logger.warning("ASCII_API_URL not set; relays will use an empty backend prefix")
    logger.info(f"Starting Flask server on port {config.PORT}")
    app.run(host=config.HOST, port=config.PORT)
