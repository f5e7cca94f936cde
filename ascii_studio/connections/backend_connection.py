import logging
import requests

from ascii_studio import config
from ascii_studio.errors import BackendUnavailable

logger = logging.getLogger("backend_connection")

FONTS_PATH = "/figlet/fonts"
GENERATE_PATH = "/figlet/generate"
RANDOM_PATH = "/figlet/random"


class RenderingBackend:
    """
    Thin relay to the figlet rendering backend.

    Every call either returns the decoded JSON body untouched or raises
    BackendUnavailable. Nothing is cached.
    """

    def __init__(self, base_url=None, timeout=None):
        self.base_url = (config.BACKEND_API_URL if base_url is None else base_url).rstrip("/")
        self.timeout = config.REQUEST_TIMEOUT if timeout is None else timeout

    def list_fonts(self):
        return self._request("GET", FONTS_PATH)

    def generate(self, body):
        """Forward a generation body verbatim."""
        return self._request("POST", GENERATE_PATH, json=body)

    def random(self):
        return self._request("GET", RANDOM_PATH)

    def _request(self, method, path, json=None):
        url = f"{self.base_url}{path}"
        try:
            if method == "POST":
                response = requests.post(
                    url,
                    headers={"Content-Type": "application/json"},
                    json=json,
                    timeout=self.timeout,
                )
            else:
                response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise BackendUnavailable(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise BackendUnavailable(f"API responded with status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise BackendUnavailable(f"{method} {url} returned a non-JSON body") from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return data
