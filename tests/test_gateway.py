import pytest

from ascii_studio.errors import BackendUnavailable
from ascii_studio.gateway import create_app


class StubBackend:
    def __init__(self, fonts=None, generated=None, random_art=None, error=None):
        self.fonts = fonts
        self.generated = generated
        self.random_art = random_art
        self.error = error
        self.generate_bodies = []

    def _answer(self, value):
        if self.error is not None:
            raise self.error
        return value

    def list_fonts(self):
        return self._answer(self.fonts)

    def generate(self, body):
        self.generate_bodies.append(body)
        return self._answer(self.generated)

    def random(self):
        return self._answer(self.random_art)


def client_for(backend):
    app = create_app(backend)
    app.testing = True
    return app.test_client()


def test_health_route():
    response = client_for(StubBackend()).get("/")
    assert response.status_code == 200
    assert b"running" in response.data


def test_fonts_relayed_unmodified():
    backend = StubBackend(fonts={"fonts": ["standard", "slant"], "count": 2})
    response = client_for(backend).get("/api/fonts")
    assert response.status_code == 200
    assert response.get_json() == {"fonts": ["standard", "slant"], "count": 2}


def test_generate_forwards_body_and_relays_result():
    result = {"ascii_art": "H i\n...", "font_used": "standard", "metadata": {"k": 1}}
    backend = StubBackend(generated=result)
    body = {"text": "Hi", "font": "standard", "width": 80, "justify": "center"}

    response = client_for(backend).post("/api/generate", json=body)

    assert response.status_code == 200
    assert response.get_json() == result
    assert backend.generate_bodies == [body]


def test_generate_without_font_is_forwarded_as_is():
    backend = StubBackend(generated={"ascii_art": "x", "font_used": "doom", "metadata": {}})
    client_for(backend).post("/api/generate", json={"text": "Hi", "width": 80, "justify": "center"})
    assert "font" not in backend.generate_bodies[0]


def test_random_relayed_unmodified():
    art = {"ascii_art": "zz", "font_used": "banner", "metadata": {"text": "zz"}}
    response = client_for(StubBackend(random_art=art)).get("/api/random")
    assert response.get_json() == art


@pytest.mark.parametrize("method, path, message", [
    ("get", "/api/fonts", "Failed to fetch fonts"),
    ("post", "/api/generate", "Failed to generate ASCII art"),
    ("get", "/api/random", "Failed to generate random ASCII art"),
])
def test_backend_failure_is_normalized(method, path, message):
    backend = StubBackend(error=BackendUnavailable("Traceback: secret internals"))
    client = client_for(backend)
    kwargs = {"json": {"text": "Hi"}} if method == "post" else {}

    response = getattr(client, method)(path, **kwargs)

    assert response.status_code >= 500
    assert response.get_json() == {"error": message}
    assert b"secret internals" not in response.data


def test_generate_with_non_json_body_fails_without_calling_backend():
    backend = StubBackend(generated={"ascii_art": "x", "font_used": "doom"})
    response = client_for(backend).post("/api/generate", data="text=Hi", content_type="text/plain")
    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to generate ASCII art"}
    assert backend.generate_bodies == []


def test_http_500_from_backend_surfaces_as_error_body(monkeypatch):
    from ascii_studio.connections import backend_connection
    from ascii_studio.connections.backend_connection import RenderingBackend

    class ServerError:
        status_code = 500

        def json(self):
            return {"detail": "stack trace here"}

    monkeypatch.setattr(backend_connection.requests, "get", lambda url, **kw: ServerError())
    client = client_for(RenderingBackend(base_url="http://backend.test"))

    response = client.get("/api/fonts")

    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to fetch fonts"}


def test_redirect_from_backend_is_not_relayed_as_success(monkeypatch):
    from ascii_studio.connections import backend_connection
    from ascii_studio.connections.backend_connection import RenderingBackend

    class MultipleChoices:
        status_code = 300

        def json(self):
            return {"fonts": ["leaked"], "count": 1}

    monkeypatch.setattr(backend_connection.requests, "get", lambda url, **kw: MultipleChoices())
    client = client_for(RenderingBackend(base_url="http://backend.test"))

    response = client.get("/api/fonts")

    assert response.status_code == 500
    assert response.get_json() == {"error": "Failed to fetch fonts"}
