import json
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from modlogpack.ui import UIServerConfig, build_ui_url, start_ui_server

OLD = json.dumps([{"name": "Foo", "version": "1.0"}])
NEW = json.dumps([{"name": "Foo", "version": "2.0"}, {"name": "Bar", "version": "1.0"}])


def _get_json(url: str) -> tuple[int, dict]:
    try:
        with urlopen(url, timeout=5) as response:  # noqa: S310 (local test server)
            return response.getcode(), json.loads(response.read().decode("utf-8"))
    except HTTPError as error:
        return error.code, json.loads(error.read().decode("utf-8"))


def _post_json(url: str, payload: dict) -> tuple[int, dict]:
    request = Request(  # noqa: S310 (local test server)
        url,
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    try:
        with urlopen(request, timeout=5) as response:
            return response.getcode(), json.loads(response.read().decode("utf-8"))
    except HTTPError as error:
        body = error.read().decode("utf-8")
        return error.code, json.loads(body)


def test_build_ui_url() -> None:
    assert build_ui_url("127.0.0.1", 4320) == "http://127.0.0.1:4320/"


def test_ui_server_serves_generator_page() -> None:
    config = UIServerConfig(host="127.0.0.1", port=0)

    with start_ui_server(config) as (server, _thread):
        host, port = server.server_address[:2]

        with urlopen(f"http://{host}:{port}/", timeout=5) as response:  # noqa: S310
            html = response.read().decode("utf-8")

    assert "<h1>Modpack Changelog Generator</h1>" in html
    assert 'for="old-json"' in html
    assert 'for="new-json"' in html
    assert 'aria-label="Markdown output"' in html
    assert 'aria-label="Rendered markdown preview"' in html
    assert "Generate Changelog" in html
    assert "Copy Markdown" in html
    assert "navigator.clipboard.writeText" in html


def test_ui_server_generate_and_read_back_changelog() -> None:
    config = UIServerConfig(host="127.0.0.1", port=0)

    with start_ui_server(config) as (server, _thread):
        host, port = server.server_address[:2]
        base_url = f"http://{host}:{port}"

        status_code, payload = _get_json(base_url + "/api/changelog")
        assert status_code == 200
        assert payload["markup"] == ""
        assert payload["html"] == ""

        status_code, payload = _post_json(base_url + "/api/generate", {"old": OLD, "new": NEW})
        assert status_code == 200
        assert payload["status"] == "ok"
        assert payload["summary"] == {"added": 1, "updated": 1, "removed": 0}
        assert payload["markup"].startswith("## Added (1)\n")
        assert "<strong>Bar</strong>" in payload["html"]
        generated = payload["markup"]

        status_code, payload = _get_json(base_url + "/api/changelog")
        assert status_code == 200
        assert payload["markup"] == generated


def test_ui_server_invalid_input_keeps_previous_changelog() -> None:
    config = UIServerConfig(host="127.0.0.1", port=0)

    with start_ui_server(config) as (server, _thread):
        host, port = server.server_address[:2]
        base_url = f"http://{host}:{port}"

        _post_json(base_url + "/api/generate", {"old": OLD, "new": NEW})
        _status, before = _get_json(base_url + "/api/changelog")

        status_code, payload = _post_json(base_url + "/api/generate", {"old": "[", "new": NEW})
        assert status_code == 400
        assert payload == {
            "status": "error",
            "message": "Invalid JSON format. Please check your input.",
        }

        _status, after = _get_json(base_url + "/api/changelog")
        assert after["markup"] == before["markup"]


def test_ui_server_validation_and_render_routes() -> None:
    config = UIServerConfig(host="127.0.0.1", port=0)

    with start_ui_server(config) as (server, _thread):
        host, port = server.server_address[:2]
        base_url = f"http://{host}:{port}"

        status_code, payload = _post_json(base_url + "/api/generate", {"old": OLD})
        assert status_code == 400
        assert "old and new" in payload["message"]

        status_code, payload = _post_json(
            base_url + "/api/render",
            {"markup": "# <script>alert(1)</script>"},
        )
        assert status_code == 200
        assert payload["html"] == "<h1>&lt;script&gt;alert(1)&lt;/script&gt;</h1>"

        status_code, payload = _post_json(base_url + "/api/render", {})
        assert status_code == 400

        status_code, payload = _get_json(base_url + "/api/unknown")
        assert status_code == 404
        assert payload == {"error": "Not found"}
