"""Local-first UI server for changelog generation."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
import json
import logging
import threading
from typing import Any, Iterator
from urllib.parse import urlparse

from modlogpack.core.exceptions import InvalidInputError
from modlogpack.markup import render_markup
from modlogpack.session import ChangelogSession

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class UIServerConfig:
    host: str = "127.0.0.1"
    port: int = 4320


def build_ui_url(host: str, port: int) -> str:
    return f"http://{host}:{port}/"


def create_ui_server(config: UIServerConfig) -> ThreadingHTTPServer:
    session = ChangelogSession()
    session_lock = threading.Lock()

    class Handler(BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            route = urlparse(self.path).path

            if route == "/":
                self._write_html(_render_index_html())
                return

            if route == "/api/changelog":
                with session_lock:
                    markup = session.markup_text
                self._write_json(
                    200,
                    {"status": "ok", "markup": markup, "html": render_markup(markup)},
                )
                return

            self._write_json(404, {"error": "Not found"})

        def do_POST(self) -> None:  # noqa: N802
            route = urlparse(self.path).path

            if route == "/api/generate":
                self._handle_generate()
                return

            if route == "/api/render":
                self._handle_render()
                return

            self._write_json(404, {"error": "Not found"})

        def _handle_generate(self) -> None:
            payload = self._read_json_body()
            old_text = payload.get("old")
            new_text = payload.get("new")
            if not isinstance(old_text, str) or not isinstance(new_text, str):
                self._write_json(
                    400,
                    {
                        "status": "error",
                        "message": "Missing required fields: old and new",
                    },
                )
                return

            try:
                with session_lock:
                    result = session.generate(old_text, new_text)
            except InvalidInputError as error:
                self._write_json(400, {"status": "error", "message": error.user_message})
                return

            self._write_json(
                200,
                {
                    "status": "ok",
                    "markup": result.markup,
                    "html": result.html,
                    "summary": result.change_set.summary(),
                },
            )

        def _handle_render(self) -> None:
            payload = self._read_json_body()
            markup = payload.get("markup")
            if not isinstance(markup, str):
                self._write_json(
                    400,
                    {"status": "error", "message": "Missing required field: markup"},
                )
                return
            self._write_json(200, {"status": "ok", "html": render_markup(markup)})

        def _read_json_body(self) -> dict[str, Any]:
            raw_length = self.headers.get("Content-Length", "0")
            try:
                length = int(raw_length)
            except ValueError:
                return {}
            if length <= 0:
                return {}
            payload = self.rfile.read(length)
            if not payload:
                return {}
            try:
                data = json.loads(payload.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError):
                return {}
            if not isinstance(data, dict):
                return {}
            return data

        def _write_html(self, html: str) -> None:
            body = html.encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "text/html; charset=utf-8")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def _write_json(self, status_code: int, payload: dict) -> None:
            body = (
                json.dumps(payload, ensure_ascii=True, sort_keys=True).encode("utf-8")
            )
            self.send_response(status_code)
            self.send_header("Content-Type", "application/json; charset=utf-8")
            self.send_header("Cache-Control", "no-store")
            self.send_header("Content-Length", str(len(body)))
            self.end_headers()
            self.wfile.write(body)

        def log_message(self, format: str, *args: object) -> None:  # noqa: A002
            logger.debug("%s - %s", self.address_string(), format % args)

    return ThreadingHTTPServer((config.host, config.port), Handler)


@contextmanager
def start_ui_server(config: UIServerConfig) -> Iterator[tuple[ThreadingHTTPServer, threading.Thread]]:
    server = create_ui_server(config)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server, thread
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=2)


def _render_index_html() -> str:
    return """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Modpack Changelog Generator</title>
  <style>
    :root {
      --bg: #f7f4ed;
      --panel: #fffdfa;
      --ink: #1f2933;
      --accent: #0f766e;
      --muted: #6b7280;
      --border: #d6d3d1;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0;
      padding: 24px;
      background: var(--bg);
      color: var(--ink);
      font-family: "IBM Plex Sans", "Segoe UI", sans-serif;
    }
    h1 { margin: 0 0 16px; font-size: 1.6rem; }
    label { display: block; font-weight: 600; margin-bottom: 6px; }
    .container, .output-grid {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 16px;
    }
    .json-input {
      width: 100%;
      min-height: 220px;
      padding: 10px;
      border: 1px solid var(--border);
      border-radius: 6px;
      background: var(--panel);
      font-family: "IBM Plex Mono", Menlo, monospace;
      font-size: 0.85rem;
    }
    .controls { display: flex; gap: 12px; margin: 16px 0; }
    button {
      padding: 8px 16px;
      border-radius: 6px;
      border: 1px solid var(--accent);
      background: var(--panel);
      color: var(--accent);
      cursor: pointer;
    }
    button.primary { background: var(--accent); color: #fff; }
    .markdown-output, .markdown-preview {
      min-height: 200px;
      margin: 0;
      padding: 12px;
      border: 1px solid var(--border);
      border-radius: 6px;
      background: var(--panel);
      overflow: auto;
    }
    .markdown-output { white-space: pre-wrap; font-family: "IBM Plex Mono", Menlo, monospace; }
    .markdown-preview p:empty { margin: 0; }
  </style>
</head>
<body>
  <h1>Modpack Changelog Generator</h1>

  <div class="container">
    <div class="input-section">
      <label for="old-json">Old Modpack JSON</label>
      <textarea id="old-json" class="json-input" aria-label="Old modpack JSON"
        placeholder='[{"name":"ModName","url":"...","version":"1.0.0"}]'></textarea>
    </div>
    <div class="input-section">
      <label for="new-json">New Modpack JSON</label>
      <textarea id="new-json" class="json-input" aria-label="New modpack JSON"
        placeholder='[{"name":"ModName","url":"...","version":"2.0.0"}]'></textarea>
    </div>
  </div>

  <div class="controls">
    <button id="generate" class="primary">Generate Changelog</button>
    <button id="copy" class="copy-btn">Copy Markdown</button>
  </div>

  <div class="output">
    <label for="markdown-output">Markdown Output</label>
    <div class="output-grid">
      <pre id="markdown-output" class="markdown-output" aria-label="Markdown output"></pre>
      <div id="markdown-preview" class="markdown-preview" aria-label="Rendered markdown preview"></div>
    </div>
  </div>

  <script>
    const oldInput = document.getElementById("old-json");
    const newInput = document.getElementById("new-json");
    const output = document.getElementById("markdown-output");
    const preview = document.getElementById("markdown-preview");
    const generateButton = document.getElementById("generate");
    const copyButton = document.getElementById("copy");
    let copyResetTimer = null;

    function showChangelog(payload) {
      output.textContent = payload.markup;
      // Server-rendered preview is escaped before any markup is applied.
      preview.innerHTML = payload.html;
    }

    async function generateChangelog() {
      const response = await fetch("/api/generate", {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify({ old: oldInput.value, new: newInput.value }),
      });
      const payload = await response.json();
      if (!response.ok) {
        alert(payload.message || "Invalid JSON format. Please check your input.");
        return;
      }
      showChangelog(payload);
    }

    async function copyToClipboard() {
      try {
        await navigator.clipboard.writeText(output.textContent);
        copyButton.textContent = "Copied";
        clearTimeout(copyResetTimer);
        copyResetTimer = setTimeout(() => { copyButton.textContent = "Copy Markdown"; }, 2000);
      } catch (err) {
        alert("Failed to copy to clipboard");
        console.error(err);
      }
    }

    async function loadCurrentChangelog() {
      const response = await fetch("/api/changelog");
      if (response.ok) {
        showChangelog(await response.json());
      }
    }

    generateButton.addEventListener("click", generateChangelog);
    copyButton.addEventListener("click", copyToClipboard);
    loadCurrentChangelog();
  </script>
</body>
</html>
"""
