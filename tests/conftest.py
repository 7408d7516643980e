import email.message
import json
import os
import urllib.error
import urllib.request

import pytest

from assetpack.core.options import AssetOptions

BASE_MTIME = 1_700_000_000


def _write(path, text, mtime):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path


@pytest.fixture()
def asset_root(tmp_path):
    root = tmp_path / "app"
    _write(root / "js" / "vendor" / "jquery.js", "var jq = 1;\n", BASE_MTIME)
    _write(root / "js" / "app.js", "var a = 1;\n", BASE_MTIME + 10)
    _write(root / "js" / "util.js", "var b = 2;\n", BASE_MTIME + 20)
    _write(root / "js" / "_partial.js", "var hidden = 1;\n", BASE_MTIME + 30)
    _write(root / "js" / ".swap.js", "junk", BASE_MTIME + 40)
    _write(root / "css" / "main.css", "body {\n  color: red;\n}\n", BASE_MTIME + 5)
    _write(root / "css" / "print.css", "p {\n  margin: 0;\n}\n", BASE_MTIME + 6)
    return root


@pytest.fixture()
def options(asset_root):
    opts = AssetOptions(development=True)
    opts.serve("/js", str(asset_root / "js"))
    opts.serve("/css", str(asset_root / "css"))
    return opts


@pytest.fixture()
def remote_options(options):
    options.remote_host = "http://assets.test"
    options.remote_base_path = "/wiki"
    return options


@pytest.fixture()
def manifest_file(tmp_path, asset_root):
    data = {
        "serve": {"/js": "app/js", "/css": "app/css"},
        "js": {"app": {"path": "/js/app.js", "files": ["/js/vendor/*.js", "/js/*.js"]}},
        "css": {"screen": {"path": "/css/screen.css", "files": ["/css/*.css"]}},
    }
    path = tmp_path / "assetpack.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class FakeResponse:
    def __init__(self, body=b"", status=200, content_type="text/plain; charset=utf-8"):
        self.status = status
        self._body = body
        self.headers = email.message.Message()
        self.headers["Content-Type"] = content_type

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeUrlopen:
    """Records outbound requests and answers from a {url: response-or-exception} table."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def __call__(self, req, timeout=None):
        self.calls.append((req, timeout))
        url = req.full_url
        answer = self.routes.get(url)
        if answer is None:
            raise urllib.error.HTTPError(url, 404, "Not Found", email.message.Message(), None)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture()
def fake_http(monkeypatch):
    def install(routes):
        fake = FakeUrlopen(routes)
        monkeypatch.setattr(urllib.request, "urlopen", fake)
        return fake

    return install
