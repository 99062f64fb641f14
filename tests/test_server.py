import threading
import urllib.error
import urllib.request
from http.server import ThreadingHTTPServer
from unittest import mock

import pytest

from leptographic.app import App, render_document
from leptographic.server import main, make_handler, serve


@pytest.fixture
def base_url():
    server = ThreadingHTTPServer(("127.0.0.1", 0), make_handler(App()))
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
        thread.join(timeout=5)


class FakeServer:
    instances: list = []

    def __init__(self, address, handler):
        self.address = address
        self.handler = handler
        self.server_address = address
        self.served = False
        FakeServer.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def serve_forever(self):
        self.served = True


@pytest.fixture
def fake_server():
    FakeServer.instances = []
    with mock.patch("leptographic.server.ThreadingHTTPServer", FakeServer):
        yield FakeServer


def test_root_serves_document(base_url):
    with urllib.request.urlopen(base_url + "/") as response:
        assert response.status == 200
        assert response.headers["Content-Type"] == "text/html; charset=utf-8"
        body = response.read().decode("utf-8")
    assert body.startswith("<!DOCTYPE html>")
    assert "<title>Leptonic UI Components</title>" in body
    assert body == render_document(App())


def test_query_string_is_ignored_for_routing(base_url):
    with urllib.request.urlopen(base_url + "/?page=1") as response:
        assert response.status == 200


def test_unknown_path_is_404_with_page(base_url):
    with pytest.raises(urllib.error.HTTPError) as info:
        urllib.request.urlopen(base_url + "/missing")
    assert info.value.code == 404
    body = info.value.read().decode("utf-8")
    assert body.startswith("<!DOCTYPE html>")


def test_head_has_length_but_no_body(base_url):
    with urllib.request.urlopen(base_url + "/") as response:
        full = response.read()
    request = urllib.request.Request(base_url + "/", method="HEAD")
    with urllib.request.urlopen(request) as response:
        assert int(response.headers["Content-Length"]) == len(full)
        assert response.read() == b""


def test_serve_prints_address(fake_server, capsys):
    serve("127.0.0.1", 3000)
    assert capsys.readouterr().out == "listening on http://127.0.0.1:3000\n"
    assert fake_server.instances[0].served is True


def test_main_defaults(fake_server, monkeypatch):
    monkeypatch.delenv("LEPTOS_SITE_ADDR", raising=False)
    assert main([]) == 0
    assert fake_server.instances[0].address == ("127.0.0.1", 3000)


def test_main_arguments(fake_server, monkeypatch):
    monkeypatch.delenv("LEPTOS_SITE_ADDR", raising=False)
    assert main(["--host", "0.0.0.0", "--port", "8080"]) == 0
    assert fake_server.instances[0].address == ("0.0.0.0", 8080)


def test_main_reads_site_addr_from_environment(fake_server, monkeypatch):
    monkeypatch.setenv("LEPTOS_SITE_ADDR", "localhost:4321")
    assert main([]) == 0
    assert fake_server.instances[0].address == ("localhost", 4321)


def test_main_rejects_bad_port(fake_server, monkeypatch):
    monkeypatch.delenv("LEPTOS_SITE_ADDR", raising=False)
    with pytest.raises(SystemExit):
        main(["--port", "notaport"])
    assert fake_server.instances == []


def test_main_rejects_bad_environment_address(fake_server, monkeypatch):
    monkeypatch.setenv("LEPTOS_SITE_ADDR", "no-port-here")
    with pytest.raises(SystemExit):
        main([])
    assert fake_server.instances == []