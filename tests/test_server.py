import pytest
from wsgiref.util import setup_testing_defaults

from megjoni.app import NOT_FOUND_MESSAGE, render_page
from megjoni.server import Env, SiteConfig, create_app, load_config, main


def _call(app, path, method="GET"):
    environ = {"PATH_INFO": path, "REQUEST_METHOD": method}
    setup_testing_defaults(environ)
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


@pytest.fixture
def app(tmp_path):
    site = tmp_path / "site"
    (site / "pkg").mkdir(parents=True)
    (site / "style.css").write_text("body { margin: 0; }", encoding="utf-8")
    (tmp_path / "outside.txt").write_text("hidden", encoding="utf-8")
    return create_app(SiteConfig(site_root=str(site)))


def test_load_config_defaults():
    config = load_config({})
    assert config.host == "127.0.0.1"
    assert config.port == 3000
    assert config.site_addr == "127.0.0.1:3000"
    assert config.site_root == "target/site"
    assert config.site_pkg_dir == "pkg"
    assert config.env is Env.DEV


def test_load_config_from_env():
    config = load_config(
        {
            "LEPTOS_SITE_ADDR": "[::1]:8080",
            "LEPTOS_SITE_ROOT": "out",
            "LEPTOS_ENV": "production",
        }
    )
    assert config.host == "::1"
    assert config.port == 8080
    assert config.site_addr == "[::1]:8080"
    assert config.site_root == "out"
    assert config.env is Env.PROD


@pytest.mark.parametrize("addr", ["nonsense", ":3000", "localhost:port", "h:70000"])
def test_load_config_rejects_bad_address(addr):
    with pytest.raises(ValueError):
        load_config({"LEPTOS_SITE_ADDR": addr})


def test_load_config_rejects_bad_env():
    with pytest.raises(ValueError):
        load_config({"LEPTOS_ENV": "staging"})


def test_routed_page(app):
    status, headers, body = _call(app, "/kontakt")
    assert status == "200 OK"
    assert headers["Content-Type"].startswith("text/html")
    assert body == render_page("/kontakt").encode("utf-8")
    assert headers["Content-Length"] == str(len(body))


def test_unknown_page_is_404(app):
    status, _, body = _call(app, "/wyprzedaz")
    assert status.startswith("404")
    assert NOT_FOUND_MESSAGE in body.decode("utf-8")


def test_static_file(app):
    status, headers, body = _call(app, "/style.css")
    assert status == "200 OK"
    assert headers["Content-Type"] == "text/css"
    assert body == b"body { margin: 0; }"


def test_directory_is_not_served(app):
    status, _, _ = _call(app, "/pkg")
    assert status.startswith("404")


def test_head_has_no_body(app):
    status, headers, body = _call(app, "/", method="HEAD")
    assert status == "200 OK"
    assert body == b""
    assert int(headers["Content-Length"]) == len(render_page("/").encode("utf-8"))


def test_post_not_allowed(app):
    status, headers, _ = _call(app, "/", method="POST")
    assert status.startswith("405")
    assert headers["Allow"] == "GET, HEAD"


def test_main_rejects_bad_address():
    with pytest.raises(ValueError):
        main(["--addr", "nonsense"])


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])