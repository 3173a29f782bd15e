import json
from wsgiref.util import setup_testing_defaults
from wsgiref.validate import validator

from patternkit.handlers import make_app, send_json


def _environ(path, method="GET"):
    environ = {}
    setup_testing_defaults(environ)
    environ["PATH_INFO"] = path
    environ["REQUEST_METHOD"] = method
    return environ


def _call(app, path, method="GET"):
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    result = app(_environ(path, method), start_response)
    try:
        body = b"".join(result)
    finally:
        close = getattr(result, "close", None)
        if close is not None:
            close()
    return captured["status"], captured["headers"], body


def test_send_json_endpoint():
    status, headers, body = _call(make_app(), "/sendjson")
    assert status.startswith("200")
    assert headers["Content-Type"] == "application/json"
    user = json.loads(body)
    assert user["Name"] == "Bill"
    assert user["Email"] == "bill@example.com"


def test_send_json_example_output():
    _, _, body = _call(make_app(), "/sendjson")
    user = json.loads(body)
    assert (user["Name"], user["Email"]) == ("Bill", "bill@example.com")


def test_send_json_wire_bytes():
    captured = {}

    def start_response(status, headers, exc_info=None):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(send_json(_environ("/anything"), start_response))
    assert body == b'{"Name":"Bill","Email":"bill@example.com"}\n'
    assert captured["status"].startswith("200")
    assert captured["headers"]["Content-Length"] == str(len(body))


def test_unknown_path_is_not_found():
    status, _, body = _call(make_app(), "/missing")
    assert status.startswith("404")
    assert body == b"404 page not found\n"


def test_app_is_wsgi_compliant():
    status, _, body = _call(validator(make_app()), "/sendjson")
    assert status == "200 OK"
    assert json.loads(body)["Name"] == "Bill"


def test_any_method_is_served():
    status, _, body = _call(make_app(), "/sendjson", method="POST")
    assert status.startswith("200")
    assert json.loads(body)["Email"] == "bill@example.com"