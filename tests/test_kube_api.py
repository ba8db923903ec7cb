import pytest
import requests
from tenacity import wait_none

from conftest import FakeResponse, FakeSession
from ringkeeper.core.errors import ConfigMapError
from ringkeeper.lib.common import kube_api

CONFIGMAPS = "https://api.example:6443/api/v1/namespaces/swift/configmaps"


@pytest.fixture(autouse=True)
def no_backoff(monkeypatch):
    monkeypatch.setattr(kube_api, "RETRY_WAIT", wait_none())


def test_urls(settings):
    assert kube_api.configmap_url(settings) == f"{CONFIGMAPS}/swift-rings"
    assert kube_api.configmap_url(settings, collection=True) == CONFIGMAPS


def test_session_headers(settings):
    session = kube_api.api_session(settings)
    assert session.headers["Authorization"] == "Bearer s3cr3t"
    assert session.headers["Content-Type"] == "application/json"
    assert session.verify is True


def test_session_without_token(settings, tmp_path):
    ca = tmp_path / "ca.crt"
    ca.write_text("cert")
    settings["token_file"] = str(tmp_path / "absent")
    settings["ca_file"] = str(ca)
    session = kube_api.api_session(settings)
    assert "Authorization" not in session.headers
    assert session.verify == str(ca)


def test_verbs(settings):
    session = FakeSession(FakeResponse(200), FakeResponse(201), FakeResponse(200))
    kube_api.get_configmap(settings, session=session)
    kube_api.create_configmap(settings, {"kind": "ConfigMap"}, session=session)
    kube_api.replace_configmap(settings, {"kind": "ConfigMap"}, session=session)
    assert [(m, u) for m, u, _ in session.calls] == [
        ("GET", f"{CONFIGMAPS}/swift-rings"),
        ("POST", CONFIGMAPS),
        ("PUT", f"{CONFIGMAPS}/swift-rings"),
    ]
    assert session.calls[1][2]["json"] == {"kind": "ConfigMap"}
    assert session.calls[0][2]["timeout"] == 10


def test_transport_errors_are_retried(settings):
    session = FakeSession(requests.ConnectionError("reset"), requests.Timeout("slow"), FakeResponse(200))
    assert kube_api.get_configmap(settings, session=session).status_code == 200
    assert len(session.calls) == 3


def test_transport_errors_exhausted(settings):
    session = FakeSession(*[requests.ConnectionError("refused")] * 3)
    with pytest.raises(ConfigMapError) as excinfo:
        kube_api.get_configmap(settings, session=session)
    assert excinfo.value.status is None
    assert len(session.calls) == 3


def test_http_errors_are_not_retried(settings):
    session = FakeSession(FakeResponse(503))
    assert kube_api.get_configmap(settings, session=session).status_code == 503
    assert len(session.calls) == 1


def test_invalid_url_becomes_configmap_error(settings):
    session = FakeSession(requests.exceptions.MissingSchema("No scheme supplied"))
    with pytest.raises(ConfigMapError, match="No scheme supplied"):
        kube_api.get_configmap(settings, session=session)
    assert len(session.calls) == 1


def test_zero_retries_still_makes_one_attempt(settings):
    settings["api_retries"] = 0
    session = FakeSession(requests.ConnectionError("refused"))
    with pytest.raises(ConfigMapError, match="after 1 attempt"):
        kube_api.get_configmap(settings, session=session)
    assert len(session.calls) == 1


def test_response_body(settings):
    assert kube_api.response_body(FakeResponse(200, {"kind": "ConfigMap"}), "GET") == {"kind": "ConfigMap"}
    with pytest.raises(ConfigMapError) as excinfo:
        kube_api.response_body(FakeResponse(200, text="<html>"), "GET")
    assert excinfo.value.status == 200
