import json
import subprocess

import pytest

from ringkeeper.core.config import load_settings
from ringkeeper.lib.common import ring_builder


class FakeResponse:
    def __init__(self, status_code, body=None, text=None):
        self.status_code = status_code
        self._body = body if body is not None else {}
        self.text = json.dumps(self._body) if text is None else text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; replays queued responses or exceptions."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class FakeBuilder:
    """Records swift-ring-builder invocations; `codes` maps subcommand -> exit code."""

    def __init__(self):
        self.calls = []
        self.codes = {}

    def __call__(self, cmd, cwd=None, capture_output=False, text=False):
        self.calls.append((cmd, cwd))
        code = self.codes.get(cmd[2], 0)
        if callable(code):
            code = code(cmd)
        return subprocess.CompletedProcess(cmd, code, stdout=f"{cmd[2]} output\n", stderr="")

    def subcommands(self, ring_type=None):
        return [
            cmd[2:] for cmd, _ in self.calls
            if ring_type is None or cmd[1] == f"{ring_type}.builder"
        ]


@pytest.fixture
def work_dir(tmp_path):
    path = tmp_path / "swift"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_path, work_dir):
    token = tmp_path / "token"
    token.write_text("s3cr3t\n")
    return load_settings(env={
        "RING_NAMESPACE": "swift",
        "RING_CONFIGMAP": "swift-rings",
        "KUBE_API_URL": "https://api.example:6443/",
        "KUBE_TOKEN_FILE": str(token),
        "KUBE_CA_FILE": str(tmp_path / "missing-ca.crt"),
        "KUBE_API_RETRIES": "3",
        "RING_WORK_DIR": str(work_dir),
        "DEVICES_FILE": str(tmp_path / "devices"),
        "OWNER_NAME": "swift-storage",
        "OWNER_UID": "1234-abcd",
    })


@pytest.fixture
def fake_builder(monkeypatch):
    builder = FakeBuilder()
    monkeypatch.setattr(ring_builder.subprocess, "run", builder)
    return builder
