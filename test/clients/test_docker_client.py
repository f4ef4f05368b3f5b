import subprocess

import pytest
from project_images.clients.docker_client import DockerClient
from project_images.errors import RuntimeInventoryError

class DummyResult:
    def __init__(self, returncode, stdout="", stderr=""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

@pytest.fixture
def client():
    return DockerClient()

def test_list_known_images(monkeypatch, client):
    stdout = (
        "registry.example.com/myorg/orders:1\n"
        "registry.example.com/myorg/billing:1\n"
        "\n"
        "<none>:<none>\n"
        "registry.example.com/myorg/orders:<none>\n"
        "registry.example.com/myorg/orders:2\n"
    )
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: DummyResult(0, stdout))
    assert client.list_known_images() == [
        "registry.example.com/myorg/orders:1",
        "registry.example.com/myorg/billing:1",
        "registry.example.com/myorg/orders:2",
    ]

def test_list_known_images_command(monkeypatch):
    calls = []
    def fake_run(cmd, **kwargs):
        calls.append(cmd)
        return DummyResult(0)
    monkeypatch.setattr(subprocess, "run", fake_run)
    assert DockerClient("podman").list_known_images() == []
    assert calls == [["podman", "image", "ls", "--format", "{{.Repository}}:{{.Tag}}"]]

def test_list_known_images_failure(monkeypatch, client):
    monkeypatch.setattr(subprocess, "run", lambda cmd, **kwargs: DummyResult(1, stderr="daemon not running\n"))
    with pytest.raises(RuntimeInventoryError, match="daemon not running"):
        client.list_known_images()

def test_list_known_images_missing_binary(monkeypatch, client):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])
    monkeypatch.setattr(subprocess, "run", fake_run)
    with pytest.raises(RuntimeInventoryError, match="not found"):
        client.list_known_images()
