from types import SimpleNamespace

import pytest
from azure.core.exceptions import ResourceNotFoundError
from typer.testing import CliRunner

import blobnav.cli.common.context as context_mod
from blobnav.cli.cli import app

runner = CliRunner()

URL = "https://acct.blob.core.windows.net/mycontainer"


class _Client:
    def __init__(self, names=(), error=None):
        self.names = list(names)
        self.error = error
        self.prefixes: list[object] = []

    def list_blobs(self, name_starts_with=None):
        self.prefixes.append(name_starts_with)
        if self.error is not None:
            raise self.error
        return [
            SimpleNamespace(name=n, size=10, last_modified=None)
            for n in self.names
            if n.startswith(name_starts_with or "")
        ]


@pytest.fixture
def fake_client(monkeypatch):
    client = _Client(["readme.txt", "docs/intro.md", "docs/ch1/page.md"])
    monkeypatch.setattr(
        context_mod, "get_container_client", lambda address, timeout=None: client
    )
    return client


def test_resolve_prints_address():
    result = runner.invoke(app, ["resolve", f"{URL}/docs"])

    assert result.exit_code == 0
    assert "acct" in result.output
    assert "mycontainer" in result.output
    assert "docs" in result.output


def test_resolve_rejects_wrong_host():
    result = runner.invoke(app, ["resolve", "https://example.com/foo"])

    assert result.exit_code == 2
    assert "Invalid Azure Blob Storage URL format" in result.output


def test_ls_lists_root(fake_client):
    result = runner.invoke(app, ["ls", URL])

    assert result.exit_code == 0
    assert fake_client.prefixes == [None]
    assert "docs/" in result.output
    assert "readme.txt" in result.output
    assert "page.md" not in result.output


def test_ls_uses_path_from_url_and_option(fake_client):
    assert runner.invoke(app, ["ls", f"{URL}/docs"]).exit_code == 0
    result = runner.invoke(app, ["ls", URL, "--path", "docs/ch1"])

    assert result.exit_code == 0
    assert fake_client.prefixes == ["docs/", "docs/ch1/"]
    assert "page.md" in result.output


def test_ls_reports_empty_folder(fake_client):
    result = runner.invoke(app, ["ls", URL, "--path", "nothing"])

    assert result.exit_code == 0
    assert "No files found" in result.output


def test_ls_bad_url_exits_before_any_request(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("no client expected")

    monkeypatch.setattr(context_mod, "get_container_client", _fail)

    result = runner.invoke(app, ["ls", "https://acct.blob.core.windows.net"])

    assert result.exit_code == 2


def test_ls_reports_missing_container(monkeypatch):
    client = _Client(error=ResourceNotFoundError("nope"))
    monkeypatch.setattr(
        context_mod, "get_container_client", lambda address, timeout=None: client
    )

    result = runner.invoke(app, ["ls", URL])

    assert result.exit_code == 1
    assert "Container not found" in result.output


def test_url_can_come_from_environment(fake_client):
    result = runner.invoke(app, ["ls"], env={"BLOBNAV_URL": URL})

    assert result.exit_code == 0
    assert "readme.txt" in result.output


def test_resolve_rejects_invalid_port():
    result = runner.invoke(app, ["resolve", "https://acct.blob.core.windows.net:99999/c"])

    assert result.exit_code == 2
    assert "Invalid Azure Blob Storage URL format" in result.output
