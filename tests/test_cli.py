"""Tests for the opensearch-rolesmapping command line."""

import json
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from opensearch_security_client import cli as cli_module
from opensearch_security_client.cli import build_client, cli
from opensearch_security_client.client import SecurityClient

from conftest import RecordingTransport


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, transport, args):
    """Run the CLI with every client bound to the given transport."""
    with patch.object(cli_module, "build_client", return_value=SecurityClient(transport=transport)):
        return runner.invoke(cli, args)


class TestBuildClient:
    """Tests for building a client from CLI connection options."""

    def test_credentials_and_insecure(self):
        client = build_client({
            "url": "https://cli:9200",
            "username": "admin",
            "password": "secret",
            "insecure": True,
            "timeout": 2.0,
        })

        assert client.base_url == "https://cli:9200"
        assert client.transport._auth == ("admin", "secret")
        assert client.transport._verify is False
        assert client.transport.timeout == 2.0


class TestCommands:
    """Tests for the role mapping commands."""

    def test_get(self, runner, get_role_mapping_response):
        transport = RecordingTransport(json_data=get_role_mapping_response)

        result = invoke(runner, transport, ["get", "human_resources", "--pretty", "--filter-path", "*.users"])

        assert result.exit_code == 0
        assert "[200 OK]" in result.output
        assert "ashley" in result.output
        request = transport.last_request
        assert request.method == "GET"
        assert request.url.path == "/_plugins/_security/api/rolesmapping/human_resources"
        assert request.url.params["pretty"] == "true"
        assert request.url.params["filter_path"] == "*.users"

    def test_get_all(self, runner):
        transport = RecordingTransport()

        result = invoke(runner, transport, ["get"])

        assert result.exit_code == 0
        assert transport.last_request.url.path == "/_plugins/_security/api/rolesmapping/"

    def test_headers_and_opaque_id(self, runner):
        transport = RecordingTransport()

        result = invoke(runner, transport, [
            "get", "admin",
            "-H", "X-Custom", "one",
            "-H", "X-Custom", "two",
            "--opaque-id", "cli-1",
        ])

        assert result.exit_code == 0
        request = transport.last_request
        assert request.headers.get_list("X-Custom") == ["one", "two"]
        assert request.headers["X-Opaque-Id"] == "cli-1"

    def test_create_from_yaml(self, runner, tmp_path):
        body_file = tmp_path / "mapping.yaml"
        body_file.write_text("backend_roles:\n  - starfleet\nusers:\n  - worf\n")
        transport = RecordingTransport(status_code=201, json_data={"status": "CREATED"})

        result = invoke(runner, transport, ["create", "worf", "-f", str(body_file)])

        assert result.exit_code == 0
        assert "[201 Created]" in result.output
        request = transport.last_request
        assert request.method == "PUT"
        assert json.loads(request.content) == {"backend_roles": ["starfleet"], "users": ["worf"]}

    def test_patch_from_json(self, runner, tmp_path):
        operations = [{"op": "replace", "path": "/users", "value": ["myuser"]}]
        body_file = tmp_path / "patch.json"
        body_file.write_text(json.dumps(operations))
        transport = RecordingTransport()

        result = invoke(runner, transport, ["patch", "human_resources", "-f", str(body_file)])

        assert result.exit_code == 0
        request = transport.last_request
        assert request.method == "PATCH"
        assert request.url.path == "/_plugins/_security/api/rolesmapping/human_resources"
        assert json.loads(request.content) == operations

    def test_bulk_upsert(self, runner, tmp_path):
        operations = [{"op": "remove", "path": "/finance"}]
        body_file = tmp_path / "bulk.json"
        body_file.write_text(json.dumps(operations))
        transport = RecordingTransport()

        result = invoke(runner, transport, ["bulk-upsert", "-f", str(body_file)])

        assert result.exit_code == 0
        request = transport.last_request
        assert request.method == "PATCH"
        assert request.url.path == "/_plugins/_security/api/rolesmapping/"

    def test_error_response_exit_code(self, runner):
        transport = RecordingTransport(status_code=404, json_data={"status": "NOT_FOUND"})

        result = invoke(runner, transport, ["get", "missing"])

        assert result.exit_code == 1
        assert "[404 Not Found]" in result.output

    def test_connection_error(self, runner):
        transport = RecordingTransport(error=httpx.ConnectError("connection refused"))

        result = invoke(runner, transport, ["get", "admin"])

        assert result.exit_code == 1
        assert "could not be established" in result.output

    def test_create_requires_file(self, runner):
        result = invoke(runner, RecordingTransport(), ["create", "worf"])
        assert result.exit_code != 0

    def test_transport_error(self, runner):
        transport = RecordingTransport(error=httpx.ReadError("connection reset by peer"))

        result = invoke(runner, transport, ["get", "admin"])

        assert result.exit_code == 1
        assert "Request failed" in result.output
        assert "connection reset by peer" in result.output

    def test_read_timeout(self, runner):
        transport = RecordingTransport(error=httpx.ReadTimeout("timed out"))

        result = invoke(runner, transport, ["get", "admin"])

        assert result.exit_code == 1
        assert "timeout" in result.output
        assert "did not complete in time" in result.output

    @pytest.mark.parametrize("filename, content", [
        ("broken.json", '{"backend_roles": ['),
        ("broken.yaml", "backend_roles: [starfleet\nusers: worf\n"),
    ])
    def test_malformed_body_file(self, runner, tmp_path, filename, content):
        body_file = tmp_path / filename
        body_file.write_text(content)
        transport = RecordingTransport()

        result = invoke(runner, transport, ["create", "worf", "-f", str(body_file)])

        assert result.exit_code == 2
        assert "Invalid value" in result.output
        assert "--file" in result.output
        assert transport.requests == []


class TestConnectionOptions:
    """Tests for connection options read from the environment."""

    def test_insecure_and_timeout_from_env(self, runner):
        client = SecurityClient(transport=RecordingTransport())

        with patch.object(cli_module, "build_client", return_value=client) as build:
            result = runner.invoke(
                cli,
                ["get", "admin"],
                env={"OPENSEARCH_INSECURE": "1", "OPENSEARCH_TIMEOUT": "2.5"},
            )

        assert result.exit_code == 0
        connection = build.call_args[0][0]
        assert connection["insecure"] is True
        assert connection["timeout"] == 2.5

    def test_defaults_without_env(self, runner):
        client = SecurityClient(transport=RecordingTransport())

        with patch.object(cli_module, "build_client", return_value=client) as build:
            result = runner.invoke(cli, ["get", "admin"], env={"OPENSEARCH_INSECURE": None, "OPENSEARCH_TIMEOUT": None})

        assert result.exit_code == 0
        connection = build.call_args[0][0]
        assert connection["insecure"] is False
        assert connection["timeout"] is None
