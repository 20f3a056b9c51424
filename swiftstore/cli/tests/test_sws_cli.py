import os
import tempfile

# Set cache dir to a temp dir before importing anything from swiftstore
tmpdir = tempfile.mkdtemp()
os.environ["SWIFTSTORE_CACHE_DIR"] = tmpdir

import unittest
from unittest.mock import patch

import requests
from click.testing import CliRunner
from loguru import logger

from swiftstore import config, __version__
from swiftstore.api.api_resource import ClientError, ServerError
from swiftstore.api.types.account import AccountInfo
from swiftstore.api.types.container import ContainerMetadata
from swiftstore.api.utils import StorageUnauthorizedError
from swiftstore.cli import sws as cli

logger.info(f"Using cache dir: {config.CACHE_DIR}")


class _FakeContainerAPI:
    def __init__(self, containers=None, error=None):
        self._containers = containers or []
        self._error = error
        self.prefixes = []

    def list(self, prefix=None):
        self.prefixes.append(prefix)
        if self._error is not None:
            raise self._error
        return list(self._containers)


class _FakeAPIClient:
    url = "https://swift.example.com/v1/AUTH_test"

    def __init__(self, containers=None, error=None, info=None):
        self.container = _FakeContainerAPI(containers, error)
        self._info = info

    def info(self):
        if isinstance(self._info, Exception):
            raise self._info
        return self._info


def _error_response(status_code, text=""):
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    return response


def _data_rows(output):
    # table rows start with the light vertical bar
    return [line for line in output.splitlines() if line.startswith("│")]


class TestSwsCli(unittest.TestCase):
    def _invoke(self, fake_client, args):
        runner = CliRunner()
        with patch("swiftstore.cli.container.get_client", return_value=fake_client):
            with patch("swiftstore.cli.account.get_client", return_value=fake_client):
                return runner.invoke(cli, args)

    def test_version(self):
        runner = CliRunner()

        v = runner.invoke(cli, ["-v"])
        version = runner.invoke(cli, ["--version"])

        self.assertEqual(v.exit_code, 0)
        self.assertEqual(version.exit_code, 0)
        self.assertEqual(v.output.strip(), f"sws, version {__version__}")
        self.assertEqual(version.output.strip(), f"sws, version {__version__}")

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["container", "--help"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("list", result.output)

    def test_list_sorted_by_name(self):
        containers = [
            ContainerMetadata("zeta", 1, 1),
            ContainerMetadata("alpha", 2, 2048),
            ContainerMetadata("mu", 3, 3),
        ]
        result = self._invoke(_FakeAPIClient(containers), ["container", "list"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        rows = _data_rows(result.output)
        names = [row.split("│")[1].strip() for row in rows]
        self.assertEqual(names, ["alpha", "mu", "zeta"])
        self.assertIn("2.0KiB", result.output)

    def test_list_sorted_by_bytes(self):
        containers = [
            ContainerMetadata("a", 1, 1),
            ContainerMetadata("b", 1, 300),
            ContainerMetadata("c", 1, 20),
        ]
        result = self._invoke(
            _FakeAPIClient(containers), ["container", "list", "--sort-by", "bytes"]
        )
        self.assertEqual(result.exit_code, 0, msg=result.output)
        names = [row.split("│")[1].strip() for row in _data_rows(result.output)]
        self.assertEqual(names, ["b", "c", "a"])

    def test_list_prefix_and_abbreviation(self):
        fake = _FakeAPIClient([ContainerMetadata("images", 0, 0)])
        result = self._invoke(fake, ["cont", "list", "-p", "img"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertEqual(fake.container.prefixes, ["img"])

    def test_list_empty(self):
        result = self._invoke(_FakeAPIClient([]), ["container", "list"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("No containers found.", result.output)

    def test_list_client_error(self):
        fake = _FakeAPIClient(error=ClientError(_error_response(401, "bad token")))
        result = self._invoke(fake, ["container", "list"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("401 Unauthorized", result.output)
        self.assertIn("SWIFTSTORE_AUTH_TOKEN", result.output)

    def test_list_server_error(self):
        fake = _FakeAPIClient(error=ServerError(_error_response(503, "down")))
        result = self._invoke(fake, ["container", "list"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("503 Error", result.output)

    def test_list_without_storage_url(self):
        runner = CliRunner()
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("SWIFTSTORE_STORAGE_URL", None)
            with patch("swiftstore.cli.util._client_singleton", None):
                result = runner.invoke(cli, ["container", "list"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("SWIFTSTORE_STORAGE_URL", result.output)

    def test_account_info(self):
        info = AccountInfo(container_count=3, object_count=42, bytes_used=1048576)
        result = self._invoke(_FakeAPIClient(info=info), ["account", "info"])
        self.assertEqual(result.exit_code, 0, msg=result.output)
        self.assertIn("42", result.output)
        self.assertIn("1.0MiB", result.output)

    def test_account_info_unauthorized(self):
        fake = _FakeAPIClient(info=StorageUnauthorizedError(storage_url="x"))
        result = self._invoke(fake, ["account", "info"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("StorageUnauthorizedError", result.output)


if __name__ == "__main__":
    unittest.main()
