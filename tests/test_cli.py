"""Tests for the command line interface."""

import json
from unittest.mock import patch

from click.testing import CliRunner

from addrlens import __version__
from addrlens.cli import main


# Keep rich from wrapping table cells
WIDE = {"COLUMNS": "200"}


class TestCli:
    """Test cases for the addrlens command."""

    def run(self, *args, backend=None):
        runner = CliRunner()
        if backend is None:
            return runner.invoke(main, list(args), env=WIDE)
        with patch("addrlens.cli.create_name_service", return_value=backend):
            return runner.invoke(main, list(args), env=WIDE)

    def test_version(self):
        result = self.run("--version")

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_lookup(self, fake_backend):
        result = self.run("example.test", backend=fake_backend)

        assert result.exit_code == 0
        assert "93.184.216.34" in result.output
        assert "Public address" in result.output

    def test_unresolvable(self, fake_backend):
        result = self.run("999.999.999.999", backend=fake_backend)

        assert result.exit_code == 1
        assert "Cannot resolve '999.999.999.999'" in result.output

    def test_no_dns(self, fake_backend):
        result = self.run("8.8.8.8", "--no-dns", backend=fake_backend)

        assert result.exit_code == 0
        assert fake_backend.reverse_calls == []

    def test_json_export(self, fake_backend, tmp_path):
        path = tmp_path / "out.json"

        result = self.run("8.8.8.8", "--json", str(path), backend=fake_backend)

        assert result.exit_code == 0
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["meta"]["backend"] == "fake"
        assert data["addresses"][0]["reverse_names"] == ["dns.google"]

    def test_nameserver_ignored_for_system(self, fake_backend):
        with patch("addrlens.cli.create_name_service", return_value=fake_backend) as factory:
            result = CliRunner().invoke(main, ["8.8.8.8", "-n", "1.1.1.1"], env=WIDE)

        assert result.exit_code == 0
        assert "ignored" in result.output
        factory.assert_called_once_with("system", nameservers=[])

    def test_dns_backend_option(self, fake_backend):
        with patch("addrlens.cli.create_name_service", return_value=fake_backend) as factory:
            result = CliRunner().invoke(main, ["8.8.8.8", "-b", "dns", "-n", "1.1.1.1"], env=WIDE)

        assert result.exit_code == 0
        factory.assert_called_once_with("dns", nameservers=["1.1.1.1"])

    def test_invalid_backend(self):
        result = self.run("8.8.8.8", "-b", "ldap")

        assert result.exit_code == 2

    def test_literal_with_system_backend(self):
        result = self.run("127.0.0.1", "--no-dns")

        assert result.exit_code == 0
        assert "Loopback" in result.output
