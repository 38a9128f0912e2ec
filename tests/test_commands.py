"""Tests for propertyops CLI commands."""

from pathlib import Path
from unittest.mock import AsyncMock

from typer.testing import CliRunner

from propertyops import __version__
from propertyops.cli import app


runner = CliRunner()


class TestVersion:
    """Tests for propertyops --version."""

    def test_version_flag(self) -> None:
        """Verify --version prints the package version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestUiCommand:
    """Tests for propertyops ui."""

    def test_ui_writes_template(self, tmp_path: Path) -> None:
        """Verify the React app is written with the API URL filled in."""
        target = tmp_path / "ui"

        result = runner.invoke(
            app,
            ["ui", str(target), "--api-url", "http://api.example.test/api/", "--name", "ops-ui"],
        )

        assert result.exit_code == 0, f"Command failed: {result.stdout}"
        api_module = (target / "src" / "services" / "api.ts").read_text()
        assert 'API_BASE = "http://api.example.test/api"' in api_module
        assert '"name": "ops-ui"' in (target / "package.json").read_text()
        for page in ("TenantsPage", "UnitsPage", "RequestsPage", "PaymentsPage"):
            assert (target / "src" / "pages" / f"{page}.tsx").exists()
        assert not (target / "copier.yml").exists()

    def test_ui_fails_if_directory_not_empty(self, tmp_path: Path) -> None:
        """Verify ui refuses to write into a non-empty directory."""
        (tmp_path / "existing.txt").write_text("keep me")

        result = runner.invoke(app, ["ui", str(tmp_path)])

        assert result.exit_code == 1
        assert "not empty" in " ".join(result.stdout.split())
        assert (tmp_path / "existing.txt").read_text() == "keep me"


class TestSeedCommand:
    """Tests for propertyops seed."""

    def test_seed_prints_counts(self, monkeypatch) -> None:
        """Verify seed reports what it loaded."""
        counts = {"tenants": 3, "units": 3, "maintenance_requests": 2, "payments": 2}
        monkeypatch.setattr(
            "propertyops.commands.seed._run_seed", AsyncMock(return_value=counts)
        )

        result = runner.invoke(app, ["seed"])

        assert result.exit_code == 0
        assert "Seeded: 3 tenants, 3 units, 2 requests, 2 payments" in result.stdout


class TestInitDbCommand:
    """Tests for propertyops init-db."""

    def test_init_db_creates_tables(self, monkeypatch) -> None:
        """Verify init-db runs table creation."""
        create_all = AsyncMock()
        monkeypatch.setattr("propertyops.core.database.create_all", create_all)

        result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        create_all.assert_awaited_once()
        assert "Tables created" in result.stdout
