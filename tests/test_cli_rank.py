import json

from typer.testing import CliRunner

from entrypoints.cli.rank_neighborhoods import app
from neighborfit.domain.errors import InvalidNeighborhoodData
from tests.fixtures.profiles import neighborhood_payload, seed_matching_user

runner = CliRunner()


def _write(path, obj):
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


def test_cli_ranks_seed_catalog(tmp_path):
    user = _write(tmp_path / "user.json", seed_matching_user())
    out = tmp_path / "matches.csv"

    result = runner.invoke(app, ["--user", str(user), "--limit", "2", "--out", str(out)])

    assert result.exit_code == 0, result.output
    assert "Fremont" in result.output
    assert "Plano" in result.output
    assert "Capitol Hill" not in result.output
    assert out.exists()


def test_cli_prints_no_matches_when_nothing_scores(tmp_path):
    user = _write(tmp_path / "user.json", seed_matching_user())
    catalog = _write(tmp_path / "catalog.json", [neighborhood_payload(name="NoHubs", nearby_job_hubs=[])])

    result = runner.invoke(app, ["--user", str(user), "--catalog", str(catalog)])

    assert result.exit_code == 0, result.output
    assert "No matches." in result.output


def test_cli_strict_fails_on_unscorable_neighborhood(tmp_path):
    user = _write(tmp_path / "user.json", seed_matching_user())
    catalog = _write(tmp_path / "catalog.json", [neighborhood_payload(name="NoHubs", nearby_job_hubs=[])])

    result = runner.invoke(app, ["--user", str(user), "--catalog", str(catalog), "--strict"])

    assert result.exit_code != 0
    assert isinstance(result.exception, InvalidNeighborhoodData)
