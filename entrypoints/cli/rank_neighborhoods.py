from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from neighborfit.adapters.config import config
from neighborfit.pipelines.ranking import rank_user_against_catalog

app = typer.Typer(help="NeighborFit offline ranking.")


@app.command("rank")
def rank_cmd(
    user: Path = typer.Option(..., "--user", help="JSON file with one user's preferences"),
    catalog: Optional[Path] = typer.Option(
        None, "--catalog", help="JSON array of neighborhoods (default: seed catalog)"
    ),
    limit: int = typer.Option(config.MATCH_LIMIT, help="How many matches to keep"),
    out: Optional[Path] = typer.Option(None, "--out", help="Write the ranked table to this CSV"),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on catalog entries that cannot be scored instead of skipping them.",
    ),
) -> None:
    """
    Rank every catalog neighborhood for one user and print the top matches.
    """
    df = rank_user_against_catalog(
        user,
        catalog,
        limit=limit,
        output_path=out,
        skip_invalid=not strict,
    )
    if df.empty:
        typer.echo("No matches.")
        return
    typer.echo(df[["rank", "name", "city", "state", "score", "explanation"]].to_string(index=False))


if __name__ == "__main__":
    app()
