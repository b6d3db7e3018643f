"""CLI commands for catalogsearch.

Implements ``catalogsearch search`` and ``catalogsearch config get/set``.
- Uses Typer for option parsing and Rich for output.
- Mandatory service parameters (site, language, device type) and the base URL
  fall back to persistent defaults resolved by
  :func:`catalogsearch.utils.config.resolve_setting`.
- Search and transport errors are reported and turned into a non-zero exit
  code; everything else propagates.
"""

import asyncio
import json
import sys
from enum import Enum
from typing import Annotated, Optional

import httpx
import typer
from rich.markup import escape
from rich.table import Table

from catalogsearch.cli import app, config_app, console
from catalogsearch.client import SearchClient
from catalogsearch.errors import SearchError
from catalogsearch.models.hits import LOCALES, Asset, Hit, Series
from catalogsearch.query import SearchQuery, normalize_params
from catalogsearch.request import RequestOption, set_request_id
from catalogsearch.response import Response
from catalogsearch.utils.config import resolve_setting, set_setting
from catalogsearch.utils.debug import logf

DEFAULT_LANGUAGE = "sv"


class ExitCode(int, Enum):
    """Exit codes for CLI commands."""

    SUCCESS = 0
    ERROR = 1


SITE = Annotated[
    Optional[str], typer.Option("--site", help="Site identifier, e.g. cmore.se")
]
LANG = Annotated[
    Optional[str],
    typer.Option("--lang", "-l", help="Language: da, fi, nb or sv"),
]
DEVICE_TYPE = Annotated[
    Optional[str], typer.Option("--device-type", help="Device type, e.g. tve_web")
]
VIDEO_IDS = Annotated[
    Optional[list[str]],
    typer.Option("--video-id", help="Video ID to fetch; may be repeated"),
]
PARAMS = Annotated[
    Optional[list[str]],
    typer.Option(
        "--param",
        "-p",
        help="Extra query parameter as key=value; may be repeated",
    ),
]


def parse_param(raw: str) -> tuple[str, str]:
    """Split a ``key=value`` CLI argument.

    Raises:
        typer.BadParameter: If the argument has no ``=`` or an empty key.
    """
    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise typer.BadParameter(f"Expected key=value, got {raw!r}")
    return key, value


def describe_hit(hit: Hit, language: str) -> tuple[str, str, str, str, str]:
    """Return the table columns (type, id, title, brand, episode) for *hit*."""
    subset = hit.subset()
    brand = ""
    episode = ""
    if isinstance(hit, Asset):
        brand = hit.brand.title(language)
        if hit.episode_number:
            episode = f"S{hit.season.season_number:02d}E{hit.episode_number:02d}"
    elif isinstance(hit, Series) and hit.seasons:
        episode = f"{len(hit.seasons)} seasons"
    return subset.type, subset.id, subset.title(language), brand, episode


def render_response(response: Response, language: str) -> None:
    """Print the hits of *response* as a table."""
    table = Table(title=f"{response.total_hits} total hits")
    for column in ("Type", "ID", "Title", "Brand", "Episode"):
        table.add_column(column)
    for hit in response.hits:
        table.add_row(*describe_hit(hit, language))
    console.print(table)


@app.command()
def search(
    site: SITE = None,
    lang: LANG = None,
    device_type: DEVICE_TYPE = None,
    brand_id: Annotated[Optional[str], typer.Option("--brand-id")] = None,
    season: Annotated[Optional[str], typer.Option("--season")] = None,
    season_id: Annotated[Optional[str], typer.Option("--season-id")] = None,
    episode: Annotated[Optional[str], typer.Option("--episode")] = None,
    hit_type: Annotated[Optional[str], typer.Option("--type")] = None,
    video_ids: VIDEO_IDS = None,
    sort_by: Annotated[Optional[str], typer.Option("--sort-by")] = None,
    order: Annotated[Optional[str], typer.Option("--order")] = None,
    page_size: Annotated[Optional[str], typer.Option("--page-size")] = None,
    params: PARAMS = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url")] = None,
    request_id: Annotated[Optional[str], typer.Option("--request-id")] = None,
    as_json: Annotated[
        bool, typer.Option("--json", help="Print hit subsets as JSON")
    ] = False,
) -> None:
    """Search the catalog and print the hits."""
    language = resolve_setting("query.lang", default="", cli_value=lang)
    query = SearchQuery(
        site=resolve_setting("query.site", default="", cli_value=site),
        language=language,
        device_type=resolve_setting(
            "query.device_type", default="", cli_value=device_type
        ),
        brand_id=brand_id or "",
        season=season or "",
        season_id=season_id or "",
        episode=episode or "",
        type=hit_type or "",
        video_ids=video_ids or [],
        sort_by=sort_by or "",
        order=order or "",
        page_size=page_size or "",
    )
    query_params = normalize_params(query)
    for raw in params or []:
        key, value = parse_param(raw)
        query_params.setdefault(key, []).append(value)

    options: list[RequestOption] = []
    if request_id:
        options.append(set_request_id(request_id))

    try:
        client = SearchClient(
            base_url=resolve_setting("base_url", default="", cli_value=base_url)
            or None,
            logf=logf,
        )
        response = asyncio.run(client.search(query_params, *options))
    except SearchError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        if exc.response is not None:
            meta = exc.response.meta
            console.print(f"[dim]{meta.status_code} GET {meta.request_url}[/dim]")
        raise typer.Exit(ExitCode.ERROR)
    except httpx.HTTPError as exc:
        console.print(f"[red]Request failed:[/red] {escape(str(exc))}")
        raise typer.Exit(ExitCode.ERROR)

    if as_json:
        subsets = [hit.subset().model_dump(mode="json") for hit in response.hits]
        sys.stdout.write(json.dumps(subsets, indent=2) + "\n")
        return

    render_response(response, language if language in LOCALES else DEFAULT_LANGUAGE)


@config_app.command("set")
def config_set(
    key: Annotated[str, typer.Argument(help="Dotted key, e.g. query.site")],
    value: Annotated[str, typer.Argument(help="Value to store")],
) -> None:
    """Store a persistent default in config.toml."""
    try:
        set_setting(key, value)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(ExitCode.ERROR)
    console.print(f"Set [bold]{key}[/bold] = {value!r}")


@config_app.command("get")
def config_get(
    key: Annotated[str, typer.Argument(help="Dotted key, e.g. query.site")],
) -> None:
    """Show the resolved value of a setting."""
    console.print(resolve_setting(key, default=""))


if __name__ == "__main__":
    app()
