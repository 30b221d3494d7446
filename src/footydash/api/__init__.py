"""REST API and HTML dashboard for footydash."""

from __future__ import annotations

import logging
from html import escape
from typing import Sequence

import httpx
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from footydash.api.schemas import ErrorResponse, FplResponse, QuotaResponse, StatsResponse
from footydash.config import CrestTable, Settings
from footydash.config_loader import load_crest_table
from footydash.errors import FootydashError
from footydash.models import FixtureRecord, GameweekRecord, PlayerRecord, TeamRecord
from footydash.service import load_fixtures, load_match_stats, load_roster
from footydash.upstream import build_client
from footydash.views import (
    PLAYER_SORT_FIELDS,
    PlayerFilter,
    TableSort,
    current_gameweek,
    export_table_csv,
    filter_players,
    sort_teams,
)


logger = logging.getLogger(__name__)

POSITION_CHOICES: list[tuple[str, str]] = [
    ("all", "All Positions"),
    ("GK", "Goalkeepers"),
    ("DEF", "Defenders"),
    ("MID", "Midfielders"),
    ("FWD", "Forwards"),
]

PLAYER_SORT_CHOICES: list[tuple[str, str]] = [
    ("total_points", "Total Points"),
    ("points_per_game", "Points per Game"),
    ("form", "Form"),
    ("selected_by_percent", "Selected By %"),
]

TABLE_COLUMNS: list[tuple[str, str]] = [
    ("position", "Pos"),
    ("name", "Team"),
    ("played", "P"),
    ("win", "W"),
    ("draw", "D"),
    ("loss", "L"),
    ("goals_scored", "GF"),
    ("goals_against", "GA"),
    ("points", "Pts"),
    ("clean_sheets", "CS"),
    ("goals_assists", "Ast"),
    ("strength_attack_home", "Att (H)"),
    ("strength_attack_away", "Att (A)"),
    ("strength_defence_home", "Def (H)"),
    ("strength_defence_away", "Def (A)"),
    ("form", "Form"),
]


def _format_odds(value: float | None) -> str:
    return "-" if value is None else f"{value:.2f}"


def _render_page(body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang=\"en\">
<head>
    <meta charset=\"utf-8\">
    <title>footydash</title>
    <style>
        body {{ font-family: Arial, sans-serif; margin: 2rem; background: #f5f7fa; }}
        main {{ background: #fff; padding: 2rem; border-radius: 12px; box-shadow: 0 2px 6px rgba(0,0,0,0.08); }}
        nav a {{ margin-right: 1rem; color: #2563eb; text-decoration: none; }}
        section + section {{ margin-top: 2rem; }}
        form {{ display: flex; gap: 1rem; flex-wrap: wrap; align-items: flex-end; }}
        label {{ display: flex; flex-direction: column; font-weight: 600; }}
        select {{ margin-top: 0.35rem; padding: 0.4rem; border-radius: 6px; border: 1px solid #cbd5e1; }}
        button {{ padding: 0.5rem 1rem; border-radius: 6px; border: none; background: #2563eb; color: #fff; cursor: pointer; }}
        table {{ border-collapse: collapse; width: 100%; margin-top: 1rem; }}
        th, td {{ padding: 0.5rem; border: 1px solid #e2e8f0; text-align: left; }}
        th a {{ color: inherit; text-decoration: none; }}
        .fixtures {{ display: grid; grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); gap: 1rem; }}
        .fixture {{ border: 1px solid #e2e8f0; border-radius: 8px; padding: 1rem; background: #f8fafc; }}
        .fixture img {{ width: 28px; height: 28px; vertical-align: middle; }}
        .fixture .odds {{ display: flex; justify-content: space-between; margin-top: 0.5rem; }}
        .hint {{ color: #475569; margin: 0; }}
        .flash {{ padding: 1rem; border-radius: 6px; margin-bottom: 1rem; }}
        .flash.error {{ background: #fef2f2; color: #b91c1c; }}
    </style>
</head>
<body>
    <nav><a href=\"/ui\">Dashboard</a><a href=\"/fpl/teams/export.csv\">Table CSV</a></nav>
    <main>{body}</main>
</body>
</html>"""


def _render_error(exc: FootydashError) -> str:
    return f"<div class='flash error'>{escape(exc.error)}: {escape(exc.details)}</div>"


def _render_crest(url: str | None, team: str) -> str:
    if not url:
        return ""
    return f"<img src='{escape(url)}' alt='{escape(team)}'> "


def _render_fixtures(fixtures: Sequence[FixtureRecord]) -> str:
    if not fixtures:
        return "<p class='hint'>No upcoming matches.</p>"
    cards = []
    for fixture in fixtures:
        source = f"<p class='hint'>Odds: {escape(fixture.bookmaker)}</p>" if fixture.bookmaker else ""
        cards.append(
            "<div class='fixture'>"
            f"<p class='hint'>{escape(fixture.match_date)} &middot; {escape(fixture.status)}</p>"
            f"<div>{_render_crest(fixture.home_crest, fixture.home_team)}{escape(fixture.home_team)}</div>"
            f"<div>{_render_crest(fixture.away_crest, fixture.away_team)}{escape(fixture.away_team)}</div>"
            "<div class='odds'>"
            f"<span>H {_format_odds(fixture.home_odds)}</span>"
            f"<span>D {_format_odds(fixture.draw_odds)}</span>"
            f"<span>A {_format_odds(fixture.away_odds)}</span>"
            "</div>"
            f"{source}"
            "</div>"
        )
    return f"<div class='fixtures'>{''.join(cards)}</div>"


def _render_options(choices: Sequence[tuple[str, str]], selected: str) -> str:
    return "".join(
        f"<option value='{value}'{' selected' if value == selected else ''}>{escape(label)}</option>"
        for value, label in choices
    )


def _render_players(
    players: Sequence[PlayerRecord],
    criteria: PlayerFilter,
    table_sort: TableSort,
) -> str:
    rows = "".join(
        "<tr>"
        f"<td>{escape(player.name)}</td>"
        f"<td>{escape(player.team or '-')}</td>"
        f"<td>{player.position}</td>"
        f"<td>{player.total_points:g}</td>"
        f"<td>{player.points_per_game:g}</td>"
        f"<td>{player.form:g}</td>"
        f"<td>{player.selected_by_percent:g}%</td>"
        f"<td>&pound;{player.price:.1f}</td>"
        "</tr>"
        for player in players
    )
    return f"""
        <form method='get' action='/ui'>
            <label>Position<select name='position'>{_render_options(POSITION_CHOICES, criteria.position)}</select></label>
            <label>Sort by<select name='sort_by'>{_render_options(PLAYER_SORT_CHOICES, criteria.sort_by)}</select></label>
            <input type='hidden' name='table_sort' value='{escape(table_sort.sort_by)}'>
            <input type='hidden' name='table_direction' value='{table_sort.direction}'>
            <button type='submit'>Apply</button>
        </form>
        <table>
            <thead><tr><th>Player</th><th>Team</th><th>Position</th><th>Points</th><th>PPG</th><th>Form</th><th>Selected By %</th><th>Price</th></tr></thead>
            <tbody>{rows}</tbody>
        </table>
    """


def _render_table(teams: Sequence[TeamRecord], criteria: PlayerFilter, table_sort: TableSort) -> str:
    headers = []
    for column, label in TABLE_COLUMNS:
        direction = "asc"
        marker = ""
        if column == table_sort.sort_by:
            marker = " &uarr;" if table_sort.direction == "asc" else " &darr;"
            direction = "desc" if table_sort.direction == "asc" else "asc"
        href = (
            f"/ui?position={criteria.position}&sort_by={criteria.sort_by}"
            f"&table_sort={column}&table_direction={direction}"
        )
        headers.append(f"<th><a href='{escape(href)}'>{label}{marker}</a></th>")
    rows = []
    for team in teams:
        cells = "".join(
            f"<td>{escape(str(getattr(team, column)) if getattr(team, column) is not None else '-')}</td>"
            for column, _ in TABLE_COLUMNS
        )
        rows.append(f"<tr>{cells}</tr>")
    return f"<table><thead><tr>{''.join(headers)}</tr></thead><tbody>{''.join(rows)}</tbody></table>"


def _render_gameweek(gameweek: GameweekRecord | None) -> str:
    if gameweek is None or gameweek.deadline_time is None:
        return ""
    return (
        f"<p class='hint'>{escape(gameweek.name)} deadline: "
        f"{gameweek.deadline_time.astimezone().strftime('%Y-%m-%d %H:%M')}</p>"
    )


def create_app(
    settings: Settings | None = None,
    *,
    crests: CrestTable | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the application.

    ``transport`` replaces the network for every outbound provider call and
    exists so tests can serve canned payloads.
    """

    settings = settings or Settings.from_env()
    crests = crests or load_crest_table(settings.crest_file)
    app = FastAPI(title="footydash")
    app.state.settings = settings
    app.state.crests = crests

    def client() -> httpx.AsyncClient:
        return build_client(settings, transport=transport)

    @app.exception_handler(FootydashError)
    async def footydash_error(request: Request, exc: FootydashError) -> JSONResponse:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.details)
        body = ErrorResponse(error=exc.error, details=exc.details)
        return JSONResponse(status_code=exc.status_code, content=body.model_dump())

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/fpl", response_model=FplResponse)
    async def fpl() -> FplResponse:
        async with client() as http:
            roster = await load_roster(http, settings)
        return FplResponse(players=roster.players, teams=roster.teams, gameweeks=roster.gameweeks)

    @app.get("/fpl/players", response_model=list[PlayerRecord])
    async def players(
        position: str = Query("all"),
        sort_by: str = Query("total_points"),
        limit: int = Query(20, ge=0),
        team: str | None = Query(None),
    ) -> list[PlayerRecord]:
        if position not in {value for value, _ in POSITION_CHOICES}:
            raise HTTPException(status_code=400, detail=f"Unknown position {position!r}")
        if sort_by not in PLAYER_SORT_FIELDS:
            raise HTTPException(status_code=400, detail=f"Unsupported sort field {sort_by!r}")
        async with client() as http:
            roster = await load_roster(http, settings)
        criteria = PlayerFilter(position=position, sort_by=sort_by, limit=limit or None, team=team)  # type: ignore[arg-type]
        return filter_players(roster.players, criteria)

    @app.get("/fpl/teams", response_model=list[TeamRecord])
    async def teams(
        sort_by: str = Query("position"),
        direction: str = Query("asc", pattern="^(asc|desc)$"),
    ) -> list[TeamRecord]:
        async with client() as http:
            roster = await load_roster(http, settings)
        try:
            return sort_teams(roster.teams, TableSort(sort_by=sort_by, direction=direction))  # type: ignore[arg-type]
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/fpl/teams/export.csv")
    async def export_teams() -> Response:
        async with client() as http:
            roster = await load_roster(http, settings)
        return Response(
            content=export_table_csv(roster.teams),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=league-table.csv"},
        )

    @app.get("/odds", response_model=list[FixtureRecord])
    async def odds() -> list[FixtureRecord]:
        async with client() as http:
            return await load_fixtures(http, settings, crests)

    @app.get("/stats", response_model=StatsResponse)
    async def stats() -> StatsResponse:
        async with client() as http:
            result = await load_match_stats(http, settings)
        return StatsResponse(
            data=result.matches,
            quota=QuotaResponse(remaining=result.quota.remaining, used=result.quota.used),
        )

    @app.get("/ui", response_class=HTMLResponse)
    async def ui_index(
        position: str = Query("all"),
        sort_by: str = Query("total_points"),
        table_sort: str = Query("position"),
        table_direction: str = Query("asc", pattern="^(asc|desc)$"),
    ) -> HTMLResponse:
        if position not in {value for value, _ in POSITION_CHOICES}:
            position = "all"
        if sort_by not in PLAYER_SORT_FIELDS:
            sort_by = "total_points"
        criteria = PlayerFilter(position=position, sort_by=sort_by)  # type: ignore[arg-type]
        ordering = TableSort(sort_by=table_sort, direction=table_direction)  # type: ignore[arg-type]

        sections: list[str] = ["<h1>Premier League Dashboard</h1>"]
        async with client() as http:
            try:
                fixtures = await load_fixtures(http, settings, crests)
                fixtures_html = _render_fixtures(fixtures)
            except FootydashError as exc:
                logger.warning("Fixtures unavailable for dashboard: %s", exc.details)
                fixtures_html = _render_error(exc)
            sections.append(f"<section><h2>Next Premier League Matches</h2>{fixtures_html}</section>")

            try:
                roster = await load_roster(http, settings)
            except FootydashError as exc:
                logger.warning("Roster unavailable for dashboard: %s", exc.details)
                sections.append(f"<section>{_render_error(exc)}</section>")
            else:
                try:
                    ordered = sort_teams(roster.teams, ordering)
                except ValueError:
                    ordering = TableSort()
                    ordered = roster.teams
                sections.append(
                    "<section><h2>Fantasy Premier League Statistics</h2>"
                    f"{_render_gameweek(current_gameweek(roster.gameweeks))}"
                    f"{_render_players(filter_players(roster.players, criteria), criteria, ordering)}"
                    "</section>"
                )
                sections.append(
                    "<section><h2>Premier League Team Statistics</h2>"
                    f"{_render_table(ordered, criteria, ordering)}"
                    "</section>"
                )
        return HTMLResponse(_render_page("".join(sections)))

    return app


__all__ = ["create_app"]
