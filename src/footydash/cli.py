"""Command-line interface for fetching dashboard data without the web server."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from footydash.config import CrestTable, Settings
from footydash.config_loader import CrestProfile, load_crest_table
from footydash.errors import FootydashError
from footydash.schedule import run_daily
from footydash.service import load_fixtures, load_match_stats, load_roster
from footydash.upstream import build_client
from footydash.views import export_table_csv


logger = logging.getLogger(__name__)

COMMANDS = ("fpl", "odds", "stats", "table")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch and normalize Premier League dashboard data")
    parser.add_argument("command", choices=COMMANDS, help="Pipeline to run")
    parser.add_argument("--output", type=Path, default=None, help="Write the result here instead of stdout")
    parser.add_argument(
        "--crest-file",
        type=Path,
        default=None,
        help="JSON crest profile with extra team crest ids (overrides FOOTYDASH_CREST_FILE)",
    )
    parser.add_argument(
        "--save-crests",
        type=Path,
        default=None,
        help="Write the effective crest table as a JSON profile and exit",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep running: refresh at local midnight and every 24 hours after",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2)


async def render(command: str, settings: Settings, crests: CrestTable) -> str:
    """Run one pipeline and return its serialized output."""

    async with build_client(settings) as client:
        if command == "fpl":
            roster = await load_roster(client, settings)
            return _to_json(
                {
                    "success": True,
                    "players": [p.model_dump(mode="json") for p in roster.players],
                    "teams": [t.model_dump(mode="json") for t in roster.teams],
                    "gameweeks": [g.model_dump(mode="json") for g in roster.gameweeks],
                }
            )
        if command == "table":
            roster = await load_roster(client, settings)
            return export_table_csv(roster.teams)
        if command == "odds":
            fixtures = await load_fixtures(client, settings, crests)
            return _to_json([f.model_dump(mode="json") for f in fixtures])
        if command == "stats":
            result = await load_match_stats(client, settings)
            return _to_json(
                {
                    "success": True,
                    "data": [m.model_dump(mode="json") for m in result.matches],
                    "quota": {"remaining": result.quota.remaining, "used": result.quota.used},
                }
            )
    raise ValueError(f"Unknown command {command!r}")


def _emit(text: str, output: Path | None) -> None:
    if output is None:
        print(text)
        return
    output.write_text(text, encoding="utf-8")
    print(f"Wrote {output}")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    crests = load_crest_table(args.crest_file or settings.crest_file)

    if args.save_crests:
        CrestProfile(dict(crests.ids)).save(args.save_crests)
        print(f"Saved crest profile to {args.save_crests}")
        return

    if args.watch:
        async def job() -> None:
            _emit(await render(args.command, settings, crests), args.output)

        asyncio.run(run_daily(job))
        return

    try:
        text = asyncio.run(render(args.command, settings, crests))
    except FootydashError as exc:
        raise SystemExit(f"{exc.error}: {exc.details}") from exc
    _emit(text, args.output)


if __name__ == "__main__":
    main()
