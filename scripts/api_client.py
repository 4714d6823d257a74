"""Lightweight REST client for the matchvision API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_json(path: Path) -> object:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid JSON in {path}: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Send vision extractions to the matchvision REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("game", nargs="?", help="Game id, name or alias")
    parser.add_argument("roster", type=Path, nargs="?", help="Roster JSON file ([{player_id, player_name}])")
    parser.add_argument("extractions", type=Path, nargs="*", help="Extraction JSON files or directories")
    parser.add_argument("--workers", type=int, default=None, help="Worker processes for the bulk run")
    parser.add_argument("--list-games", action="store_true", help="List supported games and exit")
    args = parser.parse_args()

    if args.list_games:
        with httpx.Client(base_url=args.base_url) as client:
            resp = client.get("/games")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
        return

    if args.game is None or args.roster is None or not args.extractions:
        raise SystemExit("game, roster and at least one extraction are required unless using --list-games")

    files: list[Path] = []
    for path in args.extractions:
        if path.is_dir():
            files.extend(sorted(path.glob("*.json")))
        else:
            files.append(path)
    if not files:
        raise SystemExit("no extraction files found")

    payload = {
        "game": args.game,
        "roster": load_json(args.roster),
        "items": [
            {"item_id": str(index), "file_name": path.name, "extraction": load_json(path)}
            for index, path in enumerate(files)
        ],
    }
    if args.workers:
        payload["workers"] = args.workers

    with httpx.Client(base_url=args.base_url, timeout=None) as client:
        resp = client.post("/bulk", json=payload)
        if resp.status_code == 404:
            raise SystemExit(f"game {args.game} not supported")
        resp.raise_for_status()
        report = resp.json()

    print(f"Processed {report['total']} screenshots for {report['game']}")
    for bucket in ("succeeded", "needs_review", "failed"):
        entries = report[bucket]
        print(f"{bucket}: {len(entries)}")
        for entry in entries:
            winners = ", ".join(player["name"] for player in entry["outcome"]["winner"]) or "-"
            print(f"  {entry['file_name']}: {entry['message']} (winners: {winners})")


if __name__ == "__main__":
    main()
