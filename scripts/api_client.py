"""Lightweight REST client for the playerdir API."""

from __future__ import annotations

import argparse
import json

import httpx


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the playerdir REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("--ensure", action="store_true", help="Create the player directory if missing")
    parser.add_argument("--count", action="store_true", help="Print the number of player files")
    parser.add_argument("--unordered", action="store_true", help="List players in directory order")
    parser.add_argument("--min-events", type=int, default=None, help="Override the minimum events threshold")
    parser.add_argument("--events", metavar="NAME", help="Fetch events attended for one player and exit")
    parser.add_argument("--reset", action="store_true", help="Delete every player file and exit")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.ensure:
            resp = client.post("/players/ensure")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))

        if args.reset:
            resp = client.post("/players/reset")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.events:
            resp = client.get(f"/players/{args.events}/events")
            if resp.status_code == 404:
                raise SystemExit(f"player {args.events} not found")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.count:
            resp = client.get("/players/count")
            resp.raise_for_status()
            print(resp.json()["count"])
            return

        params: dict[str, str | int] = {"order": "unordered" if args.unordered else "lexio"}
        if args.min_events is not None:
            params["min_events"] = args.min_events
        resp = client.get("/players", params=params)
        if resp.status_code == 503:
            raise SystemExit(resp.json().get("detail", "player directory unavailable"))
        resp.raise_for_status()
        payload = resp.json()
        print(f"{payload['count']} players with at least {payload['min_events']} events")
        for name in payload["players"]:
            print(name)


if __name__ == "__main__":
    main()
