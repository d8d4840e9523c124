"""REST API for the player record directory."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query

from playerdir.api.schemas import (
    EnsureResponse,
    PlayerCountResponse,
    PlayerEventsResponse,
    PlayerListResponse,
    ResetFailureResponse,
    ResetResponse,
)
from playerdir.config import PlayerDirConfig
from playerdir.directory import ErrorKind, Ordering, PlayerDirectory, PlayerDirError
from playerdir.records import RecordReadError


_STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.DIRECTORY_UNAVAILABLE: 503,
    ErrorKind.DIRECTORY_CREATE_FAILED: 500,
    ErrorKind.NAME_TOO_LONG: 400,
    ErrorKind.INVALID_NAME: 400,
    ErrorKind.CAPACITY_EXCEEDED: 500,
    ErrorKind.DELETE_FAILED: 500,
}


def _http_error(exc: PlayerDirError) -> HTTPException:
    return HTTPException(status_code=_STATUS_BY_KIND.get(exc.kind, 500), detail=exc.message)


def create_app(config: PlayerDirConfig | None = None) -> FastAPI:
    app = FastAPI(title="playerdir")
    base_config = config or PlayerDirConfig.from_env()
    app.state.config = base_config
    directory = PlayerDirectory(base_config)
    app.state.directory = directory

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/players", response_model=PlayerListResponse)
    def list_players(
        order: Ordering = Query(Ordering.LEXIO),
        min_events: int | None = Query(None, ge=0),
    ) -> PlayerListResponse:
        listing = directory
        if min_events is not None:
            listing = PlayerDirectory(base_config.with_overrides(pr_minimum_events=min_events))
        try:
            players = listing.players_list(order)
        except PlayerDirError as exc:
            raise _http_error(exc) from exc
        return PlayerListResponse(
            players=players,
            count=len(players),
            order=order,
            min_events=listing.config.pr_minimum_events,
        )

    @app.get("/players/count", response_model=PlayerCountResponse)
    def count_players() -> PlayerCountResponse:
        try:
            return PlayerCountResponse(count=directory.count_players())
        except PlayerDirError as exc:
            raise _http_error(exc) from exc

    @app.post("/players/ensure", response_model=EnsureResponse)
    def ensure_directory() -> EnsureResponse:
        try:
            created = directory.ensure_exists()
        except PlayerDirError as exc:
            raise _http_error(exc) from exc
        return EnsureResponse(path=directory.path, created=created)

    @app.post("/players/reset", response_model=ResetResponse)
    def reset_players() -> ResetResponse:
        try:
            report = directory.reset_players()
        except PlayerDirError as exc:
            raise _http_error(exc) from exc
        return ResetResponse(
            deleted=report.deleted,
            failed=[
                ResetFailureResponse(name=failure.path, reason=failure.message)
                for failure in report.failed
            ],
        )

    @app.get("/players/{name}/events", response_model=PlayerEventsResponse)
    def player_events(name: str) -> PlayerEventsResponse:
        try:
            num_events = directory.events_for(name)
        except PlayerDirError as exc:
            raise _http_error(exc) from exc
        except RecordReadError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return PlayerEventsResponse(name=name, events_attended=num_events)

    return app
