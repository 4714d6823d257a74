"""REST API in front of the result pipeline."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from matchvision.api.schemas import (
    BulkItemResponse,
    BulkRequest,
    BulkResponse,
    GameResponse,
    OutcomeResponse,
    ProcessRequest,
    StatResponse,
    WinConditionResponse,
)
from matchvision.bulk import BulkItem, BulkItemResult, process_bulk
from matchvision.config import GameRules, iter_rules, resolve_game
from matchvision.models import Outcome
from matchvision.pipeline import process_extraction


logger = logging.getLogger(__name__)


def _outcome_response(outcome: Outcome) -> OutcomeResponse:
    return OutcomeResponse(
        status=outcome.status,
        message=outcome.message,
        players=outcome.data.players,
        winner=outcome.data.winner,
    )


def _item_response(result: BulkItemResult) -> BulkItemResponse:
    return BulkItemResponse(
        item_id=result.item_id,
        file_name=result.file_name,
        status=result.status.value,
        message=result.message,
        outcome=_outcome_response(result.outcome),
    )


def _game_response(rules: GameRules) -> GameResponse:
    winner = None
    if rules.winner is not None:
        winner = WinConditionResponse(
            type=rules.winner.type.value,
            stat_name=rules.winner.win_condition.stat_name,
            comparison=rules.winner.win_condition.comparison.value,
        )
    return GameResponse(
        game=rules.game,
        display_name=rules.display_name,
        shape=rules.shape.value,
        stats=[
            StatResponse(
                stat_id=stat.stat_id,
                field_key=stat.field_key,
                name=stat.name,
                stat_type=stat.stat_type.value,
            )
            for stat in rules.stats
        ],
        winner=winner,
    )


def _resolve_or_404(game: str) -> str:
    try:
        return resolve_game(game)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=f"Unsupported game {game!r}") from exc


def create_app() -> FastAPI:
    app = FastAPI(title="matchvision")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/games", response_model=list[GameResponse])
    async def games() -> list[GameResponse]:
        return [_game_response(rules) for rules in iter_rules()]

    @app.post("/games/{game}/process", response_model=OutcomeResponse)
    async def process(game: str, request: ProcessRequest) -> OutcomeResponse:
        game_key = _resolve_or_404(game)
        outcome = process_extraction(game_key, request.extraction, request.roster)
        return _outcome_response(outcome)

    # Plain ``def`` so the worker pool runs off the event loop.
    @app.post("/bulk", response_model=BulkResponse)
    def bulk(request: BulkRequest) -> BulkResponse:
        game_key = _resolve_or_404(request.game)
        logger.info("Bulk request for %s with %s items", game_key, len(request.items))
        items = [
            BulkItem(item_id=item.item_id, file_name=item.file_name, extraction=item.extraction)
            for item in request.items
        ]
        try:
            report = process_bulk(
                items,
                game=game_key,
                roster=request.roster,
                workers=request.workers,
            )
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        return BulkResponse(
            game=game_key,
            total=len(report.results),
            succeeded=[_item_response(result) for result in report.succeeded],
            needs_review=[_item_response(result) for result in report.needs_review],
            failed=[_item_response(result) for result in report.failed],
        )

    return app
