"""
Game catalog endpoints.

Thin translation between HTTP and GameService: not found -> 404, everything else is mapped by the
exception handlers registered in src/api/main.py.
"""

import logging
from typing import Generator, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from src.api.models import CreateGameRequest, GameResponse, UpdateGameRequest
from src.db.database import session_scope
from src.db.sql_repository import SQLGameRepository
from src.services.game_service import DEFAULT_PAGE_NUMBER, GameService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/games", tags=["games"])


# -- Dependencies --
def get_db(request: Request) -> Generator[Session, None, None]:
    yield from session_scope(request.app.state.session_factory)


def get_game_service(db: Session = Depends(get_db)) -> GameService:
    return GameService(SQLGameRepository(db))


# -- Routes --
@router.get("", response_model=list[GameResponse])
def list_games(
    request: Request,
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber", ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    service: GameService = Depends(get_game_service),
) -> list[GameResponse]:
    if page_size is None:
        page_size = request.app.state.settings.default_page_size
    games = service.list_paged(page_number, page_size)
    return [GameResponse.from_model(game) for game in games]


@router.get("/game/{game_id}", response_model=GameResponse)
def get_game(game_id: UUID, service: GameService = Depends(get_game_service)) -> GameResponse:
    game = service.get_by_id(game_id)
    if game is None:
        logger.warning("Game with ID %s was not found.", game_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return GameResponse.from_model(game)


@router.get("/genre/{genre}", response_model=list[GameResponse])
def list_games_by_genre(
    genre: str, service: GameService = Depends(get_game_service)
) -> list[GameResponse]:
    return [GameResponse.from_model(game) for game in service.list_by_genre(genre)]


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
def create_game(
    body: CreateGameRequest,
    response: Response,
    service: GameService = Depends(get_game_service),
) -> GameResponse:
    created = service.create(body.to_model())
    response.headers["Location"] = f"{router.prefix}/game/{created.id}"
    logger.info("Game %s created with title %r.", created.id, created.title)
    return GameResponse.from_model(created)


@router.put("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_game(
    game_id: UUID,
    body: UpdateGameRequest,
    service: GameService = Depends(get_game_service),
) -> Response:
    if body.id != game_id:
        logger.warning(
            "Mismatched game ID in update request. URL ID: %s, Game ID: %s.", game_id, body.id
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Game ID in the URL does not match the ID in the body",
        )

    logger.info("Attempting to update game with ID: %s.", game_id)
    if not service.update(body.to_model()):
        logger.warning("Game with ID: %s not found for update.", game_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")

    logger.info("Game with ID: %s updated successfully.", game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{game_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_game(game_id: UUID, service: GameService = Depends(get_game_service)) -> Response:
    logger.info("Attempting to delete game with ID: %s.", game_id)
    if not service.delete(game_id):
        logger.warning("Game with ID: %s not found for deletion.", game_id)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")

    logger.info("Game with ID: %s deleted successfully.", game_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
