import logging
import random
from dataclasses import asdict

from fastapi import APIRouter, Depends, Form, HTTPException, Response

from league.config import FIXTURE_SEED, MIN_DOUBLES_PLAYERS, MIN_SINGLES_PLAYERS
from league.functions import create_tournament
from league.models import Tournament, TournamentType
from league.standings import calculate_standings, calculate_team_stats
from league.store import TournamentStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/league", tags=["League"])


def _get_tournament(tid: str, store: TournamentStore) -> Tournament:
    t = store.get(tid)
    if not t:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return t


def _summary(t: Tournament) -> dict:
    return {
        "id": t.id,
        "name": t.name,
        "mode": t.mode.value,
        "status": t.status,
        "created_at": t.created_at,
        "progress": {"completed": t.completed_count, "total": len(t.matches)},
    }


def _rng():
    return random.Random(FIXTURE_SEED) if FIXTURE_SEED is not None else None


# Routes

@router.get("/")
async def index(store: TournamentStore = Depends(get_store)):
    return {"tournaments": [_summary(t) for t in store.list()]}


@router.post("/tournament/create", status_code=201)
async def create(
    name: str = Form(""),
    mode: TournamentType = Form(...),
    player_names: str = Form(...),
    double_round: bool = Form(False),
    has_away_goals: bool = Form(False),
    store: TournamentStore = Depends(get_store),
):
    names = [n.strip() for n in player_names.split("\n") if n.strip()]
    minimum = MIN_DOUBLES_PLAYERS if mode == TournamentType.TWO_VS_TWO else MIN_SINGLES_PLAYERS
    if len(names) < minimum:
        raise HTTPException(status_code=400, detail=f"At least {minimum} players required")

    t = create_tournament(
        name, mode, names,
        double_round=double_round,
        has_away_goals=has_away_goals,
        rng=_rng(),
    )
    store.add(t)
    return t.to_dict()


@router.head("/tournament/{tid}")
async def tournament_head(tid: str, store: TournamentStore = Depends(get_store)):
    _get_tournament(tid, store)
    return Response(status_code=200)


@router.get("/tournament/{tid}")
async def tournament_view(tid: str, store: TournamentStore = Depends(get_store)):
    return _get_tournament(tid, store).to_dict()


@router.post("/tournament/{tid}/score")
async def submit_score(
    tid: str,
    match_id: str = Form(...),
    home_score: int = Form(..., ge=0),
    away_score: int = Form(..., ge=0),
    home_team: str = Form(""),
    away_team: str = Form(""),
    store: TournamentStore = Depends(get_store),
):
    t = _get_tournament(tid, store)
    if t.status == "completed":
        raise HTTPException(status_code=409, detail="Tournament is finished")
    if not any(m.id == match_id for m in t.matches):
        raise HTTPException(status_code=404, detail="Match not found")

    t = store.update_match(tid, match_id, home_score, away_score, home_team, away_team)
    match = next(m for m in t.matches if m.id == match_id)
    return match.to_dict()


@router.get("/tournament/{tid}/standings")
async def standings(tid: str, store: TournamentStore = Depends(get_store)):
    t = _get_tournament(tid, store)
    rows = calculate_standings(t.competitors, t.matches, t.mode)
    return {"standings": [dict(asdict(r), rank=i + 1) for i, r in enumerate(rows)]}


@router.get("/tournament/{tid}/team-stats")
async def team_stats(tid: str, store: TournamentStore = Depends(get_store)):
    t = _get_tournament(tid, store)
    return {"teams": [asdict(s) for s in calculate_team_stats(t.matches)]}


@router.post("/tournament/{tid}/finish")
async def finish_tournament(tid: str, store: TournamentStore = Depends(get_store)):
    _get_tournament(tid, store)
    return _summary(store.finish(tid))


@router.post("/tournament/{tid}/delete", status_code=204)
async def delete_tournament(tid: str, store: TournamentStore = Depends(get_store)):
    store.delete(tid)
    logger.info("tournament %s deleted", tid)
    return Response(status_code=204)
