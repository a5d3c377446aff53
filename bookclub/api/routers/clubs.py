from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from bookclub.api.deps import (
    get_create_club_use_case,
    get_delete_club_use_case,
    get_get_club_use_case,
    get_list_clubs_use_case,
    get_update_club_use_case,
)
from bookclub.api.schemas.clubs import ClubResponse, CreateClubRequest, UpdateClubRequest
from bookclub.application.dto.clubs import CreateClubInput, UpdateClubInput
from bookclub.application.use_cases.create_club import CreateClubUseCase
from bookclub.application.use_cases.delete_club import DeleteClubUseCase
from bookclub.application.use_cases.get_club import GetClubUseCase
from bookclub.application.use_cases.list_clubs import ListClubsUseCase
from bookclub.application.use_cases.update_club import UpdateClubUseCase
from bookclub.domain.entities.club import Club
from bookclub.domain.exceptions import ClubNotFoundError, EmptyUpdateError


router = APIRouter()


def _to_response(club: Club) -> ClubResponse:
    return ClubResponse(
        id=club.id,
        name=club.name,
        description=club.description,
        created_at=club.created_at,
        updated_at=club.updated_at,
    )


@router.post("/clubs", response_model=ClubResponse, status_code=201)
def create_club(
    req: CreateClubRequest,
    use_case: CreateClubUseCase = Depends(get_create_club_use_case),
):
    try:
        club = use_case.execute(CreateClubInput(name=req.name, description=req.description))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_response(club)


@router.get("/clubs/list", response_model=list[ClubResponse])
def list_clubs(
    use_case: ListClubsUseCase = Depends(get_list_clubs_use_case),
):
    return [_to_response(club) for club in use_case.execute()]


@router.get("/clubs/{club_id}", response_model=ClubResponse)
def get_club(
    club_id: int,
    use_case: GetClubUseCase = Depends(get_get_club_use_case),
):
    try:
        club = use_case.execute(club_id=club_id)
    except ClubNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(club)


@router.put("/clubs/{club_id}", response_model=ClubResponse)
def update_club(
    club_id: int,
    req: UpdateClubRequest,
    use_case: UpdateClubUseCase = Depends(get_update_club_use_case),
):
    try:
        club = use_case.execute(
            UpdateClubInput(club_id=club_id, name=req.name, description=req.description)
        )
    except EmptyUpdateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ClubNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(club)


@router.delete("/clubs/{club_id}", status_code=204)
def delete_club(
    club_id: int,
    use_case: DeleteClubUseCase = Depends(get_delete_club_use_case),
):
    try:
        use_case.execute(club_id=club_id)
    except ClubNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
