from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from bookclub.api.deps import (
    get_create_membership_use_case,
    get_delete_membership_use_case,
    get_get_membership_use_case,
    get_list_memberships_use_case,
)
from bookclub.api.schemas.clubs import CreateMembershipRequest, MembershipResponse
from bookclub.application.dto.clubs import CreateMembershipInput, ListMembershipsInput
from bookclub.application.use_cases.create_membership import CreateMembershipUseCase
from bookclub.application.use_cases.delete_membership import DeleteMembershipUseCase
from bookclub.application.use_cases.get_membership import GetMembershipUseCase
from bookclub.application.use_cases.list_memberships import ListMembershipsUseCase
from bookclub.domain.entities.club import Membership
from bookclub.domain.exceptions import (
    ClubNotFoundError,
    MembershipAlreadyExistsError,
    MembershipInputError,
    MembershipNotFoundError,
    UserNotFoundError,
)


router = APIRouter()


def _to_response(membership: Membership) -> MembershipResponse:
    return MembershipResponse(
        id=membership.id,
        user_id=membership.user_id,
        club_id=membership.club_id,
        permission_level=membership.permission_level,
        created_at=membership.created_at,
    )


@router.post("/memberships", response_model=MembershipResponse, status_code=201)
def create_membership(
    req: CreateMembershipRequest,
    use_case: CreateMembershipUseCase = Depends(get_create_membership_use_case),
):
    try:
        membership = use_case.execute(
            CreateMembershipInput(
                user_id=req.user_id,
                club_id=req.club_id,
                permission_level=req.permission_level,
            )
        )
    except MembershipInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (UserNotFoundError, ClubNotFoundError) as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except MembershipAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(membership)


@router.get("/memberships", response_model=list[MembershipResponse])
def list_memberships(
    user_id: int | None = None,
    club_id: int | None = None,
    use_case: ListMembershipsUseCase = Depends(get_list_memberships_use_case),
):
    memberships = use_case.execute(ListMembershipsInput(user_id=user_id, club_id=club_id))
    return [_to_response(membership) for membership in memberships]


@router.get("/memberships/{membership_id}", response_model=MembershipResponse)
def get_membership(
    membership_id: int,
    use_case: GetMembershipUseCase = Depends(get_get_membership_use_case),
):
    try:
        membership = use_case.execute(membership_id=membership_id)
    except MembershipNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(membership)


@router.delete("/memberships/{membership_id}", status_code=204)
def delete_membership(
    membership_id: int,
    use_case: DeleteMembershipUseCase = Depends(get_delete_membership_use_case),
):
    try:
        use_case.execute(membership_id=membership_id)
    except MembershipNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
