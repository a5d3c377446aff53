from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from bookclub.api.deps import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_find_users_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
    get_update_user_use_case,
)
from bookclub.api.schemas.users import CreateUserRequest, UpdateUserRequest, UserResponse
from bookclub.application.dto.users import CreateUserInput, FindUsersInput, UpdateUserInput
from bookclub.application.use_cases.create_user import CreateUserUseCase
from bookclub.application.use_cases.delete_user import DeleteUserUseCase
from bookclub.application.use_cases.find_users import FindUsersUseCase
from bookclub.application.use_cases.get_user import GetUserUseCase
from bookclub.application.use_cases.list_users import ListUsersUseCase
from bookclub.application.use_cases.update_user import UpdateUserUseCase
from bookclub.domain.entities.user import User
from bookclub.domain.exceptions import (
    EmailAlreadyExistsError,
    EmptyUpdateError,
    UserNotFoundError,
    UserSearchInputError,
)


router = APIRouter()


def _to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.post("/users/create", response_model=UserResponse)
def create_user(
    req: CreateUserRequest,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    try:
        user = use_case.execute(
            CreateUserInput(
                email=req.email,
                first_name=req.first_name,
                last_name=req.last_name,
            )
        )
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return _to_response(user)


@router.get("/users/list", response_model=list[UserResponse])
def list_users(
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    return [_to_response(user) for user in use_case.execute()]


# Registered before /users/{user_id} so "search" is not parsed as an id.
@router.get("/users/search", response_model=list[UserResponse])
def search_users(
    email: str | None = None,
    first_name: str | None = None,
    last_name: str | None = None,
    use_case: FindUsersUseCase = Depends(get_find_users_use_case),
):
    try:
        users = use_case.execute(
            FindUsersInput(email=email, first_name=first_name, last_name=last_name)
        )
    except UserSearchInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return [_to_response(user) for user in users]


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    try:
        user = use_case.execute(user_id=user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _to_response(user)


@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    req: UpdateUserRequest,
    use_case: UpdateUserUseCase = Depends(get_update_user_use_case),
):
    try:
        user = use_case.execute(
            UpdateUserInput(
                user_id=user_id,
                email=req.email,
                first_name=req.first_name,
                last_name=req.last_name,
            )
        )
    except EmptyUpdateError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except EmailAlreadyExistsError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _to_response(user)


@router.delete("/users/{user_id}", status_code=204)
def delete_user(
    user_id: int,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    try:
        use_case.execute(user_id=user_id)
    except UserNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return Response(status_code=204)
