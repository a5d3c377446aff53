from __future__ import annotations

from functools import lru_cache

from fastapi import HTTPException

from bookclub.application.use_cases.create_book import CreateBookUseCase
from bookclub.application.use_cases.create_club import CreateClubUseCase
from bookclub.application.use_cases.create_membership import CreateMembershipUseCase
from bookclub.application.use_cases.create_user import CreateUserUseCase
from bookclub.application.use_cases.delete_book import DeleteBookUseCase
from bookclub.application.use_cases.delete_club import DeleteClubUseCase
from bookclub.application.use_cases.delete_membership import DeleteMembershipUseCase
from bookclub.application.use_cases.delete_user import DeleteUserUseCase
from bookclub.application.use_cases.find_books import FindBooksUseCase
from bookclub.application.use_cases.find_users import FindUsersUseCase
from bookclub.application.use_cases.get_book import GetBookUseCase
from bookclub.application.use_cases.get_club import GetClubUseCase
from bookclub.application.use_cases.get_membership import GetMembershipUseCase
from bookclub.application.use_cases.get_user import GetUserUseCase
from bookclub.application.use_cases.import_book import ImportBookUseCase
from bookclub.application.use_cases.list_books import ListBooksUseCase
from bookclub.application.use_cases.list_clubs import ListClubsUseCase
from bookclub.application.use_cases.list_memberships import ListMembershipsUseCase
from bookclub.application.use_cases.list_users import ListUsersUseCase
from bookclub.application.use_cases.login_google import CompleteGoogleLoginUseCase
from bookclub.application.use_cases.search_open_library import SearchOpenLibraryUseCase
from bookclub.application.use_cases.start_google_login import StartGoogleLoginUseCase
from bookclub.application.use_cases.update_club import UpdateClubUseCase
from bookclub.application.use_cases.update_user import UpdateUserUseCase
from bookclub.infrastructure.clients.google_oidc_client import GoogleOidcClient
from bookclub.infrastructure.clients.open_library_client import OpenLibraryClient
from bookclub.infrastructure.db.engine import get_engine
from bookclub.infrastructure.db.repositories.auth_repository import SqlAuthRepository
from bookclub.infrastructure.db.repositories.books_repository import SqlBooksRepository
from bookclub.infrastructure.db.repositories.clubs_repository import (
    SqlClubsRepository,
    SqlMembershipsRepository,
)
from bookclub.infrastructure.db.repositories.users_repository import SqlUsersRepository
from bookclub.infrastructure.security.token_service import SecretTokenService
from bookclub.shared.config import get_settings


def _get_db_engine():
    settings = get_settings()
    if not settings.database_url:
        raise HTTPException(status_code=500, detail="DATABASE_URL is required.")
    return get_engine(settings.database_url)


@lru_cache(maxsize=1)
def _get_open_library_client() -> OpenLibraryClient:
    settings = get_settings()
    return OpenLibraryClient(
        api_base=settings.open_library_api_base,
        timeout_seconds=settings.open_library_timeout_seconds,
    )


@lru_cache(maxsize=1)
def _get_google_oidc_client() -> GoogleOidcClient:
    settings = get_settings()
    if not settings.google_client_id:
        raise HTTPException(status_code=500, detail="GOOGLE_CLIENT_ID is required.")
    if not settings.google_client_secret:
        raise HTTPException(status_code=500, detail="GOOGLE_CLIENT_SECRET is required.")
    return GoogleOidcClient(
        client_id=settings.google_client_id,
        client_secret=settings.google_client_secret,
        host_url=settings.host_url,
        issuer_url=settings.google_issuer_url,
        timeout_seconds=settings.oidc_timeout_seconds,
    )


@lru_cache(maxsize=1)
def _get_secret_token_service() -> SecretTokenService:
    return SecretTokenService()


def _get_books_repository() -> SqlBooksRepository:
    return SqlBooksRepository(_get_db_engine())


def _get_users_repository() -> SqlUsersRepository:
    return SqlUsersRepository(_get_db_engine())


def _get_clubs_repository() -> SqlClubsRepository:
    return SqlClubsRepository(_get_db_engine())


def _get_memberships_repository() -> SqlMembershipsRepository:
    return SqlMembershipsRepository(_get_db_engine())


def get_create_book_use_case() -> CreateBookUseCase:
    return CreateBookUseCase(books_port=_get_books_repository())


def get_list_books_use_case() -> ListBooksUseCase:
    return ListBooksUseCase(books_port=_get_books_repository())


def get_get_book_use_case() -> GetBookUseCase:
    return GetBookUseCase(books_port=_get_books_repository())


def get_find_books_use_case() -> FindBooksUseCase:
    return FindBooksUseCase(books_port=_get_books_repository())


def get_delete_book_use_case() -> DeleteBookUseCase:
    return DeleteBookUseCase(books_port=_get_books_repository())


def get_import_book_use_case() -> ImportBookUseCase:
    return ImportBookUseCase(
        books_port=_get_books_repository(),
        book_lookup_port=_get_open_library_client(),
    )


def get_search_open_library_use_case() -> SearchOpenLibraryUseCase:
    return SearchOpenLibraryUseCase(book_lookup_port=_get_open_library_client())


def get_create_user_use_case() -> CreateUserUseCase:
    return CreateUserUseCase(users_port=_get_users_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(users_port=_get_users_repository())


def get_get_user_use_case() -> GetUserUseCase:
    return GetUserUseCase(users_port=_get_users_repository())


def get_find_users_use_case() -> FindUsersUseCase:
    return FindUsersUseCase(users_port=_get_users_repository())


def get_update_user_use_case() -> UpdateUserUseCase:
    return UpdateUserUseCase(users_port=_get_users_repository())


def get_delete_user_use_case() -> DeleteUserUseCase:
    return DeleteUserUseCase(users_port=_get_users_repository())


def get_create_club_use_case() -> CreateClubUseCase:
    return CreateClubUseCase(clubs_port=_get_clubs_repository())


def get_list_clubs_use_case() -> ListClubsUseCase:
    return ListClubsUseCase(clubs_port=_get_clubs_repository())


def get_get_club_use_case() -> GetClubUseCase:
    return GetClubUseCase(clubs_port=_get_clubs_repository())


def get_update_club_use_case() -> UpdateClubUseCase:
    return UpdateClubUseCase(clubs_port=_get_clubs_repository())


def get_delete_club_use_case() -> DeleteClubUseCase:
    return DeleteClubUseCase(clubs_port=_get_clubs_repository())


def get_create_membership_use_case() -> CreateMembershipUseCase:
    return CreateMembershipUseCase(
        memberships_port=_get_memberships_repository(),
        users_port=_get_users_repository(),
        clubs_port=_get_clubs_repository(),
    )


def get_list_memberships_use_case() -> ListMembershipsUseCase:
    return ListMembershipsUseCase(memberships_port=_get_memberships_repository())


def get_get_membership_use_case() -> GetMembershipUseCase:
    return GetMembershipUseCase(memberships_port=_get_memberships_repository())


def get_delete_membership_use_case() -> DeleteMembershipUseCase:
    return DeleteMembershipUseCase(memberships_port=_get_memberships_repository())


def get_start_google_login_use_case() -> StartGoogleLoginUseCase:
    return StartGoogleLoginUseCase(
        auth_port=SqlAuthRepository(_get_db_engine()),
        identity_provider_port=_get_google_oidc_client(),
        secret_token_port=_get_secret_token_service(),
    )


def get_complete_google_login_use_case() -> CompleteGoogleLoginUseCase:
    return CompleteGoogleLoginUseCase(
        auth_port=SqlAuthRepository(_get_db_engine()),
        users_port=_get_users_repository(),
        identity_provider_port=_get_google_oidc_client(),
        secret_token_port=_get_secret_token_service(),
    )
