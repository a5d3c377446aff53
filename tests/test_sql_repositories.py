from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import create_engine, inspect, text
from sqlalchemy.pool import StaticPool

from bookclub.domain.entities.dialogue import PollingState, StartState
from bookclub.infrastructure.db.engine import create_bot_schema, create_schema, enable_sqlite_foreign_keys
from bookclub.infrastructure.db.repositories.auth_repository import SqlAuthRepository
from bookclub.infrastructure.db.repositories.books_repository import SqlBooksRepository
from bookclub.infrastructure.db.repositories.clubs_repository import (
    SqlClubsRepository,
    SqlMembershipsRepository,
)
from bookclub.infrastructure.db.repositories.dialogue_repository import SqlDialogueRepository
from bookclub.infrastructure.db.repositories.users_repository import SqlUsersRepository


NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    enable_sqlite_foreign_keys(engine)
    create_schema(engine)
    yield engine
    engine.dispose()


def _create_user(repo: SqlUsersRepository, email: str, first_name: str = "Ada", last_name: str = "Lovelace"):
    return repo.create_user(
        email=email,
        first_name=first_name,
        last_name=last_name,
        created_at=NOW,
        updated_at=NOW,
    )


def test_books_search_matches_title_or_author(engine):
    repo = SqlBooksRepository(engine)
    dune = repo.create_book(title="Dune", author="Frank Herbert")
    emma = repo.create_book(title="Emma", author="Jane Austen")
    repo.create_book(title="Persuasion", author="Jane Austen")

    assert [book.id for book in repo.find_books(title="Dune", author=None)] == [dune.id]
    assert [book.title for book in repo.find_books(title="Dune", author="Jane Austen")] == [
        "Dune",
        "Emma",
        "Persuasion",
    ]
    assert repo.get_book_by_id(book_id=emma.id) == emma
    assert repo.find_books(title="Ulysses", author=None) == []


def test_books_list_and_delete(engine):
    repo = SqlBooksRepository(engine)
    first = repo.create_book(title="A", author="X")
    second = repo.create_book(title="B", author="Y")

    assert [book.id for book in repo.list_books()] == [first.id, second.id]
    assert repo.delete_book(book_id=first.id) == 1
    assert repo.delete_book(book_id=first.id) == 0
    assert repo.get_book_by_id(book_id=first.id) is None


def test_users_lookup_search_and_partial_update(engine):
    repo = SqlUsersRepository(engine)
    ada = _create_user(repo, "ada@example.com")
    _create_user(repo, "grace@example.com", first_name="Grace", last_name="Hopper")
    _create_user(repo, "ada.byron@example.com", last_name="Byron")

    assert repo.get_user_by_email(email="ADA@example.com").id == ada.id
    assert [user.email for user in repo.find_users(email=None, first_name="Ada", last_name=None)] == [
        "ada@example.com",
        "ada.byron@example.com",
    ]
    assert [user.id for user in repo.find_users(email=None, first_name="Ada", last_name="Lovelace")] == [ada.id]

    later = NOW + timedelta(hours=1)
    updated = repo.update_user(user_id=ada.id, email=None, first_name="Augusta", last_name=None, updated_at=later)
    assert updated is not None
    assert (updated.email, updated.first_name, updated.last_name) == ("ada@example.com", "Augusta", "Lovelace")
    assert updated.updated_at - updated.created_at == timedelta(hours=1)

    assert repo.update_user(user_id=999, email=None, first_name="X", last_name=None, updated_at=later) is None
    assert repo.delete_user(user_id=ada.id) == 1
    assert repo.get_user_by_id(user_id=ada.id) is None


def test_clubs_and_memberships(engine):
    users = SqlUsersRepository(engine)
    clubs = SqlClubsRepository(engine)
    memberships = SqlMembershipsRepository(engine)
    ada = _create_user(users, "ada@example.com")
    grace = _create_user(users, "grace@example.com")
    readers = clubs.create_club(name="Readers", description="Monthly", created_at=NOW, updated_at=NOW)
    writers = clubs.create_club(name="Writers", description="Weekly", created_at=NOW, updated_at=NOW)

    first = memberships.create_membership(user_id=ada.id, club_id=readers.id, permission_level=2, created_at=NOW)
    memberships.create_membership(user_id=grace.id, club_id=readers.id, permission_level=0, created_at=NOW)
    memberships.create_membership(user_id=ada.id, club_id=writers.id, permission_level=1, created_at=NOW)

    assert len(memberships.list_memberships(user_id=None, club_id=None)) == 3
    assert [m.club_id for m in memberships.list_memberships(user_id=ada.id, club_id=None)] == [readers.id, writers.id]
    assert [m.user_id for m in memberships.list_memberships(user_id=None, club_id=readers.id)] == [ada.id, grace.id]
    assert memberships.get_membership_for_user_club(user_id=ada.id, club_id=readers.id) == first
    assert memberships.get_membership_for_user_club(user_id=grace.id, club_id=writers.id) is None

    renamed = clubs.update_club(club_id=readers.id, name="Readers Guild", description=None, updated_at=NOW)
    assert (renamed.name, renamed.description) == ("Readers Guild", "Monthly")
    assert [club.id for club in clubs.list_clubs()] == [readers.id, writers.id]

    assert memberships.delete_membership(membership_id=first.id) == 1
    assert memberships.get_membership_by_id(membership_id=first.id) is None
    assert clubs.delete_club(club_id=writers.id) == 1
    assert clubs.get_club_by_id(club_id=writers.id) is None


def test_deleting_user_or_club_cascades_to_dependents(engine):
    users = SqlUsersRepository(engine)
    clubs = SqlClubsRepository(engine)
    memberships = SqlMembershipsRepository(engine)
    auth = SqlAuthRepository(engine)
    ada = _create_user(users, "ada@example.com")
    grace = _create_user(users, "grace@example.com")
    readers = clubs.create_club(name="Readers", description="", created_at=NOW, updated_at=NOW)
    writers = clubs.create_club(name="Writers", description="", created_at=NOW, updated_at=NOW)
    memberships.create_membership(user_id=ada.id, club_id=readers.id, permission_level=2, created_at=NOW)
    memberships.create_membership(user_id=grace.id, club_id=writers.id, permission_level=0, created_at=NOW)
    kept = memberships.create_membership(user_id=grace.id, club_id=readers.id, permission_level=1, created_at=NOW)
    auth.create_session(
        user_id=ada.id,
        token_p1="left",
        token_p2="right",
        created_at=NOW,
        expires_at=NOW + timedelta(hours=24),
    )

    assert users.delete_user(user_id=ada.id) == 1
    assert memberships.list_memberships(user_id=ada.id, club_id=None) == []
    with engine.connect() as conn:
        sessions = conn.execute(text("SELECT COUNT(*) FROM user_sessions")).scalar_one()
    assert sessions == 0

    assert clubs.delete_club(club_id=writers.id) == 1
    assert memberships.list_memberships(user_id=None, club_id=None) == [kept]


def test_bot_schema_only_creates_dialogue_table():
    bot_engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    create_bot_schema(bot_engine)

    assert inspect(bot_engine).get_table_names() == ["bot_dialogues"]
    bot_engine.dispose()


def test_oauth_state_is_consumed_once(engine):
    repo = SqlAuthRepository(engine)
    repo.create_oauth_state(csrf_state="state-1", nonce="nonce-1", return_url="/clubs")

    consumed = repo.consume_oauth_state(csrf_state="state-1")

    assert consumed is not None
    assert (consumed.nonce, consumed.return_url) == ("nonce-1", "/clubs")
    assert repo.consume_oauth_state(csrf_state="state-1") is None


def test_session_halves_are_stored_separately(engine):
    user = _create_user(SqlUsersRepository(engine), "ada@example.com")
    repo = SqlAuthRepository(engine)

    session = repo.create_session(
        user_id=user.id,
        token_p1="left",
        token_p2="right",
        created_at=NOW,
        expires_at=NOW + timedelta(hours=24),
    )

    assert session.token == "left_right"
    assert session.user_id == user.id
    assert (session.expires_at - session.created_at).total_seconds() == 86400


def test_dialogue_state_defaults_to_start_and_is_overwritten(engine):
    repo = SqlDialogueRepository(engine)
    assert repo.get_state(conversation_id="42") == StartState()

    first = PollingState(start=datetime(2024, 1, 1), end=datetime(2024, 1, 4))
    repo.save_state(conversation_id="42", state=first)
    second = PollingState(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 4),
        selected=frozenset({"2024-01-02"}),
    )
    repo.save_state(conversation_id="42", state=second)

    assert repo.get_state(conversation_id="42") == second
    assert repo.get_state(conversation_id="43") == StartState()
