from __future__ import annotations

from bookclub.application.dto.clubs import CreateMembershipInput
from bookclub.application.ports.clubs_port import ClubsPort, MembershipsPort
from bookclub.application.ports.users_port import UsersPort
from bookclub.domain.entities.club import MAX_PERMISSION_LEVEL, MIN_PERMISSION_LEVEL, Membership
from bookclub.domain.exceptions import (
    ClubNotFoundError,
    MembershipAlreadyExistsError,
    MembershipInputError,
    UserNotFoundError,
)

from .auth_common import utcnow


class CreateMembershipUseCase:
    def __init__(
        self,
        *,
        memberships_port: MembershipsPort,
        users_port: UsersPort,
        clubs_port: ClubsPort,
    ):
        self._memberships_port = memberships_port
        self._users_port = users_port
        self._clubs_port = clubs_port

    def execute(self, command: CreateMembershipInput) -> Membership:
        if not MIN_PERMISSION_LEVEL <= command.permission_level <= MAX_PERMISSION_LEVEL:
            raise MembershipInputError(
                f"Permission level must be between {MIN_PERMISSION_LEVEL} and {MAX_PERMISSION_LEVEL}."
            )
        if self._users_port.get_user_by_id(user_id=command.user_id) is None:
            raise UserNotFoundError("User not found.")
        if self._clubs_port.get_club_by_id(club_id=command.club_id) is None:
            raise ClubNotFoundError("Club not found.")

        existing = self._memberships_port.get_membership_for_user_club(
            user_id=command.user_id,
            club_id=command.club_id,
        )
        if existing is not None:
            raise MembershipAlreadyExistsError("User is already a member of this club.")

        return self._memberships_port.create_membership(
            user_id=command.user_id,
            club_id=command.club_id,
            permission_level=command.permission_level,
            created_at=utcnow(),
        )
