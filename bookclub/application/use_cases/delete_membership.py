from __future__ import annotations

from bookclub.application.ports.clubs_port import MembershipsPort
from bookclub.domain.exceptions import MembershipNotFoundError


class DeleteMembershipUseCase:
    def __init__(self, *, memberships_port: MembershipsPort):
        self._memberships_port = memberships_port

    def execute(self, *, membership_id: int) -> None:
        if self._memberships_port.delete_membership(membership_id=membership_id) == 0:
            raise MembershipNotFoundError("Membership not found.")
