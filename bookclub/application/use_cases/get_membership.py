from __future__ import annotations

from bookclub.application.ports.clubs_port import MembershipsPort
from bookclub.domain.entities.club import Membership
from bookclub.domain.exceptions import MembershipNotFoundError


class GetMembershipUseCase:
    def __init__(self, *, memberships_port: MembershipsPort):
        self._memberships_port = memberships_port

    def execute(self, *, membership_id: int) -> Membership:
        membership = self._memberships_port.get_membership_by_id(membership_id=membership_id)
        if membership is None:
            raise MembershipNotFoundError("Membership not found.")
        return membership
