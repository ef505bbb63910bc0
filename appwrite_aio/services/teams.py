"""Teams service: teams, memberships and team preferences."""
import logging
from typing import Any, Dict, List, Optional

from ..helpers import compact, require_params
from ..models import Membership, MembershipList, Preferences, Team, TeamList
from ._base import JSON_HEADERS, Service

log = logging.getLogger(__name__)


class Teams(Service):
    """Service for teams the current user belongs to."""

    async def list(self, queries: Optional[List[str]] = None, search: Optional[str] = None) -> TeamList:
        data = await self._client.call("GET", "/teams", params=compact({"queries": queries, "search": search}))
        return TeamList.from_dict(data)

    async def create(self, team_id: str, name: str, roles: Optional[List[str]] = None) -> Team:
        """Create a team; the caller becomes its owner."""
        require_params(teamId=team_id, name=name)
        payload = compact({"teamId": team_id, "name": name, "roles": roles})
        return Team.from_dict(await self._client.call("POST", "/teams", JSON_HEADERS, payload))

    async def get(self, team_id: str) -> Team:
        require_params(teamId=team_id)
        return Team.from_dict(await self._client.call("GET", f"/teams/{team_id}"))

    async def update_name(self, team_id: str, name: str) -> Team:
        require_params(teamId=team_id, name=name)
        return Team.from_dict(await self._client.call("PUT", f"/teams/{team_id}", JSON_HEADERS, {"name": name}))

    async def delete(self, team_id: str) -> None:
        require_params(teamId=team_id)
        log.info(f"Deleting team {team_id}")
        await self._client.call("DELETE", f"/teams/{team_id}", JSON_HEADERS)

    # -------------------------
    # Memberships
    # -------------------------
    async def list_memberships(self, team_id: str, queries: Optional[List[str]] = None,
                               search: Optional[str] = None) -> MembershipList:
        require_params(teamId=team_id)
        data = await self._client.call("GET", f"/teams/{team_id}/memberships",
                                       params=compact({"queries": queries, "search": search}))
        return MembershipList.from_dict(data)

    async def create_membership(self, team_id: str, roles: List[str], email: Optional[str] = None,
                                user_id: Optional[str] = None, phone: Optional[str] = None,
                                url: Optional[str] = None, name: Optional[str] = None) -> Membership:
        """Invite a member by email, user id or phone.

        Args:
            team_id: Team id
            roles: Roles granted within the team
            email: Email of the invitee
            user_id: Id of an existing user
            phone: Phone number of the invitee
            url: Redirect URL of the invitation link
            name: Display name of the invitee
        """
        require_params(teamId=team_id, roles=roles)
        payload = compact({
            "roles": roles,
            "email": email,
            "userId": user_id,
            "phone": phone,
            "url": url,
            "name": name,
        })
        data = await self._client.call("POST", f"/teams/{team_id}/memberships", JSON_HEADERS, payload)
        return Membership.from_dict(data)

    async def get_membership(self, team_id: str, membership_id: str) -> Membership:
        require_params(teamId=team_id, membershipId=membership_id)
        return Membership.from_dict(await self._client.call("GET", f"/teams/{team_id}/memberships/{membership_id}"))

    async def update_membership(self, team_id: str, membership_id: str, roles: List[str]) -> Membership:
        require_params(teamId=team_id, membershipId=membership_id, roles=roles)
        data = await self._client.call("PATCH", f"/teams/{team_id}/memberships/{membership_id}", JSON_HEADERS,
                                       {"roles": roles})
        return Membership.from_dict(data)

    async def delete_membership(self, team_id: str, membership_id: str) -> None:
        require_params(teamId=team_id, membershipId=membership_id)
        await self._client.call("DELETE", f"/teams/{team_id}/memberships/{membership_id}", JSON_HEADERS)

    async def update_membership_status(self, team_id: str, membership_id: str, user_id: str,
                                       secret: str) -> Membership:
        """Accept an invitation with the secret from the invitation link."""
        require_params(teamId=team_id, membershipId=membership_id, userId=user_id, secret=secret)
        payload = {"userId": user_id, "secret": secret}
        data = await self._client.call("PATCH", f"/teams/{team_id}/memberships/{membership_id}/status",
                                       JSON_HEADERS, payload)
        return Membership.from_dict(data)

    # -------------------------
    # Preferences
    # -------------------------
    async def get_prefs(self, team_id: str) -> Preferences:
        require_params(teamId=team_id)
        return Preferences.from_dict(await self._client.call("GET", f"/teams/{team_id}/prefs"))

    async def update_prefs(self, team_id: str, prefs: Dict[str, Any]) -> Preferences:
        require_params(teamId=team_id, prefs=prefs)
        data = await self._client.call("PUT", f"/teams/{team_id}/prefs", JSON_HEADERS, {"prefs": prefs})
        return Preferences.from_dict(data)
