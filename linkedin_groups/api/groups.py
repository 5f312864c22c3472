"""Groups API.

Wrappers for the LinkedIn Groups REST endpoints. Each method builds a path,
serializes the body when there is one, and makes a single transport call.
Transport errors are not caught here.

Endpoints without a wrapper:

- PUT/POST change group settings
- DELETE leave a group
- PUT follow/unfollow a group post
- PUT flag a post as a promotion or job
- DELETE a comment, or flag a comment as inappropriate
- DELETE remove a group suggestion

See http://developer.linkedin.com/documents/groups-api
"""

import json
from typing import Any, Dict, Optional
from urllib.parse import quote
from loguru import logger

from linkedin_groups.api.paths import CurrentUser, GroupRef, PersonRef, group_path, person_path
from linkedin_groups.api.query import QueryOptions, simple_query
from linkedin_groups.core.constants import (
    ACCESS_TOKEN_PARAM,
    JSON_CONTENT_TYPE,
    MEMBERSHIP_STATE_MEMBER,
)
from linkedin_groups.core.protocols import Transport
from linkedin_groups.utils.decorators import deprecated


JSON_HEADERS = {"Content-Type": JSON_CONTENT_TYPE}


def _dump_json(body: Any) -> str:
    """Serialize a request body as compact JSON (no spaces after separators)."""
    return json.dumps(body, separators=(",", ":"))


class GroupsClient:
    """Client for the LinkedIn Groups API.

    Attributes:
        transport: HTTP layer the requests are delegated to
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    def group_suggestions(
        self,
        who: PersonRef = CurrentUser(),
        options: Optional[QueryOptions] = None,
    ) -> Dict[str, Any]:
        """Retrieve group suggestions for a member.

        Permissions: r_fullprofile

        Args:
            who: Member to get suggestions for (default: the current user)
            options: Query options

        Returns:
            Parsed response
        """
        path = f"{person_path(who)}/suggestions/groups"
        return simple_query(self.transport, path, options)

    def group_memberships(
        self,
        who: PersonRef = CurrentUser(),
        options: Optional[QueryOptions] = None,
    ) -> Dict[str, Any]:
        """Retrieve the groups a member belongs to.

        Permissions: rw_groups

        Args:
            who: Member whose memberships to list (default: the current user)
            options: Query options

        Returns:
            Parsed response
        """
        path = f"{person_path(who)}/group-memberships"
        return simple_query(self.transport, path, options)

    def group_profile(
        self,
        group: GroupRef,
        options: Optional[QueryOptions] = None,
    ) -> Dict[str, Any]:
        """Retrieve the profile of a group.

        Permissions: rw_groups

        Args:
            group: Group to fetch
            options: Query options, typically a field selection

        Returns:
            Parsed response
        """
        path = group_path(group)
        return simple_query(self.transport, path, options)

    def group_posts(
        self,
        group: GroupRef,
        options: Optional[QueryOptions] = None,
    ) -> Dict[str, Any]:
        """Retrieve the posts in a group.

        Permissions: rw_groups

        Args:
            group: Group whose posts to list
            options: Query options; count and start page through the posts

        Returns:
            Parsed response
        """
        path = f"{group_path(group)}/posts"
        return simple_query(self.transport, path, options)

    def group_post(
        self,
        post_id: str,
        group: GroupRef,
        options: Optional[QueryOptions] = None,
    ) -> Dict[str, Any]:
        path = f"{group_path(group)}/posts/{post_id}"
        return simple_query(self.transport, path, options)

    @deprecated("add_group_share")
    def post_group_discussion(self, group_id: str, discussion: Dict[str, Any]) -> Dict[str, Any]:
        return self.add_group_share(group_id, discussion)

    def add_group_share(self, group_id: str, share: Dict[str, Any]) -> Dict[str, Any]:
        """Create a share (post) in a group.

        Permissions: rw_groups

        Args:
            group_id: Group ID
            share: Share payload, e.g. {"title": ..., "summary": ...}

        Returns:
            Transport result
        """
        path = f"/groups/{group_id}/posts"
        logger.info(f"Adding share to group {group_id}")
        return self.transport.post(path, _dump_json(share), dict(JSON_HEADERS))

    def add_group_share_as(self, group_id: str, share: Dict[str, Any], token: str) -> Dict[str, Any]:
        """Create a share in a group authenticated by an explicit token.

        Same request as add_group_share, with the token sent as the
        oauth2_access_token query parameter.
        """
        path = f"/groups/{group_id}/posts?{ACCESS_TOKEN_PARAM}={quote(str(token), safe='')}"
        logger.info(f"Adding share to group {group_id} with explicit token")
        return self.transport.post(path, _dump_json(share), dict(JSON_HEADERS))

    def join_group(self, group_id: str) -> Dict[str, Any]:
        """Join, or request to join, a group as the current user.

        Args:
            group_id: Group ID

        Returns:
            Transport result
        """
        path = f"/people/~/group-memberships/{group_id}"
        logger.info(f"Joining group {group_id}")
        return self.transport.put(path, _dump_json(MEMBERSHIP_STATE_MEMBER), dict(JSON_HEADERS))

    def delete_post(self, post_id: str) -> Dict[str, Any]:
        """Delete a post, or flag it as inappropriate.

        Args:
            post_id: Post ID

        Returns:
            Transport result
        """
        path = f"/posts/{post_id}"
        logger.info(f"Deleting post {post_id}")
        return self.transport.delete(path)
