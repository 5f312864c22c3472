"""
LinkedIn Groups API client.
Thin wrappers over the Groups REST endpoints (suggestions, memberships,
group profile, posts, shares, joins, deletes).
"""

from linkedin_groups.api.groups import GroupsClient
from linkedin_groups.api.paths import CurrentUser, Identified, PersonUrl
from linkedin_groups.api.query import QueryOptions
from linkedin_groups.client import LinkedInClient

__version__ = "0.1.0"

__all__ = [
    "GroupsClient",
    "LinkedInClient",
    "CurrentUser",
    "Identified",
    "PersonUrl",
    "QueryOptions",
]
