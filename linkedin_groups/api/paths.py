"""Path builders for people and groups resources.

The API addresses a resource either as "the authenticated member" or by an
explicit identifier. Callers say which one they mean with CurrentUser or
Identified instead of relying on the presence of an id key.
"""

from dataclasses import dataclass
from typing import Union
from urllib.parse import quote


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated member (or, for groups, the group collection)."""


@dataclass(frozen=True)
class Identified:
    """A person or group addressed by its LinkedIn id."""

    id: str

    def __post_init__(self):
        object.__setattr__(self, "id", str(self.id))


@dataclass(frozen=True)
class PersonUrl:
    """A person addressed by public profile URL."""

    url: str


PersonRef = Union[CurrentUser, Identified, PersonUrl]
GroupRef = Union[CurrentUser, Identified]


def person_path(who: PersonRef) -> str:
    """
    Build the path of a person resource.

    Examples:
        >>> person_path(CurrentUser())
        '/people/~'
        >>> person_path(Identified("abc"))
        '/people/id=abc'
        >>> person_path(PersonUrl("http://linkedin.com/in/jane"))
        '/people/url=http%3A%2F%2Flinkedin.com%2Fin%2Fjane'
    """
    if isinstance(who, CurrentUser):
        return "/people/~"
    if isinstance(who, Identified):
        return f"/people/id={who.id}"
    if isinstance(who, PersonUrl):
        return f"/people/url={quote(who.url, safe='')}"
    raise TypeError(f"Expected CurrentUser, Identified or PersonUrl, got {type(who).__name__}")


def group_path(group: GroupRef) -> str:
    """
    Build the path of a group resource.

    Examples:
        >>> group_path(CurrentUser())
        '/groups'
        >>> group_path(Identified("123"))
        '/groups/123'
    """
    if isinstance(group, CurrentUser):
        return "/groups"
    if isinstance(group, Identified):
        return f"/groups/{group.id}"
    raise TypeError(f"Expected CurrentUser or Identified, got {type(group).__name__}")
