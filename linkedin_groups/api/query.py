"""Query options and the GET helper shared by the read-only endpoints.

A read request is a path, an optional field selector and a query string:

    /groups/123/posts:(id,title)?count=10&start=20
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlencode
from loguru import logger

from linkedin_groups.core.constants import COUNT_PARAM, START_PARAM
from linkedin_groups.core.protocols import Transport


FieldSpec = Union[str, List[Any], Dict[str, Any]]


@dataclass
class QueryOptions:
    """Per-call options for GET requests.

    Attributes:
        count: Number of items per page (server-side pagination)
        start: Offset of the first item (server-side pagination)
        fields: Field names to select, rendered as ``:(a,b,c)``.
            Dict entries select sub-fields: ``{"creator": ["id"]}``
            renders as ``creator:(id)``
        public: Request the public profile (``:public``) instead of fields
        headers: Extra request headers for this call
        extra_params: Any other query parameters, forwarded verbatim
    """

    count: Optional[int] = None
    start: Optional[int] = None
    fields: Optional[List[FieldSpec]] = None
    public: bool = False
    headers: Dict[str, str] = field(default_factory=dict)
    extra_params: Dict[str, Any] = field(default_factory=dict)


def build_fields_params(fields: FieldSpec) -> str:
    """
    Render a field specification as LinkedIn's comma separated field list.

    Underscores become dashes, so Python-friendly names can be used.

    Example:
        >>> build_fields_params(["id", "site_group_url", {"creator": ["first_name"]}])
        'id,site-group-url,creator:(first-name)'
    """
    if isinstance(fields, dict):
        return ",".join(
            f"{build_fields_params(name)}:({build_fields_params(sub)})"
            for name, sub in fields.items()
        )
    if isinstance(fields, (list, tuple)):
        return ",".join(build_fields_params(f) for f in fields)
    return str(fields).replace("_", "-")


def build_fields_selector(fields: FieldSpec) -> str:
    """Wrap the field list in a path selector, e.g. ``:(id,name)``."""
    return f":({build_fields_params(fields)})"


def to_query(options: QueryOptions) -> str:
    """
    Build the URL-encoded query string for a request.

    Parameters are emitted as count, start, then extra_params in insertion
    order. None values are skipped; list values repeat the parameter.
    """
    params: Dict[str, Any] = {}
    if options.count is not None:
        params[COUNT_PARAM] = options.count
    if options.start is not None:
        params[START_PARAM] = options.start
    for key, value in options.extra_params.items():
        if value is not None:
            params[key] = value
    return urlencode(params, doseq=True)


def simple_query(
    transport: Transport,
    path: str,
    options: Optional[QueryOptions] = None,
) -> Dict[str, Any]:
    """
    Issue a GET for path with the selector and query string from options.

    Args:
        transport: HTTP transport
        path: Resource path, e.g. /groups/123
        options: Query options (defaults to none)

    Returns:
        Parsed response

    Raises:
        APIError: Whatever the transport raises
    """
    options = options or QueryOptions()

    if options.public:
        path = f"{path}:public"
    elif options.fields:
        path = f"{path}{build_fields_selector(options.fields)}"

    query = to_query(options)
    if query:
        separator = "&" if "?" in path else "?"
        path = f"{path}{separator}{query}"

    logger.debug(f"Querying {path}")
    return transport.get(path, headers=options.headers or None)
