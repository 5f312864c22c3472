#!/usr/bin/env python
"""LinkedIn Groups command line tool.

Usage:
    # Groups the current user belongs to
    linkedin-groups memberships

    # Second page of a group's posts
    linkedin-groups posts 12345 --count 10 --start 10

    # Share a post read from a JSON file
    linkedin-groups share 12345 share.json

    # Use a YAML configuration instead of environment variables
    linkedin-groups --config linkedin.yml profile 12345

Environment Variables:
    LINKEDIN_ACCESS_TOKEN: OAuth2 access token
    LINKEDIN_CREDENTIALS_FILE: YAML credentials file (if no token is set)
    LINKEDIN_API_BASE_URL: API base URL override
    LINKEDIN_TIMEOUT: Request timeout in seconds
    LINKEDIN_LOG_LEVEL: Log level (default INFO)
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from loguru import logger

from linkedin_groups.api.groups import GroupsClient
from linkedin_groups.api.paths import CurrentUser, Identified
from linkedin_groups.api.query import QueryOptions
from linkedin_groups.client import LinkedInClient
from linkedin_groups.core.config import ClientConfig
from linkedin_groups.core.constants import LOG_LEVEL_DEBUG
from linkedin_groups.core.exceptions import LinkedInError
from linkedin_groups.utils.logging import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one subcommand per endpoint."""
    parser = argparse.ArgumentParser(
        prog="linkedin-groups",
        description="Call the LinkedIn Groups API",
    )
    parser.add_argument("--config", help="YAML configuration file (default: environment)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", required=True)

    suggestions = commands.add_parser("suggestions", help="Group suggestions for a member")
    suggestions.add_argument("--person", help="Member id (default: current user)")

    memberships = commands.add_parser("memberships", help="Groups a member belongs to")
    memberships.add_argument("--person", help="Member id (default: current user)")

    profile = commands.add_parser("profile", help="Profile of a group")
    profile.add_argument("group_id")
    profile.add_argument("--fields", nargs="+", help="Fields to select")

    posts = commands.add_parser("posts", help="Posts in a group")
    posts.add_argument("group_id")
    posts.add_argument("--count", type=int, help="Posts per page")
    posts.add_argument("--start", type=int, help="Offset of the first post")

    post = commands.add_parser("post", help="A single group post")
    post.add_argument("group_id")
    post.add_argument("post_id")

    share = commands.add_parser("share", help="Create a post in a group")
    share.add_argument("group_id")
    share.add_argument("share_file", help="JSON file with the share payload")
    share.add_argument("--token", help="Post with this access token instead")

    join = commands.add_parser("join", help="Join a group")
    join.add_argument("group_id")

    delete = commands.add_parser("delete", help="Delete a post")
    delete.add_argument("post_id")

    return parser


def _person(person_id: Optional[str]):
    return Identified(person_id) if person_id else CurrentUser()


def _read_share(path: str) -> Dict[str, Any]:
    with open(path, "r") as jsfile:
        return json.load(jsfile)


def dispatch(groups: GroupsClient, args: argparse.Namespace) -> Dict[str, Any]:
    """Run the API call selected by the parsed arguments."""
    if args.command == "suggestions":
        return groups.group_suggestions(_person(args.person))
    if args.command == "memberships":
        return groups.group_memberships(_person(args.person))
    if args.command == "profile":
        return groups.group_profile(Identified(args.group_id), QueryOptions(fields=args.fields))
    if args.command == "posts":
        options = QueryOptions(count=args.count, start=args.start)
        return groups.group_posts(Identified(args.group_id), options)
    if args.command == "post":
        return groups.group_post(args.post_id, Identified(args.group_id))
    if args.command == "share":
        if args.token:
            return groups.add_group_share_as(args.group_id, args.share, args.token)
        return groups.add_group_share(args.group_id, args.share)
    if args.command == "join":
        return groups.join_group(args.group_id)
    if args.command == "delete":
        return groups.delete_post(args.post_id)
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line execution."""
    args = build_parser().parse_args(argv)

    if args.command == "share":
        try:
            args.share = _read_share(args.share_file)
        except (OSError, ValueError) as e:
            logger.error(f"Cannot read share file {args.share_file}: {e}")
            return 1

    try:
        config = ClientConfig.from_yaml(args.config) if args.config else ClientConfig.from_env()
        setup_logging(level=LOG_LEVEL_DEBUG if args.debug else config.log_level)

        with LinkedInClient.from_config(config) as client:
            result = dispatch(client.groups, args)
    except LinkedInError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
