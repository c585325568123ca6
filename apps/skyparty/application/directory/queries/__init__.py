"""Directory Queries."""

from apps.skyparty.application.directory.queries.get_user import GetUserQuery
from apps.skyparty.application.directory.queries.search_users import SearchUsersQuery

__all__ = ["GetUserQuery", "SearchUsersQuery"]
