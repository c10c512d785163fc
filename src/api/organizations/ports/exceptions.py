"""Exceptions for the Organizations bounded context.

Two kinds of failure are surfaced to callers: NotFoundError when an
identifier does not resolve to a membership of the stated organization,
and BadRequestError when a rule forbids the change on a membership that
does resolve. Callers map them to their own error responses.
"""

USER_NOT_FOUND = "User not found."
CANNOT_REMOVE_YOURSELF = "You cannot remove yourself."
ONLY_OWNERS_CAN_DELETE_OWNERS = "Only owners can delete other owners."
LAST_CONFIRMED_OWNER = "Organization must have at least one confirmed owner."
USERS_INVALID = "Users invalid."


class NotFoundError(Exception):
    """Raised when a membership cannot be resolved within an organization.

    Covers both a missing membership and one that belongs to a different
    organization, so callers cannot probe other organizations' members.
    """

    def __init__(self, message: str = USER_NOT_FOUND):
        super().__init__(message)
        self.message = message


class BadRequestError(Exception):
    """Raised when a business rule forbids the requested change.

    The membership exists and is in scope, but removing it would violate
    a rule such as self-removal or the confirmed-owner invariant.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
