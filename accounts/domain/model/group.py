"""Work members groups.

Members of the work section are organised into groups. A group can only be
removed once no member belongs to it.
"""

from pydantic import Field

from accounts.domain.model.common import DomainModel
from accounts.domain.value import Email, GroupId, MemberId


class Group(DomainModel):
    """Group of work members."""

    id: GroupId
    name: str = Field(min_length=1, max_length=255)


class Member(DomainModel):
    """Work member belonging to exactly one group."""

    id: MemberId
    group_id: GroupId
    name: str = Field(min_length=1, max_length=255)
    email: Email
