"""Strongly typed identifiers for social domain entities.

Identifiers are database-assigned integers. NewType keeps a post id from
being passed where a user id is expected.
"""

from typing import NewType

UserId = NewType("UserId", int)
RoleId = NewType("RoleId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
