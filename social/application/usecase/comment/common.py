"""Comment response shared by comment and post use cases."""

from datetime import datetime

from pydantic import BaseModel

from social.domain.model import Comment


class CommentResponse(BaseModel):
    """Comment as exposed over the API."""

    id: int
    post_id: int
    user_id: int
    username: str
    content: str
    created_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            post_id=comment.post_id,
            user_id=comment.author_id,
            username=comment.author_username,
            content=comment.content,
            created_at=comment.created_at,
        )
