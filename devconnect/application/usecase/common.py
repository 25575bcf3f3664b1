"""Models shared by use cases."""

from pydantic import BaseModel, ConfigDict

from devconnect.domain.value import UserId


class CallerContext(BaseModel):
    """The authenticated caller of a request.

    Built from a verified token at the API edge and handed to every use case
    that acts on behalf of a user.
    """

    model_config = ConfigDict(frozen=True)

    user_id: UserId


class MessageResponse(BaseModel):
    """Plain acknowledgement, e.g. ``{"msg": "Post removed"}``."""

    msg: str
