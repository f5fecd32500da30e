
"""Messages exchanged between the two peers of a versus match"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

PROTOCOL_VERSION = "1.0"


class _Message(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Hello(_Message):
    """Sent once by the host: shared seed plus the sender's clock reading."""
    kind: Literal["hello"] = Field("hello", alias="t")
    seed: int
    version: str = Field(PROTOCOL_VERSION, alias="ver")
    sender_time: int = Field(..., alias="now")


class AttackMessage(_Message):
    kind: Literal["attack"] = Field("attack", alias="t")
    applied_at_time: int = Field(..., alias="at")   # sender's clock
    rows: int


class GameOver(_Message):
    kind: Literal["gameover"] = Field("gameover", alias="t")
    winner: Literal["me", "you"]


class Emote(_Message):
    kind: Literal["emote"] = Field("emote", alias="t")
    id: int


Message = Annotated[Union[Hello, AttackMessage, GameOver, Emote], Field(discriminator="kind")]

_adapter = TypeAdapter(Message)


def encode_message(message: _Message) -> str:
    return message.model_dump_json(by_alias=True)


def decode_message(raw: Union[str, bytes]) -> Message:
    """Parse a wire message; raises pydantic.ValidationError when malformed."""
    return _adapter.validate_json(raw)
