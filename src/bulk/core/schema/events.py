"""Bulk lifecycle events delivered by the engine to its sinks."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _Base(BaseModel):
    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# bulk.started
# ---------------------------------------------------------------------------


class BulkStartedEvent(_Base):
    kind: Literal["bulk.started"] = "bulk.started"


# ---------------------------------------------------------------------------
# command.appended
# ---------------------------------------------------------------------------


class CommandAppendedEvent(_Base):
    kind: Literal["command.appended"] = "command.appended"
    command: str = Field(min_length=1)


# ---------------------------------------------------------------------------
# bulk.ended
# ---------------------------------------------------------------------------


class BulkEndedEvent(_Base):
    kind: Literal["bulk.ended"] = "bulk.ended"


# ---------------------------------------------------------------------------
# Discriminated union of all event types
# ---------------------------------------------------------------------------

BulkEvent = Annotated[
    Union[
        BulkStartedEvent,
        CommandAppendedEvent,
        BulkEndedEvent,
    ],
    Field(discriminator="kind"),
]

# Stateless events are shared; only command.appended carries data.
BULK_STARTED = BulkStartedEvent()
BULK_ENDED = BulkEndedEvent()
