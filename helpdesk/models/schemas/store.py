from pydantic import BaseModel, ConfigDict, StrictBool, StrictInt, StrictStr


class TicketRecord(BaseModel):
    """One ticket as persisted in the JSON store; unknown keys are kept."""

    model_config = ConfigDict(extra="allow")

    id: StrictStr
    name: StrictStr
    description: StrictStr = ""
    status: StrictBool
    created: StrictInt


class StoreDocument(BaseModel):
    tickets: list[TicketRecord]
