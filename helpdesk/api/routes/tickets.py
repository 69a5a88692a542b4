from typing import Annotated, Any, TypeVar

from fastapi import APIRouter, Body, Depends, Query
from pydantic import BaseModel, ValidationError

from helpdesk.core.config import Settings, get_settings
from helpdesk.core.errors import InvalidInputError
from helpdesk.models.schemas.ticket import (
    TicketCreateRequest,
    TicketCreateResponse,
    TicketDataResponse,
    TicketDeleteRequest,
    TicketDeleteResponse,
    TicketRead,
    TicketStatusRequest,
    TicketSummary,
    TicketUpdateRequest,
)
from helpdesk.repositories.ticket_store import JsonTicketStore
from helpdesk.services.ticket_service import TicketService

router = APIRouter(prefix="/tickets")

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def get_ticket_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TicketService:
    return TicketService(ticket_store=JsonTicketStore(settings.data_file))


def _require_method(method: str | None) -> str:
    if not method:
        raise InvalidInputError("METHOD_REQUIRED", "Method parameter is required")
    return method


def _invalid_method(method: str) -> InvalidInputError:
    return InvalidInputError("INVALID_METHOD", "Invalid method", details=f"method={method}")


_FIELD_ERROR_CODES = {
    "id": ("TICKET_ID_REQUIRED", "ID is required"),
    "name": ("TICKET_NAME_REQUIRED", "Name is required"),
}


def _parse_body(model: type[RequestModel], body: dict[str, Any] | None) -> RequestModel:
    try:
        return model.model_validate(body or {})
    except ValidationError as exc:
        issue = exc.errors()[0]
        field = str(issue["loc"][0]) if issue["loc"] else ""
        code, message = _FIELD_ERROR_CODES.get(
            field, ("INVALID_TICKET_FIELD", f"Invalid value for {field or 'body'}")
        )
        raise InvalidInputError(code, message, details=f"{field}: {issue['msg']}") from exc


@router.get("", response_model=None)
def read_tickets(
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
    method: Annotated[str | None, Query()] = None,
    ticket_id: Annotated[str | None, Query(alias="id")] = None,
) -> list[TicketSummary] | TicketRead:
    method = _require_method(method)

    if method == "allTickets":
        return ticket_service.list_ticket_summaries()
    if method == "ticketById":
        return ticket_service.get_ticket(ticket_id)
    raise _invalid_method(method)


@router.post("", response_model=None)
def modify_tickets(
    ticket_service: Annotated[TicketService, Depends(get_ticket_service)],
    method: Annotated[str | None, Query()] = None,
    body: Annotated[dict[str, Any] | None, Body()] = None,
) -> TicketCreateResponse | TicketDataResponse | TicketDeleteResponse:
    method = _require_method(method)

    if method == "createTicket":
        ticket = ticket_service.create_ticket(_parse_body(TicketCreateRequest, body))
        return TicketCreateResponse(id=ticket.id, ticket=ticket)
    if method == "updateTicket":
        ticket = ticket_service.update_ticket(_parse_body(TicketUpdateRequest, body))
        return TicketDataResponse(ticket=ticket)
    if method == "deleteTicket":
        ticket_service.delete_ticket(_parse_body(TicketDeleteRequest, body))
        return TicketDeleteResponse()
    if method == "statusTicket":
        ticket = ticket_service.set_ticket_status(_parse_body(TicketStatusRequest, body))
        return TicketDataResponse(ticket=ticket)
    raise _invalid_method(method)
