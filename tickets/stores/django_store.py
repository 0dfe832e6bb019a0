"""Django ORM implementations of the enrollment and ticket stores."""

from tickets import models
from tickets.domain import (
    Address,
    Enrollment,
    EnrollmentId,
    Ticket,
    TicketId,
    TicketStatus,
    TicketType,
    TicketTypeId,
    UserId,
)
from tickets.stores.interfaces import EnrollmentStore, TicketStore


class DjangoEnrollmentStore(EnrollmentStore):
    """Enrollment store backed by the Django ORM."""

    def find_enrollment_by_user(self, user_id: UserId) -> Enrollment | None:
        row = (
            models.Enrollment.objects.select_related("address")
            .filter(user_id=user_id.value)
            .first()
        )
        if row is None:
            return None
        return _to_enrollment(row)


class DjangoTicketStore(TicketStore):
    """Ticket store backed by the Django ORM."""

    def find_ticket_by_enrollment(self, enrollment_id: EnrollmentId) -> Ticket | None:
        row = (
            models.Ticket.objects.filter(enrollment_id=enrollment_id.value)
            .order_by("id")
            .first()
        )
        if row is None:
            return None
        return _to_ticket(row)

    def find_ticket_type_by_ticket(self, ticket_id: TicketId) -> TicketType:
        row = models.Ticket.objects.select_related("ticket_type").get(pk=ticket_id.value)
        return _to_ticket_type(row.ticket_type)


def _to_enrollment(row: models.Enrollment) -> Enrollment:
    try:
        address = _to_address(row.address)
    except models.Address.DoesNotExist:
        address = None
    return Enrollment(
        id=EnrollmentId(row.id),
        user_id=UserId(row.user_id),
        name=row.name,
        address=address,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_address(row: models.Address) -> Address:
    return Address(
        cep=row.cep,
        street=row.street,
        city=row.city,
        state=row.state,
        number=row.number,
        neighborhood=row.neighborhood,
        address_detail=row.address_detail,
    )


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.id),
        enrollment_id=EnrollmentId(row.enrollment_id),
        ticket_type_id=TicketTypeId(row.ticket_type_id),
        status=TicketStatus(row.status),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_ticket_type(row: models.TicketType) -> TicketType:
    return TicketType(
        id=TicketTypeId(row.id),
        name=row.name,
        price=row.price,
        is_remote=row.is_remote,
        includes_hotel=row.includes_hotel,
    )
