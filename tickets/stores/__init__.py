from tickets.stores.django_store import DjangoEnrollmentStore, DjangoTicketStore
from tickets.stores.interfaces import EnrollmentStore, TicketStore

__all__ = ["EnrollmentStore", "TicketStore", "DjangoEnrollmentStore", "DjangoTicketStore"]
