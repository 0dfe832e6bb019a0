"""Django ORM models for enrollments and tickets (persistence layer).

Domain representations live in tickets/domain/models.py.
"""

from django.conf import settings
from django.db import models


class Enrollment(models.Model):
    """Persistence model for a user's event registration."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="enrollment"
    )
    name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=11)
    birthday = models.DateTimeField()
    phone = models.CharField(max_length=20)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class Address(models.Model):
    """Persistence model for an enrollment's address."""

    enrollment = models.OneToOneField(
        Enrollment, on_delete=models.CASCADE, related_name="address"
    )
    cep = models.CharField(max_length=9)
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=255)
    state = models.CharField(max_length=2)
    number = models.CharField(max_length=20)
    neighborhood = models.CharField(max_length=255)
    address_detail = models.CharField(max_length=255, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.street}, {self.number} - {self.city}/{self.state}"


class TicketType(models.Model):
    """Persistence model for ticket types."""

    name = models.CharField(max_length=255)
    price = models.PositiveIntegerField()
    is_remote = models.BooleanField()
    includes_hotel = models.BooleanField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return self.name


class TicketStatus(models.TextChoices):
    RESERVED = "RESERVED", "Reserved"
    PAID = "PAID", "Paid"


class Ticket(models.Model):
    """Persistence model for a ticket held by an enrollment."""

    enrollment = models.ForeignKey(
        Enrollment, on_delete=models.CASCADE, related_name="tickets"
    )
    ticket_type = models.ForeignKey(
        TicketType, on_delete=models.PROTECT, related_name="tickets"
    )
    status = models.CharField(max_length=20, choices=TicketStatus.choices)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self) -> str:
        return f"{self.enrollment} - {self.status}"
