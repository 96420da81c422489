"""Import every ORM model so the declarative registry is complete."""

from barbershop.modules.admins.models import Admin
from barbershop.modules.appointments.models import Appointment
from barbershop.modules.assignments.models import StaffService
from barbershop.modules.catalog.models import Service
from barbershop.modules.payments.models import Payment
from barbershop.modules.products.models import Product
from barbershop.modules.staff.models import Staff

__all__ = ["Admin", "Appointment", "Payment", "Product", "Service", "Staff", "StaffService"]
