# app/models/__init__.py
# Import every model so Base.metadata is complete for create_all / alembic.
from app.models.medicine import Medicine
from app.models.order import Order, OrderItem, OrderStatus
from app.models.clinic_service import ClinicService
from app.models.appointment import Appointment, AppointmentStatus
from app.models.contact_message import ContactMessage, ContactMessageStatus
from app.models.prescription import Prescription, PrescriptionStatus
from app.models.consultation import Consultation, ConsultationStatus, ConsultationType
