from __future__ import annotations

from dealership_lite.domain.leads import ContactMessage, ServiceBooking, ServiceType
from dealership_lite.entrypoints.http.dtos.contact import ContactRequestDTO
from dealership_lite.entrypoints.http.dtos.services import (
    ServiceBookingRequestDTO,
    ServiceBookingResponseDTO,
    ServiceTypeDTO,
)
from dealership_lite.use_cases.book_service import ServiceBookingConfirmation


class LeadMapper:
    """Service booking and contact form mapping."""

    @staticmethod
    def to_service_type(service: ServiceType) -> ServiceTypeDTO:
        return ServiceTypeDTO(
            id=service.id,
            name=service.name,
            price=str(service.price) if service.price is not None else None,
            description=service.description,
            duration=service.duration,
        )

    @staticmethod
    def to_booking(dto: ServiceBookingRequestDTO) -> ServiceBooking:
        return ServiceBooking(**dto.model_dump())

    @staticmethod
    def to_booking_response(
        confirmation: ServiceBookingConfirmation,
    ) -> ServiceBookingResponseDTO:
        return ServiceBookingResponseDTO(
            reference=confirmation.reference,
            service=LeadMapper.to_service_type(confirmation.service),
            date=confirmation.date,
            time_slot=confirmation.time_slot,
            message=(
                f"Your service has been scheduled for "
                f"{confirmation.date:%B} {confirmation.date.day}, {confirmation.date.year} "
                f"at {confirmation.time_slot}."
            ),
        )

    @staticmethod
    def to_contact_message(dto: ContactRequestDTO) -> ContactMessage:
        return ContactMessage(**dto.model_dump())
