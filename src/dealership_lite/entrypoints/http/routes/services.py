from fastapi import APIRouter, Depends, status

from dealership_lite.domain.leads import BOOKING_WINDOW_DAYS, SERVICE_TYPES, TIME_SLOTS
from dealership_lite.entrypoints.http.dependencies import get_book_service_use_case
from dealership_lite.entrypoints.http.dtos.services import (
    ServiceBookingRequestDTO,
    ServiceBookingResponseDTO,
    ServiceCatalogDTO,
)
from dealership_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from dealership_lite.entrypoints.http.mappers.lead_mapper import LeadMapper
from dealership_lite.use_cases.book_service import BookService

router = APIRouter(tags=["Service"])


@router.get("/services", response_model=ServiceCatalogDTO, summary="Service types and time slots")
def list_services() -> ServiceCatalogDTO:
    return ServiceCatalogDTO(
        service_types=[LeadMapper.to_service_type(s) for s in SERVICE_TYPES],
        time_slots=list(TIME_SLOTS),
        booking_window_days=BOOKING_WINDOW_DAYS,
    )


@router.post(
    "/service-bookings",
    response_model=ServiceBookingResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Book a service appointment",
    description="Weekdays only, from tomorrow up to 30 days ahead.",
    responses={422: ERROR_RESPONSES[422]},
)
def book_service(
    payload: ServiceBookingRequestDTO,
    use_case: BookService = Depends(get_book_service_use_case),
) -> ServiceBookingResponseDTO:
    confirmation = use_case.execute(LeadMapper.to_booking(payload))
    return LeadMapper.to_booking_response(confirmation)
