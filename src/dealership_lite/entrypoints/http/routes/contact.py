from fastapi import APIRouter, Depends, status

from dealership_lite.entrypoints.http.dependencies import get_send_contact_message_use_case
from dealership_lite.entrypoints.http.dtos.contact import ContactRequestDTO, ContactResponseDTO
from dealership_lite.entrypoints.http.error_responses import ERROR_RESPONSES
from dealership_lite.entrypoints.http.mappers.lead_mapper import LeadMapper
from dealership_lite.use_cases.send_contact_message import SendContactMessage

router = APIRouter(tags=["Contact"])


@router.post(
    "/contact",
    response_model=ContactResponseDTO,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Send a message to the dealership",
    responses={422: ERROR_RESPONSES[422]},
)
def send_contact_message(
    payload: ContactRequestDTO,
    use_case: SendContactMessage = Depends(get_send_contact_message_use_case),
) -> ContactResponseDTO:
    use_case.execute(LeadMapper.to_contact_message(payload))
    return ContactResponseDTO(
        message="Thank you for your message! We'll get back to you shortly."
    )
