from pydantic import BaseModel


class ContactRequestDTO(BaseModel):
    name: str
    email: str
    subject: str
    message: str


class ContactResponseDTO(BaseModel):
    message: str
