from __future__ import annotations

import logging

from dealership_lite.domain.errors import ValidationError
from dealership_lite.domain.leads import ContactMessage

logger = logging.getLogger(__name__)


class SendContactMessage:
    def execute(self, message: ContactMessage) -> None:
        result = message.validate()
        if not result.ok:
            raise ValidationError(errors=result.error_dicts())

        logger.info(
            "Contact form submitted",
            extra={"subject": message.subject, "email": message.email},
        )
