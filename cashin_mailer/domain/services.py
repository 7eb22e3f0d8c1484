import logging

from cashin_mailer.domain.models import DispatchResult, PaymentNotificationRequest
from cashin_mailer.domain.protocols import MailRelay
from cashin_mailer.domain.renderer import InstructionRenderer

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, renderer: InstructionRenderer, relay: MailRelay):
        """Initialize the NotificationService with a renderer and a mail relay."""
        self.renderer = renderer
        self.relay = relay

    async def send_payment_instructions(
        self, request: PaymentNotificationRequest
    ) -> DispatchResult:
        """
        Render the instruction email and hand it to the relay once.
        Relay failures are logged and returned, never retried.
        """
        document = self.renderer.render(request)
        logger.info(
            f"Sending payment instructions {document.transaction_code} "
            f"for user {request.userId} via {request.source}"
        )

        try:
            result = await self.relay.send(
                document.recipient, document.subject, document.html_body
            )
        except Exception as exc:
            logger.exception(f"Mail relay raised while sending {document.transaction_code}")
            result = DispatchResult.failed(f"{type(exc).__name__}: {exc}")

        if result.ok:
            logger.info(f"Payment instructions {document.transaction_code} sent: {result.detail}")
        else:
            logger.error(
                f"Failed to send payment instructions {document.transaction_code}: {result.reason}"
            )
        return result

    async def close(self) -> None:
        await self.relay.close()
