from cashin_mailer.adapters.http import HttpMailRelay
from cashin_mailer.adapters.smtp import SmtpMailRelay
from cashin_mailer.config.settings import Settings
from cashin_mailer.domain.protocols import MailRelay
from cashin_mailer.domain.renderer import InstructionRenderer
from cashin_mailer.domain.services import NotificationService


def create_mail_relay(settings: Settings) -> MailRelay:
    """Create the mail relay selected by MAIL_TRANSPORT."""
    if settings.mail_transport == "http":
        return HttpMailRelay(
            api_url=settings.mail_api_url,
            api_key=settings.mail_api_key,
            sender_name=settings.brand_name,
            sender_address=settings.from_address,
            timeout=settings.mail_api_timeout,
        )

    return SmtpMailRelay(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
        sender_name=settings.brand_name,
        sender_address=settings.from_address,
        timeout=settings.smtp_timeout,
        use_tls=settings.smtp_use_tls,
    )


def create_notification_service(settings: Settings) -> NotificationService:
    """Create a NotificationService with real implementations for production use."""
    renderer = InstructionRenderer(
        brand=settings.brand_profile(),
        accounts=settings.channel_accounts(),
    )
    return NotificationService(renderer=renderer, relay=create_mail_relay(settings))
