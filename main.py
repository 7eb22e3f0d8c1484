from cashin_mailer.config.logging import setup_logging
from cashin_mailer.config.settings import get_settings
from cashin_mailer.api import create_app
from cashin_mailer.factories import create_notification_service

# Setup logging first
setup_logging()

# Mail relay credentials are read once here
settings = get_settings()

# Create the notification service
notification_service = create_notification_service(settings)

# Create the FastAPI app with all components
app = create_app(notification_service, settings)


def main():
    import uvicorn
    from cashin_mailer.config.logging import get_uvicorn_log_level

    # Get log level for uvicorn
    log_level = get_uvicorn_log_level()

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=log_level
    )


if __name__ == "__main__":
    main()
