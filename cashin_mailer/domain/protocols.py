from typing import Protocol

from cashin_mailer.domain.models import DispatchResult


class MailRelay(Protocol):
    async def send(self, recipient: str, subject: str, html_body: str) -> DispatchResult:
        """Hand an HTML email to the relay for delivery."""
        ...

    async def close(self) -> None:
        """Release any connection held by the relay."""
        ...


class HttpResponse(Protocol):
    status_code: int
    text: str

    def json(self) -> dict:
        """Parse the response as JSON."""
        ...


class HttpClient(Protocol):
    async def post(self, url: str, json: dict, headers: dict) -> HttpResponse:
        """Make an HTTP POST request."""
        ...

    async def aclose(self) -> None:
        """Close the underlying connections."""
        ...
