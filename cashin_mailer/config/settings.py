from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cashin_mailer.domain.models import BrandProfile, ChannelAccounts


class Settings(BaseSettings):
    """Process configuration, read once from the environment and ``.env``."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    profiling_enabled: bool = False

    # Mail relay
    mail_transport: Literal["smtp", "http"] = "smtp"
    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 465
    smtp_username: str = Field(
        default="", validation_alias=AliasChoices("SMTP_USERNAME", "GMAIL_USER")
    )
    smtp_password: str = Field(
        default="", validation_alias=AliasChoices("SMTP_PASSWORD", "GMAIL_APP_PASSWORD")
    )
    smtp_timeout: float = 30.0
    # STARTTLS on ports other than 465; off for plain internal relays
    smtp_use_tls: bool = True
    mail_api_url: str = "https://api.brevo.com/v3/smtp/email"
    mail_api_key: str = ""
    mail_api_timeout: float = 10.0
    sender_address: str = ""

    # Branding
    brand_name: str = "komyut"
    brand_code_tag: str = "KOMYUT"
    biller_name: str = "Komyut Services PH"

    # Payment destinations, unset channels show the generic biller block
    gcash_number: str = ""
    maya_number: str = ""
    bank_name: str = ""
    bank_account_number: str = ""

    @property
    def from_address(self) -> str:
        return self.sender_address or self.smtp_username

    def brand_profile(self) -> BrandProfile:
        return BrandProfile(
            name=self.brand_name,
            code_tag=self.brand_code_tag,
            biller_name=self.biller_name,
        )

    def channel_accounts(self) -> ChannelAccounts:
        return ChannelAccounts(
            gcash_number=self.gcash_number,
            maya_number=self.maya_number,
            bank_name=self.bank_name,
            bank_account_number=self.bank_account_number,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
