from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    graphql_url: str = Field(..., validation_alias="GRAPHQL_URL")

    # Session-level settings of the httpx client; shared read-only by all requests.
    http_connect_timeout_seconds: float = Field(5.0, validation_alias="HTTP_CONNECT_TIMEOUT_SECONDS")
    http_read_timeout_seconds: float = Field(30.0, validation_alias="HTTP_READ_TIMEOUT_SECONDS")
    http_follow_redirects: bool = Field(True, validation_alias="HTTP_FOLLOW_REDIRECTS")
    http_user_agent: str = Field("", validation_alias="HTTP_USER_AGENT")
