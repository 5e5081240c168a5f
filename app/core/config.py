from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Shopify app credentials; session tokens are signed with the API secret
    SHOPIFY_API_KEY: str
    SHOPIFY_API_SECRET: str

    SESSION_TOKEN_ALGORITHM: str = "HS256"
    SESSION_TOKEN_LEEWAY_SECONDS: int = 10

    ENVIRONMENT: str = "development"  # "development" or "production"
    CORS_ORIGINS: List[str] = ["https://admin.shopify.com"]

    @property
    def is_production(self):
        return self.ENVIRONMENT == "production"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
