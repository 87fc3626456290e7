from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "DNSGate"
    DATABASE_URL: str = "sqlite:///./data/dnsgate.db"
    LOG_LEVEL: str = "INFO"

    # Operator auth
    ALGORITHM: str = "RS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 15
    SERVER_PRIVATE_KEY: str
    SERVER_PUBLIC_KEY: str

    # Security
    PASSWORD_PEPPER: str

    # Bootstrap operator
    ADMIN_USERNAME: str
    ADMIN_PASSWORD: str

    # Shared secret the resolver presents on /access/* (unset = open)
    RESOLVER_API_KEY: str | None = None

    # Client tokens
    TOKEN_GENERATION_ATTEMPTS: int = 3

    model_config = SettingsConfigDict(env_file=".env")

settings = Settings()
