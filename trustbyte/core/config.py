from os import getenv


class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./trustbyte.db")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_DAYS = int(getenv("JWT_EXPIRE_DAYS", "28"))
    CORS_ORIGIN = getenv("CORS_ORIGIN", "")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

    # client side
    BASE_URL = getenv("TRUSTBYTE_BASE_URL", "http://localhost:8081")
    SESSION_FILE = getenv("TRUSTBYTE_SESSION_FILE", "~/.trustbyte/user.json")
    HTTP_TIMEOUT = float(getenv("HTTP_TIMEOUT", "10"))

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGIN:
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGIN.split(",") if origin.strip()]


settings = Settings()
