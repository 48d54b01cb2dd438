from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Aluminium Frame Estimator"
    CURRENCY_LABEL: str = "Rs."
    LOG_LEVEL: str = "INFO"

    # Final summary defaults: per sq ft for glass/labor, per window for hardware
    GLASS_RATE_DEFAULT: float = 0.0
    LABOR_RATE_DEFAULT: float = 0.0
    HARDWARE_RATE_DEFAULT: float = 0.0
    DISCOUNT_PCT_DEFAULT: float = 0.0

    class Config:
        env_file = ".env"


settings = Settings()
