from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    api_title: str = "Amortizer"
    debug: bool = False
    log_level: str = "INFO"

    # Day-count basis for per diem interest (leap years are not special-cased)
    per_diem_days_in_year: int = 365


settings = Settings()
