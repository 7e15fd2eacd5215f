from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "EMI_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Calculator bounds (the engine itself only enforces the numeric domain)
    max_term_months: int = 360  # 30 years
    max_annual_rate_percent: float = 50.0

    # Export
    export_delimiter: str = ","
    export_filename: str = "emi-breakdown.csv"

    # Calculator reset values
    default_loan_amount: float = 100000
    default_interest_rate: float = 8.5
    default_loan_tenure: int = 12


settings = Settings()
