from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    # Close the gap where a patron could borrow past max_borrow_items.
    # Turn off to reproduce the permissive legacy behaviour.
    enforce_borrow_limit: bool = True

    # Only used by the demo driver, the engine never configures logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LIBLEDGER_", env_file=".env", extra="ignore", case_sensitive=False
    )
