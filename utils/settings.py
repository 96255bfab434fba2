from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="BERLIN_CLOCK_", extra="ignore")

    lit_glyph: str = "Y"
    unlit_glyph: str = "O"
    red_glyph: str = "R"
    mark_red_lamps: bool = False

    log_level: str = "WARNING"
    debug: bool = False
