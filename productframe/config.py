from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "ProductFrame API"
    env: str = "local"
    log_level: str = "INFO"

    output_path: str = "./result.png"
    strict_resize: bool = False  # fail instead of producing a zero-area product

    max_upload_bytes: int = 20 * 1024 * 1024
    max_image_pixels: int | None = 80_000_000

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


settings = Settings()
