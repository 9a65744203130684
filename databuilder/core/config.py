from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "databuilder"
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    # Storage placement applied to entities that don't override it
    couchbase_bucket: str = "general"
    couchbase_scope: str = "general"
    use_type_discriminator: bool = False

settings = Settings()
