from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Supabase
    supabase_url: str
    supabase_service_role_key: str

    # API
    secret_api_key: str
    origin: str = "http://localhost:4000"  # Public URL, used for /uploads links
    port: int = 4000
    uploads_dir: str = "uploads"

    # Environment (development, test, production)
    node_env: str = "development"

    # Telegram: bot_name -> token, e.g. BOT_TOKENS='{"neuro_blogger_bot": "123:abc"}'
    bot_tokens: dict[str, str] = {}
    default_bot_name: str = "neuro_blogger_bot"
    admin_group_id: str = ""  # Optional: payment notifications for admins

    # Replicate
    replicate_api_token: str = ""
    replicate_webhook_url: str = ""

    # OpenAI (task extraction)
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"

    # 100ms (rooms)
    app_access_key: str = ""
    app_secret: str = ""

    # Inngest
    use_inngest: bool = True
    use_fallback: bool = False  # Run event bodies in-process instead of via Inngest
    inngest_app_id: str = "ai-server"
    inngest_event_key: str = ""

    @property
    def is_dev(self) -> bool:
        return self.node_env != "production"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
