from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 8080
    github_mcp_server_url: Optional[str] = None
    github_mcp_token: Optional[str] = None
    relay_timeout: float = 30.0
    backend_cors_origins: str = "http://localhost:8080"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "allow"

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins.split(",") if origin.strip()]

    @property
    def relay_enabled(self) -> bool:
        return bool(self.github_mcp_server_url)


def get_settings() -> Settings:
    return Settings()
