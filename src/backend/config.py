import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from chess_path.config import SearchConfig

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"


class BackendConfig(BaseModel):
    """Settings for serving path searches over HTTP."""
    host: str = "0.0.0.0"
    port: int = Field(8000, gt=0)
    debug: bool = False
    log_level: Optional[str] = None

    # Browser frontends allowed to call the API
    cors_origins: List[str] = Field(default_factory=lambda: DEFAULT_CORS_ORIGINS.split(","))

    # A request holds its connection for the whole search, so HTTP searches are always bounded
    search_timeout_seconds: float = Field(60.0, gt=0)

    def search_config(self, base: SearchConfig) -> SearchConfig:
        """Apply the HTTP search timeout unless `base` already sets one."""
        if base.search_timeout_seconds is not None:
            return base
        return base.model_copy(update={"search_timeout_seconds": self.search_timeout_seconds})

    @classmethod
    def from_env(cls) -> "BackendConfig":
        """Create config from CHESS_PATH_API_* environment variables."""
        origins = os.getenv("CHESS_PATH_API_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        return cls(
            host=os.getenv("CHESS_PATH_API_HOST", "0.0.0.0"),
            port=int(os.getenv("CHESS_PATH_API_PORT", "8000")),
            debug=os.getenv("CHESS_PATH_API_DEBUG", "false").lower() == "true",
            log_level=os.getenv("CHESS_PATH_API_LOG_LEVEL") or None,
            cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
            search_timeout_seconds=float(os.getenv("CHESS_PATH_API_SEARCH_TIMEOUT", "60")),
        )


config = BackendConfig.from_env()
