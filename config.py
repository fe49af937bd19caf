from pydantic import PrivateAttr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "case-chain"
    debug: bool = False

    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = {
        "env_prefix": "CASE_CHAIN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    _effective_log_level: str = PrivateAttr(default="INFO")

    def model_post_init(self, __context: object) -> None:
        level = "DEBUG" if self.debug else self.log_level.upper()
        object.__setattr__(self, "_effective_log_level", level)

    @property
    def effective_log_level(self) -> str:
        return self._effective_log_level


settings = Settings()
