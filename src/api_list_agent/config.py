from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    source_root: Path = Field(default=Path("."), alias="API_LIST_SOURCE_ROOT")
    output_file: Path = Field(default=Path("api-list.txt"), alias="API_LIST_OUTPUT_FILE")

    file_extension: str = Field(default=".java", alias="API_LIST_FILE_EXTENSION")
    encoding: str = Field(default="utf-8", alias="API_LIST_ENCODING")

    # None이면 ThreadPoolExecutor 기본값
    max_workers: int | None = Field(default=None, alias="API_LIST_MAX_WORKERS", ge=1)

settings = Settings()
