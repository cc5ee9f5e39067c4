from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    order: int = int(os.getenv("MARKOV_ORDER", 2))
    max_token_len: int = int(os.getenv("MAX_TOKEN_LEN", 99))
    max_words: int = int(os.getenv("MAX_WORDS", 10000))
    hash_buckets: int = int(os.getenv("HASH_BUCKETS", 4096))
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")
    api_key: str | None = os.getenv("API_KEY")
    api_base: str = os.getenv("API_BASE", "http://127.0.0.1:8000")

settings = Settings()
