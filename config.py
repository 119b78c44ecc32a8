# config.py
"""
Environment-derived settings for the checkout relay.

Values are read once at startup (see main.create_app) and passed down;
nothing else in the application reads os.environ directly.
"""
import os
from typing import Literal
from urllib.parse import quote_plus

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_CHECKOUT_API_URL = "https://payments.yoco.com/api/checkouts"


def _database_url_from_parts() -> str:
     """Build the MS SQL Server URL from DB_* variables (same layout as alembic/env.py)."""
     safe_user = quote_plus(os.getenv("DB_USER") or "")
     safe_pass = quote_plus(os.getenv("DB_PASS") or "")
     server = os.getenv("DB_SERVER")
     port = os.getenv("DB_PORT", "1433")
     name = os.getenv("DB_NAME")
     return f"mssql+pymssql://{safe_user}:{safe_pass}@{server}:{port}/{name}"


class Settings(BaseModel):
     frontend_url: str = "http://localhost:5173"
     payment_secret_key: str = ""
     checkout_api_url: str = DEFAULT_CHECKOUT_API_URL
     cors_origin: str = ""
     database_url: str = "sqlite:///./checkouts.db"
     store_failure_policy: Literal["escalate", "log"] = "escalate"
     log_level: str = "INFO"
     port: int = Field(default=3000, gt=0)
     sql_echo: bool = False

     @field_validator("frontend_url")
     @classmethod
     def _strip_trailing_slash(cls, value: str) -> str:
          return value.rstrip("/")

     def model_post_init(self, __context) -> None:
          # CORS is pinned to the frontend unless told otherwise
          if not self.cors_origin:
               self.cors_origin = self.frontend_url

     @classmethod
     def from_env(cls) -> "Settings":
          load_dotenv()
          values = {"sql_echo": os.getenv("SQL_ECHO", "false").lower() == "true"}
          if os.getenv("DATABASE_URL"):
               values["database_url"] = os.getenv("DATABASE_URL")
          elif os.getenv("DB_SERVER"):
               values["database_url"] = _database_url_from_parts()
          env_map = {
               "frontend_url": "FRONTEND_URL",
               "payment_secret_key": "PAYMENT_SECRET_KEY",
               "checkout_api_url": "PAYMENT_CHECKOUT_URL",
               "cors_origin": "CORS_ORIGIN",
               "store_failure_policy": "STORE_FAILURE_POLICY",
               "log_level": "LOG_LEVEL",
               "port": "PORT",
          }
          for field, var in env_map.items():
               raw = os.getenv(var)
               if raw:
                    values[field] = raw.strip()
          return cls(**values)
