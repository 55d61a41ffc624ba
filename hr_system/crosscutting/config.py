"""
===============================================================================
TARJETA CRC — hr_system/crosscutting/config.py (Settings)
===============================================================================

Responsabilidades:
  - Leer y validar la configuración desde variables de entorno / `.env`.
  - Fallar al arrancar si producción queda con secretos débiles o sin
    password por defecto para el alta de cuentas.
  - Exponer helpers derivados (orígenes CORS, TTL en segundos, entorno).

Colaboradores:
  - container.py: construye adapters y servicios con estos valores.
  - api/main.py: CORS, pool, logging y nivel de detalle de errores.

Restricciones:
  - Inmutable (frozen) y singleton vía get_settings().
  - Dominio, identidad y casos de uso NO importan este módulo: reciben
    valores por constructor.
===============================================================================
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_WEAK_SECRETS = frozenset({"dev-secret", "changeme", "change-me", "secret", "password"})
_MIN_SECRET_LENGTH = 32


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # --- Entorno / HTTP ---
    app_env: str = Field(
        default="development",
        description="development | test | testing | ci | integration | production",
    )
    allowed_origins: str = Field(
        default="http://localhost:3000", description="Orígenes CORS separados por coma"
    )
    log_level: str = "INFO"
    log_json: bool = Field(default=True, description="False = texto plano local")

    # --- PostgreSQL ---
    database_url: str
    db_pool_min_size: int = Field(default=2, ge=1)
    db_pool_max_size: int = Field(default=10, ge=1)
    db_statement_timeout_ms: int = Field(
        default=30_000, ge=0, description="Deadline por sentencia; 0 lo desactiva"
    )

    # --- Redis (sesiones + perfiles) ---
    redis_url: str = "redis://localhost:6379/0"
    redis_socket_timeout_seconds: float = Field(default=2.0, gt=0)

    # --- Tokens de acceso ---
    jwt_secret: str = "dev-secret"
    jwt_issuer: str = "hr-system"
    jwt_access_ttl_minutes: int = Field(
        default=24 * 60, ge=1, description="Vida del token y de la sesión en cache"
    )

    # --- Cuentas ---
    default_password: str = Field(
        default="", description="Password inicial cuando el alta no trae uno"
    )
    profile_cache_ttl_seconds: int = Field(default=3600, ge=1)

    @model_validator(mode="after")
    def _check_pool_bounds(self) -> "Settings":
        if self.db_pool_min_size > self.db_pool_max_size:
            raise ValueError(
                f"DB_POOL_MIN_SIZE ({self.db_pool_min_size}) must not exceed "
                f"DB_POOL_MAX_SIZE ({self.db_pool_max_size})"
            )
        return self

    @model_validator(mode="after")
    def _check_production_secrets(self) -> "Settings":
        if not self.is_production():
            return self

        secret = self.jwt_secret.strip()
        if secret.lower() in _WEAK_SECRETS or len(secret) < _MIN_SECRET_LENGTH:
            raise ValueError(
                f"JWT_SECRET must be a non-default value of at least "
                f"{_MIN_SECRET_LENGTH} characters in production"
            )
        if not self.default_password.strip():
            raise ValueError("DEFAULT_PASSWORD must be set in production")
        return self

    # --- Derivados ---
    def get_allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    def _env(self) -> str:
        return self.app_env.strip().lower()

    def is_production(self) -> bool:
        return self._env() == "production"

    def is_test(self) -> bool:
        """test / testing / ci => adapters in-memory (sin Postgres ni Redis)."""
        return self._env() in {"test", "testing", "ci"}

    @property
    def jwt_access_ttl_seconds(self) -> int:
        return self.jwt_access_ttl_minutes * 60


@lru_cache
def get_settings() -> Settings:
    """Singleton; levanta ValidationError si falta DATABASE_URL o hay valores inválidos."""
    return Settings()
