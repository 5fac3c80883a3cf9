from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Auth configuration
	jwt_secret_key: str = Field(default="change-me", validation_alias="JWT_SECRET_KEY")
	jwt_algorithm: str = Field(default="HS256", validation_alias="JWT_ALGORITHM")
	access_token_expire_minutes: int = Field(default=120, validation_alias="ACCESS_TOKEN_EXPIRE_MINUTES")
	# Seed user
	seed_username: str | None = Field(default=None, validation_alias="SEED_USERNAME")
	seed_password_plain: str | None = Field(default=None, validation_alias="SEED_PASSWORD")
	# Auth sessions idle for longer than this are purged
	session_retention_days: int = Field(default=7, validation_alias="SESSION_RETENTION_DAYS")

	# Contest calendar (IST by default; weekday uses Python numbering, 6 = Sunday)
	contest_utc_offset_minutes: int = Field(default=330, validation_alias="CONTEST_UTC_OFFSET_MINUTES")
	contest_weekday: int = Field(default=6, ge=0, le=6, validation_alias="CONTEST_WEEKDAY")
	contest_start_time: str = Field(default="20:00", validation_alias="CONTEST_START_TIME")
	contest_duration_minutes: int = Field(default=70, gt=0, validation_alias="CONTEST_DURATION_MINUTES")

	# Rating
	default_contest_rating: int = Field(default=1000, validation_alias="DEFAULT_CONTEST_RATING")
	min_contest_rating: int = Field(default=500, validation_alias="MIN_CONTEST_RATING")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
