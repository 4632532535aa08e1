"""配置管理模块"""

from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 加载环境变量
load_dotenv()


class ApiConfig(BaseSettings):
    """招聘后端API配置"""
    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    base_url: str = Field("http://localhost:8000/api", validation_alias="RECRUIT_API_BASE_URL")
    timeout: float = Field(30, validation_alias="RECRUIT_API_TIMEOUT")
    token: Optional[str] = Field(None, validation_alias="RECRUIT_API_TOKEN")
    jobs_path: str = Field("/recruitment/jobs/", validation_alias="RECRUIT_JOBS_PATH")
    upload_path: str = Field("/recruitment/upload-resume/", validation_alias="RECRUIT_UPLOAD_PATH")
    max_retries: int = Field(3, validation_alias="RECRUIT_API_MAX_RETRIES")


class SupabaseConfig(BaseSettings):
    """Supabase认证配置"""
    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    url: Optional[str] = Field(None, validation_alias="SUPABASE_URL")
    key: Optional[str] = Field(None, validation_alias="SUPABASE_KEY")
    redirect_url: Optional[str] = Field(None, validation_alias="SUPABASE_REDIRECT_URL")


class UploadConfig(BaseSettings):
    """简历上传配置"""
    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    max_size_mb: int = Field(10, validation_alias="MAX_RESUME_SIZE_MB")
    supported_mime_types: str = Field(
        "application/pdf,"
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document,"
        "image/jpeg",
        validation_alias="SUPPORTED_MIME_TYPES"
    )

    @property
    def supported_mime_types_list(self) -> List[str]:
        return [t.strip() for t in self.supported_mime_types.split(",") if t.strip()]


class AppConfig(BaseSettings):
    """应用配置"""
    model_config = SettingsConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field("Recruit Client", validation_alias="APP_NAME")
    version: str = Field("1.0.0", validation_alias="APP_VERSION")
    debug: bool = Field(False, validation_alias="DEBUG")
    log_level: str = Field("INFO", validation_alias="LOG_LEVEL")
    log_dir: str = Field("logs", validation_alias="LOG_DIR")
    log_to_file: bool = Field(True, validation_alias="LOG_TO_FILE")
    display_timezone: Optional[str] = Field(None, validation_alias="DISPLAY_TIMEZONE")


class Settings:
    """全局配置类"""

    def __init__(self):
        self.app = AppConfig()
        self.api = ApiConfig()
        self.supabase = SupabaseConfig()
        self.upload = UploadConfig()


# 全局配置实例
settings = Settings()


def get_settings() -> Settings:
    """获取配置实例"""
    return settings


def get_config() -> Settings:
    """获取配置实例(兼容别名)"""
    return settings
