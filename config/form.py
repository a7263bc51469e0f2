import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class FormConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    welcome_path: str = "/welcome"
    name_param: str = "name"
    failure_notice: str = "Form submission failed. Please try again."
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "WARNING"

    @classmethod
    def from_env(cls) -> "FormConfig":
        defaults = cls()
        return cls(
            welcome_path=os.environ.get("REGISTRATION_WELCOME_PATH", defaults.welcome_path),
            name_param=os.environ.get("REGISTRATION_NAME_PARAM", defaults.name_param),
            failure_notice=os.environ.get(
                "REGISTRATION_FAILURE_NOTICE", defaults.failure_notice
            ),
            log_level=os.environ.get("REGISTRATION_LOG_LEVEL", defaults.log_level).upper(),
        )
