"""Driver configuration."""

import os
from typing import Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))

ENV_PREFIX = "uniregistrar_driver_did_web_"


class DriverSettings(BaseSettings):
    """Driver settings sourced from the environment.

    Only used when the host does not hand the driver an explicit
    properties mapping.
    """

    model_config = SettingsConfigDict(env_prefix=ENV_PREFIX, extra="ignore")

    baseUrl: Union[str, None] = None
    basePath: Union[str, None] = None

    def to_properties(self) -> dict:
        """Return the non empty settings as a driver properties mapping."""
        return {key: value for key, value in self.model_dump().items() if value}
