"""lib_log_rich runtime initialization shared by every entry point.

Module code logs through ``logging.getLogger(__name__)``; this module
configures lib_log_rich from the ``[lib_log_rich]`` section once and bridges
the standard logging tree into it.
"""

from __future__ import annotations

from typing import Any, cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from resend_gateway import __init__conf__


class LoggingConfigModel(BaseModel):
    """Boundary model for the ``[lib_log_rich]`` section.

    Unknown keys are kept and forwarded to ``RuntimeConfig`` untouched.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(service="mailer").service
        'mailer'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section to a RuntimeConfig.

    ``service`` falls back to the package name.
    """
    section: Any = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, Any]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once per process.

    Loads ``.env`` files so ``LOG_*`` variables apply, starts the runtime and
    attaches std logging. Later calls return immediately.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
