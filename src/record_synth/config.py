import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    indent: int = 4


def get_settings() -> Settings:
    indent = os.getenv("RECORD_SYNTH_INDENT", "4")
    try:
        indent_width = int(indent)
    except ValueError:
        raise ValueError(f"RECORD_SYNTH_INDENT must be an integer, got '{indent}'") from None
    if indent_width < 1:
        raise ValueError(f"RECORD_SYNTH_INDENT must be positive, got {indent_width}")
    return Settings(
        log_level=os.getenv("RECORD_SYNTH_LOG_LEVEL", "WARNING").upper(),
        indent=indent_width,
    )


def configure_logging(level: str | None = None) -> None:
    resolved = (level or get_settings().log_level).upper()
    if not isinstance(logging.getLevelName(resolved), int):
        raise ValueError(f"Unknown log level '{resolved}'")
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("record_synth").setLevel(resolved)
