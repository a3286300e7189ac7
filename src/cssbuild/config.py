from __future__ import annotations

import os
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class CssBuildConfig:
    log_level: str = "WARNING"
    part_separator: str = "="  # splits "category=value" tokens
    combinator_prefix: str = "combinator"

    @classmethod
    def from_env(cls) -> CssBuildConfig:
        config = cls()
        level = os.environ.get("CSSBUILD_LOG_LEVEL")
        if level:
            config = replace(config, log_level=level.upper())
        return config
