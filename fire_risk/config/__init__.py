from fire_risk.config.config import Config, config

__all__ = ["Config", "config"]
