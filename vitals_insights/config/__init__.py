from vitals_insights.config.config_manager import ConfigManager, configure_logging

__all__ = ['ConfigManager', 'configure_logging']
