"""Configuration package.

Import from ``leaguetable.config.settings`` directly where needed.
"""

__all__: list[str] = []
