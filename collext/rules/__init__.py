from collext.rules.loader import load_rules
from collext.rules.models import (
    LoggingRules,
    PluckRules,
    Rules,
    TemplateRules,
    UuidRules,
)

__all__ = [
    "load_rules",
    "Rules",
    "TemplateRules",
    "PluckRules",
    "UuidRules",
    "LoggingRules",
]
