"""Model classes for localconfig."""

from model.config_item import ConfigItem
from model.configuration import Configuration
from model.subject import Subject, Subscription
from model.serializers import (
    configuration_from_dict,
    configuration_to_dict,
    items_from_mapping,
)

__all__ = [
    "ConfigItem",
    "Configuration",
    "Subject",
    "Subscription",
    "configuration_from_dict",
    "configuration_to_dict",
    "items_from_mapping",
]
