from jproperties import Properties
from pydantic import BaseModel

from .base import DEFAULT_API_URL


class SendGridSettings(BaseModel):
    api_key: str
    api_url: str = DEFAULT_API_URL


def get_property_value(property_name, properties_path, default=None):
    configs = Properties()
    with open(properties_path, 'rb') as config_file:
        configs.load(config_file)
    prop = configs.get(property_name)
    return prop.data if prop is not None else default


def load_settings(properties_path) -> SendGridSettings:
    """
    Reads SENDGRID_API_KEY and SENDGRID_API_URL from a .properties file.

    :param properties_path: path of the .properties file
    :return: SendGridSettings
    """
    api_key = get_property_value("SENDGRID_API_KEY", properties_path, "").strip()
    if not api_key:
        raise ValueError(f"SENDGRID_API_KEY is not set in {properties_path}")

    api_url = get_property_value("SENDGRID_API_URL", properties_path, "").strip()
    if api_url:
        return SendGridSettings(api_key=api_key, api_url=api_url)
    return SendGridSettings(api_key=api_key)
