from user_settings.infrastructure.serialization.xml_serializer import XmlSettingsSerializer

__all__ = ["XmlSettingsSerializer"]
