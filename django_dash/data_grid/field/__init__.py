from .field_definition import FieldDefinition
from .user_profile_link_field_definition import UserProfileLinkFieldDefinition

__all__ = ["FieldDefinition", "UserProfileLinkFieldDefinition"]
