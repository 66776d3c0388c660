"""Core constants: reserved representation tokens and request parameter names.

Single source of truth for literal values shared by the resolvers and the
HTTP shell. Parameter names are defaults; Settings may override them.
"""

# Representation tokens (exact, case-sensitive)
REPRESENTATION_REF = "ref"
REPRESENTATION_DEFAULT = "default"
REPRESENTATION_FULL = "full"
REPRESENTATION_CUSTOM_PREFIX = "custom:"

# Request parameters
REQUEST_PROPERTY_FOR_REPRESENTATION = "v"
REQUEST_PROPERTY_FOR_SEARCH_ID = "s"
REQUEST_PROPERTY_FOR_PURGE = "purge"
REQUEST_PROPERTY_FOR_REASON = "reason"

# Properties every representation of a delegate carries
PROPERTY_UUID = "uuid"
PROPERTY_DISPLAY = "display"
