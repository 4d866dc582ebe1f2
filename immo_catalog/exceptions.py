"""Custom exception hierarchy for immo-catalog."""


class CatalogError(Exception):
    """Base exception for all immo-catalog errors."""


class EntityNotFoundError(CatalogError):
    """Raised when a referenced entity does not exist."""


class ReferentialIntegrityError(EntityNotFoundError):
    """Raised when a neighborhood or amenity reference does not resolve."""


class InvalidEntityStateError(CatalogError):
    """Raised when an entity is in an invalid state for the operation."""


class CompareCapacityError(InvalidEntityStateError):
    """Raised when adding to a compare set that is already full."""


class GalleryClosedError(InvalidEntityStateError):
    """Raised when reading or navigating a gallery that is not open."""


class EmptyGalleryError(CatalogError, ValueError):
    """Raised when a gallery is opened without photos."""


class ConfigurationError(CatalogError):
    """Raised when configuration is invalid or missing."""
