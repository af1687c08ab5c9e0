"""
Business logic services.
"""
from imagegen.services.user_service import UserService, EmailAlreadyRegisteredError
from imagegen.services.credit_service import CreditService
from imagegen.services.image_service import ImageService, InsufficientCreditsError

__all__ = [
    "UserService",
    "EmailAlreadyRegisteredError",
    "CreditService",
    "ImageService",
    "InsufficientCreditsError",
]
