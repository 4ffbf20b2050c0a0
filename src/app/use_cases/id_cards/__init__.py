"""
ID Card Use Cases
"""

from .create_id_card_use_case import CreateIdCardUseCase
from .get_id_card_use_case import GetIdCardUseCase, ListIdCardsUseCase
from .update_id_card_use_case import UpdateIdCardUseCase
from .delete_id_card_use_case import DeleteIdCardUseCase
from .dtos import CreateIdCardCommand, IdCardResponse, UpdateIdCardCommand

__all__ = [
    # Use Cases
    "CreateIdCardUseCase",
    "GetIdCardUseCase",
    "ListIdCardsUseCase",
    "UpdateIdCardUseCase",
    "DeleteIdCardUseCase",
    # DTOs
    "CreateIdCardCommand",
    "UpdateIdCardCommand",
    "IdCardResponse",
]
