from .accounts import AccountsService
from .auth import AuthService
from .authority_hints import AuthorityHintsService
from .entity_statement import EntityStatementService
from .keys import KeysService
from .metadata import MetadataService
from .subordinates import SubordinatesService
from .system import SystemService
from .trust_marks import ReceivedTrustMarksService, TrustMarksService, TrustMarkTypesService

__all__ = [
    "AccountsService",
    "AuthService",
    "AuthorityHintsService",
    "EntityStatementService",
    "KeysService",
    "MetadataService",
    "ReceivedTrustMarksService",
    "SubordinatesService",
    "SystemService",
    "TrustMarkTypesService",
    "TrustMarksService",
]
