"""Typed REST client layer shared by all Watson services."""

from clarety.watson.client import ErrorPolicy as ErrorPolicy
from clarety.watson.client import RestClient as RestClient
from clarety.watson.endpoint import Endpoint as Endpoint
from clarety.watson.errors import DecodingError as DecodingError
from clarety.watson.errors import EncodingError as EncodingError
from clarety.watson.errors import SerializationError as SerializationError
from clarety.watson.errors import ServiceError as ServiceError
from clarety.watson.errors import TransportError as TransportError
from clarety.watson.errors import WatsonError as WatsonError
from clarety.watson.result import Result as Result
from clarety.watson.service import WatsonService as WatsonService
