"""textrazor-client — Python client for the TextRazor text analytics API."""

from textrazor_client.api import default_headers
from textrazor_client.client import TextRazorClient
from textrazor_client.config import VERSION
from textrazor_client.exceptions import (
    APIError,
    BodyEncodingError,
    BodyReadError,
    DecodeError,
    HTTPStatusError,
    RequestBuildError,
    ResponseError,
    SetupError,
    TextRazorError,
    TransportError,
    URIError,
    ValidationError,
)
from textrazor_client.models import (
    Account,
    Analysis,
    Category,
    CategoryList,
    Dictionary,
    DictionaryEntry,
    DictionaryEntryList,
    DictionaryList,
    EmptyResponse,
    Entailment,
    Entity,
    HTTPResponse,
    NounPhrase,
    Property,
    Relation,
    RelationParam,
    RelationType,
    ScoredCategory,
    Sentence,
    Topic,
    Word,
)
from textrazor_client.params import Params, RawBody, RequestBody
from textrazor_client.transport import UrllibTransport, default_transport

__all__ = [
    "VERSION",
    "TextRazorClient",
    "Params",
    "RawBody",
    "RequestBody",
    "UrllibTransport",
    "default_headers",
    "default_transport",
    "TextRazorError",
    "SetupError",
    "ValidationError",
    "URIError",
    "BodyEncodingError",
    "RequestBuildError",
    "TransportError",
    "BodyReadError",
    "ResponseError",
    "HTTPStatusError",
    "DecodeError",
    "APIError",
    "HTTPResponse",
    "Account",
    "Analysis",
    "Category",
    "CategoryList",
    "Dictionary",
    "DictionaryEntry",
    "DictionaryEntryList",
    "DictionaryList",
    "EmptyResponse",
    "Entailment",
    "Entity",
    "NounPhrase",
    "Property",
    "Relation",
    "RelationParam",
    "RelationType",
    "ScoredCategory",
    "Sentence",
    "Topic",
    "Word",
]
