"""
TextRazorClient — public Python API for the TextRazor text analytics service.

One method per remote operation. Each method picks the verb, path, headers
and body, creates an empty result record and hands everything to
``api.dispatch``. Raises a TextRazorError subclass on failure.
"""

from __future__ import annotations

import urllib.parse

from textrazor_client import config
from textrazor_client.api import default_headers, dispatch
from textrazor_client.exceptions import SetupError, ValidationError
from textrazor_client.models import (
    Account,
    Analysis,
    Category,
    CategoryList,
    Dictionary,
    DictionaryEntry,
    DictionaryEntryList,
    DictionaryList,
    HTTPResponse,
)
from textrazor_client.params import Params, RawBody
from textrazor_client.transport import default_transport


def _escape(segment):
    """Path-escape an identifier so it stays a single path segment."""
    return urllib.parse.quote(str(segment), safe="")


def _paging(limit, offset):
    return "?" + Params({"limit": limit, "offset": offset}).encode()


class TextRazorClient:
    """Client for the TextRazor REST API.

    Configuration is fixed at construction; the client keeps no per-call
    state, so one instance may be shared as long as its transport can be.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        use_compression: bool | None = None,
        use_encryption: bool | None = None,
        endpoint: str | None = None,
        secure_endpoint: str | None = None,
        transport=None,
        timeout: float | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: TextRazor API key. Falls back to TEXTRAZOR_API_KEY.
            use_compression: Ask for gzip responses (default transport only).
            use_encryption: Use the https endpoint instead of the plain one.
            endpoint / secure_endpoint: Override the service URLs.
            transport: Object with ``open(request, timeout=None)``; built
                from ``use_compression`` when omitted.
            timeout: Seconds passed to the transport; None defers to it.
        """
        api_key = api_key if api_key is not None else config.API_KEY
        if not api_key:
            raise SetupError(
                "[SETUP_NEEDED] No TextRazor API key configured. "
                "Pass api_key or set TEXTRAZOR_API_KEY."
            )
        self._api_key = api_key
        self._use_compression = (
            config.USE_COMPRESSION if use_compression is None else use_compression
        )
        self._use_encryption = config.USE_ENCRYPTION if use_encryption is None else use_encryption
        self._endpoint = endpoint if endpoint is not None else config.ENDPOINT
        self._secure_endpoint = (
            secure_endpoint if secure_endpoint is not None else config.SECURE_ENDPOINT
        )
        self._transport = transport or default_transport(self._use_compression)
        self._timeout = timeout if timeout is not None else config.HTTP_TIMEOUT_SECONDS

    # -------------------------------------------------------------------
    # Read-only configuration
    # -------------------------------------------------------------------

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def use_compression(self) -> bool:
        return self._use_compression

    @property
    def use_encryption(self) -> bool:
        return self._use_encryption

    @property
    def endpoint(self) -> str:
        return self._endpoint

    @property
    def secure_endpoint(self) -> str:
        return self._secure_endpoint

    @property
    def transport(self):
        return self._transport

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def __repr__(self):
        return (
            f"TextRazorClient(use_encryption={self._use_encryption}, "
            f"use_compression={self._use_compression}, endpoint={self._endpoint!r}, "
            f"secure_endpoint={self._secure_endpoint!r})"
        )

    def _request(self, path, method, headers=None, body=None, response=None) -> HTTPResponse:
        return dispatch(self, path, method, headers=headers, body=body, response=response)

    # -------------------------------------------------------------------
    # Analysis
    # https://www.textrazor.com/docs/rest#analysis
    # -------------------------------------------------------------------

    def analyze(self, params: Params | None) -> Analysis:
        """Analyze either the 'text' or the web page at 'url' in *params*.

        Exactly one of 'text' / 'url' must be set, and at least one
        'extractors' value.
        """
        if params is None:
            params = Params()
        has_text = params.get("text") != ""
        has_url = params.get("url") != ""
        if has_text == has_url:
            raise ValidationError("[ERROR] Either 'url' or 'text' should be specified, not both.")
        if params.get("extractors") == "":
            raise ValidationError("[ERROR] At least one 'extractors' should be specified.")
        analysis = Analysis()
        self._request("/", "POST", default_headers(config.CONTENT_TYPE_FORM), params, analysis)
        return analysis

    def analyze_text(self, text: str, params: Params | None = None) -> Analysis:
        """Analyze *text*. Sets 'text' on *params* (created when None)."""
        if params is None:
            params = Params()
        params.set("text", text)
        return self.analyze(params)

    def analyze_url(self, url: str, params: Params | None = None) -> Analysis:
        """Download and analyze the page at *url*. Sets 'url' on *params*."""
        if params is None:
            params = Params()
        params.set("url", url)
        return self.analyze(params)

    # -------------------------------------------------------------------
    # Account
    # -------------------------------------------------------------------

    def get_account(self) -> Account:
        """Return plan and usage of the account owning the API key."""
        account = Account()
        self._request("/account/", "GET", response=account)
        return account

    # -------------------------------------------------------------------
    # Entity dictionaries
    # https://www.textrazor.com/docs/rest#Dictionary
    # -------------------------------------------------------------------

    def create_dictionary(self, dictionary: Dictionary) -> HTTPResponse:
        """Create (or replace) an entity dictionary from its definition."""
        return self._request(
            f"/entities/{_escape(dictionary.id)}",
            "PUT",
            default_headers(config.CONTENT_TYPE_JSON),
            dictionary,
        )

    def list_dictionaries(self) -> DictionaryList:
        """List every entity dictionary of the account."""
        dictionaries = DictionaryList()
        self._request("/entities/", "GET", response=dictionaries)
        return dictionaries

    def get_dictionary(self, dictionary_id: str) -> Dictionary:
        """Get one entity dictionary definition."""
        dictionary = Dictionary()
        self._request(f"/entities/{_escape(dictionary_id)}", "GET", response=dictionary)
        return dictionary

    def delete_dictionary(self, dictionary_id: str) -> HTTPResponse:
        """Delete an entity dictionary and all of its entries."""
        return self._request(f"/entities/{_escape(dictionary_id)}", "DELETE")

    def add_dictionary_entries(
        self, dictionary_id: str, entries: list[DictionaryEntry]
    ) -> HTTPResponse:
        """Add entries to an entity dictionary."""
        return self._request(
            f"/entities/{_escape(dictionary_id)}/",
            "POST",
            default_headers(config.CONTENT_TYPE_JSON),
            DictionaryEntryList(entries=list(entries)),
        )

    def add_dictionary_entry(self, dictionary_id: str, entry: DictionaryEntry) -> HTTPResponse:
        """Add a single entry to an entity dictionary."""
        return self.add_dictionary_entries(dictionary_id, [entry])

    def get_dictionary_entries(
        self, dictionary_id: str, limit: int = 20, offset: int = 0
    ) -> DictionaryEntryList:
        """List entries of an entity dictionary (paginated)."""
        entries = DictionaryEntryList()
        self._request(
            f"/entities/{_escape(dictionary_id)}/_all{_paging(limit, offset)}",
            "GET",
            response=entries,
        )
        return entries

    def get_dictionary_entry(self, dictionary_id: str, entry_id: str) -> DictionaryEntry:
        """Get one entry of an entity dictionary."""
        entry = DictionaryEntry()
        self._request(
            f"/entities/{_escape(dictionary_id)}/{_escape(entry_id)}", "GET", response=entry
        )
        return entry

    def delete_dictionary_entry(self, dictionary_id: str, entry_id: str) -> HTTPResponse:
        """Delete one entry of an entity dictionary."""
        return self._request(f"/entities/{_escape(dictionary_id)}/{_escape(entry_id)}", "DELETE")

    # -------------------------------------------------------------------
    # Classifiers
    # https://www.textrazor.com/docs/rest#Classifier
    # -------------------------------------------------------------------

    def create_classifier(self, classifier_id: str, categories: list[Category]) -> HTTPResponse:
        """Create (or replace) a classifier from Category records."""
        return self._request(
            f"/categories/{_escape(classifier_id)}",
            "PUT",
            default_headers(config.CONTENT_TYPE_JSON),
            CategoryList(categories=list(categories)),
        )

    def create_classifier_from_json(self, classifier_id: str, json_str: str) -> HTTPResponse:
        """Create (or replace) a classifier from a JSON category array."""
        return self._request(
            f"/categories/{_escape(classifier_id)}",
            "PUT",
            default_headers(config.CONTENT_TYPE_JSON),
            RawBody(json_str),
        )

    def create_classifier_from_csv(self, classifier_id: str, csv_str: str) -> HTTPResponse:
        """Create (or replace) a classifier from CSV rows (id,label,query)."""
        return self._request(
            f"/categories/{_escape(classifier_id)}",
            "PUT",
            default_headers(config.CONTENT_TYPE_CSV),
            RawBody(csv_str),
        )

    def delete_classifier(self, classifier_id: str) -> HTTPResponse:
        """Delete a classifier and all of its categories."""
        return self._request(f"/categories/{_escape(classifier_id)}", "DELETE")

    def get_classifier_categories(
        self, classifier_id: str, limit: int = 20, offset: int = 0
    ) -> CategoryList:
        """List categories of a classifier (paginated)."""
        categories = CategoryList()
        self._request(
            f"/categories/{_escape(classifier_id)}/_all{_paging(limit, offset)}",
            "GET",
            response=categories,
        )
        return categories

    def get_classifier_category(self, classifier_id: str, category_id: str) -> Category:
        """Get one category of a classifier."""
        category = Category()
        self._request(
            f"/categories/{_escape(classifier_id)}/{_escape(category_id)}",
            "GET",
            response=category,
        )
        return category

    def delete_classifier_category(self, classifier_id: str, category_id: str) -> HTTPResponse:
        """Delete one category of a classifier."""
        return self._request(
            f"/categories/{_escape(classifier_id)}/{_escape(category_id)}", "DELETE"
        )
