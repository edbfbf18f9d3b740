"""
Typed models for TextRazor responses and request payloads.

Every response shares one JSON envelope::

    {"ok": bool, "error": str, "message": str, "time": float, "response": {...}}

``HTTPResponse`` holds the envelope plus the raw transport metadata. Result
records (``Analysis``, ``Account``, ``Dictionary``, ...) hold the inner
payload of one operation and a back-reference to their ``HTTPResponse``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# JSON field plumbing
# ---------------------------------------------------------------------------


def _field(key, default=None, *, kind=None, item=None):
    """Declare a dataclass field read from / written to JSON key *key*."""
    metadata = {"json": key}
    if kind is not None:
        metadata["kind"] = kind
    if item is not None:
        metadata["item"] = item
    if kind == "list":
        return field(default_factory=list, metadata=metadata)
    if kind == "dict":
        return field(default_factory=dict, metadata=metadata)
    return field(default=default, metadata=metadata)


def _convert(f, value, owner):
    kind = f.metadata.get("kind")
    if kind == "list":
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError(
                f"{owner}.{f.name}: expected JSON array, got {type(value).__name__}"
            )
        item = f.metadata.get("item")
        if item is None:
            return list(value)
        return [item.from_json(v) for v in value]
    if kind == "dict":
        if value is None:
            return {}
        if not isinstance(value, dict):
            raise ValueError(
                f"{owner}.{f.name}: expected JSON object, got {type(value).__name__}"
            )
        return dict(value)
    expected = _SCALAR_TYPES.get(f.type)
    if expected is None:
        return value
    # JSON null leaves the field at its default.
    if value is None:
        return f.default
    if isinstance(value, bool) and bool not in expected:
        expected = ()
    if not isinstance(value, expected):
        raise ValueError(f"{owner}.{f.name}: expected {f.type}, got {type(value).__name__}")
    return value


# Annotation strings (``from __future__ import annotations``) of checked scalars.
_SCALAR_TYPES = {
    "str": (str,),
    "bool": (bool,),
    "int": (int,),
    "int | None": (int,),
    "float": (int, float),
}


def _render(value):
    if isinstance(value, _JSONRecord):
        return value.to_json()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_render(v) for v in value]
    if isinstance(value, dict):
        return {k: _render(v) for k, v in value.items()}
    return value


class _JSONRecord:
    """Mixin mapping dataclass fields to the service's camelCase JSON keys."""

    def update_from_json(self, data):
        """Populate fields in place from a decoded JSON object."""
        if data is None:
            return self
        if not isinstance(data, dict):
            raise ValueError(
                f"{type(self).__name__}: expected JSON object, got {type(data).__name__}"
            )
        for f in fields(self):
            key = f.metadata.get("json")
            if key is None or key not in data:
                continue
            setattr(self, f.name, _convert(f, data[key], type(self).__name__))
        return self

    @classmethod
    def from_json(cls, data):
        return cls().update_from_json(data)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON-keyed dict form of this record."""
        return {
            f.metadata["json"]: _render(getattr(self, f.name))
            for f in fields(self)
            if "json" in f.metadata
        }


@dataclass
class _Result(_JSONRecord):
    """Base for records returned by a client call.

    ``http_response`` is bound once, by the dispatcher, to the exchange that
    produced the record.
    """

    http_response: HTTPResponse | None = field(
        default=None, repr=False, compare=False, kw_only=True
    )

    def set_http_response(self, http_response):
        if self.http_response is not None and self.http_response is not http_response:
            raise RuntimeError(f"{type(self).__name__} is already bound to a response")
        self.http_response = http_response

    def load_envelope(self, document):
        """Read this record's payload out of a decoded envelope."""
        self.update_from_json(document.get("response"))


# ---------------------------------------------------------------------------
# Analysis building blocks
# https://www.textrazor.com/docs/rest#TextRazorResponse
# ---------------------------------------------------------------------------


class RelationType(str, Enum):
    """Role of a RelationParam within its Relation."""

    SUBJECT = "SUBJECT"
    OBJECT = "OBJECT"
    OTHER = "OTHER"


@dataclass
class Entity(_JSONRecord):
    id: int | None = _field("id")
    entity_id: str = _field("entityId", "")
    entity_english_id: str = _field("entityEnglishId", "")
    custom_entity_id: str = _field("customEntityId", "")
    confidence_score: float = _field("confidenceScore", 0.0)
    relevance_score: float = _field("relevanceScore", 0.0)
    types: list[str] = _field("type", kind="list")
    freebase_types: list[str] = _field("freebaseTypes", kind="list")
    freebase_id: str = _field("freebaseId", "")
    wikidata_id: str = _field("wikidataId", "")
    wiki_link: str = _field("wikiLink", "")
    matching_tokens: list[int] = _field("matchingTokens", kind="list")
    matched_text: str = _field("matchedText", "")
    starting_pos: int | None = _field("startingPos")
    ending_pos: int | None = _field("endingPos")
    data: dict[str, Any] = _field("data", kind="dict")


@dataclass
class Topic(_JSONRecord):
    id: int | None = _field("id")
    label: str = _field("label", "")
    score: float = _field("score", 0.0)
    wiki_link: str = _field("wikiLink", "")
    wikidata_id: str = _field("wikidataId", "")


@dataclass
class ScoredCategory(_JSONRecord):
    category_id: str = _field("categoryId", "")
    label: str = _field("label", "")
    score: float = _field("score", 0.0)
    classifier_id: str = _field("classifierId", "")


@dataclass
class Entailment(_JSONRecord):
    id: int | None = _field("id")
    context_score: float = _field("contextScore", 0.0)
    prior_score: float = _field("priorScore", 0.0)
    score: float = _field("score", 0.0)
    entailed_tree: dict[str, Any] = _field("entailedTree", kind="dict")
    word_positions: list[int] = _field("wordPositions", kind="list")


@dataclass
class RelationParam(_JSONRecord):
    relation: str = _field("relation", "")
    word_positions: list[int] = _field("wordPositions", kind="list")


@dataclass
class Relation(_JSONRecord):
    id: int | None = _field("id")
    params: list[RelationParam] = _field("params", kind="list", item=RelationParam)
    word_positions: list[int] = _field("wordPositions", kind="list")


@dataclass
class NounPhrase(_JSONRecord):
    id: int | None = _field("id")
    word_positions: list[int] = _field("wordPositions", kind="list")


@dataclass
class Property(_JSONRecord):
    id: int | None = _field("id")
    word_positions: list[int] = _field("wordPositions", kind="list")
    property_positions: list[int] = _field("propertyPositions", kind="list")


@dataclass
class Word(_JSONRecord):
    position: int | None = _field("position")
    starting_pos: int | None = _field("startingPos")
    ending_pos: int | None = _field("endingPos")
    token: str = _field("token", "")
    stem: str = _field("stem", "")
    lemma: str = _field("lemma", "")
    part_of_speech: str = _field("partOfSpeech", "")
    parent_position: int | None = _field("parentPosition")
    relation_to_parent: str = _field("relationToParent", "")
    # Each entry maps a Wordnet sense / spelling suggestion to its score.
    senses: list[dict[str, float]] = _field("senses", kind="list")
    spelling_suggestions: list[dict[str, float]] = _field("spellingSuggestions", kind="list")


@dataclass
class Sentence(_JSONRecord):
    position: int | None = _field("position")
    words: list[Word] = _field("words", kind="list", item=Word)


@dataclass
class Analysis(_Result):
    """Result of an analysis call."""

    language: str = _field("language", "")
    language_is_reliable: bool = _field("languageIsReliable", False)
    custom_annotation_output: str = _field("customAnnotationOutput", "")
    cleaned_text: str = _field("cleanedText", "")
    raw_text: str = _field("rawText", "")
    entailments: list[Entailment] = _field("entailments", kind="list", item=Entailment)
    entities: list[Entity] = _field("entities", kind="list", item=Entity)
    topics: list[Topic] = _field("topics", kind="list", item=Topic)
    coarse_topics: list[Topic] = _field("coarseTopics", kind="list", item=Topic)
    categories: list[ScoredCategory] = _field("categories", kind="list", item=ScoredCategory)
    noun_phrases: list[NounPhrase] = _field("nounPhrases", kind="list", item=NounPhrase)
    properties: list[Property] = _field("properties", kind="list", item=Property)
    relations: list[Relation] = _field("relations", kind="list", item=Relation)
    sentences: list[Sentence] = _field("sentences", kind="list", item=Sentence)
    matching_rules: list[str] = _field("matchingRules", kind="list")


# ---------------------------------------------------------------------------
# Account, dictionaries, classifiers
# ---------------------------------------------------------------------------


@dataclass
class Account(_Result):
    plan: str = _field("plan", "")
    concurrent_request_limit: int = _field("concurrentRequestLimit", 0)
    concurrent_requests_used: int = _field("concurrentRequestsUsed", 0)
    # Documented as planDailyIncludedRequests, sent as planDailyRequestsIncluded.
    plan_daily_included_requests: int = _field("planDailyRequestsIncluded", 0)
    requests_used_today: int = _field("requestsUsedToday", 0)


@dataclass
class Dictionary(_Result):
    """Custom entity dictionary definition."""

    id: str = _field("id", "")
    match_type: str = _field("matchType", "")
    case_insensitive: bool = _field("caseInsensitive", False)
    language: str = _field("language", "")

    def encode(self) -> str:
        return json.dumps(self.to_json())


@dataclass
class DictionaryList(_Result):
    """Result of listing dictionaries.

    The service returns these as a top-level "dictionaries" array instead of
    a nested "response" object.
    """

    dictionaries: list[Dictionary] = _field("dictionaries", kind="list", item=Dictionary)

    def load_envelope(self, document):
        self.update_from_json({"dictionaries": document.get("dictionaries")})


@dataclass
class DictionaryEntry(_Result):
    id: str = _field("id", "")
    text: str = _field("text", "")
    data: dict[str, Any] = _field("data", kind="dict")


@dataclass
class DictionaryEntryList(_Result):
    offset: int = _field("offset", 0)
    limit: int = _field("limit", 0)
    total: int = _field("total", 0)
    entries: list[DictionaryEntry] = _field("entries", kind="list", item=DictionaryEntry)

    def encode(self) -> str:
        """Render the entries as the JSON array expected by the add-entries call."""
        return json.dumps([entry.to_json() for entry in self.entries])


@dataclass
class Category(_Result):
    category_id: str = _field("categoryId", "")
    label: str = _field("label", "")
    query: str = _field("query", "")


@dataclass
class CategoryList(_Result):
    id: str = _field("id", "")
    offset: int = _field("offset", 0)
    limit: int = _field("limit", 0)
    total: int = _field("total", 0)
    last_updated: int | None = _field("lastUpdated")
    categories: list[Category] = _field("categories", kind="list", item=Category)

    def encode(self) -> str:
        return json.dumps([category.to_json() for category in self.categories])


@dataclass
class EmptyResponse(_Result):
    """Placeholder for calls whose envelope carries no payload."""


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


@dataclass
class HTTPResponse:
    """One request/response exchange: transport metadata plus the decoded envelope."""

    status: int
    headers: Any = field(default_factory=dict)
    body: bytes = b""
    time: float = 0.0
    ok: bool = False
    error: str = ""
    message: str = ""
    response: _Result | None = field(default=None, repr=False)
    dictionaries: list[Dictionary] = field(default_factory=list)

    def parse_body(self):
        """Decode ``body`` into the envelope fields and the bound result.

        Raises ValueError if the body is not a well-formed envelope.
        """
        document = json.loads(self.body)
        if not isinstance(document, dict):
            raise ValueError(f"expected JSON object envelope, got {type(document).__name__}")

        ok = document.get("ok")
        if ok is None:
            ok = False
        if not isinstance(ok, bool):
            raise ValueError(f"'ok' must be a boolean, got {type(ok).__name__}")
        elapsed = document.get("time") or 0.0
        if isinstance(elapsed, bool) or not isinstance(elapsed, (int, float)):
            raise ValueError(f"'time' must be a number, got {type(elapsed).__name__}")

        for key in ("error", "message"):
            text = document.get(key)
            if text is not None and not isinstance(text, str):
                raise ValueError(f"'{key}' must be a string, got {type(text).__name__}")

        self.ok = ok
        self.time = float(elapsed)
        self.error = document.get("error") or ""
        self.message = document.get("message") or ""

        dictionaries = document.get("dictionaries")
        if dictionaries is None:
            dictionaries = []
        if not isinstance(dictionaries, list):
            raise ValueError("'dictionaries' must be a JSON array")
        self.dictionaries = [Dictionary.from_json(d) for d in dictionaries]

        if self.response is not None:
            self.response.load_envelope(document)
        return self
