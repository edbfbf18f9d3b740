"""MCP server exposing TextRazorClient methods as tools.

Run: py -m textrazor_client.mcp_server
Requires: py -m pip install .[mcp]
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from textrazor_client import config
from textrazor_client.client import TextRazorClient
from textrazor_client.exceptions import SetupError, TextRazorError, ValidationError
from textrazor_client.params import Params

mcp = FastMCP(
    "textrazor",
    instructions=(
        "TextRazor text analytics tools. "
        "Analysis needs at least one extractor, e.g. entities, topics, words, "
        "phrases, dependency-trees, relations, entailments, senses, spelling. "
        "Each tool call costs one TextRazor request against the daily quota."
    ),
)

_client: TextRazorClient | None = None


def _get_client() -> TextRazorClient:
    """Return a cached TextRazorClient, creating one on first use."""
    global _client
    if _client is None:
        _client = TextRazorClient()
    return _client


def _contract_error(message: str, error_type: str = "error") -> dict:
    """Return a stable MCP error envelope with legacy compatibility fields."""
    return {
        "ok": False,
        "schema_version": config.CONTRACT_SCHEMA_VERSION,
        "type": error_type,  # legacy
        "error": message,  # legacy
        "error_detail": {
            "type": error_type,
            "message": message,
        },
    }


def _finalize_tool_result(result: dict) -> dict:
    """Add contract metadata; wrap successes when MCP_RESPONSE_MODE=envelope."""
    if result.get("ok") is False:
        return result
    if config.MCP_RESPONSE_MODE == "envelope":
        return {
            "ok": True,
            "schema_version": config.CONTRACT_SCHEMA_VERSION,
            "data": result,
        }
    out = dict(result)
    out.setdefault("ok", True)
    out.setdefault("schema_version", config.CONTRACT_SCHEMA_VERSION)
    return out


_ALLOWED_METHODS = {
    "analyze",
    "get_account",
    "list_dictionaries",
    "get_dictionary",
    "get_dictionary_entries",
    "get_classifier_categories",
    "get_classifier_category",
}


def _call(method_name: str, *args, **kwargs) -> dict:
    """Call a TextRazorClient method, converting exceptions to error dicts."""
    if method_name not in _ALLOWED_METHODS:
        return _contract_error(f"Unknown method: {method_name}", "error")
    try:
        client = _get_client()
        result = getattr(client, method_name)(*args, **kwargs)
    except SetupError as e:
        return _contract_error(str(e), "setup")
    except ValidationError as e:
        return _contract_error(str(e), "validation")
    except TextRazorError as e:
        return _contract_error(str(e), "error")
    return _finalize_tool_result(result.to_json())


def _analysis_params(extractors, classifiers, language_override, cleanup_mode) -> Params:
    params = Params({"extractors": list(extractors or [])})
    for classifier in classifiers or []:
        params.add("classifiers", classifier)
    if language_override:
        params.set("languageOverride", language_override)
    if cleanup_mode:
        params.set("cleanup.mode", cleanup_mode)
    return params


# -------------------------------------------------------------------
# Analysis
# -------------------------------------------------------------------


@mcp.tool()
def analyze_text(
    text: str,
    extractors: list[str],
    classifiers: list[str] | None = None,
    language_override: str | None = None,
) -> dict:
    """Analyze a piece of text.

    Args:
        extractors: e.g. ["entities", "topics"]. At least one is required.
        classifiers: Optional classifier ids, e.g. ["textrazor_iab"].
        language_override: ISO-639-2 code to skip language detection.
    """
    params = _analysis_params(extractors, classifiers, language_override, None)
    params.set("text", text)
    return _call("analyze", params)


@mcp.tool()
def analyze_url(
    url: str,
    extractors: list[str],
    classifiers: list[str] | None = None,
    cleanup_mode: str | None = None,
) -> dict:
    """Download and analyze a web page.

    Args:
        cleanup_mode: raw, stripTags or cleanHTML (service default: raw).
    """
    params = _analysis_params(extractors, classifiers, None, cleanup_mode)
    params.set("url", url)
    return _call("analyze", params)


# -------------------------------------------------------------------
# Account, dictionaries, classifiers (read-only)
# -------------------------------------------------------------------


@mcp.tool()
def get_account() -> dict:
    """Get plan, daily usage and concurrency limits of the account."""
    return _call("get_account")


@mcp.tool()
def list_dictionaries() -> dict:
    """List custom entity dictionaries."""
    return _call("list_dictionaries")


@mcp.tool()
def get_dictionary(dictionary_id: str) -> dict:
    """Get one entity dictionary definition."""
    return _call("get_dictionary", dictionary_id)


@mcp.tool()
def get_dictionary_entries(dictionary_id: str, limit: int = 20, offset: int = 0) -> dict:
    """List entries of an entity dictionary (paginated)."""
    return _call("get_dictionary_entries", dictionary_id, limit=limit, offset=offset)


@mcp.tool()
def get_classifier_categories(classifier_id: str, limit: int = 20, offset: int = 0) -> dict:
    """List categories of a classifier (paginated)."""
    return _call("get_classifier_categories", classifier_id, limit=limit, offset=offset)


@mcp.tool()
def get_classifier_category(classifier_id: str, category_id: str) -> dict:
    """Get one category of a classifier."""
    return _call("get_classifier_category", classifier_id, category_id)


# -------------------------------------------------------------------
# Entry point
# -------------------------------------------------------------------


def main():
    """Run the MCP server (stdio transport)."""
    mcp.run()


if __name__ == "__main__":
    main()
