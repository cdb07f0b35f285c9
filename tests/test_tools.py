"""Tests for the documentation server tools."""

import pytest

from doc_server.constants import ErrorCode
from doc_server.dispatcher import GetOverview, GetQuickReference, SearchResources
from doc_server.exceptions import NotFoundError
from doc_server.tools import (
    GET_OVERVIEW,
    GET_QUICK_REFERENCE,
    SEARCH_RESOURCES,
    TOOL_SCHEMAS,
    build_tool_request,
)


@pytest.mark.unit
class TestBuildToolRequest:
    """Test translating tool calls into dispatcher requests."""

    def test_schema(self):
        """Test the advertised input schema."""
        schema = TOOL_SCHEMAS[SEARCH_RESOURCES]
        assert schema["name"] == "search_resources"
        assert schema["inputSchema"]["required"] == ["query"]
        assert set(schema["inputSchema"]["properties"]) == {"query", "category", "complexity"}

    def test_tool_names(self):
        """Test the advertised tools in order."""
        assert list(TOOL_SCHEMAS) == [SEARCH_RESOURCES, GET_OVERVIEW, GET_QUICK_REFERENCE]
        assert TOOL_SCHEMAS[GET_OVERVIEW]["inputSchema"]["properties"] == {}

    def test_query_only(self):
        """Test a call without filters."""
        request = build_tool_request("search_resources", {"query": "terraform"})
        assert request == SearchResources(query="terraform", category=None, complexity=None)

    def test_with_category(self):
        """Test a call with category."""
        request = build_tool_request(
            "search_resources", {"query": "terraform", "category": "infrastructure"}
        )
        assert request.category == "infrastructure"

    def test_with_complexity(self):
        """Test a call with complexity."""
        request = build_tool_request("search_resources", {"query": "forms", "complexity": "advanced"})
        assert request.complexity == "advanced"

    def test_empty_filters_ignored(self):
        """Test that empty filters mean no filter."""
        request = build_tool_request(
            "search_resources", {"query": "x", "category": "", "complexity": None}
        )
        assert request.category is None
        assert request.complexity is None

    def test_non_string_filter(self):
        """Test that filters must be strings."""
        with pytest.raises(ValueError, match="complexity"):
            build_tool_request("search_resources", {"query": "x", "complexity": 3})

    @pytest.mark.parametrize("arguments", [None, {}, {"query": ""}, {"query": 5}])
    def test_missing_query(self, arguments):
        """Test that a usable query is required."""
        with pytest.raises(ValueError):
            build_tool_request("search_resources", arguments)

    def test_overview_and_quick_reference(self):
        """Test the argument-less tools, ignoring stray arguments."""
        assert build_tool_request("get_overview", None) == GetOverview()
        assert build_tool_request("get_quick_reference", {"extra": 1}) == GetQuickReference()

    def test_unknown_tool(self):
        """Test NotFound for unknown tool names."""
        with pytest.raises(NotFoundError) as exc_info:
            build_tool_request("delete_everything", {})
        assert exc_info.value.error_code == ErrorCode.TOOL_NOT_FOUND
        assert str(exc_info.value) == "Unknown tool: delete_everything"

    def test_search_through_dispatcher(self, dispatcher):
        """Test that the built request is served by the dispatcher."""
        request = build_tool_request("search_resources", {"query": "welcome"})
        response = dispatcher.handle(request)
        assert [r["uri"] for r in response["resources"]] == ["docs://onboarding/welcome-pack"]
