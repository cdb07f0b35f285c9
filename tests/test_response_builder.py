"""Tests for response envelopes."""

import pytest

from doc_server.constants import ErrorCode, Role
from doc_server.exceptions import NotFoundError
from doc_server.prompts import MessageFragment, PromptArgument, PromptDescriptor
from doc_server.resources import QuickReference, QuickReferenceEntry, ResourceDescriptor
from doc_server.response_builder import (
    build_error_response,
    build_overview_response,
    build_prompt_list,
    build_prompt_response,
    build_quick_reference_response,
    build_resource_list,
    build_resource_response,
    build_search_response,
)


@pytest.mark.unit
class TestResponseBuilder:
    """Test envelope builders."""

    def test_resource_response(self):
        """Test read result shape."""
        assert build_resource_response("a://b/c", "body", "text/markdown") == {
            "contents": [{"uri": "a://b/c", "mimeType": "text/markdown", "text": "body"}]
        }

    def test_resource_response_default_mime_type(self):
        """Test default content type."""
        response = build_resource_response("a://b/c", "")
        assert response["contents"][0]["mimeType"] == "text/plain"
        assert response["contents"][0]["text"] == ""

    def test_resource_list(self):
        """Test resource list shape."""
        response = build_resource_list([ResourceDescriptor(uri="a://b/c", name="C")])
        assert response == {
            "resources": [
                {"uri": "a://b/c", "mimeType": "text/plain", "name": "C", "description": ""}
            ]
        }

    def test_prompt_list(self):
        """Test prompt list shape."""
        descriptor = PromptDescriptor("p", "desc", (PromptArgument("x", required=True),))
        assert build_prompt_list([descriptor]) == {
            "prompts": [
                {
                    "name": "p",
                    "description": "desc",
                    "arguments": [{"name": "x", "description": "", "required": True}],
                }
            ]
        }

    def test_prompt_response(self):
        """Test rendered prompt shape."""
        response = build_prompt_response(
            "Summary", [MessageFragment(Role.USER, "one"), MessageFragment(Role.USER, "two")]
        )
        assert response["description"] == "Summary"
        assert [m["content"]["text"] for m in response["messages"]] == ["one", "two"]

    def test_search_response(self):
        """Test search result shape."""
        response = build_search_response("q", [], category="c")
        assert response == {
            "query": "q",
            "category": "c",
            "complexity": None,
            "count": 0,
            "resources": [],
        }

    def test_search_response_includes_metadata(self):
        """Test that search matches carry category, tags and complexity."""
        descriptor = ResourceDescriptor(
            uri="erp://resource/crud",
            name="CRUD",
            category="Data Operations",
            tags=("crud", "tables"),
            complexity="intermediate",
        )
        response = build_search_response("crud", [descriptor], complexity="intermediate")
        assert response["complexity"] == "intermediate"
        assert response["resources"] == [
            {
                "uri": "erp://resource/crud",
                "mimeType": "text/plain",
                "name": "CRUD",
                "description": "",
                "category": "Data Operations",
                "tags": ["crud", "tables"],
                "complexity": "intermediate",
            }
        ]

    def test_overview_response(self):
        """Test overview statistics and per-category counts."""
        descriptors = [
            ResourceDescriptor(uri="a://x/1", name="One", category="x", tags=("t1",), complexity="advanced"),
            ResourceDescriptor(uri="a://y/2", name="Two", category="y", tags=("t1", "t2")),
            ResourceDescriptor(uri="a://x/3", name="Three", category="x", complexity="advanced"),
        ]
        response = build_overview_response({"name": "a", "version": "1.0.0"}, descriptors, ["x", "y"])
        assert response["server"] == {"name": "a", "version": "1.0.0"}
        assert response["statistics"] == {
            "total_resources": 3,
            "categories": 2,
            "tags": 2,
            "complexity_levels": ["advanced"],
        }
        assert response["categories"] == [{"name": "x", "count": 2}, {"name": "y", "count": 1}]
        assert [r["name"] for r in response["resources"]] == ["One", "Two", "Three"]

    def test_quick_reference_response(self):
        """Test quick reference envelope."""
        reference = QuickReference(
            title="Key Resources",
            sections=(("patterns", (QuickReferenceEntry("a://x/1", "One", "Use it"),)),),
        )
        assert build_quick_reference_response(reference) == {
            "quick_reference": {
                "title": "Key Resources",
                "sections": {"patterns": [{"name": "One", "uri": "a://x/1", "usage": "Use it"}]},
            }
        }

    def test_error_response_from_not_found(self):
        """Test error envelope for a lookup failure."""
        error = NotFoundError("a://missing")
        response = build_error_response(error, error.error_code.value, "read_resource")
        assert response == {
            "status": "error",
            "error": "Resource not found: a://missing",
            "error_code": ErrorCode.RESOURCE_NOT_FOUND.value,
            "request": "read_resource",
        }

    def test_error_response_from_value_error(self):
        """Test error envelope for invalid input."""
        response = build_error_response(
            ValueError("bad"), ErrorCode.INVALID_INPUT.value, "search_resources"
        )
        assert response["error"] == "bad"
        assert response["error_code"] == "INVALID_INPUT"


@pytest.mark.unit
class TestNotFoundError:
    """Test NotFoundError messages."""

    @pytest.mark.parametrize(
        "kind, message, code",
        [
            ("Resource", "Resource not found: x", ErrorCode.RESOURCE_NOT_FOUND),
            ("Prompt", "Prompt not found: x", ErrorCode.PROMPT_NOT_FOUND),
            ("Tool", "Unknown tool: x", ErrorCode.TOOL_NOT_FOUND),
        ],
    )
    def test_messages(self, kind, message, code):
        """Test message and code per lookup kind."""
        error = NotFoundError("x", kind=kind)
        assert error.message == message
        assert error.error_code == code
        assert isinstance(error, LookupError)

    def test_unknown_kind(self):
        """Test rejecting an unknown lookup kind."""
        with pytest.raises(ValueError):
            NotFoundError("x", kind="Widget")
