"""Tests for the catalogs shipped with the package."""

import json

import pytest

from doc_server.catalog import available_catalogs, load_catalog
from doc_server.dispatcher import (
    CallTool,
    GetOverview,
    GetPrompt,
    GetQuickReference,
    ListResources,
    ReadResource,
    SearchResources,
)

BUNDLED = [
    "agency",
    "crm-base",
    "erp-business-patterns",
    "ibso-business-units",
    "ibso-patterns",
    "mcp-documentation",
]


@pytest.mark.integration
class TestBundledCatalogs:
    """Test that every bundled catalog is consistent and servable."""

    def test_available(self):
        """Test bundled catalog discovery."""
        assert available_catalogs() == BUNDLED

    @pytest.mark.parametrize("name", BUNDLED)
    def test_every_resource_readable(self, name):
        """Test that every advertised resource can be read."""
        dispatcher = load_catalog(name).create_dispatcher()
        listed = dispatcher.dispatch(ListResources())["resources"]
        assert listed
        for resource in listed:
            response = dispatcher.handle(ReadResource(uri=resource["uri"]))
            content = response["contents"][0]
            assert content["uri"] == resource["uri"]
            assert content["mimeType"] == resource["mimeType"]
            assert content["text"].strip()
            assert not content["text"].startswith("---")

    @pytest.mark.parametrize("name", BUNDLED)
    def test_every_prompt_renders_without_arguments(self, name):
        """Test that prompts render with fallbacks only."""
        catalog = load_catalog(name)
        dispatcher = catalog.create_dispatcher()
        for descriptor in catalog.prompts.list_prompts():
            response = dispatcher.handle(GetPrompt(name=descriptor.name))
            assert "status" not in response
            assert response["messages"]
            for message in response["messages"]:
                assert "{" not in message["content"]["text"]

    def test_agency_onboarding(self):
        """Test the agency onboarding prompt with arguments."""
        dispatcher = load_catalog("agency").create_dispatcher()
        response = dispatcher.dispatch(
            GetPrompt(
                name="onboard_client",
                arguments={"client_name": "Acme", "project_type": "web application"},
            )
        )
        text = response["messages"][0]["content"]["text"]
        assert "Acme" in text
        assert "web application" in text

    def test_business_units_discovery(self):
        """Test discovered business unit documents."""
        registry = load_catalog("ibso-business-units").resources
        uris = [d.uri for d in registry.list_resources()]
        assert "ibso-business://vitracoat/business-workflows" in uris
        assert "ibso-business://patterns/client-project-structure" in uris
        descriptor = registry.get_descriptor("ibso-business://vitracoat/business-workflows")
        assert descriptor.name == "Vitracoat - Business Workflows"
        assert descriptor.category == "vitracoat"

    @pytest.mark.parametrize(
        "name, count",
        [
            ("crm-base", 20),
            ("erp-business-patterns", 25),
            ("ibso-business-units", 15),
            ("mcp-documentation", 21),
        ],
    )
    def test_resource_counts(self, name, count):
        """Test that the full resource lists are shipped."""
        assert len(load_catalog(name).resources.manifest) == count

    @pytest.mark.parametrize("name", BUNDLED)
    def test_tools_answer(self, name):
        """Test overview and quick reference for every catalog."""
        dispatcher = load_catalog(name).create_dispatcher()
        overview = dispatcher.handle(GetOverview())
        assert overview["server"]["name"]
        assert overview["statistics"]["total_resources"] == len(overview["resources"])
        reference = dispatcher.handle(GetQuickReference())["quick_reference"]
        assert reference["sections"]


@pytest.mark.integration
class TestErpBusinessPatterns:
    """Test the ERP business patterns catalog."""

    @pytest.fixture
    def dispatcher(self):
        return load_catalog("erp-business-patterns").create_dispatcher()

    def test_json_payload(self, dispatcher):
        """Test that structured pattern resources are served as JSON."""
        response = dispatcher.dispatch(
            ReadResource(uri="erp-business-patterns://resource/vitracoat-business-model")
        )
        content = response["contents"][0]
        assert content["mimeType"] == "application/json"
        assert json.loads(content["text"])["name"] == "Vitracoat Business Model"

    def test_search_with_complexity(self, dispatcher):
        """Test search filtered by category and complexity."""
        response = dispatcher.dispatch(
            SearchResources(query="forms", category="Business Architecture", complexity="advanced")
        )
        assert [r["uri"] for r in response["resources"]] == [
            "erp-business-patterns://resource/vitracoat-request-forms"
        ]
        assert response["resources"][0]["complexity"] == "advanced"

    def test_overview(self, dispatcher):
        """Test overview statistics and categories."""
        overview = dispatcher.handle(CallTool("get_overview"))
        assert overview["server"]["name"] == "erp-business-patterns"
        assert overview["statistics"]["total_resources"] == 25
        counts = {c["name"]: c["count"] for c in overview["categories"]}
        assert counts["Business Architecture"] == 3
        assert sum(counts.values()) == 25
        assert set(overview["statistics"]["complexity_levels"]) <= {
            "foundational",
            "intermediate",
            "advanced",
            "enterprise",
        }

    def test_quick_reference(self, dispatcher):
        """Test the curated quick reference."""
        reference = dispatcher.handle(CallTool("get_quick_reference"))["quick_reference"]
        assert reference["title"] == "ERP Business Patterns - Key Resources"
        assert list(reference["sections"]) == ["patterns", "workflows", "businessModel"]
        assert reference["sections"]["patterns"][0] == {
            "name": "Configuration Tabs Pattern",
            "uri": "erp-business-patterns://resource/configuration-tabs-pattern",
            "usage": "For all configuration page implementations",
        }
