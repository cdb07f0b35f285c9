"""Pytest configuration and shared fixtures."""

import os
import sys
from pathlib import Path

import pytest

# Add src to Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Set test environment variables
os.environ.setdefault("TESTING", "true")

from doc_server.catalog import build_catalog  # noqa: E402


CHECKLIST_TEXT = "# Checklist\n- [ ] Discovery call\n- [ ] SOW signed\n"


@pytest.fixture
def catalog_definition():
    """A small catalog definition with inline content."""
    return {
        "server": {
            "name": "test-docs",
            "version": "0.0.1",
            "description": "Test documentation server",
            "uri_scheme": "docs",
        },
        "resources": [
            {
                "uri": "docs://onboarding/checklist",
                "name": "Checklist",
                "description": "Onboarding checklist",
                "category": "onboarding",
                "mime_type": "text/plain",
                "text": CHECKLIST_TEXT,
            },
            {
                "uri": "docs://contracts/sow-template",
                "name": "Statement of Work Template",
                "description": "SOW template with scope and timeline",
                "category": "contracts",
                "mime_type": "text/markdown",
                "text": "# SOW\n",
            },
            {
                "uri": "docs://onboarding/welcome-pack",
                "name": "Welcome Pack",
                "description": "What new clients receive on day one",
                "category": "onboarding",
                "text": "# Welcome\n",
            },
        ],
        "prompts": [
            {
                "name": "onboard_client",
                "description": "Complete client onboarding process",
                "arguments": [
                    {"name": "client_name", "description": "Name of the client", "required": True},
                    {"name": "project_type", "description": "Type of project", "required": True},
                ],
                "summary": "Onboarding {client_name|client} for {project_type|project}",
                "messages": [
                    "Complete the onboarding for {client_name|client} building a "
                    "{project_type|web application}. Use docs://onboarding/checklist."
                ],
            },
            {
                "name": "add_component",
                "description": "Add a new UI component",
                "arguments": [
                    {"name": "component_type", "description": "Type of component", "required": True},
                ],
                "summary": "Adding {component_type|component}",
                "messages": [
                    "Create a new {component_type|component}.",
                    "Follow the {{shared}} styling rules.",
                ],
            },
        ],
    }


@pytest.fixture
def server_catalog(catalog_definition):
    """ServerCatalog built from the test definition."""
    return build_catalog(catalog_definition)


@pytest.fixture
def dispatcher(server_catalog):
    """Dispatcher over the test catalog."""
    return server_catalog.create_dispatcher()


@pytest.fixture
def catalog_dir(tmp_path):
    """Catalog directory on disk with file-backed and discovered resources."""
    root = tmp_path / "catalog"
    (root / "resources").mkdir(parents=True)
    (root / "resources" / "guide.md").write_text(
        "---\ntitle: Ignored Title\n---\n# Deployment Guide\n\nShip it.\n",
        encoding="utf-8",
    )

    docs = root / "docs"
    (docs / "vitracoat").mkdir(parents=True)
    (docs / "vitracoat" / "business-workflows.md").write_text(
        "# Business Workflows\n", encoding="utf-8"
    )
    (docs / "vitracoat" / "overview.md").write_text(
        "---\ntitle: Vitracoat Overview\ndescription: Project overview\n---\n# Overview\n",
        encoding="utf-8",
    )

    (root / "catalog.yaml").write_text(
        """
server:
  name: disk-docs
  version: 2.0.0
  uri_scheme: disk
resources:
  - uri: disk://guides/deployment
    name: Deployment Guide
    category: guides
    mime_type: text/markdown
    file: resources/guide.md
discover:
  - path: docs
prompts:
  - name: deploy
    description: Deploy a project
    arguments:
      - name: project_name
        required: true
    summary: "Deploying {project_name|project}"
    messages: "Deploy {project_name|project} now."
""",
        encoding="utf-8",
    )
    return root
