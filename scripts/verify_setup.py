#!/usr/bin/env python3
"""Script to verify the environment and the bundled catalogs."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def check_python_version():
    """Check Python version >= 3.10."""
    version = sys.version_info
    if version.major >= 3 and version.minor >= 10:
        print(f"✓ Python {version.major}.{version.minor}.{version.micro}")
        return True
    else:
        print(f"✗ Python {version.major}.{version.minor}.{version.micro} (need 3.10+)")
        return False


def check_package(package_name):
    """Check if a package is installed."""
    try:
        __import__(package_name)
        print(f"✓ {package_name} installed")
        return True
    except ImportError:
        print(f"✗ {package_name} not installed")
        return False


def check_file(path):
    """Check if file exists."""
    if Path(path).exists():
        print(f"✓ {path} exists")
        return True
    else:
        print(f"✗ {path} missing")
        return False


def check_catalog(name):
    """Load a bundled catalog and read every resource it advertises."""
    from doc_server.catalog import load_catalog
    from doc_server.dispatcher import CallTool, GetPrompt, ReadResource

    try:
        catalog = load_catalog(name)
    except (FileNotFoundError, ValueError) as e:
        print(f"✗ {name}: {e}")
        return False

    dispatcher = catalog.create_dispatcher()
    failures = []
    for descriptor in catalog.resources.list_resources():
        response = dispatcher.handle(ReadResource(descriptor.uri))
        if "status" in response:
            failures.append(f"{descriptor.uri}: {response['error']}")
    for descriptor in catalog.prompts.list_prompts():
        response = dispatcher.handle(GetPrompt(descriptor.name))
        if "status" in response:
            failures.append(f"{descriptor.name}: {response['error']}")
    for tool in ("get_overview", "get_quick_reference"):
        response = dispatcher.handle(CallTool(tool))
        if "status" in response:
            failures.append(f"{tool}: {response['error']}")

    if failures:
        print(f"✗ {name}")
        for failure in failures:
            print(f"    {failure}")
        return False

    print(
        f"✓ {name} ({len(catalog.resources.manifest)} resources, "
        f"{len(catalog.prompts.catalog)} prompts)"
    )
    return True


def main():
    """Run all verification checks."""
    print("=" * 60)
    print("Documentation Servers Environment Verification")
    print("=" * 60)
    print()

    checks = []

    print("Checking Python version...")
    checks.append(check_python_version())
    print()

    print("Checking required packages...")
    for package in ["mcp", "yaml"]:
        checks.append(check_package(package))
    print()

    print("Checking development packages...")
    for package in ["pytest", "pytest_asyncio"]:
        checks.append(check_package(package))
    print()

    print("Checking configuration files...")
    for config_file in ["pyproject.toml", "config/server.yaml"]:
        checks.append(check_file(config_file))
    print()

    if all(checks[:3]):
        from doc_server.catalog import available_catalogs

        print("Checking bundled catalogs...")
        for name in available_catalogs():
            checks.append(check_catalog(name))
        print()

    # Summary
    print("=" * 60)
    passed = sum(checks)
    total = len(checks)
    print(f"Results: {passed}/{total} checks passed")
    print("=" * 60)

    if passed == total:
        print("✓ All checks passed! Environment is ready.")
        return 0
    else:
        print("✗ Some checks failed. Please review the output above.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
