import pytest

from explorer.browser import DocsBrowser
from tools import add_repo_mapping as add_repo_mapping_tool
from tools import list_repo_mappings as list_repo_mappings_tool


@pytest.mark.asyncio
async def test_add_repo_mapping_echoes_inputs(dummy_mcp, fake_accessor_factory):
    browser = DocsBrowser(fake_accessor_factory())
    add_repo_mapping_tool.register(dummy_mcp, browser=browser)

    out = await dummy_mcp.tools["add_repo_mapping"](
        name="widgets",
        url="https://github.com/acme/widgets",
        docsPath="docs/site",
    )

    assert out == (
        "✅ Successfully added repository mapping:\n"
        "- Name: widgets\n"
        "- URL: https://github.com/acme/widgets\n"
        "- Docs Path: docs/site"
    )
    assert browser.get_repository_mappings()["widgets"].docs_path == "docs/site"


@pytest.mark.asyncio
async def test_added_short_name_is_browsable_without_detection(dummy_mcp, fake_accessor_factory):
    acc = fake_accessor_factory(dirs={"docs/site": ["index.md"]})
    browser = DocsBrowser(acc)
    add_repo_mapping_tool.register(dummy_mcp, browser=browser)

    await dummy_mcp.tools["add_repo_mapping"](name="widgets", url="https://github.com/acme/widgets", docsPath="docs/site")
    result = await browser.browse("widgets")

    assert result.path == "docs/site"
    assert acc.calls == [("list", "acme", "widgets", "docs/site")]


@pytest.mark.asyncio
async def test_list_repo_mappings(dummy_mcp, fake_accessor_factory):
    browser = DocsBrowser(fake_accessor_factory())
    browser.add_repository_mapping("acme/widgets", "https://github.com/acme/widgets", "docs")
    list_repo_mappings_tool.register(dummy_mcp, browser=browser)

    out = await dummy_mcp.tools["list_repo_mappings"]()

    assert out.splitlines() == [
        "- datajoint-python: https://github.com/datajoint/datajoint-python (docs: docs/src)",
        "- acme/widgets: https://github.com/acme/widgets (docs: docs)",
    ]
