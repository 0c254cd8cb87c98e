import sys
import types
import uuid
import importlib.util
from pathlib import Path


def _find_server_py() -> Path:
    root = Path(__file__).resolve().parents[2]
    candidates = [
        root / "src" / "server" / "server.py",
        root / "server" / "server.py",
    ]
    for p in candidates:
        if p.exists():
            return p
    raise FileNotFoundError(f"Could not find server.py. Tried: {candidates}")


def _install_fake_modules(monkeypatch, captures: dict):
    # ---- Fake mcp.server.fastmcp.FastMCP ----
    mcp_mod = types.ModuleType("mcp")
    mcp_server_mod = types.ModuleType("mcp.server")
    fastmcp_mod = types.ModuleType("mcp.server.fastmcp")

    class DummyFastMCP:
        def __init__(self, name: str):
            captures["fastmcp_name"] = name
            captures["mcp_instance"] = self
            self.run_calls = []

        def run(self, *, transport: str):
            self.run_calls.append({"transport": transport})
            captures["run_calls"] = list(self.run_calls)

    fastmcp_mod.FastMCP = DummyFastMCP

    mcp_mod.__path__ = []
    mcp_server_mod.__path__ = []

    monkeypatch.setitem(sys.modules, "mcp", mcp_mod)
    monkeypatch.setitem(sys.modules, "mcp.server", mcp_server_mod)
    monkeypatch.setitem(sys.modules, "mcp.server.fastmcp", fastmcp_mod)

    # ---- Fake config ----
    config_mod = types.ModuleType("config")
    config_mod.GITHUB_TOKEN = "tok-123"
    config_mod.GITHUB_TIMEOUT = 12.3
    config_mod.HTTP_VERIFY = False
    config_mod.LOG_LEVEL = "WARNING"
    monkeypatch.setitem(sys.modules, "config", config_mod)

    def _ensure_pkg(name: str):
        pkg = types.ModuleType(name)
        pkg.__path__ = []
        monkeypatch.setitem(sys.modules, name, pkg)
        return pkg

    # ---- Fake GitHub client ----
    _ensure_pkg("clients")
    gh_mod = _ensure_pkg("clients.github")

    class FakeGitHubClient:
        def __init__(self, *, token=None, timeout: float = 20.0, verify: bool = True):
            captures["github_client_ctor_calls"] = captures.get("github_client_ctor_calls", []) + [
                {"token": token, "timeout": timeout, "verify": verify}
            ]
            captures["github_client_instance"] = self

    gh_mod.GitHubClient = FakeGitHubClient

    # ---- Fake docs browser ----
    _ensure_pkg("explorer")
    browser_mod = types.ModuleType("explorer.browser")

    class FakeDocsBrowser:
        def __init__(self, accessor):
            captures["browser_ctor_calls"] = captures.get("browser_ctor_calls", []) + [{"accessor": accessor}]
            captures["browser_instance"] = self

    browser_mod.DocsBrowser = FakeDocsBrowser
    monkeypatch.setitem(sys.modules, "explorer.browser", browser_mod)

    # ---- Fake tools ----
    _ensure_pkg("tools")

    for tool in ("browse_docs", "add_repo_mapping", "list_repo_mappings"):
        mod = types.ModuleType(f"tools.{tool}")

        def register(mcp, *, browser, _tool=tool):
            captures.setdefault("register_calls", []).append({"tool": _tool, "mcp": mcp, "browser": browser})

        mod.register = register
        monkeypatch.setitem(sys.modules, f"tools.{tool}", mod)


def _load_server_module(monkeypatch, captures: dict):
    _install_fake_modules(monkeypatch, captures)

    server_path = _find_server_py()
    mod_name = f"server_under_test_{uuid.uuid4().hex}"
    spec = importlib.util.spec_from_file_location(mod_name, server_path)
    assert spec and spec.loader

    module = importlib.util.module_from_spec(spec)
    monkeypatch.setitem(sys.modules, mod_name, module)
    spec.loader.exec_module(module)
    return module


def test_server_registers_tools_with_shared_browser(monkeypatch):
    captures = {}
    module = _load_server_module(monkeypatch, captures)

    assert captures["fastmcp_name"] == "github-docs-explorer"
    mcp = captures["mcp_instance"]

    # One client built from config, handed to one browser
    assert captures["github_client_ctor_calls"] == [{"token": "tok-123", "timeout": 12.3, "verify": False}]
    assert len(captures["browser_ctor_calls"]) == 1
    assert captures["browser_ctor_calls"][0]["accessor"] is captures["github_client_instance"]

    calls = captures["register_calls"]
    assert [c["tool"] for c in calls] == ["browse_docs", "add_repo_mapping", "list_repo_mappings"]
    assert all(c["mcp"] is mcp for c in calls)
    assert all(c["browser"] is captures["browser_instance"] for c in calls)

    # main() runs stdio transport
    module.main()
    assert captures["run_calls"] == [{"transport": "stdio"}]
