import importlib.util
from pathlib import Path

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "check_core_imports.py"


def _load_guard():
    spec = importlib.util.spec_from_file_location("check_core_imports", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    assert spec.loader is not None
    spec.loader.exec_module(module)
    return module


def test_core_import_guard_passes():
    guard = _load_guard()
    assert guard.violations() == []
    assert guard.main() == 0


def test_tools_may_not_use_httpx(tmp_path, monkeypatch):
    guard = _load_guard()
    core = tmp_path / "src" / "linear_mcp" / "core"
    (core / "tools").mkdir(parents=True)
    (core / "client.py").write_text("import httpx\n")
    (core / "tools" / "bad.py").write_text("from httpx import AsyncClient\n")
    monkeypatch.setattr(guard, "REPO_ROOT", tmp_path)
    monkeypatch.setattr(guard, "CORE_DIR", core)
    monkeypatch.setattr(guard, "TOOLS_DIR", core / "tools")

    assert guard.violations() == [
        "src/linear_mcp/core/tools/bad.py: forbidden import 'httpx'"
    ]
