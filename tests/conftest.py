import shutil
import sys
from pathlib import Path
from typing import Any, Callable

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

from copy_configs.models import CopierKind, RunOptions  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setattr(Path, "home", lambda: home)


@pytest.fixture
def home_dir(tmp_path: Path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def write_file() -> Callable[..., Path]:
    def _write(path: Path, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def source_root(tmp_path: Path) -> Path:
    root = tmp_path / "source"
    root.mkdir()
    return root


@pytest.fixture
def target_root(tmp_path: Path) -> Path:
    root = tmp_path / "target"
    root.mkdir()
    return root


@pytest.fixture(params=[CopierKind.NATIVE, CopierKind.RSYNC], ids=["native", "rsync"])
def copier_kind(request) -> CopierKind:
    if request.param == CopierKind.RSYNC and shutil.which("rsync") is None:
        pytest.skip("rsync not installed")
    return request.param


@pytest.fixture
def make_options(source_root: Path, copier_kind: CopierKind) -> Callable[..., RunOptions]:
    def _make(**overrides: Any) -> RunOptions:
        values: dict[str, Any] = {
            "source_override": source_root,
            "copier": copier_kind,
            "rsync_path": shutil.which("rsync") if copier_kind == CopierKind.RSYNC else None,
        }
        values.update(overrides)
        return RunOptions(**values)

    return _make


@pytest.fixture
def cli_runner(home_dir: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(home_dir))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()


def tree_listing(root: Path) -> dict[str, bytes | None]:
    listing: dict[str, bytes | None] = {}
    for path in sorted(root.rglob("*")):
        key = str(path.relative_to(root))
        listing[key] = path.read_bytes() if path.is_file() else None
    return listing


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes | None]]:
    return tree_listing
