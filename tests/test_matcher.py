import os
from pathlib import Path

from copy_configs.matcher import PatternMatcher


def _relative(matcher: PatternMatcher, pattern: str) -> list[str]:
    return [match.relative_path for match in matcher.match(pattern)]


def test_env_glob_includes_dotfiles(source_root: Path, write_file) -> None:
    write_file(source_root / ".env", "A=1")
    write_file(source_root / ".env.local", "A=2")
    write_file(source_root / ".env.production.local", "A=3")
    write_file(source_root / "env.txt", "not hidden")

    assert _relative(PatternMatcher(source_root), ".env*") == [
        ".env",
        ".env.local",
        ".env.production.local",
    ]


def test_hidden_directory_matches_as_unit(source_root: Path, write_file) -> None:
    write_file(source_root / ".claude" / "settings.json", "{}")
    write_file(source_root / ".claude" / "agents" / "reviewer.md", "x")

    matches = list(PatternMatcher(source_root).match(".claude/"))

    assert len(matches) == 1
    assert matches[0].relative_path == ".claude"
    assert matches[0].is_dir is True
    assert matches[0].source_path == source_root / ".claude"


def test_star_includes_hidden_entries(source_root: Path, write_file) -> None:
    write_file(source_root / "conf" / ".hidden", "h")
    write_file(source_root / "conf" / "visible", "v")

    assert _relative(PatternMatcher(source_root), "conf/*") == [
        "conf/.hidden",
        "conf/visible",
    ]


def test_no_match_is_empty(source_root: Path) -> None:
    assert _relative(PatternMatcher(source_root), "GEMINI.md") == []
    assert _relative(PatternMatcher(source_root), ".cursor/") == []


def test_trailing_slash_only_matches_directories(source_root: Path, write_file) -> None:
    write_file(source_root / ".augment", "a file, not a directory")
    assert _relative(PatternMatcher(source_root), ".augment/") == []


def test_file_with_spaces_matches_literally(source_root: Path, write_file) -> None:
    write_file(source_root / "agents" / "My Agent.json", "{}")
    write_file(source_root / "agents" / "My", "decoy")

    matches = list(PatternMatcher(source_root).match("agents/My Agent.json"))

    assert [match.relative_path for match in matches] == ["agents/My Agent.json"]
    assert matches[0].is_dir is False


def test_double_star_spans_directories(source_root: Path, write_file) -> None:
    write_file(source_root / "a.env", "1")
    write_file(source_root / "svc" / "api" / "b.env", "2")

    assert _relative(PatternMatcher(source_root), "**/*.env") == [
        "a.env",
        "svc/api/b.env",
    ]


def test_matches_are_sorted(source_root: Path, write_file) -> None:
    for name in ("c.md", "a.md", "b.md"):
        write_file(source_root / name, name)
    assert _relative(PatternMatcher(source_root), "*.md") == ["a.md", "b.md", "c.md"]


def test_dangling_symlink_matches(source_root: Path) -> None:
    os.symlink(source_root / "nowhere", source_root / "CLAUDE.md")
    matches = list(PatternMatcher(source_root).match("CLAUDE.md"))
    assert [match.relative_path for match in matches] == ["CLAUDE.md"]
    assert matches[0].is_dir is False


def test_match_is_recomputed_on_each_call(source_root: Path, write_file) -> None:
    matcher = PatternMatcher(source_root)
    assert _relative(matcher, "AGENTS.md") == []
    write_file(source_root / "AGENTS.md", "x")
    assert _relative(matcher, "AGENTS.md") == ["AGENTS.md"]
