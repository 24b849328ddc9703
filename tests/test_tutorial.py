"""Tests for loading tutorials."""

from pathlib import Path

from src.tutorial import load_tutorials


def test_load_flat_tutorials(tmp_path: Path) -> None:
    """Verify each HTML file becomes a tutorial named after its stem."""
    (tmp_path / "intro.html").write_text("<p>Hi</p>")
    (tmp_path / "notes.txt").write_text("ignored")

    tutorials = load_tutorials(tmp_path)
    assert [t.name for t in tutorials] == ["intro"]
    assert tutorials[0].title == "intro"
    assert tutorials[0].content == "<p>Hi</p>"


def test_config_sets_titles_and_nesting(tmp_path: Path) -> None:
    """Verify tutorials.yml titles tutorials and nests children."""
    for name in ("intro", "setup", "advanced"):
        (tmp_path / f"{name}.html").write_text(f"<p>{name}</p>")
    (tmp_path / "tutorials.yml").write_text(
        "intro:\n"
        "  title: Introduction\n"
        "  children:\n"
        "    setup:\n"
        "      title: Setting up\n"
        "      children: [advanced]\n",
    )

    tutorials = load_tutorials(tmp_path)
    assert [t.title for t in tutorials] == ["Introduction"]
    setup = tutorials[0].children[0]
    assert setup.title == "Setting up"
    assert setup.parent is tutorials[0]
    assert [c.name for c in setup.children] == ["advanced"]


def test_self_nesting_is_ignored(tmp_path: Path) -> None:
    """Verify a tutorial listed as its own child stays top level."""
    (tmp_path / "loop.html").write_text("")
    (tmp_path / "tutorials.json").write_text('{"loop": {"children": ["loop"]}}')

    tutorials = load_tutorials(tmp_path)
    assert [t.name for t in tutorials] == ["loop"]
    assert tutorials[0].children == []


def test_non_mapping_config_is_ignored(tmp_path: Path) -> None:
    """Verify a tutorials.yml that is not a mapping leaves the tutorials flat."""
    (tmp_path / "a.html").write_text("<p>a</p>")
    (tmp_path / "tutorials.yml").write_text("- a\n")

    tutorials = load_tutorials(tmp_path)
    assert [t.name for t in tutorials] == ["a"]
    assert tutorials[0].title == "a"


def test_missing_directory_yields_no_tutorials(tmp_path: Path) -> None:
    """Verify a tutorials directory that does not exist loads nothing."""
    assert load_tutorials(tmp_path / "nope") == []


def test_undecodable_tutorial_is_skipped(tmp_path: Path) -> None:
    """Verify a tutorial in another encoding is skipped and the rest still load."""
    (tmp_path / "bad.html").write_bytes(b"<p>caf\xe9</p>")
    (tmp_path / "ok.html").write_text("<p>ok</p>")

    assert [t.name for t in load_tutorials(tmp_path)] == ["ok"]
