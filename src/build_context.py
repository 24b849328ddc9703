"""Build-scoped state shared by the publishing steps."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.doclet_page import PageRegistry
from src.link_registry import GLOBAL_LONGNAME, LinkRegistry
from src.symbol_store import SymbolStore

INDEX_NAME = "index"


@dataclass
class BuildContext:
    """Everything one build owns; nothing outlives it."""

    store: SymbolStore
    config: dict[str, Any]
    out_dir: Path
    links: LinkRegistry = field(default_factory=LinkRegistry)
    pages: PageRegistry = field(init=False)
    global_url: str = field(init=False)
    index_url: str = field(init=False)

    def __post_init__(self) -> None:
        """Claim the globals and index file names before anything else."""
        self.pages = PageRegistry(self.links)
        self.global_url = self.links.unique_filename(GLOBAL_LONGNAME)
        self.index_url = self.links.unique_filename(INDEX_NAME)
        self.links.register(GLOBAL_LONGNAME, self.global_url)

    @property
    def api_entry(self) -> str | None:
        """Longname of the record documented on the index page, if configured."""
        return self.config["templates"]["classy"].get("api_entry") or None

    @property
    def encoding(self) -> str:
        """Encoding for reading source files and tutorials."""
        return self.config["opts"].get("encoding") or "utf-8"
