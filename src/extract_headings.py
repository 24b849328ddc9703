"""Logic for extracting heading targets from rendered description HTML."""

import re

from bs4 import BeautifulSoup

HEADING_TAG_RE = re.compile(r"^h[1-6]$")


def extract_headings(description: str) -> list[tuple[str, str, int]]:
    """Return (id, text, level) for each heading element with an id and text."""
    if not description:
        return []
    soup = BeautifulSoup(description, "html.parser")
    headings = []
    for el in soup.find_all(HEADING_TAG_RE, id=True):
        heading_id = el.get("id")
        text = el.get_text()
        if heading_id and text:
            headings.append((str(heading_id), text, int(el.name[1])))
    return headings
