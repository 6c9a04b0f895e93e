# src/faleproxy/dom/backend.py
"""
Parse/serialize boundary around the third-party HTML parser.

The DocumentTransformer only talks to the abstract DocumentTree and TextNode
interfaces defined here; SoupBackend is the BeautifulSoup implementation used
by the server.
"""
import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

logger = logging.getLogger(__name__)

DEFAULT_SKIP_TAGS = frozenset({"script", "style"})


class TextNode(ABC):
    """A single text node of a parsed document."""

    @property
    @abstractmethod
    def text(self) -> str:
        ...

    @abstractmethod
    def replace(self, new_text: str) -> None:
        """Replaces the node's content in place, keeping its sibling position."""


class DocumentTree(ABC):
    """A parsed document, mutated in place and serialized once."""

    @abstractmethod
    def title_text(self) -> Optional[str]:
        """Full text of the title element, or None when the document has none."""

    @abstractmethod
    def set_title_text(self, text: str) -> None:
        ...

    @abstractmethod
    def body_text_nodes(self) -> Iterator[TextNode]:
        """Visible text nodes of the body, in document order."""

    @abstractmethod
    def paragraph_texts(self) -> List[str]:
        ...

    @abstractmethod
    def serialize(self) -> str:
        ...


class HtmlBackend(ABC):
    @abstractmethod
    def parse(self, html: str) -> DocumentTree:
        ...


# --- BeautifulSoup implementation ---

class SoupTextNode(TextNode):

    def __init__(self, string: NavigableString):
        self._string = string

    @property
    def text(self) -> str:
        return str(self._string)

    def replace(self, new_text: str) -> None:
        replacement = NavigableString(new_text)
        self._string.replace_with(replacement)
        self._string = replacement


class SoupDocumentTree(DocumentTree):

    def __init__(self, soup: BeautifulSoup, skip_tags: Iterable[str] = DEFAULT_SKIP_TAGS):
        self.soup = soup
        self.skip_tags = frozenset(t.lower() for t in skip_tags)

    def _title_tag(self) -> Optional[Tag]:
        # An inline <svg><title> in the body must not count as the page title
        if self.soup.head is not None:
            return self.soup.head.find('title')
        return self.soup.find('title')

    def title_text(self) -> Optional[str]:
        tag = self._title_tag()
        return tag.get_text() if tag else None

    def set_title_text(self, text: str) -> None:
        tag = self._title_tag()
        if tag is None:
            logger.debug("set_title_text called on a document without <title>; ignored.")
            return
        tag.string = text

    def _is_visible(self, string: NavigableString, excluded: Iterable[str]) -> bool:
        # Comments, doctypes, CDATA and processing instructions
        if isinstance(string, PreformattedString):
            return False
        for parent in string.parents:
            if parent.name in excluded:
                return False
        return True

    def body_text_nodes(self) -> Iterator[TextNode]:
        root = self.soup.body
        excluded = set(self.skip_tags)
        if root is None:
            # No <body>: fall back to the whole document minus head/title
            root = self.soup
            excluded.update({'head', 'title'})

        # Materialize first, replacements would otherwise break the generator
        strings = [s for s in root.descendants
                   if isinstance(s, NavigableString) and self._is_visible(s, excluded)]
        for string in strings:
            yield SoupTextNode(string)

    def paragraph_texts(self) -> List[str]:
        return [p.get_text() for p in self.soup.find_all('p')]

    def serialize(self) -> str:
        return self.soup.decode(formatter="minimal")


class SoupBackend(HtmlBackend):
    """
    Lenient parsing via BeautifulSoup. Uses the stdlib 'html.parser' by
    default; 'lxml' or 'html5lib' can be configured when installed.
    """

    def __init__(self, parser: str = "html.parser", skip_tags: Iterable[str] = DEFAULT_SKIP_TAGS):
        self.parser = parser
        self.skip_tags = frozenset(skip_tags)

    def parse(self, html: str) -> SoupDocumentTree:
        # Strip a leading BOM, it would otherwise end up as a text node
        clean_html = (html or "").replace('\ufeff', '')
        soup = BeautifulSoup(clean_html, self.parser)
        return SoupDocumentTree(soup, self.skip_tags)
