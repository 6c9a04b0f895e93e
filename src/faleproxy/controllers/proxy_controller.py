# src/faleproxy/controllers/proxy_controller.py
import logging

from faleproxy.dom.document_transformer import DocumentTransformer
from faleproxy.model import ProxyResponse
from faleproxy.services.page_fetch_service import PageFetchService

logger = logging.getLogger(__name__)


class ProxyController:
    """
    Orchestrates a single relay request: fetch the page, rewrite it,
    and package the result for the API layer.
    """

    def __init__(self, fetch_service: PageFetchService, transformer: DocumentTransformer):
        self.fetch_service = fetch_service
        self.transformer = transformer

    def proxy(self, url: str) -> ProxyResponse:
        html = self.fetch_service.fetch(url)
        result = self.transformer.transform_document(html)
        logger.info("Relayed %s (title: '%s')", url, result.title)
        return ProxyResponse(content=result.html, title=result.title, original_url=url)
