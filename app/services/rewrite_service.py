import re
from typing import List, NamedTuple, Optional

import httpx
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString, Tag

from app.config import config
from app.exceptions import FetchFailed, ValidationError
from app.logger import get_logger
from app.models import FetchResponse

logger = get_logger(__name__)

# Applied in order. Mixed-case spellings such as "YaLe" are left alone.
SUBSTITUTIONS = [
    (re.compile("Yale"), "Fale"),
    (re.compile("yale"), "fale"),
    (re.compile("YALE"), "FALE"),
]


class RewriteResult(NamedTuple):
    content: str
    title: str


class RewriteService:
    def __init__(self, parser: str = config.HTML_PARSER):
        """
        Public attribute: name of the BeautifulSoup tree builder
        """
        self.parser = parser

    def handle(self, url: Optional[str]) -> FetchResponse:
        """
        Public method: Fetch the URL, rewrite its text and return the response payload.
        """
        if not url:
            raise ValidationError("URL is required")

        html_content = self.fetch_html(url)
        try:
            result = self.rewrite_document(html_content)
        except Exception as e:
            raise FetchFailed(str(e), url=url) from e

        logger.info(f"Rewrote {url} ({len(result.content)} chars)")
        return FetchResponse(
            success=True,
            content=result.content,
            title=result.title,
            originalUrl=url,
        )

    def fetch_html(self, url: str) -> str:
        """
        Public method: Fetch HTML content from the URL.
        """
        try:
            response = httpx.get(url, follow_redirects=True)
            response.raise_for_status()
        except Exception as e:
            raise FetchFailed(str(e), url=url) from e
        return response.text

    def parse_html(self, html_content: str) -> BeautifulSoup:
        """
        Public method: Parse HTML content using BeautifulSoup, whatever the declared content type.
        """
        return BeautifulSoup(html_content, self.parser)

    def rewrite_document(self, html_content: str) -> RewriteResult:
        """
        Public method: Rewrite every text node under <body> and in each <title>, then serialize the tree.
        Attribute values are never touched.
        """
        soup = self.parse_html(html_content)

        if soup.body is not None:
            self._rewrite_strings(soup.body)

        titles = soup.find_all("title")
        for title_tag in titles:
            self._rewrite_strings(title_tag)
        title = titles[0].get_text() if titles else ""

        return RewriteResult(content=str(soup), title=title)

    @staticmethod
    def rewrite_text(text: str) -> str:
        for pattern, replacement in SUBSTITUTIONS:
            text = pattern.sub(replacement, text)
        return text

    def _rewrite_strings(self, root: Tag) -> None:
        """
        Private method: Replace the text nodes below root whose content changes under the substitution.
        """
        for node in self._text_nodes(root):
            new_text = self.rewrite_text(str(node))
            if new_text != node:
                node.replace_with(type(node)(new_text))

    def _text_nodes(self, root: Tag) -> List[NavigableString]:
        # Collected up front since replace_with relinks the tree.
        return [
            node for node in root.descendants
            if isinstance(node, NavigableString) and not isinstance(node, PreformattedString)
        ]
