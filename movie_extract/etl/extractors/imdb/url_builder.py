"""IMDb URL builder.

Builds advanced-search listing URLs and resolves detail
links found on listing pages.
"""

from urllib.parse import urljoin


class IMDbUrlBuilder:
    """Builds listing and detail URLs for IMDb."""

    def __init__(self, base_url: str, page_size: int = 50) -> None:
        """Initialize builder.

        Args:
            base_url: Site origin (e.g. https://www.imdb.com).
            page_size: Titles per listing page.
        """
        self._base_url = base_url.rstrip("/")
        self._page_size = page_size

    @property
    def base_url(self) -> str:
        """Site origin without trailing slash."""
        return self._base_url

    def build_search_url(self, genre: str, page: int) -> str:
        """Build the listing URL for a genre page.

        The genre token is passed through verbatim.

        Args:
            genre: Catalog genre token (e.g. "comedy").
            page: 1-based page number.

        Returns:
            Complete listing URL.
        """
        start = (page - 1) * self._page_size + 1
        return f"{self._base_url}/search/title/?genres={genre}&start={start}&ref_=adv_nxt"

    def build_detail_url(self, href: str | None) -> str | None:
        """Resolve a title link against the site origin.

        Raises ValueError on links urljoin rejects (e.g. a broken IPv6 host).

        Args:
            href: Raw href attribute from the listing item.

        Returns:
            Absolute detail URL, or None when there is no link.
        """
        if not href or not href.strip():
            return None
        return urljoin(f"{self._base_url}/", href.strip())
