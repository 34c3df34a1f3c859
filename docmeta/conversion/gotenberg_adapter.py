import httpx

from docmeta.conversion.base import BaseOfficeConverter, ensure_pdf
from docmeta.conversion.exceptions import ConversionError


class GotenbergAdapter(BaseOfficeConverter):
    """Converts office documents through a Gotenberg conversion server."""

    ROUTE = "/forms/libreoffice/convert"

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        client: httpx.Client | None = None,
    ) -> None:
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout_seconds)

    def convert(self, source_bytes: bytes, source_suffix: str = ".pptx") -> bytes:
        files = {"files": (f"source{source_suffix}", source_bytes)}
        try:
            response = self._client.post(self.ROUTE, files=files)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ConversionError(
                f"Gotenberg returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ConversionError(f"Gotenberg request failed: {exc}") from exc
        return ensure_pdf(response.content, "Gotenberg")
