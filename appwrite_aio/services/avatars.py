"""Avatars service.

Every method returns an absolute image URL (with ``project`` in the query)
for use in ``<img>`` tags or direct downloads; no request is sent.
"""
from typing import Optional

from ..enums import Browser, CreditCard, Flag
from ..helpers import compact, require_params
from ._base import Service


class Avatars(Service):
    """URL builders for avatar, icon, flag and QR images."""

    def get_browser(self, code: str, width: Optional[int] = None, height: Optional[int] = None,
                    quality: Optional[int] = None) -> str:
        """Icon of a browser by its code (see ``Browser``).

        Raises:
            InvalidValueError: If code is not a Browser token
        """
        Browser.validate_strict(code)
        params = compact({"width": width, "height": height, "quality": quality})
        return self._client.build_url(f"/avatars/browsers/{code}", params)

    def get_credit_card(self, code: str, width: Optional[int] = None, height: Optional[int] = None,
                        quality: Optional[int] = None) -> str:
        """Logo of a credit card brand (see ``CreditCard``)."""
        CreditCard.validate_strict(code)
        params = compact({"width": width, "height": height, "quality": quality})
        return self._client.build_url(f"/avatars/credit-cards/{code}", params)

    def get_favicon(self, url: str) -> str:
        """Favicon of a remote website."""
        require_params(url=url)
        return self._client.build_url("/avatars/favicon", {"url": url})

    def get_flag(self, code: str, width: Optional[int] = None, height: Optional[int] = None,
                 quality: Optional[int] = None) -> str:
        """Country flag by ISO 3166-1 alpha-2 code (see ``Flag``)."""
        Flag.validate_strict(code)
        params = compact({"width": width, "height": height, "quality": quality})
        return self._client.build_url(f"/avatars/flags/{code}", params)

    def get_image(self, url: str, width: Optional[int] = None, height: Optional[int] = None) -> str:
        """Remote image fetched and resized by the server."""
        require_params(url=url)
        return self._client.build_url("/avatars/image", compact({"url": url, "width": width, "height": height}))

    def get_initials(self, name: Optional[str] = None, width: Optional[int] = None,
                     height: Optional[int] = None, background: Optional[str] = None) -> str:
        """Initials avatar; without a name the current user's name is used."""
        params = compact({"name": name, "width": width, "height": height, "background": background})
        return self._client.build_url("/avatars/initials", params)

    def get_qr(self, text: str, size: Optional[int] = None, margin: Optional[int] = None,
               download: Optional[bool] = None) -> str:
        require_params(text=text)
        params = compact({"text": text, "size": size, "margin": margin, "download": download})
        return self._client.build_url("/avatars/qr", params)
