from ..models import (
    ContinentList,
    CountryList,
    CurrencyList,
    LanguageList,
    Locale as LocaleInfo,
    LocaleCodeList,
    PhoneList,
)
from ._base import Service


class Locale(Service):
    """Localization data: the caller's locale and reference lists."""

    async def get(self) -> LocaleInfo:
        """Locale of the caller, resolved from the request IP."""
        return LocaleInfo.from_dict(await self._client.call("GET", "/locale"))

    async def list_codes(self) -> LocaleCodeList:
        return LocaleCodeList.from_dict(await self._client.call("GET", "/locale/codes"))

    async def list_continents(self) -> ContinentList:
        return ContinentList.from_dict(await self._client.call("GET", "/locale/continents"))

    async def list_countries(self) -> CountryList:
        return CountryList.from_dict(await self._client.call("GET", "/locale/countries"))

    async def list_countries_eu(self) -> CountryList:
        return CountryList.from_dict(await self._client.call("GET", "/locale/countries/eu"))

    async def list_countries_phones(self) -> PhoneList:
        return PhoneList.from_dict(await self._client.call("GET", "/locale/countries/phones"))

    async def list_currencies(self) -> CurrencyList:
        return CurrencyList.from_dict(await self._client.call("GET", "/locale/currencies"))

    async def list_languages(self) -> LanguageList:
        return LanguageList.from_dict(await self._client.call("GET", "/locale/languages"))
