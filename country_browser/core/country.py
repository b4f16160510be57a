from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Country:
    """
    One record of the country dataset, immutable once fetched.

    Only `name`, `region` and `population` take part in filtering and sorting.
    The remaining fields are for display and may all be missing.

    - population: None when the source does not report it (sorted as 0)
    - code: ISO 3166-1 alpha-3 code, used as the favorites key
    """

    name: str
    region: str = ""
    population: Optional[int] = None
    capital: Optional[str] = None
    subregion: Optional[str] = None
    flag_url: Optional[str] = None
    flag_alt: Optional[str] = None
    code: Optional[str] = None

    @property
    def population_or_zero(self) -> int:
        return self.population if self.population is not None else 0

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> Country:
        """
        Build a Country from one REST Countries v3.1 object.

        Malformed optional fields degrade to None instead of raising.
        """
        name_obj = raw.get("name")
        if isinstance(name_obj, dict):
            name = name_obj.get("common") or ""
        elif isinstance(name_obj, str):
            name = name_obj
        else:
            name = ""

        capitals = raw.get("capital")
        if isinstance(capitals, list) and capitals:
            capital = str(capitals[0])
        elif isinstance(capitals, str) and capitals:
            capital = capitals
        else:
            capital = None

        flags = raw.get("flags")
        if isinstance(flags, dict):
            flag_url = flags.get("png") or flags.get("svg")
            flag_alt = flags.get("alt")
        else:
            flag_url, flag_alt = None, None

        return cls(
            name=str(name),
            region=str(raw.get("region") or ""),
            population=_as_population(raw.get("population")),
            capital=capital,
            subregion=raw.get("subregion") or None,
            flag_url=flag_url or None,
            flag_alt=flag_alt or None,
            code=raw.get("cca3") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "region": self.region,
            "subregion": self.subregion,
            "capital": self.capital,
            "population": self.population,
            "code": self.code,
            "flag_url": self.flag_url,
        }


def _as_population(value: Any) -> Optional[int]:
    # bool is an int subclass; reject it explicitly
    if value is None or isinstance(value, bool):
        return None
    try:
        population = int(value)
    except (TypeError, ValueError):
        return None
    return population if population >= 0 else None
