from __future__ import annotations

from typing import Iterable

import pandas as pd

from country_browser.core.country import Country

EXPORT_COLUMNS = ["name", "region", "subregion", "capital", "population", "code", "flag_url"]


def countries_to_frame(records: Iterable[Country]) -> pd.DataFrame:
    """
    Tabulate records in their current order for CSV download.
    Missing population stays empty rather than 0.
    """
    rows = [c.to_dict() for c in records]
    if not rows:
        return pd.DataFrame(columns=EXPORT_COLUMNS)

    df = pd.DataFrame(rows, columns=EXPORT_COLUMNS)
    df["population"] = df["population"].astype("Int64")
    return df
